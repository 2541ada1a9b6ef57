from models.show import Show, ScheduledShow

__all__ = [
    "Show",
    "ScheduledShow",
]
