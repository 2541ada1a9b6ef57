"""Solver-Modul (greedy Interval Partitioning)."""

from .scheduler import TrackScheduler, TrackSchedule, schedule

__all__ = [
    "TrackScheduler",
    "TrackSchedule",
    "schedule",
]
