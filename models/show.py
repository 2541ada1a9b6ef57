"""Datenmodell für eine Show und ihre Track-Zuweisung (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict, Field


class Show(BaseModel):
    """Eine zeitlich begrenzte Show (Vorstellung) im Festivalprogramm.

    Zeiten sind abstrakte ganzzahlige Ticks (z.B. Stunden). Eine Show mit
    end_time=9 belegt ihren Track bis einschließlich Tick 9.
    start_time <= end_time wird vorausgesetzt, aber nicht geprüft.
    """

    model_config = ConfigDict(frozen=True)

    title: str
    start_time: int
    end_time: int

    @property
    def key(self) -> tuple[str, int, int]:
        """(title, start_time, end_time) als Identität für Vollständigkeitsprüfungen."""
        return (self.title, self.start_time, self.end_time)

    def __str__(self) -> str:
        return f"{self.title} ({self.start_time}–{self.end_time})"


class ScheduledShow(Show):
    """Show mit zugewiesenem Track (1-basiert). Nach der Zuweisung unveränderlich."""

    track: int = Field(ge=1)

    @classmethod
    def from_show(cls, show: Show, track: int) -> "ScheduledShow":
        return cls(
            title=show.title,
            start_time=show.start_time,
            end_time=show.end_time,
            track=track,
        )
