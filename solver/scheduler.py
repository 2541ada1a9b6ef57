"""Greedy Track-Zuweisung (Interval Partitioning) für Festival-Shows.

Architektur:
  - Shows stabil nach start_time sortieren (gleiche Startzeit → Eingabereihenfolge)
  - Pro Track wird nur die end_time der zuletzt zugewiesenen Show gehalten
  - Ein Track ist frei, wenn seine end_time STRIKT kleiner als die start_time ist
  - Von den freien Tracks wird der mit der spätesten end_time gewählt
    (bei Gleichstand der mit dem kleinsten Index), sonst neuer Track
"""

import logging
import time
from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel

from models.show import Show, ScheduledShow

logger = logging.getLogger(__name__)


# ─── Kern-Algorithmus ─────────────────────────────────────────────────────────

def schedule(shows: Iterable[Show]) -> tuple[list[ScheduledShow], int]:
    """Verteilt Shows auf die minimale Anzahl paralleler Tracks.

    Returns:
        (scheduled, track_count): scheduled ist nach start_time sortiert
        (stabil), track_count ist 0 bei leerer Eingabe.
    """
    ordered = sorted(shows, key=lambda s: s.start_time)

    # track_end_time[i] gehört zu Track i+1
    track_end_time: list[int] = []
    scheduled: list[ScheduledShow] = []

    for show in ordered:
        selected: Optional[int] = None
        for idx, end_time in enumerate(track_end_time):
            if end_time >= show.start_time:
                continue
            # Strikt größer: bei Gleichstand bleibt der kleinere Index
            if selected is None or end_time > track_end_time[selected]:
                selected = idx

        if selected is None:
            track_end_time.append(show.end_time)
            selected = len(track_end_time) - 1
        else:
            track_end_time[selected] = show.end_time

        scheduled.append(ScheduledShow.from_show(show, track=selected + 1))

    return scheduled, len(track_end_time)


# ─── Ergebnis-Modell ──────────────────────────────────────────────────────────

class TrackSchedule(BaseModel):
    """Vollständiges Ergebnis der Track-Zuweisung."""

    shows: list[ScheduledShow]
    track_count: int
    solve_time_seconds: float = 0.0

    def tracks(self) -> range:
        """Alle Track-Indizes (1..track_count)."""
        return range(1, self.track_count + 1)

    def get_track_shows(self, track: int) -> list[ScheduledShow]:
        """Alle Shows eines Tracks, in der Reihenfolge des Ergebnisses."""
        return [s for s in self.shows if s.track == track]

    def time_range(self) -> Optional[tuple[int, int]]:
        """(früheste start_time, späteste end_time) oder None ohne Shows."""
        if not self.shows:
            return None
        return (
            min(s.start_time for s in self.shows),
            max(s.end_time for s in self.shows),
        )

    def summary(self) -> str:
        """Kurze Übersicht über das Ergebnis."""
        lines = [f"Shows: {len(self.shows)}", f"Tracks: {self.track_count}"]
        rng = self.time_range()
        if rng is not None:
            lines.append(f"Zeitraum: {rng[0]} – {rng[1]}")
        return "\n".join(lines)

    def save_json(self, path: Path) -> None:
        """Speichert das Ergebnis als JSON-Datei."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.model_dump_json(indent=2))

    @classmethod
    def load_json(cls, path: Path) -> "TrackSchedule":
        """Lädt ein gespeichertes Ergebnis aus JSON."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Ergebnis nicht gefunden: {path}")
        with open(path, "r", encoding="utf-8") as f:
            return cls.model_validate_json(f.read())


# ─── Solver-Fassade ───────────────────────────────────────────────────────────

class TrackScheduler:
    """Wrapper um schedule() mit Zeitmessung und Logging.

    Verwendung:
        result = TrackScheduler().solve(shows)
    """

    def solve(self, shows: Iterable[Show]) -> TrackSchedule:
        shows = list(shows)
        start = time.time()
        scheduled, track_count = schedule(shows)
        elapsed = time.time() - start
        logger.info(
            f"Track-Zuweisung: {len(scheduled)} Shows auf "
            f"{track_count} Tracks ({elapsed:.3f}s)"
        )
        return TrackSchedule(
            shows=scheduled,
            track_count=track_count,
            solve_time_seconds=elapsed,
        )
