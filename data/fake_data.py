"""Testdaten-Generator für den Festival-Planer.

Erzeugt reproduzierbare Show-Listen (fester Seed) mit absichtlichen
Überlappungen, damit mehrere Tracks nötig werden:
  1. Eröffnungsblock: mehrere Shows starten gleichzeitig am Beginn
  2. Lücken im Programm: nicht jeder Tick ist belegt
"""

import random

from rich.console import Console
from rich.table import Table
from rich import box

from models.show import Show

console = Console()

# ─── Namens-Listen ────────────────────────────────────────────────────────────

_ADJECTIVES = [
    "Blue", "Midnight", "Electric", "Golden", "Silent", "Velvet", "Neon",
    "Wild", "Crimson", "Lunar", "Solar", "Urban", "Hidden", "Paper",
]

_NOUNS = [
    "Foxes", "Harbour", "Machines", "Orchestra", "Parade", "Echoes",
    "Lanterns", "Collective", "Circus", "Theatre", "Choir", "Drums",
]


class FakeFestivalGenerator:
    """Erzeugt ein zufälliges, aber reproduzierbares Festivalprogramm."""

    def __init__(
        self,
        seed: int = 42,
        num_shows: int = 20,
        horizon: int = 48,
        max_duration: int = 6,
        opening_shows: int = 3,
    ) -> None:
        self.rng = random.Random(seed)
        self.num_shows = num_shows
        self.horizon = horizon
        self.max_duration = max_duration
        self.opening_shows = min(opening_shows, num_shows)

    def _title(self, index: int) -> str:
        # Titel dürfen keine Leerzeichen enthalten (Eingabeformat)
        adj = self.rng.choice(_ADJECTIVES)
        noun = self.rng.choice(_NOUNS)
        return f"{adj}_{noun}_{index + 1}"

    def generate(self) -> list[Show]:
        shows: list[Show] = []
        for i in range(self.num_shows):
            if i < self.opening_shows:
                start = 0
            else:
                start = self.rng.randint(0, max(self.horizon - 1, 0))
            duration = self.rng.randint(0, self.max_duration)
            shows.append(Show(
                title=self._title(i),
                start_time=start,
                end_time=start + duration,
            ))
        return shows

    def print_summary(self, shows: list[Show]) -> None:
        """Zeigt das erzeugte Programm als Rich-Tabelle."""
        table = Table(title="Erzeugte Shows", box=box.ROUNDED)
        table.add_column("Titel", style="bold")
        table.add_column("Start", justify="right")
        table.add_column("Ende", justify="right")
        for s in shows:
            table.add_row(s.title, str(s.start_time), str(s.end_time))
        console.print(table)
