"""Konsolen-Ausgabe der Track-Zuweisung.

render_console_lines() liefert den Klartext-Bericht (eine Sektion pro Track),
print_schedule_table() eine Rich-Tabelle für die interaktive Anzeige.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich import box
from rich.text import Text

from solver.scheduler import TrackSchedule

from export.helpers import track_colors


def render_console_lines(schedule: TrackSchedule) -> list[str]:
    """Eine Sektion pro Track 1..track_count, Shows in Ergebnisreihenfolge.

    Zeilenformat: "- title <titel>, time from <start> t/m <ende>"
    """
    lines: list[str] = []
    for track in schedule.tracks():
        lines.append("")
        lines.append(f"track {track}")
        for show in schedule.get_track_shows(track):
            lines.append(
                f"- title {show.title}, time from {show.start_time} "
                f"t/m {show.end_time}"
            )
    return lines


def print_schedule(schedule: TrackSchedule, console: Optional[Console] = None) -> None:
    """Gibt den Klartext-Bericht aus.

    Titel bleiben unverändert: kein Markup, keine Emoji-Codes, kein Umbruch.
    """
    console = console or Console()
    for line in render_console_lines(schedule):
        console.print(line, markup=False, highlight=False, emoji=False,
                      soft_wrap=True)


def print_schedule_table(
    schedule: TrackSchedule,
    console: Optional[Console] = None,
    colormap: str = "winter",
) -> None:
    """Zeigt alle Shows als Tabelle, Track-Spalte in der Track-Farbe."""
    console = console or Console()
    if not schedule.shows:
        console.print("[dim]Keine Shows vorhanden.[/dim]")
        return
    colors = track_colors(schedule.track_count, colormap, scale=255)

    table = Table(title=f"Track-Zuweisung ({schedule.track_count} Tracks)",
                  box=box.ROUNDED)
    table.add_column("Track", justify="right")
    table.add_column("Titel", style="bold")
    table.add_column("Start", justify="right")
    table.add_column("Ende", justify="right")
    for show in schedule.shows:
        r, g, b = colors[show.track - 1]
        table.add_row(
            Text(str(show.track), style=f"rgb({r},{g},{b})"),
            Text(show.title),
            str(show.start_time),
            str(show.end_time),
        )
    console.print(table)
