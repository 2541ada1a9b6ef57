"""Import der Show-Liste aus einer Textdatei.

Format: eine Show pro Zeile, durch Leerzeichen getrennt:

    show_1 29 33
    show_2 2 9

Titel ohne Leerzeichen, Start- und Endzeit als Ganzzahlen. Keine Kopfzeile.
Leere Zeilen und Zeilen mit führendem '#' werden übersprungen.
"""

import logging
from pathlib import Path
from typing import Iterable

from models.show import Show

logger = logging.getLogger(__name__)


class ShowImportError(Exception):
    """Fehler beim Einlesen der Show-Datei."""


def parse_show_line(line: str, line_no: int = 0, source: str = "<input>") -> Show:
    """Parst eine einzelne Zeile '<titel> <start> <ende>' zu einer Show."""
    tokens = line.split()
    if len(tokens) != 3:
        raise ShowImportError(
            f"{source}:{line_no}: erwartet '<titel> <start> <ende>', "
            f"gefunden {len(tokens)} Werte: {line.strip()!r}"
        )
    title, start_raw, end_raw = tokens
    try:
        start_time = int(start_raw)
        end_time = int(end_raw)
    except ValueError:
        raise ShowImportError(
            f"{source}:{line_no}: Zeiten müssen Ganzzahlen sein: {line.strip()!r}"
        )
    return Show(title=title, start_time=start_time, end_time=end_time)


def parse_shows(lines: Iterable[str], source: str = "<input>") -> list[Show]:
    """Parst alle Zeilen in Dateireihenfolge."""
    shows: list[Show] = []
    for line_no, line in enumerate(lines, start=1):
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        shows.append(parse_show_line(stripped, line_no, source))
    return shows


def read_shows(path: Path) -> list[Show]:
    """Liest die Show-Datei ein. Reihenfolge der Datei bleibt erhalten."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Eingabedatei nicht gefunden: {path}")
    with open(path, "r", encoding="utf-8") as f:
        shows = parse_shows(f, source=str(path))
    logger.info(f"{len(shows)} Shows aus {path} gelesen")
    return shows


def write_shows(shows: Iterable[Show], path: Path) -> None:
    """Schreibt Shows im Eingabeformat (Gegenstück zu read_shows)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for s in shows:
            f.write(f"{s.title} {s.start_time} {s.end_time}\n")
