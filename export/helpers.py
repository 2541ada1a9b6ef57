"""Gemeinsame Hilfsfunktionen für Konsolen- und HTML-Export."""

from typing import Iterable

import numpy as np
from matplotlib import colormaps

from models.show import Show


# ─── Farbpalette ──────────────────────────────────────────────────────────────

def track_colors(
    track_count: int, colormap: str = "winter", scale: int = 128
) -> list[tuple[int, int, int]]:
    """Eine RGB-Farbe pro Track, gleichmäßig aus der Colormap abgetastet.

    Track 1 erhält den Anfang der Colormap, der letzte Track ihr Ende.
    Kanalwerte liegen in 0..scale.
    """
    if track_count <= 0:
        return []
    cmap = colormaps[colormap]
    rgba = cmap(np.linspace(0.0, 1.0, track_count))
    return [
        (int(round(r * scale)), int(round(g * scale)), int(round(b * scale)))
        for r, g, b, _ in rgba
    ]


def rgb_css(rgb: tuple[int, int, int]) -> str:
    """(r, g, b) → 'rgb(r, g, b)'."""
    r, g, b = rgb
    return f"rgb({r}, {g}, {b})"


# ─── Zeit-Beschriftungen ──────────────────────────────────────────────────────

def tick_label(tick: int) -> str:
    """Beschriftung einer Zeitzeile: 14 → '14:00'."""
    return f"{tick}:00"


def session_time_label(start_time: int, end_time: int) -> str:
    """Zeitspanne einer Show; end_time wird bis zum Ende des Ticks belegt."""
    return f"{start_time}:00 - {end_time}:59"


# ─── Gleichzeitigkeit ─────────────────────────────────────────────────────────

def max_concurrent(shows: Iterable[Show]) -> int:
    """Maximale Anzahl gleichzeitig laufender Shows an einem ganzzahligen Tick.

    Eine Show [start, end] läuft an jedem Tick t mit start <= t <= end.
    """
    events: list[tuple[int, int]] = []
    for s in shows:
        events.append((s.start_time, 1))
        events.append((s.end_time + 1, -1))
    # Bei gleichem Tick zuerst Enden (-1), dann Starts (+1)
    events.sort()
    best = current = 0
    for _, delta in events:
        current += delta
        best = max(best, current)
    return best
