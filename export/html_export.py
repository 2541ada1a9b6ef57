"""HTML-Export: Track-Ansicht als CSS-Grid in einer eigenständigen HTML-Datei.

Das Basis-Template enthält fünf Marker-Zeilen. Jeder Marker wird durch genau
ein berechnetes Fragment ersetzt, alle anderen Zeilen bleiben unverändert:

  %trackstyle%          CSS-Klasse .track-<n> mit Hintergrundfarbe
  %track_slot_header%   Spaltenköpfe "Track <n>"
  %template_rows%       Grid-Zeilen [time-<t>] für jeden Tick
  %template_columns%    Grid-Spalten [times] + [track-<n>-start/end]
  %sessions%            Zeit-Beschriftungen und eine <div> pro Show
"""

import html
import logging
from pathlib import Path
from typing import Optional

import click

from config.defaults import (
    DEFAULT_TEMPLATE,
    MARKER_SESSIONS,
    MARKER_TEMPLATE_COLUMNS,
    MARKER_TEMPLATE_ROWS,
    MARKER_TRACK_HEADER,
    MARKER_TRACK_STYLE,
)
from config.schema import HtmlConfig
from solver.scheduler import TrackSchedule

from export.helpers import rgb_css, session_time_label, tick_label, track_colors

logger = logging.getLogger(__name__)


class TemplateError(ValueError):
    """Basis-Template enthält einen Marker nicht genau einmal."""


def substitute_markers(
    template_lines: list[str], fragments: dict[str, list[str]]
) -> list[str]:
    """Ersetzt jede Marker-Zeile durch ihr Fragment.

    Jeder Marker muss genau einmal im Template stehen (allein auf der Zeile).
    """
    for marker in fragments:
        count = sum(1 for line in template_lines if line.strip() == marker)
        if count != 1:
            raise TemplateError(
                f"Marker {marker} kommt {count}x im Template vor (erwartet: 1)"
            )

    result: list[str] = []
    for line in template_lines:
        fragment = fragments.get(line.strip())
        if fragment is None:
            result.append(line)
        else:
            result.extend(fragment)
    return result


class HtmlExporter:
    """Exportiert ein TrackSchedule als HTML-Grid.

    Verwendung:
        exporter = HtmlExporter(config.html)
        path = exporter.export(result, Path("schedule.html"))
    """

    def __init__(self, config: Optional[HtmlConfig] = None) -> None:
        self.config = config or HtmlConfig()

    # ─── Template ─────────────────────────────────────────────────────────────

    def load_template(self) -> list[str]:
        path = Path(self.config.template_path) if self.config.template_path else DEFAULT_TEMPLATE
        if not path.exists():
            raise FileNotFoundError(f"HTML-Template nicht gefunden: {path}")
        with open(path, "r", encoding="utf-8") as f:
            return f.read().splitlines()

    # ─── Fragmente ────────────────────────────────────────────────────────────

    def build_track_style(self, schedule: TrackSchedule) -> list[str]:
        colors = track_colors(
            schedule.track_count, self.config.colormap, self.config.color_scale
        )
        lines: list[str] = []
        for track, rgb in zip(schedule.tracks(), colors):
            lines.extend([
                f".track-{track} {{",
                f"  background-color: {rgb_css(rgb)};",
                "  color: #fff;",
                "}",
            ])
        return lines

    def build_track_headers(self, schedule: TrackSchedule) -> list[str]:
        return [
            f'  <span class="track-slot" aria-hidden="true" '
            f'style="grid-column: track-{t}; grid-row: tracks;">Track {t}</span>'
            for t in schedule.tracks()
        ]

    def build_template_rows(self, schedule: TrackSchedule) -> list[str]:
        """Eine Grid-Zeile pro Tick von tmin bis tmax, plus eine Abschlusszeile."""
        rng = schedule.time_range()
        if rng is None:
            return ["      [time-0] 1fr;"]
        tstart, tend = rng
        lines = [f"      [time-{t}] 1fr" for t in range(tstart, tend + 1)]
        lines.append(f"      [time-{tend + 1}] 1fr;")
        return lines

    def build_template_columns(self, schedule: TrackSchedule) -> list[str]:
        n = schedule.track_count
        if n == 0:
            return ["      [times] 4em;"]
        lines = [f"      [times] {n}em", "      [track-1-start] 1fr"]
        for t in range(1, n):
            lines.append(f"      [track-{t}-end track-{t + 1}-start] 1fr")
        lines.append(f"      [track-{n}-end];")
        return lines

    def build_sessions(self, schedule: TrackSchedule) -> list[str]:
        """Zeit-Beschriftungen und Show-Zellen in Ergebnisreihenfolge.

        Jeder Tick von tmin bis tmax+1 erhält genau eine Beschriftung; sie wird
        vor der ersten Show eingefügt, die an oder nach diesem Tick beginnt.
        """
        rng = schedule.time_range()
        if rng is None:
            return ['  <p class="no-shows">No shows scheduled.</p>']
        tstart, tend = rng

        lines: list[str] = []
        tlast = tstart - 1
        for i, show in enumerate(schedule.shows, start=1):
            if show.start_time > tlast:
                for t in range(tlast + 1, show.start_time + 1):
                    lines.append(self._time_slot(t))
                tlast = show.start_time
            title = html.escape(show.title)
            lines.extend([
                f'  <div class="session session-{i} track-{show.track}" '
                f'style="grid-column: track-{show.track}; '
                f'grid-row: time-{show.start_time} / time-{show.end_time + 1};">',
                f'    <h3 class="session-title"><a href="#">{title}</a></h3>',
                f'    <span class="session-time">'
                f'{session_time_label(show.start_time, show.end_time)}</span>',
                f'    <span class="session-track">Track: {show.track}</span>',
                "  </div>",
            ])

        for t in range(tlast + 1, tend + 2):
            lines.append(self._time_slot(t))
        return lines

    @staticmethod
    def _time_slot(tick: int) -> str:
        return f'<h2 class="time-slot" style="grid-row: time-{tick};">{tick_label(tick)}</h2>'

    # ─── Dokument ─────────────────────────────────────────────────────────────

    def render(self, schedule: TrackSchedule) -> str:
        """Baut das vollständige HTML-Dokument."""
        fragments = {
            MARKER_TRACK_STYLE: self.build_track_style(schedule),
            MARKER_TRACK_HEADER: self.build_track_headers(schedule),
            MARKER_TEMPLATE_ROWS: self.build_template_rows(schedule),
            MARKER_TEMPLATE_COLUMNS: self.build_template_columns(schedule),
            MARKER_SESSIONS: self.build_sessions(schedule),
        }
        lines = substitute_markers(self.load_template(), fragments)
        return "\n".join(lines) + "\n"

    def export(self, schedule: TrackSchedule, path: Path) -> Path:
        """Schreibt das HTML-Dokument und gibt den Pfad zurück."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.render(schedule))
        logger.info(f"HTML-Ansicht geschrieben: {path} ({schedule.track_count} Tracks)")
        return path


def open_in_viewer(path: Path) -> int:
    """Öffnet die Datei im Standardprogramm des Systems."""
    return click.launch(str(Path(path).resolve()))
