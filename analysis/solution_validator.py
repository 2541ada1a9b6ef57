"""Post-Solve Validierung der Track-Zuweisung.

Prüft das fertige TrackSchedule auf Verletzungen als Sicherheitsnetz
unabhängig vom Algorithmus.
"""

from collections import Counter, defaultdict
from typing import Iterable, Literal, Optional

from pydantic import BaseModel

from models.show import Show, ScheduledShow
from solver.scheduler import TrackSchedule
from export.helpers import max_concurrent


class ValidationViolation(BaseModel):
    """Eine einzelne Verletzung."""

    severity: Literal["error", "warning"]
    constraint: str      # z.B. "track_overlap"
    description: str
    entity: str          # "track-<n>" oder Show-Titel


class ValidationReport(BaseModel):
    """Ergebnis der Post-Solve Validierung."""

    violations: list[ValidationViolation]
    is_valid: bool       # True wenn keine Errors (Warnings ok)

    def print_rich(self) -> None:
        """Gibt den Report formatiert über Rich aus."""
        from rich.console import Console
        from rich.panel import Panel
        from rich.table import Table
        from rich import box

        console = Console()
        errors = [v for v in self.violations if v.severity == "error"]
        warnings = [v for v in self.violations if v.severity == "warning"]

        status = (
            "[bold green]✓ VALIDE[/bold green]"
            if self.is_valid
            else "[bold red]✗ VERLETZUNGEN GEFUNDEN[/bold red]"
        )
        lines = [status, f"Fehler: {len(errors)} | Warnungen: {len(warnings)}"]
        console.print(Panel("\n".join(lines), title="Track-Validierung", border_style="cyan"))

        if not self.violations:
            console.print("[dim]Keine Verletzungen gefunden.[/dim]")
            return

        table = Table(box=box.ROUNDED, show_lines=True)
        table.add_column("Typ", width=8)
        table.add_column("Constraint", width=24)
        table.add_column("Entität", width=14)
        table.add_column("Beschreibung")

        for v in self.violations:
            color = "red" if v.severity == "error" else "yellow"
            table.add_row(
                f"[{color}]{v.severity.upper()}[/{color}]",
                v.constraint,
                v.entity,
                v.description,
            )
        console.print(table)


class SolutionValidator:
    """Prüft ein fertiges TrackSchedule auf Verletzungen."""

    def validate(
        self, schedule: TrackSchedule, shows: Optional[Iterable[Show]] = None
    ) -> ValidationReport:
        """Führt alle Checks durch.

        Ohne shows (ursprüngliche Eingabe) entfällt die Vollständigkeitsprüfung.
        """
        violations: list[ValidationViolation] = []

        if shows is not None:
            violations.extend(self._check_completeness(schedule, list(shows)))
        violations.extend(self._check_track_range(schedule))
        violations.extend(self._check_track_overlap(schedule))
        violations.extend(self._check_minimality(schedule))

        has_errors = any(v.severity == "error" for v in violations)
        return ValidationReport(violations=violations, is_valid=not has_errors)

    # ── Einzelne Prüfungen ────────────────────────────────────────────────────

    def _check_completeness(
        self, schedule: TrackSchedule, shows: list[Show]
    ) -> list[ValidationViolation]:
        """Jede Eingabe-Show genau einmal im Ergebnis (Multimenge)."""
        violations: list[ValidationViolation] = []
        expected = Counter(s.key for s in shows)
        actual = Counter(s.key for s in schedule.shows)

        for key in sorted(set(expected) | set(actual)):
            diff = actual[key] - expected[key]
            if diff == 0:
                continue
            title, start, end = key
            what = "doppelt" if diff > 0 else "fehlt"
            violations.append(ValidationViolation(
                severity="error",
                constraint="completeness",
                entity=title,
                description=f"Show {title} ({start}–{end}) {what} ({abs(diff)}x).",
            ))
        return violations

    def _check_track_range(self, schedule: TrackSchedule) -> list[ValidationViolation]:
        """Track-Indizes liegen in 1..track_count."""
        return [
            ValidationViolation(
                severity="error",
                constraint="track_range",
                entity=s.title,
                description=(
                    f"Track {s.track} außerhalb von 1..{schedule.track_count}."
                ),
            )
            for s in schedule.shows
            if not 1 <= s.track <= schedule.track_count
        ]

    def _check_track_overlap(self, schedule: TrackSchedule) -> list[ValidationViolation]:
        """Auf einem Track muss jede Show strikt nach dem Ende aller früheren beginnen.

        Verglichen wird mit der bisher am spätesten endenden Show des Tracks,
        damit auch eine lange Show mehrere spätere Überschneidungen meldet.
        """
        violations: list[ValidationViolation] = []
        by_track: dict[int, list[ScheduledShow]] = defaultdict(list)
        for s in schedule.shows:
            by_track[s.track].append(s)

        for track, shows in sorted(by_track.items()):
            ordered = sorted(shows, key=lambda s: s.start_time)
            prev = ordered[0]
            for nxt in ordered[1:]:
                if nxt.start_time <= prev.end_time:
                    violations.append(ValidationViolation(
                        severity="error",
                        constraint="track_overlap",
                        entity=f"track-{track}",
                        description=(
                            f"{nxt.title} ({nxt.start_time}–{nxt.end_time}) "
                            f"überschneidet {prev.title} "
                            f"({prev.start_time}–{prev.end_time})."
                        ),
                    ))
                if nxt.end_time > prev.end_time:
                    prev = nxt
        return violations

    def _check_minimality(self, schedule: TrackSchedule) -> list[ValidationViolation]:
        """track_count entspricht der maximalen Zahl gleichzeitig laufender Shows."""
        peak = max_concurrent(schedule.shows)
        if peak == schedule.track_count:
            return []
        return [ValidationViolation(
            severity="error",
            constraint="track_count_minimality",
            entity="schedule",
            description=(
                f"{schedule.track_count} Tracks, aber maximal {peak} "
                f"Shows gleichzeitig."
            ),
        )]
