"""Festival-Planer — Haupt-CLI.

Verwendung:
  python main.py run [input.txt]          einlesen → zuweisen → Konsole + HTML
  python main.py run --open               ... und HTML im Viewer öffnen
  python main.py show [input.txt]         nur Konsolen-Bericht
  python main.py show --table             Konsolen-Bericht als Tabelle
  python main.py html [input.txt]         nur HTML-Ansicht erzeugen
  python main.py validate [input.txt]     Zuweisung prüfen (Exit-Code 0/1)
  python main.py generate                 Zufalls-Programm als input.txt
  python main.py config show              Konfiguration anzeigen
  python main.py config init              Standard-Konfiguration anlegen
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _load_config(ctx: click.Context):
    """Lädt die Konfiguration oder bricht mit Fehlermeldung ab.

    Standardwerte nur ohne --config; ein explizit angegebener Pfad muss existieren.
    """
    from config.manager import ConfigManager
    mgr = ConfigManager()
    path = ctx.obj.get("config_path") if ctx.obj else None
    try:
        if path is not None:
            return mgr.load(path)
        return mgr.load_or_default()
    except FileNotFoundError as e:
        console.print(f"[red bold]Konfiguration fehlt:[/red bold]\n{e}")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red bold]Konfiguration ungültig:[/red bold]\n{e}")
        sys.exit(1)


def _read_and_schedule(input_path: Path):
    """Liest die Eingabedatei und führt die Track-Zuweisung durch."""
    from data.show_import import read_shows, ShowImportError
    from solver.scheduler import TrackScheduler

    try:
        shows = read_shows(input_path)
    except (ShowImportError, FileNotFoundError) as e:
        console.print(f"[red bold]Einlesen fehlgeschlagen:[/red bold]\n{e}")
        sys.exit(1)

    return shows, TrackScheduler().solve(shows)


def _resolve_input(config, input_file: Optional[Path]) -> Path:
    return input_file if input_file is not None else Path(config.paths.input_file)


def _write_html(config, result, output: Optional[Path], open_viewer: Optional[bool]) -> None:
    from export.html_export import HtmlExporter, open_in_viewer

    out_path = output if output is not None else Path(config.paths.html_output)
    HtmlExporter(config.html).export(result, out_path)
    console.print(f"[green]✓[/green] HTML gespeichert: {out_path}")

    if open_viewer is None:
        open_viewer = config.html.open_in_browser
    if open_viewer:
        open_in_viewer(out_path)


def _write_json(config, result) -> None:
    if config.paths.json_output:
        out_path = Path(config.paths.json_output)
        result.save_json(out_path)
        console.print(f"[green]✓[/green] JSON gespeichert: {out_path}")


# ─── RUN ──────────────────────────────────────────────────────────────────────

@click.command("run")
@click.argument("input_file", required=False, type=click.Path(path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None,
              help="Ausgabepfad der HTML-Datei.")
@click.option("--open/--no-open", "open_viewer", default=None,
              help="HTML-Datei nach dem Export öffnen.")
@click.pass_context
def cmd_run(ctx, input_file: Optional[Path], output: Optional[Path],
            open_viewer: Optional[bool]):
    """Liest Shows ein, verteilt sie auf Tracks und exportiert Konsole + HTML."""
    from export.console_export import print_schedule

    config = _load_config(ctx)
    _, result = _read_and_schedule(_resolve_input(config, input_file))

    print_schedule(result, console)
    _write_html(config, result, output, open_viewer)
    _write_json(config, result)


# ─── SHOW ─────────────────────────────────────────────────────────────────────

@click.command("show")
@click.argument("input_file", required=False, type=click.Path(path_type=Path))
@click.option("--table", "as_table", is_flag=True, default=False,
              help="Als Rich-Tabelle statt Klartext ausgeben.")
@click.pass_context
def cmd_show(ctx, input_file: Optional[Path], as_table: bool):
    """Zeigt die Track-Zuweisung in der Konsole."""
    from export.console_export import print_schedule, print_schedule_table

    config = _load_config(ctx)
    _, result = _read_and_schedule(_resolve_input(config, input_file))

    if as_table:
        print_schedule_table(result, console, colormap=config.html.colormap)
    else:
        print_schedule(result, console)


# ─── HTML ─────────────────────────────────────────────────────────────────────

@click.command("html")
@click.argument("input_file", required=False, type=click.Path(path_type=Path))
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None,
              help="Ausgabepfad der HTML-Datei.")
@click.option("--open/--no-open", "open_viewer", default=None,
              help="HTML-Datei nach dem Export öffnen.")
@click.pass_context
def cmd_html(ctx, input_file: Optional[Path], output: Optional[Path],
             open_viewer: Optional[bool]):
    """Erzeugt nur die HTML-Ansicht."""
    config = _load_config(ctx)
    _, result = _read_and_schedule(_resolve_input(config, input_file))
    _write_html(config, result, output, open_viewer)


# ─── VALIDATE ─────────────────────────────────────────────────────────────────

@click.command("validate")
@click.argument("input_file", required=False, type=click.Path(path_type=Path))
@click.pass_context
def cmd_validate(ctx, input_file: Optional[Path]):
    """Prüft die Track-Zuweisung (Vollständigkeit, Überschneidungen, Minimalität)."""
    from analysis.solution_validator import SolutionValidator

    config = _load_config(ctx)
    shows, result = _read_and_schedule(_resolve_input(config, input_file))

    console.print(f"\n{result.summary()}\n")
    report = SolutionValidator().validate(result, shows)
    report.print_rich()

    sys.exit(0 if report.is_valid else 1)


# ─── GENERATE ─────────────────────────────────────────────────────────────────

@click.command("generate")
@click.option("--seed", default=42, help="Zufalls-Seed für reproduzierbare Daten.")
@click.option("--count", "-n", default=20, help="Anzahl Shows.")
@click.option("--horizon", default=48, help="Letzter möglicher Starttick.")
@click.option("--output", "-o", type=click.Path(path_type=Path), default=None,
              help="Ausgabedatei (Standard: Eingabedatei aus der Config).")
@click.pass_context
def cmd_generate(ctx, seed: int, count: int, horizon: int, output: Optional[Path]):
    """Erzeugt ein zufälliges Festivalprogramm im Eingabeformat."""
    from data.fake_data import FakeFestivalGenerator
    from data.show_import import write_shows

    config = _load_config(ctx)
    out_path = output if output is not None else Path(config.paths.input_file)

    gen = FakeFestivalGenerator(seed=seed, num_shows=count, horizon=horizon)
    shows = gen.generate()
    gen.print_summary(shows)
    write_shows(shows, out_path)
    console.print(f"[green]✓[/green] {len(shows)} Shows gespeichert: {out_path}")


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
@click.pass_context
def config_show(ctx):
    """Zeigt die aktuelle Konfiguration an."""
    config = _load_config(ctx)

    console.print(Panel(f"[bold]{config.title}[/bold]",
                        title="Festival-Konfiguration", border_style="cyan"))

    table = Table(title="Einstellungen", box=box.ROUNDED)
    table.add_column("Parameter", style="bold")
    table.add_column("Wert")
    for section in ("paths", "html"):
        for k, v in getattr(config, section).model_dump().items():
            table.add_row(f"{section}.{k}", str(v))
    console.print(table)


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Bestehende Konfiguration überschreiben.")
@click.pass_context
def config_init(ctx, force: bool):
    """Legt eine Konfigurationsdatei mit Standardwerten an."""
    from config.manager import ConfigManager
    from config.defaults import default_festival_config

    mgr = ConfigManager()
    target = (ctx.obj or {}).get("config_path") or mgr.DEFAULT_CONFIG
    if target.exists() and not force:
        console.print(
            f"[yellow]Konfiguration existiert bereits: {target}[/yellow]\n"
            "Mit [bold]--force[/bold] überschreiben."
        )
        sys.exit(1)
    mgr.save(default_festival_config(), target)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="Pfad zur Konfigurationsdatei (Standard: festival_config.yaml).")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Log-Ausgaben anzeigen.")
@click.pass_context
def cli(ctx, config_path: Optional[Path], verbose: bool):
    """Festival-Planer: verteilt Shows auf möglichst wenige parallele Tracks."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if verbose:
        logging.basicConfig(level=logging.INFO,
                            format="%(levelname)s %(name)s: %(message)s")


def main():
    """Einstiegspunkt."""
    cli()


# Befehle registrieren
cli.add_command(cmd_run)
cli.add_command(cmd_show)
cli.add_command(cmd_html)
cli.add_command(cmd_validate)
cli.add_command(cmd_generate)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
