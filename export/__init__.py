"""Export-Modul: Konsolen-Bericht und HTML-Grid für die Track-Zuweisung."""

from export.console_export import print_schedule, print_schedule_table, render_console_lines
from export.html_export import HtmlExporter, open_in_viewer

__all__ = [
    "HtmlExporter",
    "open_in_viewer",
    "print_schedule",
    "print_schedule_table",
    "render_console_lines",
]
