from pathlib import Path

from config.schema import FestivalConfig, HtmlConfig, PathConfig

# Mitgeliefertes Basis-Template mit den fünf Marker-Zeilen
DEFAULT_TEMPLATE = Path(__file__).resolve().parent.parent / "export" / "templates" / "schedule_template.html"

# Marker im Basis-Template (jeweils allein auf einer Zeile)
MARKER_TRACK_STYLE = "%trackstyle%"
MARKER_TRACK_HEADER = "%track_slot_header%"
MARKER_TEMPLATE_ROWS = "%template_rows%"
MARKER_TEMPLATE_COLUMNS = "%template_columns%"
MARKER_SESSIONS = "%sessions%"

TEMPLATE_MARKERS = [
    MARKER_TRACK_STYLE,
    MARKER_TRACK_HEADER,
    MARKER_TEMPLATE_ROWS,
    MARKER_TEMPLATE_COLUMNS,
    MARKER_SESSIONS,
]


def default_festival_config() -> FestivalConfig:
    """Standard-Konfiguration: input.txt → schedule.html, Colormap "winter"."""
    return FestivalConfig(
        title="Festival",
        paths=PathConfig(
            input_file="input.txt",
            html_output="schedule.html",
            json_output=None,
        ),
        html=HtmlConfig(
            colormap="winter",
            color_scale=128,
            open_in_browser=False,
            template_path=None,
        ),
    )
