from matplotlib import colormaps
from pydantic import BaseModel, Field, field_validator
from typing import Optional


# ─── PFADE ───

class PathConfig(BaseModel):
    """Ein- und Ausgabedateien (ersetzen die früheren festen Dateinamen)."""
    # Eingabedatei: eine Show pro Zeile "<titel> <start> <ende>"
    input_file: str = Field("input.txt",
        description="Eingabedatei mit Shows")
    # Ausgabe der HTML-Ansicht
    html_output: str = Field("schedule.html",
        description="Ausgabedatei für die HTML-Ansicht")
    # Optionale JSON-Ausgabe des Ergebnisses (None = keine)
    json_output: Optional[str] = Field(None,
        description="JSON-Export des Ergebnisses (leer = aus)")


# ─── HTML ───

class HtmlConfig(BaseModel):
    """Darstellung der HTML-Ansicht."""
    # Name einer matplotlib-Colormap, wird auf track_count Farben abgetastet
    colormap: str = Field("winter",
        description="Colormap für die Track-Farben")
    # Skalierung der Colormap-Werte (0..1) auf RGB-Kanäle
    color_scale: int = Field(128, ge=1, le=255,
        description="Maximaler RGB-Wert der Track-Farben")
    # Nach dem Schreiben im Standard-Viewer öffnen
    open_in_browser: bool = Field(False,
        description="HTML-Datei nach dem Export öffnen")
    # Eigenes Basis-Template (None = mitgeliefertes Template)
    template_path: Optional[str] = Field(None,
        description="Pfad zu eigenem Basis-Template")

    @field_validator("colormap")
    @classmethod
    def _check_colormap(cls, v: str) -> str:
        if v not in colormaps:
            raise ValueError(f"Unbekannte Colormap: {v!r}")
        return v


# ─── GESAMT-CONFIG ───

class FestivalConfig(BaseModel):
    """Gesamtkonfiguration des Festival-Planers."""
    # Titel des Festivals (nur für Konsolen-Überschriften)
    title: str = Field("Festival",
        description="Name des Festivals")
    # Ein- und Ausgabepfade
    paths: PathConfig = Field(default_factory=PathConfig)
    # HTML-Darstellung
    html: HtmlConfig = Field(default_factory=HtmlConfig)
