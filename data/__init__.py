"""Einlesen der Show-Datei und Testdaten-Generator."""
