"""Post-Solve Analyse der Track-Zuweisung."""
