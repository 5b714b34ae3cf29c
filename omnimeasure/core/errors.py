"""
OmniMeasure - Exceptions
========================

Echte Fehler (Datei fehlt, Format nicht lesbar, Abbruch) werden als
Exception signalisiert. Degenerierte Geometrie ist KEIN Fehler - der
MeshAnalyzer liefert dafür Teil- oder Null-Ergebnisse.
"""


class MeasureError(Exception):
    """Basisklasse für alle OmniMeasure-Fehler."""
    pass


class MeshDataError(MeasureError, ValueError):
    """Mesh-Daten sind strukturell unbrauchbar (z.B. Positionen nicht (n, 3))."""
    pass


class AssetLoadError(MeasureError):
    """
    3D-Asset konnte nicht geladen werden.

    Attributes:
        path: Pfad des Assets
        reason: Kurzbeschreibung ("not_found", "unsupported_format", "read_failed")
    """

    def __init__(self, message: str, path: str = "", reason: str = ""):
        super().__init__(message)
        self.path = path
        self.reason = reason


class AnalysisCancelledError(MeasureError):
    """Analyse wurde zwischen zwei Parts abgebrochen."""
    pass
