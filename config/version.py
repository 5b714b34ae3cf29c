"""
OmniMeasure - Version

Die Analyzer-Version wird mit jedem Ergebnis exportiert (AnalysisResult.to_dict),
damit gespeicherte Messwerte einer Analyzer-Version zugeordnet werden können.
"""

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

APP_NAME = "OmniMeasure"

VERSION = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"
