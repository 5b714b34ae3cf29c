"""
OmniMeasure - Result Types
==========================

Ergebnis-Typen der Mesh-Analyse:
- PartStatistics: Zwischenergebnis für einen MeshPart
- AnalysisResult: Endergebnis für Mesh + BoundingBox
- ComplexityLevel: Klassifizierung des Complexity Ratio für die Anzeige
- total_surface_area: Summe über mehrere Analyse-Ergebnisse

Usage:
    from omnimeasure.core.result_types import AnalysisResult, ComplexityLevel

    result = analyze(mesh, box)
    if result.is_empty:
        ...
    level = result.complexity_level
"""

import math
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Any, Dict, Iterable, Optional

from config.tolerances import Tolerances
from config.version import VERSION


class ComplexityLevel(Enum):
    """
    Grobe Einordnung der Oberflächen-Komplexität.

    SIMPLE           - Ratio <= 1.5, box-ähnliche Geometrie
    MODERATE         - 1.5 < Ratio <= 2.0
    HIGHLY_DETAILED  - Ratio > 2.0, viel Oberflächendetail
    """
    SIMPLE = "simple"
    MODERATE = "moderate"
    HIGHLY_DETAILED = "highly_detailed"

    @classmethod
    def from_ratio(cls, ratio: float) -> "ComplexityLevel":
        if ratio > Tolerances.COMPLEXITY_HIGHLY_DETAILED:
            return cls.HIGHLY_DETAILED
        if ratio > Tolerances.COMPLEXITY_MODERATE:
            return cls.MODERATE
        return cls.SIMPLE

    @property
    def description(self) -> str:
        return _COMPLEXITY_DESCRIPTIONS[self]


_COMPLEXITY_DESCRIPTIONS = {
    ComplexityLevel.SIMPLE: "Simple geometry",
    ComplexityLevel.MODERATE: "Moderate complexity",
    ComplexityLevel.HIGHLY_DETAILED: "Highly detailed geometry",
}


@dataclass(frozen=True)
class PartStatistics:
    """Beitrag eines einzelnen MeshParts."""

    surface_area: float = 0.0
    face_count: int = 0
    vertex_count: int = 0
    skipped_face_count: int = 0

    @classmethod
    def combine(cls, stats: Iterable["PartStatistics"]) -> "PartStatistics":
        """Summiert Part-Beiträge (Flächen via fsum, reihenfolgeunabhängig)."""
        stats = list(stats)
        return cls(
            surface_area=math.fsum(s.surface_area for s in stats),
            face_count=sum(s.face_count for s in stats),
            vertex_count=sum(s.vertex_count for s in stats),
            skipped_face_count=sum(s.skipped_face_count for s in stats),
        )


@dataclass(frozen=True)
class AnalysisResult:
    """
    Ergebnis einer Mesh-Analyse.

    Attributes:
        surface_area: Summe aller Dreiecksflächen (Einheit²)
        face_count: Nominale Dreiecke über alle Parts (len(indices) // 3),
            inklusive Dreiecke mit ungültigen Indices
        vertex_count: Positionen über alle Parts (nicht dedupliziert)
        bounding_box_area: 2·(w·h + h·d + w·d)
        complexity_ratio: surface_area / bounding_box_area, 0 wenn Box-Fläche <= 0
        skipped_face_count: Dreiecke, die in face_count zählen, aber keine
            Fläche beitragen (Index außerhalb, nicht-endliche Vertices)
        part_count: Anzahl analysierter Parts
    """

    surface_area: float = 0.0
    face_count: int = 0
    vertex_count: int = 0
    bounding_box_area: float = 0.0
    complexity_ratio: float = 0.0
    skipped_face_count: int = 0
    part_count: int = 0

    # --- Factory Methods ---

    @classmethod
    def empty(cls) -> "AnalysisResult":
        """Null-Ergebnis (leeres Mesh, Null-Box)."""
        return cls()

    # --- Properties ---

    @property
    def valid_face_count(self) -> int:
        """Dreiecke, die tatsächlich zur Fläche beigetragen haben."""
        return self.face_count - self.skipped_face_count

    @property
    def is_empty(self) -> bool:
        """True wenn das Mesh weder Vertices noch Faces hatte."""
        return self.face_count == 0 and self.vertex_count == 0

    @property
    def has_skipped_faces(self) -> bool:
        return self.skipped_face_count > 0

    @property
    def complexity_level(self) -> ComplexityLevel:
        return ComplexityLevel.from_ratio(self.complexity_ratio)

    def to_dict(self) -> Dict[str, Any]:
        """Konvertiert zu Dictionary (z.B. für Metadaten-Persistenz beim Aufrufer)."""
        data = asdict(self)
        data["complexity_level"] = self.complexity_level.value
        data["analyzer_version"] = VERSION
        return data


def total_surface_area(results: Iterable[Optional[AnalysisResult]]) -> float:
    """
    Gesamtfläche über mehrere Modelle (Bibliotheks-Statistik).

    Modelle ohne Analyse (None) werden übersprungen.
    """
    return math.fsum(r.surface_area for r in results if r is not None)
