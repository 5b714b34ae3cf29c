"""
OmniMeasure Core - Geometrie-, Ergebnis- und Fehler-Typen.
"""

from omnimeasure.core.errors import (
    MeasureError,
    MeshDataError,
    AssetLoadError,
    AnalysisCancelledError,
)
from omnimeasure.core.geometry import Vector3, MeshPart, Mesh, BoundingBox
from omnimeasure.core.result_types import AnalysisResult, PartStatistics, ComplexityLevel, total_surface_area

__all__ = [
    'MeasureError',
    'MeshDataError',
    'AssetLoadError',
    'AnalysisCancelledError',
    'Vector3',
    'MeshPart',
    'Mesh',
    'BoundingBox',
    'AnalysisResult',
    'PartStatistics',
    'ComplexityLevel',
    'total_surface_area',
]
