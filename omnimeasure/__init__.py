"""
OmniMeasure - Mesh-Metriken für photogrammetrisch erfasste Objekte

Berechnet aus einem rekonstruierten Dreiecks-Mesh:
- Oberfläche
- Face- und Vertex-Anzahl
- Bounding-Box-Oberfläche und Complexity Ratio
"""

from config.version import VERSION as __version__

from omnimeasure.core import (
    Vector3,
    MeshPart,
    Mesh,
    BoundingBox,
    AnalysisResult,
    ComplexityLevel,
    total_surface_area,
    MeasureError,
    MeshDataError,
    AssetLoadError,
    AnalysisCancelledError,
)
from omnimeasure.analysis import (
    MeshAnalyzer,
    analyze,
    triangle_area,
    MeshAnalysisWorker,
    analyze_in_background,
    measure_asset,
)
from omnimeasure.loaders import load_asset, mesh_from_polydata
from omnimeasure.formatting import format_surface_area, format_total_surface_area, format_analysis_report
from omnimeasure.logging_setup import configure_logging
