"""
OmniMeasure - Anzeige-Formatierung
==================================

Reine, zustandslose Formatierungs-Regeln für Analyse-Werte.

- Flächen unter 0.01 m² werden in cm² angezeigt
- Dimensionen immer in Metern
"""

from typing import Iterable, Optional

from config.tolerances import Tolerances, area_unit_threshold
from omnimeasure.core.geometry import BoundingBox
from omnimeasure.core.result_types import AnalysisResult, ComplexityLevel, total_surface_area


def format_surface_area(area_m2: Optional[float]) -> str:
    """
    Fläche für die Anzeige, mit Einheitenwechsel.

    Args:
        area_m2: Fläche in m², None wenn unbekannt

    Returns:
        "Unknown", "12.5 cm²" oder "0.152 m²"
    """
    if area_m2 is None:
        return "Unknown"

    if area_m2 < area_unit_threshold():
        cm2 = area_m2 * Tolerances.AREA_M2_TO_CM2
        return f"{cm2:.1f} cm²"

    return f"{area_m2:.3f} m²"


def format_total_surface_area(results: Iterable[Optional[AnalysisResult]]) -> str:
    """Gesamtfläche mehrerer Modelle, gleiche cm²/m² Regel wie format_surface_area."""
    return format_surface_area(total_surface_area(results))


def format_area_precise(area_m2: float) -> str:
    """Fläche mit vier Nachkommastellen, immer in m²."""
    return f"{area_m2:.4f} m²"


def format_complexity_ratio(ratio: float) -> str:
    return f"{ratio:.2f}×"


def describe_complexity(ratio: float) -> str:
    """Kurzbeschreibung des Complexity Ratio ("Simple geometry", ...)."""
    return ComplexityLevel.from_ratio(ratio).description


def format_dimensions(box: BoundingBox) -> str:
    """z.B. "1.20 × 0.80 × 0.50 m" """
    return f"{box.width:.2f} × {box.height:.2f} × {box.depth:.2f} m"


def format_dimensions_compact(box: BoundingBox) -> str:
    """z.B. "1.2×0.8×0.5 m" """
    return f"{box.width:.1f}×{box.height:.1f}×{box.depth:.1f} m"


def format_analysis_report(result: AnalysisResult, box: Optional[BoundingBox] = None) -> str:
    """
    Mehrzeiliger Text-Report einer Analyse (Share-Text, Logs).

    Args:
        result: Analyse-Ergebnis
        box: Optional die Bounding Box für die Dimensionszeile
    """
    lines = [
        f"Surface Area: {format_surface_area(result.surface_area)}",
        f"Faces: {result.face_count}",
        f"Vertices: {result.vertex_count}",
        f"Bounding Box Area: {format_area_precise(result.bounding_box_area)}",
        f"Complexity Ratio: {format_complexity_ratio(result.complexity_ratio)}",
        f"Complexity: {describe_complexity(result.complexity_ratio)}",
    ]

    if box is not None:
        lines.insert(0, f"Dimensions: {format_dimensions(box)}")

    if result.has_skipped_faces:
        lines.append(f"Skipped Faces: {result.skipped_face_count}")

    return "\n".join(lines)
