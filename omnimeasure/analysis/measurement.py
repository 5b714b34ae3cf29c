"""
Measurement Pipeline - Asset laden und analysieren in einem Schritt.

Ladefehler (AssetLoadError) werden an den Aufrufer durchgereicht; die
Analyse selbst liefert bei kaputter Geometrie Teil-Ergebnisse.
"""

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from omnimeasure.analysis.mesh_analyzer import MeshAnalyzer
from omnimeasure.core.result_types import AnalysisResult
from omnimeasure.formatting import format_analysis_report
from omnimeasure.loaders.asset_loader import load_asset


def measure_asset(path: Union[str, Path], analyzer: Optional[MeshAnalyzer] = None) -> AnalysisResult:
    """
    Lädt ein Asset und berechnet die Mesh-Metriken.

    Args:
        path: Pfad zur 3D-Datei
        analyzer: Optionaler, vorkonfigurierter MeshAnalyzer

    Returns:
        AnalysisResult

    Raises:
        AssetLoadError: wenn das Asset nicht geladen werden kann
    """
    asset = load_asset(path)
    analyzer = analyzer or MeshAnalyzer()
    result = analyzer.analyze(asset.mesh, asset.bounding_box)

    logger.debug(f"[Measure] {Path(path).name}\n{format_analysis_report(result, asset.bounding_box)}")
    return result
