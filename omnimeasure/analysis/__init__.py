"""
Mesh Analysis Module - Oberfläche, Face-/Vertex-Zahlen, Complexity Ratio.
"""

from .mesh_analyzer import MeshAnalyzer, analyze, triangle_area, as_bounding_box
from .analysis_worker import MeshAnalysisWorker, analyze_in_background
from .measurement import measure_asset

__all__ = [
    'MeshAnalyzer',
    'analyze',
    'triangle_area',
    'as_bounding_box',
    'MeshAnalysisWorker',
    'analyze_in_background',
    'measure_asset',
]
