"""
Asset Loader - Eingangsgrenze zwischen 3D-Dateien und Mesh-Analyse.
"""

from .asset_loader import LoadedAsset, load_asset, mesh_from_polydata, SUPPORTED_EXTENSIONS

__all__ = [
    'LoadedAsset',
    'load_asset',
    'mesh_from_polydata',
    'SUPPORTED_EXTENSIONS',
]
