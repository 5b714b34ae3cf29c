"""
OmniMeasure - Asset Loader
==========================

Liest ein rekonstruiertes 3D-Asset mit PyVista und liefert die rohen
Geometrie-Buffer für die Analyse.

- Jeder (nicht leere) Block eines MultiBlock-Datasets wird ein MeshPart
- Nicht-PolyData Blöcke werden per extract_surface() zu Oberflächen
- Polygone/Strips werden trianguliert
- Die Bounding Box umfasst die Bounds ALLER Blöcke

Echte Fehler (Datei fehlt, Format unbekannt, Reader schlägt fehl) werden als
AssetLoadError gemeldet - anders als die Analyse selbst.

Verwendung:
    from omnimeasure.loaders import load_asset

    asset = load_asset("scans/toy_car.glb")
    result = analyze(asset.mesh, asset.bounding_box)
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Union

import numpy as np
import pyvista as pv
from loguru import logger

from config.feature_flags import is_enabled
from omnimeasure.core.errors import AssetLoadError
from omnimeasure.core.geometry import BoundingBox, Mesh, MeshPart


SUPPORTED_EXTENSIONS = (
    ".stl", ".obj", ".ply",
    ".vtk", ".vtp", ".vtu", ".vtm",
    ".gltf", ".glb",
)


@dataclass(frozen=True, eq=False)
class LoadedAsset:
    """Geladenes Asset: Geometrie-Buffer + visuelle Bounds."""

    mesh: Mesh
    bounding_box: BoundingBox
    source_path: str = ""


def _polydata_to_part(dataset) -> MeshPart:
    """Einzelnen Block in einen MeshPart umwandeln (trianguliert)."""
    if not isinstance(dataset, pv.PolyData):
        dataset = dataset.extract_surface()

    if dataset.n_cells == 0:
        return MeshPart(np.asarray(dataset.points), None)

    if not dataset.is_all_triangles:
        dataset = dataset.triangulate()

    faces = dataset.faces
    if faces.size == 0:
        return MeshPart(np.asarray(dataset.points), None)

    # Nur Triangle-Indices (Padding-Spalte entfernen)
    triangles = faces.reshape(-1, 4)[:, 1:4]
    return MeshPart(np.asarray(dataset.points), triangles)


def _collect_blocks(dataset, out: List) -> None:
    if isinstance(dataset, pv.MultiBlock):
        for block in dataset:
            if block is not None:
                _collect_blocks(block, out)
        return

    if dataset.n_points > 0:
        out.append(dataset)


def _bounding_box_of(blocks: List) -> BoundingBox:
    """Vereinigung der Bounds aller nicht leeren Blöcke."""
    if not blocks:
        return BoundingBox.zero()
    bounds = np.array([block.bounds for block in blocks], dtype=np.float64)
    return BoundingBox.from_bounds(
        bounds[:, 0].min(), bounds[:, 1].max(),
        bounds[:, 2].min(), bounds[:, 3].max(),
        bounds[:, 4].min(), bounds[:, 5].max(),
    )


def mesh_from_polydata(dataset: Union[pv.DataSet, pv.MultiBlock]) -> LoadedAsset:
    """
    Wandelt ein PyVista Dataset (PolyData, UnstructuredGrid, MultiBlock) um.

    Args:
        dataset: PyVista Dataset im Speicher

    Returns:
        LoadedAsset ohne source_path
    """
    blocks: List = []
    _collect_blocks(dataset, blocks)

    parts = []
    for i, block in enumerate(blocks):
        part = _polydata_to_part(block)
        if is_enabled("loader_debug_logging"):
            logger.debug(f"[AssetLoader] Block {i}: {part.vertex_count} pts, {part.nominal_face_count} tris")
        parts.append(part)

    return LoadedAsset(mesh=Mesh(tuple(parts)), bounding_box=_bounding_box_of(blocks))


def load_asset(path: Union[str, Path]) -> LoadedAsset:
    """
    Lädt ein 3D-Asset von der Platte.

    Args:
        path: Pfad zur Datei

    Returns:
        LoadedAsset

    Raises:
        AssetLoadError: Datei fehlt, Format nicht unterstützt oder nicht lesbar
    """
    path = Path(path)

    if not path.is_file():
        raise AssetLoadError(f"Asset nicht gefunden: {path}", path=str(path), reason="not_found")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_EXTENSIONS:
        raise AssetLoadError(
            f"Format nicht unterstützt: {suffix or '(ohne Endung)'}",
            path=str(path), reason="unsupported_format",
        )

    logger.info(f"Lade Asset: {path}")
    try:
        dataset = pv.read(str(path))
    except Exception as e:
        raise AssetLoadError(f"Asset konnte nicht gelesen werden: {e}",
                             path=str(path), reason="read_failed") from e

    if dataset is None:
        raise AssetLoadError(f"Reader lieferte kein Dataset: {path}", path=str(path), reason="read_failed")

    asset = mesh_from_polydata(dataset)
    logger.debug(f"[AssetLoader] {path.name}: {len(asset.mesh)} Parts, "
                 f"box={asset.bounding_box.extents}")
    return LoadedAsset(mesh=asset.mesh, bounding_box=asset.bounding_box, source_path=str(path))
