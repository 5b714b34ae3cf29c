"""
Mesh Analyzer - Oberfläche und Komplexität eines rekonstruierten Meshes

Berechnet aus (Mesh, BoundingBox):
- Oberfläche (Summe der Dreiecksflächen, Kreuzprodukt-Formel)
- Face- und Vertex-Anzahl über alle Parts
- Bounding-Box-Oberfläche
- Complexity Ratio (Mesh-Fläche / Box-Fläche)

Die Analyse wirft bei kaputter Geometrie NIE eine Exception:
- Leeres Mesh -> Null-Ergebnis
- Part ohne Indices -> nur Vertices
- Index außerhalb -> Dreieck ohne Fläche
- Box-Fläche <= 0 -> Ratio 0

Verwendung:
    from omnimeasure.analysis import analyze

    result = analyze(mesh, BoundingBox(1.2, 0.8, 0.5))
    print(result.surface_area, result.complexity_ratio)
"""

import math
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional, Sequence, Union

import numpy as np
from loguru import logger

from config.feature_flags import is_enabled
from config.tolerances import Tolerances
from omnimeasure.core.geometry import BoundingBox, Mesh, MeshPart, Vector3
from omnimeasure.core.result_types import AnalysisResult, PartStatistics


BoxLike = Union[BoundingBox, Sequence[float]]


def triangle_area(v0, v1, v2) -> float:
    """
    Fläche eines Dreiecks: 0.5 · |(v1 - v0) × (v2 - v0)|.

    Kollineare Punkte liefern exakt 0.
    """
    side1 = Vector3(*v1) - Vector3(*v0)
    side2 = Vector3(*v2) - Vector3(*v0)
    return 0.5 * side1.cross(side2).length()


def as_bounding_box(bounding_box: BoxLike) -> BoundingBox:
    if isinstance(bounding_box, BoundingBox):
        return bounding_box
    return BoundingBox.from_extents(bounding_box)


class MeshAnalyzer:
    """
    Zustandslose Mesh-Analyse.

    Die Instanz hält nur Konfiguration (Parallelisierung). Jeder analyze()
    Aufruf rechnet frisch, ohne Cache und ohne die Eingaben zu verändern.
    """

    def __init__(self, parallel: Optional[bool] = None, max_workers: Optional[int] = None):
        """
        Args:
            parallel: Parts auf einen ThreadPool verteilen.
                None = Feature-Flag "parallel_part_analysis" entscheidet.
            max_workers: Worker für den ThreadPool (None = Tolerances.PARALLEL_MAX_WORKERS)
        """
        self.parallel = parallel
        self.max_workers = max_workers if max_workers is not None else Tolerances.PARALLEL_MAX_WORKERS

    def analyze(self, mesh: Union[Mesh, Iterable[MeshPart]], bounding_box: BoxLike) -> AnalysisResult:
        """
        Analysiert alle Parts und vergleicht mit der Bounding Box.

        Args:
            mesh: Mesh (oder beliebige Sequenz von MeshParts), darf leer sein
            bounding_box: BoundingBox oder (w, h, d)

        Returns:
            AnalysisResult
        """
        parts = list(mesh)
        box = as_bounding_box(bounding_box)

        if self._use_parallel(len(parts)):
            logger.debug(f"[MeshAnalyzer] Parallele Analyse: {len(parts)} Parts")
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                stats = list(pool.map(self.analyze_part, parts))
        else:
            stats = [self.analyze_part(part) for part in parts]

        if is_enabled("analysis_debug_logging"):
            for i, part_stats in enumerate(stats):
                logger.debug(f"[MeshAnalyzer] Part {i}: area={part_stats.surface_area:.6f}, "
                             f"faces={part_stats.face_count}, vertices={part_stats.vertex_count}, "
                             f"skipped={part_stats.skipped_face_count}")

        return self.finalize(stats, box)

    def _use_parallel(self, part_count: int) -> bool:
        enabled = self.parallel if self.parallel is not None else is_enabled("parallel_part_analysis")
        return enabled and part_count >= Tolerances.PARALLEL_MIN_PARTS

    @staticmethod
    def analyze_part(part: MeshPart) -> PartStatistics:
        """
        Beitrag eines einzelnen Parts.

        face_count zählt nominal (len(indices) // 3), auch Dreiecke mit
        ungültigen Indices. Diese landen zusätzlich in skipped_face_count.
        """
        vertex_count = part.vertex_count
        indices = part.triangle_indices
        face_count = part.nominal_face_count

        if indices is None or face_count == 0:
            return PartStatistics(vertex_count=vertex_count)

        # Überzählige 1-2 Indices am Ende ignorieren
        triangles = indices[:face_count * 3].reshape(-1, 3)
        in_range = np.all((triangles >= 0) & (triangles < vertex_count), axis=1)
        valid = triangles[in_range]

        if valid.shape[0] == 0:
            return PartStatistics(
                face_count=face_count,
                vertex_count=vertex_count,
                skipped_face_count=face_count,
            )

        positions = part.positions
        v0 = positions[valid[:, 0]]
        side1 = positions[valid[:, 1]] - v0
        side2 = positions[valid[:, 2]] - v0
        areas = 0.5 * np.linalg.norm(np.cross(side1, side2), axis=1)

        # NaN/Inf Vertices wie ungültige Indices behandeln
        finite = np.isfinite(areas)
        contributing = int(np.count_nonzero(finite))

        return PartStatistics(
            surface_area=math.fsum(areas[finite].tolist()),
            face_count=face_count,
            vertex_count=vertex_count,
            skipped_face_count=face_count - contributing,
        )

    @staticmethod
    def finalize(stats: List[PartStatistics], bounding_box: BoundingBox) -> AnalysisResult:
        """Kombiniert Part-Beiträge mit der Bounding Box zum Endergebnis."""
        totals = PartStatistics.combine(stats)
        box_area = bounding_box.surface_area

        # NaN-Box fällt hier ebenfalls auf 0
        complexity_ratio = totals.surface_area / box_area if box_area > 0 else 0.0

        result = AnalysisResult(
            surface_area=totals.surface_area,
            face_count=totals.face_count,
            vertex_count=totals.vertex_count,
            bounding_box_area=box_area,
            complexity_ratio=complexity_ratio,
            skipped_face_count=totals.skipped_face_count,
            part_count=len(stats),
        )

        if result.has_skipped_faces:
            logger.warning(f"[MeshAnalyzer] {result.skipped_face_count} von {result.face_count} "
                           f"Dreiecken ohne Fläche übersprungen (ungültige Indices/Vertices)")

        if is_enabled("analysis_summary_logging"):
            logger.info(f"[MeshAnalyzer] Analyse abgeschlossen: "
                        f"area={result.surface_area:.6f} m², faces={result.face_count}, "
                        f"vertices={result.vertex_count}, bbox_area={result.bounding_box_area:.6f} m², "
                        f"ratio={result.complexity_ratio:.4f}")

        return result


def analyze(mesh: Union[Mesh, Iterable[MeshPart]], bounding_box: BoxLike) -> AnalysisResult:
    """
    Convenience-Funktion für eine einmalige Analyse.

    Args:
        mesh: Mesh oder Sequenz von MeshParts
        bounding_box: BoundingBox oder (w, h, d)

    Returns:
        AnalysisResult
    """
    analyzer = MeshAnalyzer()
    return analyzer.analyze(mesh, bounding_box)
