"""
OmniMeasure - Geometrie-Typen
=============================

Eingabe-Typen für die Mesh-Analyse:
- Vector3: unveränderliches (x, y, z) Tripel
- MeshPart: Positionen + optionaler Triangle-Index-Buffer
- Mesh: geordnete Sequenz von MeshParts
- BoundingBox: achsenparallele Box (Extents), kommt von außen (Asset-Bounds)

Die Typen normalisieren ihre Eingaben beim Erzeugen (float64 / int64 Kopien),
damit die Analyse die Daten des Aufrufers nie verändert.
"""

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from omnimeasure.core.errors import MeshDataError


class Vector3(NamedTuple):
    """Unveränderlicher 3D-Vektor. Gleichheit nur über Werte."""

    x: float
    y: float
    z: float

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other[0], self.y + other[1], self.z + other[2])

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other[0], self.y - other[1], self.z - other[2])

    def cross(self, other: "Vector3") -> "Vector3":
        """Kreuzprodukt self × other."""
        ox, oy, oz = other
        return Vector3(
            self.y * oz - self.z * oy,
            self.z * ox - self.x * oz,
            self.x * oy - self.y * ox,
        )

    def length(self) -> float:
        """Euklidische Länge."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


def _coerce_positions(positions) -> np.ndarray:
    """Positionen als (n, 3) float64 Kopie. Flache Buffer (3n,) werden umgeformt."""
    try:
        arr = np.array(positions, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise MeshDataError(f"Positionen nicht numerisch lesbar: {e}") from e

    if arr.size == 0:
        return np.zeros((0, 3), dtype=np.float64)

    if arr.ndim == 1 and arr.size % 3 == 0:
        arr = arr.reshape(-1, 3)

    if arr.ndim != 2 or arr.shape[1] != 3:
        raise MeshDataError(f"Positionen müssen die Form (n, 3) haben, nicht {arr.shape}")

    return arr


def _coerce_indices(indices) -> Optional[np.ndarray]:
    """Index-Buffer (flach oder (m, 3)) als flache int64 Kopie. None bleibt None."""
    if indices is None:
        return None

    try:
        arr = np.array(indices)
    except (TypeError, ValueError) as e:
        raise MeshDataError(f"Triangle-Indices nicht lesbar: {e}") from e

    if arr.size == 0:
        return np.zeros(0, dtype=np.int64)

    # Nur flache Buffer oder (m, 3) Tripel, Quad-Buffer (m, 4) würden falsch zerlegt
    if arr.ndim > 2 or (arr.ndim == 2 and arr.shape[1] != 3):
        raise MeshDataError(f"Triangle-Indices müssen flach oder (m, 3) sein, nicht {arr.shape}")

    if arr.dtype.kind == "f":
        # Float-Buffer nur akzeptieren wenn alle Werte ganzzahlig sind
        if not (np.all(np.isfinite(arr)) and np.all(np.mod(arr, 1) == 0)):
            raise MeshDataError("Triangle-Indices enthalten nicht-ganzzahlige Werte")
    elif arr.dtype.kind not in ("i", "u"):
        raise MeshDataError(f"Triangle-Indices haben ungültigen Typ: {arr.dtype}")

    return arr.astype(np.int64).ravel()


@dataclass(frozen=True, eq=False)
class MeshPart:
    """
    Ein zusammenhängendes Stück eines Meshes.

    Attributes:
        positions: (n, 3) float64, Reihenfolge = Vertex-Index
        triangle_indices: flacher int64 Buffer, je drei Indices ein Dreieck.
            Länge muss kein Vielfaches von 3 sein (Rest wird ignoriert).
            None = Part liefert nur Vertices, keine Faces.
    """

    positions: np.ndarray
    triangle_indices: Optional[np.ndarray] = None

    def __post_init__(self):
        positions = _coerce_positions(self.positions)
        indices = _coerce_indices(self.triangle_indices)

        positions.setflags(write=False)
        if indices is not None:
            indices.setflags(write=False)

        object.__setattr__(self, "positions", positions)
        object.__setattr__(self, "triangle_indices", indices)

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def nominal_face_count(self) -> int:
        """Anzahl der Index-Tripel (ohne Prüfung der Indices)."""
        if self.triangle_indices is None:
            return 0
        return int(self.triangle_indices.shape[0] // 3)

    @property
    def has_faces(self) -> bool:
        return self.nominal_face_count > 0


@dataclass(frozen=True, eq=False)
class Mesh:
    """Geordnete Sequenz von MeshParts. Die Reihenfolge ist für Summen egal."""

    parts: Tuple[MeshPart, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "parts", tuple(self.parts))

    def __iter__(self) -> Iterator[MeshPart]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    @classmethod
    def from_arrays(cls, positions, triangle_indices=None) -> "Mesh":
        """Mesh mit genau einem Part aus rohen Buffern."""
        return cls((MeshPart(positions, triangle_indices),))

    @classmethod
    def from_parts(cls, parts: Iterable[MeshPart]) -> "Mesh":
        return cls(tuple(parts))


@dataclass(frozen=True)
class BoundingBox:
    """
    Achsenparallele Bounding Box als Extents (gleiche Einheit wie Positionen).

    Wird NICHT aus dem Mesh berechnet - die Box stammt aus den visuellen
    Bounds des ganzen Assets und kann mehr als die reine Mesh-Geometrie
    enthalten.
    """

    width: float   # X-Achse
    height: float  # Y-Achse
    depth: float   # Z-Achse

    @property
    def extents(self) -> Tuple[float, float, float]:
        return (self.width, self.height, self.depth)

    @property
    def surface_area(self) -> float:
        """Oberfläche der Box: 2·(w·h + h·d + w·d)."""
        w, h, d = float(self.width), float(self.height), float(self.depth)
        return 2.0 * (w * h + h * d + w * d)

    @property
    def volume(self) -> float:
        """Volumen der Box in Einheit³."""
        return float(self.width) * float(self.height) * float(self.depth)

    @classmethod
    def from_extents(cls, extents: Sequence[float]) -> "BoundingBox":
        w, h, d = extents
        return cls(float(w), float(h), float(d))

    @classmethod
    def from_bounds(cls, xmin: float, xmax: float, ymin: float, ymax: float,
                    zmin: float, zmax: float) -> "BoundingBox":
        """Aus PyVista-Style Bounds (xmin, xmax, ymin, ymax, zmin, zmax)."""
        return cls(float(xmax - xmin), float(ymax - ymin), float(zmax - zmin))

    @classmethod
    def zero(cls) -> "BoundingBox":
        return cls(0.0, 0.0, 0.0)
