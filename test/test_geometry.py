"""
Tests für die Geometrie-Eingabetypen (Vector3, MeshPart, Mesh, BoundingBox).
"""

import math

import numpy as np
import pytest

from omnimeasure.analysis.mesh_analyzer import as_bounding_box, triangle_area
from omnimeasure.core.errors import MeasureError, MeshDataError
from omnimeasure.core.geometry import BoundingBox, Mesh, MeshPart, Vector3


class TestVector3:

    def test_value_equality(self):
        assert Vector3(1, 2, 3) == Vector3(1.0, 2.0, 3.0)

    def test_add_sub(self):
        a = Vector3(1, 2, 3)
        b = Vector3(4, 5, 6)
        assert a + b == Vector3(5, 7, 9)
        assert b - a == Vector3(3, 3, 3)

    def test_cross_right_handed(self):
        x = Vector3(1, 0, 0)
        y = Vector3(0, 1, 0)
        assert x.cross(y) == Vector3(0, 0, 1)
        assert y.cross(x) == Vector3(0, 0, -1)

    def test_length(self):
        assert Vector3(3, 4, 12).length() == pytest.approx(13.0)


class TestTriangleArea:

    def test_unit_right_triangle(self):
        assert triangle_area((0, 0, 0), (1, 0, 0), (0, 1, 0)) == pytest.approx(0.5)

    def test_collinear_is_zero(self):
        assert triangle_area((0, 0, 0), (1, 1, 1), (2, 2, 2)) == 0.0

    def test_translation_invariant(self):
        a = triangle_area((0, 0, 0), (2, 0, 0), (0, 3, 0))
        b = triangle_area((10, -5, 7), (12, -5, 7), (10, -2, 7))
        assert a == pytest.approx(b)
        assert a == pytest.approx(3.0)


class TestMeshPart:
    """Normalisierung der Roh-Buffer."""

    def test_positions_become_float64(self):
        part = MeshPart(np.zeros((3, 3), dtype=np.float32), [0, 1, 2])
        assert part.positions.dtype == np.float64
        assert part.positions.shape == (3, 3)

    def test_flat_positions_are_reshaped(self):
        part = MeshPart([0, 0, 0, 1, 0, 0, 0, 1, 0], [0, 1, 2])
        assert part.vertex_count == 3

    def test_empty_positions(self):
        part = MeshPart([], None)
        assert part.positions.shape == (0, 3)
        assert part.vertex_count == 0
        assert part.nominal_face_count == 0

    def test_bad_positions_shape_raises(self):
        with pytest.raises(MeshDataError):
            MeshPart(np.zeros((4, 2)), None)

    def test_non_numeric_positions_raise(self):
        with pytest.raises(MeshDataError):
            MeshPart([("a", "b", "c")], None)

    def test_mesh_data_error_is_value_error(self):
        assert issubclass(MeshDataError, ValueError)
        assert issubclass(MeshDataError, MeasureError)

    def test_indices_m_by_3_are_flattened(self):
        part = MeshPart(np.zeros((4, 3)), np.array([[0, 1, 2], [0, 2, 3]], dtype=np.uint16))
        assert part.triangle_indices.dtype == np.int64
        assert part.triangle_indices.shape == (6,)
        assert part.nominal_face_count == 2

    def test_quad_index_buffer_raises(self):
        quads = np.array([[0, 1, 2, 3]], dtype=np.int32)
        with pytest.raises(MeshDataError):
            MeshPart(np.zeros((4, 3)), quads)

    def test_3d_index_buffer_raises(self):
        with pytest.raises(MeshDataError):
            MeshPart(np.zeros((3, 3)), np.zeros((1, 1, 3), dtype=np.int64))

    def test_integral_float_indices_accepted(self):
        part = MeshPart(np.zeros((3, 3)), [0.0, 1.0, 2.0])
        assert part.triangle_indices.tolist() == [0, 1, 2]

    def test_fractional_float_indices_raise(self):
        with pytest.raises(MeshDataError):
            MeshPart(np.zeros((3, 3)), [0.0, 1.5, 2.0])

    def test_string_indices_raise(self):
        with pytest.raises(MeshDataError):
            MeshPart(np.zeros((3, 3)), ["0", "1", "2"])

    def test_none_indices_stay_none(self):
        part = MeshPart(np.zeros((3, 3)))
        assert part.triangle_indices is None
        assert not part.has_faces

    def test_nominal_face_count_floors(self):
        part = MeshPart(np.zeros((3, 3)), [0, 1, 2, 0, 1])
        assert part.nominal_face_count == 1

    def test_buffers_are_read_only_copies(self):
        positions = np.zeros((3, 3))
        part = MeshPart(positions, [0, 1, 2])

        assert not part.positions.flags.writeable
        assert not part.triangle_indices.flags.writeable
        assert part.positions is not positions
        with pytest.raises(ValueError):
            part.positions[0, 0] = 1.0


class TestMesh:

    def test_iteration_and_len(self, unit_square_part, unit_cube_part):
        mesh = Mesh.from_parts([unit_square_part, unit_cube_part])
        assert len(mesh) == 2
        assert list(mesh) == [unit_square_part, unit_cube_part]

    def test_from_arrays(self):
        mesh = Mesh.from_arrays([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [0, 1, 2])
        assert len(mesh) == 1
        assert mesh.parts[0].nominal_face_count == 1

    def test_empty_mesh(self):
        assert len(Mesh()) == 0


class TestBoundingBox:

    def test_surface_area(self):
        assert BoundingBox(2, 3, 4).surface_area == pytest.approx(52.0)

    def test_volume(self):
        assert BoundingBox(2, 3, 4).volume == pytest.approx(24.0)

    def test_from_bounds(self):
        box = BoundingBox.from_bounds(-1.0, 1.0, 0.0, 0.5, 2.0, 5.0)
        assert box.extents == pytest.approx((2.0, 0.5, 3.0))

    def test_zero(self):
        assert BoundingBox.zero().surface_area == 0.0

    def test_nan_extent_gives_nan_area(self):
        assert math.isnan(BoundingBox(float("nan"), 1, 1).surface_area)

    def test_as_bounding_box(self):
        box = BoundingBox(1, 2, 3)
        assert as_bounding_box(box) is box
        assert as_bounding_box([1, 2, 3]) == box
