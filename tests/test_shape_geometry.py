"""
Tests for shape geometry and the Shape record.

Covers:
- Containment per kind (rect box, circle disc, triangle polygon)
- Normalisation of negative extents
- Click placement default sizes
- Immutable identity on copies
"""
import math
import pytest
import numpy as np

from models.shape import Shape, ShapeKind, default_size, new_shape_id
from models.transform import WorldPoint
from utils.shape_geometry import (
    rect_contains, circle_contains, regular_polygon_vertices, triangle_vertices, polygon_contains
)


# ══════════════════════════════════════════════════════════════════════════
# Geometry helpers
# ══════════════════════════════════════════════════════════════════════════

class TestGeometryHelpers:

    def test_rect_edges_inclusive(self):
        assert rect_contains(0, 0, 10, 10, 10, 10)
        assert not rect_contains(0, 0, 10, 10, 10.01, 5)

    def test_rect_negative_extents(self):
        assert rect_contains(10, 10, -10, -10, 5, 5)

    def test_circle(self):
        assert circle_contains(0, 0, 5, 3, 4)
        assert not circle_contains(0, 0, 5, 4, 4)

    def test_triangle_first_vertex_up(self):
        verts = triangle_vertices(0.0, 0.0, 10.0)
        assert verts.shape == (3, 2)
        assert list(verts[0]) == pytest.approx([0.0, -10.0])
        # Base vertices are mirror images below the centre
        assert verts[1][1] == pytest.approx(5.0)
        assert verts[2][1] == pytest.approx(5.0)
        assert verts[1][0] == pytest.approx(-verts[2][0])

    def test_regular_polygon_radius(self):
        verts = regular_polygon_vertices(3.0, 4.0, 7.0, 6)
        distances = np.hypot(verts[:, 0] - 3.0, verts[:, 1] - 4.0)
        assert list(distances) == pytest.approx([7.0] * 6)

    def test_polygon_contains_centre_not_corner(self):
        verts = triangle_vertices(0.0, 0.0, 10.0)
        assert polygon_contains(verts, 0.0, 0.0)
        assert not polygon_contains(verts, -9.0, -9.0)

    def test_polygon_either_winding(self):
        verts = triangle_vertices(0.0, 0.0, 10.0)[::-1]
        assert polygon_contains(verts, 0.0, 1.0)

    def test_zero_area_polygon_contains_nothing(self):
        assert not polygon_contains(triangle_vertices(5.0, 5.0, 0.0), 5.0, 5.0)
        assert not polygon_contains([[0, 0], [1, 1]], 0.5, 0.5)


# ══════════════════════════════════════════════════════════════════════════
# Shape
# ══════════════════════════════════════════════════════════════════════════

def _shape(kind, x=0.0, y=0.0, width=100.0, height=100.0):
    return Shape(id="s", kind=kind, x=x, y=y, width=width, height=height,
                 fill="#ff0000", stroke="#000000", stroke_width=2.0)


class TestShapeGeometry:

    def test_circle_radius_is_half_width(self):
        circle = _shape(ShapeKind.CIRCLE, width=80, height=40)
        assert circle.radius == 40.0
        assert circle.center == WorldPoint(40.0, 20.0)

    def test_triangle_radius_uses_larger_extent(self):
        tri = _shape(ShapeKind.TRIANGLE, width=30, height=90)
        assert tri.radius == 45.0

    def test_outline_only_for_triangle(self):
        assert _shape(ShapeKind.RECTANGLE).outline() is None
        assert _shape(ShapeKind.TRIANGLE).outline().shape == (3, 2)

    def test_triangle_contains(self):
        tri = _shape(ShapeKind.TRIANGLE)
        assert tri.contains(WorldPoint(50, 50))
        assert not tri.contains(WorldPoint(1, 1))

    def test_degenerate_circle_contains_nothing(self):
        assert not _shape(ShapeKind.CIRCLE, width=0, height=0).contains(WorldPoint(0, 0))

    def test_normalized_flips_anchor(self):
        draft = _shape(ShapeKind.RECTANGLE, x=100, y=100, width=-40, height=-60)
        norm = draft.normalized()
        assert (norm.x, norm.y, norm.width, norm.height) == (60, 40, 40, 60)

    def test_normalized_positive_unchanged(self):
        shape = _shape(ShapeKind.RECTANGLE, x=1, y=2, width=3, height=4)
        assert shape.normalized() == shape

    def test_with_changes_rejects_identity(self):
        with pytest.raises(ValueError):
            _shape(ShapeKind.RECTANGLE).with_changes(kind=ShapeKind.CIRCLE)

    def test_shapes_are_immutable(self):
        shape = _shape(ShapeKind.RECTANGLE)
        with pytest.raises(Exception):
            shape.x = 5.0

    def test_moved_to(self):
        moved = _shape(ShapeKind.CIRCLE).moved_to(7, 8)
        assert (moved.x, moved.y, moved.width) == (7, 8, 100.0)

    def test_retyped_keeps_id_and_box(self):
        rect = _shape(ShapeKind.RECTANGLE, x=3, width=60, height=40)
        circle = rect.retyped('circle')
        assert circle.kind is ShapeKind.CIRCLE
        assert (circle.id, circle.x, circle.width, circle.height) == ("s", 3, 60, 40)
        with pytest.raises(ValueError):
            rect.retyped('hexagon')


class TestDefaultSize:

    def test_rectangle(self):
        assert default_size(ShapeKind.RECTANGLE, 50) == (50, 50)

    def test_circle_radius_equals_initial_size(self):
        width, height = default_size(ShapeKind.CIRCLE, 50)
        assert (width, height) == (100, 100)

    def test_triangle_equilateral_height(self):
        width, height = default_size(ShapeKind.TRIANGLE, 50)
        assert width == 50
        assert height == pytest.approx(50 * math.sqrt(3) / 2)


class TestIds:

    def test_ids_unique(self):
        ids = {new_shape_id() for _ in range(1000)}
        assert len(ids) == 1000
