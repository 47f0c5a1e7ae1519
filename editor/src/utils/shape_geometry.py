"""
Shape Editor - Shape Geometry Utilities

Pure geometry used for hit testing and outline generation. Everything here
works in world units and has no UI dependencies.

Geometry per kind (all centred on the bounding-box centre except the rect):
- Rectangle: axis-aligned box from (x, y) with the given extents
- Circle: disc of radius width / 2
- Triangle: regular 3-gon of radius max(width, height) / 2, first vertex up
"""

import math

import numpy as np


def rect_contains(x, y, width, height, px, py):
    """Check if a point lies inside an axis-aligned box (edges inclusive).

    Extents may be negative (box drawn up/left of its anchor).
    """
    left, right = sorted((x, x + width))
    top, bottom = sorted((y, y + height))
    return left <= px <= right and top <= py <= bottom


def circle_contains(cx, cy, radius, px, py):
    """Check if a point lies inside a disc (edge inclusive)."""
    return math.hypot(px - cx, py - cy) <= abs(radius)


def regular_polygon_vertices(cx, cy, radius, sides):
    """Vertices of a regular polygon with its first vertex straight up.

    Args:
        cx, cy: Centre in world units
        radius: Circumradius in world units
        sides: Number of sides (>= 3)

    Returns:
        np.ndarray of shape (sides, 2)
    """
    angles = -math.pi / 2 + np.arange(sides) * (2.0 * math.pi / sides)
    return np.column_stack((cx + radius * np.cos(angles), cy + radius * np.sin(angles)))


def triangle_vertices(cx, cy, radius):
    """Vertices of the upward equilateral triangle inscribed in a circle."""
    return regular_polygon_vertices(cx, cy, radius, 3)


def polygon_contains(vertices, px, py):
    """Check if a point lies inside a convex polygon (edges inclusive).

    The point is inside when it is on the same side of every edge.
    """
    vertices = np.asarray(vertices, dtype=float)
    if len(vertices) < 3:
        return False
    edges = np.roll(vertices, -1, axis=0) - vertices
    # Degenerate (zero-area) polygons contain nothing
    if abs(np.sum(vertices[:, 0] * edges[:, 1] - vertices[:, 1] * edges[:, 0])) < 1e-12:
        return False
    to_point = np.array([px, py]) - vertices
    cross = edges[:, 0] * to_point[:, 1] - edges[:, 1] * to_point[:, 0]
    return bool(np.all(cross >= -1e-9) or np.all(cross <= 1e-9))
