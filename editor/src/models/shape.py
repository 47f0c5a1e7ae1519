"""
Shape Editor - Shape Domain Model

A Shape is an immutable record: edits produce a new instance through
dataclasses.replace, so any reader (renderer, properties form) always holds a
consistent snapshot. The id is fixed at creation; kind only changes through
an explicit retyped() copy (the properties form), never through with_changes().
"""

import math
import uuid as uuid_module
from dataclasses import dataclass, replace
from enum import Enum

from models.transform import WorldPoint
from utils.shape_geometry import (
    rect_contains, circle_contains, triangle_vertices, polygon_contains
)


class ShapeKind(Enum):
    """Primitive shape types the editor can place."""
    RECTANGLE = 'rect'
    CIRCLE = 'circle'
    TRIANGLE = 'triangle'

    @property
    def label(self) -> str:
        """Human readable name for toolbars and forms"""
        return _KIND_LABELS[self]


_KIND_LABELS = {
    ShapeKind.RECTANGLE: 'Rectangle',
    ShapeKind.CIRCLE: 'Circle',
    ShapeKind.TRIANGLE: 'Triangle',
}

# Fields that may change after creation
MUTABLE_FIELDS = ('x', 'y', 'width', 'height', 'fill', 'stroke', 'stroke_width')


def new_shape_id() -> str:
    """Generate a collision-resistant shape id."""
    return str(uuid_module.uuid4())


@dataclass(frozen=True)
class Shape:
    """A primitive placed in world space.

    Attributes:
        id: Opaque unique id, never reused
        kind: ShapeKind, changed only by retyped()
        x, y: Bounding-box origin (top-left) in world units
        width, height: Bounding-box extents in world units. Circle uses width
            as its diameter; triangle uses max(width, height) as the diameter
            of its circumscribed circle.
        fill, stroke: Colour strings (#rrggbb)
        stroke_width: Outline width in world units
    """
    id: str
    kind: ShapeKind
    x: float
    y: float
    width: float
    height: float
    fill: str
    stroke: str
    stroke_width: float

    # ========================================
    # Geometry
    # ========================================

    @property
    def center(self) -> WorldPoint:
        """Centre of the bounding box"""
        return WorldPoint(self.x + self.width / 2.0, self.y + self.height / 2.0)

    @property
    def radius(self) -> float:
        """Radius used by circle and triangle rendering"""
        if self.kind is ShapeKind.CIRCLE:
            return abs(self.width) / 2.0
        return max(abs(self.width), abs(self.height)) / 2.0

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def outline(self):
        """Triangle vertices as an (3, 2) array, None for other kinds."""
        if self.kind is not ShapeKind.TRIANGLE:
            return None
        c = self.center
        return triangle_vertices(c.x, c.y, self.radius)

    def contains(self, point) -> bool:
        """Hit test a world point against the rendered geometry."""
        if self.kind is ShapeKind.RECTANGLE:
            return rect_contains(self.x, self.y, self.width, self.height, point.x, point.y)
        if self.radius <= 0:
            return False
        c = self.center
        if self.kind is ShapeKind.CIRCLE:
            return circle_contains(c.x, c.y, self.radius, point.x, point.y)
        return polygon_contains(self.outline(), point.x, point.y)

    # ========================================
    # Derived copies
    # ========================================

    def normalized(self) -> 'Shape':
        """Flip negative extents onto the anchor so width/height are >= 0."""
        return replace(
            self,
            x=self.x + min(self.width, 0.0),
            y=self.y + min(self.height, 0.0),
            width=abs(self.width),
            height=abs(self.height),
        )

    def moved_to(self, x: float, y: float) -> 'Shape':
        return replace(self, x=x, y=y)

    def retyped(self, kind) -> 'Shape':
        """Same id and bounding box drawn as another kind."""
        return replace(self, kind=ShapeKind(kind))

    def with_changes(self, **changes) -> 'Shape':
        """Copy with mutable fields replaced.

        Raises:
            ValueError: If a change targets id, kind or an unknown field
        """
        illegal = [name for name in changes if name not in MUTABLE_FIELDS]
        if illegal:
            raise ValueError(f"Cannot change shape field(s): {', '.join(sorted(illegal))}")
        return replace(self, **changes)


def default_size(kind: ShapeKind, initial_size: float):
    """Extents of a shape placed by a single click.

    Returns:
        (width, height) in world units
    """
    if kind is ShapeKind.CIRCLE:
        return initial_size * 2.0, initial_size * 2.0
    if kind is ShapeKind.TRIANGLE:
        return initial_size, initial_size * math.sqrt(3) / 2.0
    return initial_size, initial_size
