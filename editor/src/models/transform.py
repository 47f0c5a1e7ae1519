"""Point types for the two coordinate spaces of the editor.

World space is where shapes live; screen space is widget pixels. The two are
never mixed: only Viewport converts one into the other.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Vec2:
    """2D vector for coordinate pairs and deltas."""
    x: float
    y: float

    def __iter__(self):
        """Allow tuple unpacking: x, y = vec2"""
        return iter((self.x, self.y))

    def __add__(self, other):
        return type(self)(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return type(self)(self.x - other.x, self.y - other.y)

    def length(self):
        return (self.x * self.x + self.y * self.y) ** 0.5


@dataclass(frozen=True)
class ScreenPoint(Vec2):
    """Widget pixel coordinates (top-left origin, Y down)."""


@dataclass(frozen=True)
class WorldPoint(Vec2):
    """World coordinates, independent of zoom and pan."""
