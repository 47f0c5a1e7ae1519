"""
Shape Editor - Data Models

This is the MODEL in MVC architecture. No Qt imports live in this package:
the models can be driven and tested without a display.
"""

from .transform import Vec2, ScreenPoint, WorldPoint
from .shape import Shape, ShapeKind, new_shape_id
from .viewport import Viewport
from .shape_store import ShapeStore, ShapeStoreError, DuplicateIdError, ShapeNotFoundError
from .tool_state import ToolState
from .selection import SelectionModel

__all__ = [
    'Vec2', 'ScreenPoint', 'WorldPoint',
    'Shape', 'ShapeKind', 'new_shape_id',
    'Viewport',
    'ShapeStore', 'ShapeStoreError', 'DuplicateIdError', 'ShapeNotFoundError',
    'ToolState',
    'SelectionModel',
]
