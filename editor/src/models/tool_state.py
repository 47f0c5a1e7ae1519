"""
Shape Editor - Tool State

Tracks which shape kind is armed for placement and the style applied to
newly created shapes. armed_kind None means pan / zoom / select mode.
"""

import logging
from typing import Optional

from models.shape import Shape, ShapeKind
from constants import DEFAULT_FILL, DEFAULT_STROKE, DEFAULT_STROKE_WIDTH


class ToolState:
    """Armed shape tool plus pending defaults for new shapes."""

    def __init__(self, default_fill: str = DEFAULT_FILL, default_stroke: str = DEFAULT_STROKE,
                 default_stroke_width: float = DEFAULT_STROKE_WIDTH):
        self._logger = logging.getLogger('ToolState')
        self._armed_kind: Optional[ShapeKind] = None
        self.default_fill = default_fill
        self.default_stroke = default_stroke
        self.default_stroke_width = default_stroke_width
        self._listeners = []

    @property
    def armed_kind(self) -> Optional[ShapeKind]:
        return self._armed_kind

    @property
    def is_armed(self) -> bool:
        return self._armed_kind is not None

    def arm(self, kind: ShapeKind):
        """Toggle a tool: arming the armed kind disarms, another kind replaces it."""
        kind = ShapeKind(kind)
        self._set_armed(None if kind is self._armed_kind else kind)

    def disarm(self):
        """Return to pan / select mode"""
        self._set_armed(None)

    def set_defaults(self, fill: str = None, stroke: str = None, stroke_width: float = None):
        """Change the style used for shapes created from now on"""
        if stroke_width is not None and stroke_width <= 0:
            raise ValueError(f"Stroke width must be positive, got {stroke_width}")
        if fill is not None:
            self.default_fill = fill
        if stroke is not None:
            self.default_stroke = stroke
        if stroke_width is not None:
            self.default_stroke_width = stroke_width
        self._notify_listeners()

    def new_shape(self, shape_id: str, x: float, y: float, width: float = 0.0, height: float = 0.0,
                  kind: ShapeKind = None) -> Shape:
        """Build a shape of the armed kind carrying the pending defaults.

        Raises:
            RuntimeError: If no kind is given and no tool is armed
        """
        kind = kind or self._armed_kind
        if kind is None:
            raise RuntimeError("No shape tool armed")
        return Shape(
            id=shape_id,
            kind=kind,
            x=x,
            y=y,
            width=width,
            height=height,
            fill=self.default_fill,
            stroke=self.default_stroke,
            stroke_width=self.default_stroke_width,
        )

    def _set_armed(self, kind):
        if kind is self._armed_kind:
            return
        self._armed_kind = kind
        self._logger.debug(f"Armed tool: {kind.value if kind else None}")
        self._notify_listeners()

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback):
        self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self):
        for callback in list(self._listeners):
            callback()
