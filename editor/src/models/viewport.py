"""
Shape Editor - Viewport Model

Owns the uniform scale + translation between screen space and world space:

    screen = world * scale + translation
    world  = (screen - translation) / scale

translation is the screen position (pixels) of the world origin. Scale and
translation are only ever changed by zooming around a screen pivot or by
panning; every other mutator is expressed in terms of those two.
"""

import logging

from models.transform import ScreenPoint, WorldPoint, Vec2
from constants import WHEEL_ZOOM_FACTOR, MIN_SCALE, MAX_SCALE


class Viewport:
    """Screen <-> world transform with zoom-around-cursor and pan."""

    def __init__(self, scale: float = 1.0, translation: Vec2 = None,
                 min_scale: float = MIN_SCALE, max_scale: float = MAX_SCALE):
        if not (0 < min_scale <= max_scale):
            raise ValueError(f"Invalid scale limits: {min_scale}..{max_scale}")
        self._logger = logging.getLogger('Viewport')
        self.min_scale = min_scale
        self.max_scale = max_scale
        self._scale = self._clamp(scale)
        if translation is None:
            translation = ScreenPoint(0.0, 0.0)
        self._translation = ScreenPoint(float(translation.x), float(translation.y))
        self._listeners = []

    # ========================================
    # Properties
    # ========================================

    @property
    def scale(self) -> float:
        """World -> screen magnification - READ ONLY"""
        return self._scale

    @property
    def translation(self) -> ScreenPoint:
        """Screen position of the world origin - READ ONLY"""
        return self._translation

    @property
    def zoom_percent(self) -> int:
        return int(round(self._scale * 100))

    # ========================================
    # Conversions
    # ========================================

    def screen_to_world(self, point) -> WorldPoint:
        """Convert a screen point (pixels) to world coordinates."""
        return WorldPoint(
            (point.x - self._translation.x) / self._scale,
            (point.y - self._translation.y) / self._scale,
        )

    def world_to_screen(self, point) -> ScreenPoint:
        """Convert a world point to screen coordinates (pixels)."""
        return ScreenPoint(
            point.x * self._scale + self._translation.x,
            point.y * self._scale + self._translation.y,
        )

    # ========================================
    # Mutation
    # ========================================

    def zoom_around_screen_point(self, pivot, factor: float) -> bool:
        """Multiply scale by factor keeping the world point under pivot fixed.

        The new scale is clamped to [min_scale, max_scale]; the translation
        uses the clamped ratio so the pivot stays put even at the limits.

        Args:
            pivot: ScreenPoint that must not move on screen
            factor: Zoom multiplier (> 1 zooms in)

        Returns:
            True if the view changed
        """
        if factor <= 0:
            raise ValueError(f"Zoom factor must be positive, got {factor}")
        return self._zoom_to(pivot, self._clamp(self._scale * factor))

    def _zoom_to(self, pivot, new_scale) -> bool:
        old_scale = self._scale
        if new_scale == old_scale:
            return False

        ratio = new_scale / old_scale
        self._translation = ScreenPoint(
            pivot.x - (pivot.x - self._translation.x) * ratio,
            pivot.y - (pivot.y - self._translation.y) * ratio,
        )
        self._scale = new_scale
        self._logger.debug(f"Zoom x{ratio:.4f} around ({pivot.x:.1f}, {pivot.y:.1f}) -> scale {new_scale:.4f}")
        self._notify_listeners()
        return True

    def pan_by(self, delta) -> bool:
        """Shift the view by a screen-space delta (pixels)."""
        if delta.x == 0 and delta.y == 0:
            return False
        self._translation = ScreenPoint(self._translation.x + delta.x, self._translation.y + delta.y)
        self._notify_listeners()
        return True

    def set_scale(self, scale: float, pivot) -> bool:
        """Zoom to an absolute scale around a screen pivot."""
        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale}")
        return self._zoom_to(pivot, self._clamp(scale))

    def reset(self) -> bool:
        """Return to scale 1 with the world origin at the screen origin."""
        changed = self.set_scale(1.0, ScreenPoint(0.0, 0.0))
        origin = self._translation
        return self.pan_by(ScreenPoint(-origin.x, -origin.y)) or changed

    @staticmethod
    def wheel_factor(delta_y: float) -> float:
        """Zoom factor for one wheel event.

        Follows the DOM sign convention: negative delta (wheel away from the
        user) zooms in. One step per event, no inertia.
        """
        if delta_y < 0:
            return WHEEL_ZOOM_FACTOR
        if delta_y > 0:
            return 1.0 / WHEEL_ZOOM_FACTOR
        return 1.0

    def _clamp(self, scale):
        return max(self.min_scale, min(self.max_scale, float(scale)))

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback):
        """Register a callback invoked (with no arguments) after every change"""
        self._listeners.append(callback)

    def remove_listener(self, callback):
        """Remove a listener"""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self):
        for callback in list(self._listeners):
            callback()

    def __repr__(self):
        return f"Viewport(scale={self._scale:.4f}, translation=({self._translation.x:.2f}, {self._translation.y:.2f}))"
