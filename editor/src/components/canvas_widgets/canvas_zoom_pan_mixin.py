"""Mixin for handling zoom in the shape canvas.

Provides viewport navigation including:
- Wheel zoom around the cursor (routed through the interaction controller)
- Zoom in/out/reset and absolute zoom for the toolbar and shortcuts
- Grid display toggle

Panning is a pointer gesture and lives in the interaction controller.
"""

from PyQt5.QtCore import Qt

from models.transform import ScreenPoint
from constants import KEY_ZOOM_FACTOR


class CanvasZoomPanMixin:
    """Mixin providing zoom functionality for the canvas."""

    # Expected state variables (initialized in main class):
    # - viewport: Viewport
    # - controller: InteractionController
    # - show_grid: bool
    # - zoom_changed: pyqtSignal(int)

    def zoom_in(self, cursor_pos=None):
        """Zoom in one step around the cursor (or the canvas centre)."""
        self.viewport.zoom_around_screen_point(self._zoom_pivot(cursor_pos), KEY_ZOOM_FACTOR)

    def zoom_out(self, cursor_pos=None):
        """Zoom out one step around the cursor (or the canvas centre)."""
        self.viewport.zoom_around_screen_point(self._zoom_pivot(cursor_pos), 1.0 / KEY_ZOOM_FACTOR)

    def zoom_reset(self):
        """Reset zoom to 100% with the world origin at the top-left corner."""
        self.viewport.reset()

    def set_zoom_level(self, zoom_percent):
        """Set zoom to specific percentage around the canvas centre."""
        self.viewport.set_scale(zoom_percent / 100.0, self._zoom_pivot(None))

    def get_zoom_percent(self):
        """Get current zoom percentage."""
        return self.viewport.zoom_percent

    def _zoom_pivot(self, cursor_pos):
        if cursor_pos is None:
            return ScreenPoint(self.width() / 2.0, self.height() / 2.0)
        return ScreenPoint(float(cursor_pos.x()), float(cursor_pos.y()))

    def _on_viewport_changed(self):
        """Viewport listener - repaint and report zoom."""
        self.zoom_changed.emit(self.get_zoom_percent())
        self.update()

    def set_show_grid(self, show):
        """Toggle grid visibility."""
        self.show_grid = show
        self.update()

    # ========================================
    # Mouse Event Handlers
    # ========================================

    def wheelEvent(self, event):
        """Handle mouse wheel for zoom around the cursor."""
        delta = event.angleDelta().y()
        if delta:
            pos = event.position()
            # Qt reports wheel-away-from-user as positive; the controller
            # expects the DOM convention (negative zooms in)
            self.controller.wheel(ScreenPoint(pos.x(), pos.y()), -delta, self._modifier_names(event))
        # Consume so no parent scroll area scrolls
        event.accept()

    @staticmethod
    def _modifier_names(event):
        """Translate Qt modifier flags into the controller's modifier names."""
        modifiers = event.modifiers()
        names = set()
        if modifiers & Qt.ShiftModifier:
            names.add('shift')
        if modifiers & Qt.ControlModifier:
            names.add('ctrl')
        if modifiers & Qt.AltModifier:
            names.add('alt')
        return frozenset(names)
