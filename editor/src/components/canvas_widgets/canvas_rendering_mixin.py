"""Canvas rendering mixin - QPainter drawing of the world.

Rendering reads the shape store, selection, viewport and the controller's
preview once per paint; it never writes to any of them.
"""

import numpy as np
from PyQt5.QtCore import Qt, QPointF, QRectF
from PyQt5.QtGui import QBrush, QColor, QPainter, QPen, QPolygonF, QTransform

from models.shape import ShapeKind
from models.transform import ScreenPoint
from constants import (
    CANVAS_BACKGROUND, GRID_COLOR, GRID_SPACING, GRID_MIN_SCREEN_SPACING,
    SELECTION_HIGHLIGHT, PREVIEW_OPACITY
)


def world_transform(viewport):
    """QTransform mapping world coordinates to widget pixels."""
    scale = viewport.scale
    translation = viewport.translation
    return QTransform(scale, 0.0, 0.0, scale, translation.x, translation.y)


class CanvasRenderingMixin:
    """Mixin providing scene painting for the canvas."""

    # Expected state variables (initialized in main class):
    # - viewport, store, selection, controller
    # - show_grid: bool

    def _paint_scene(self, painter):
        """Paint background, grid, stored shapes and the gesture preview."""
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.fillRect(self.rect(), QColor(CANVAS_BACKGROUND))

        painter.save()
        painter.setTransform(world_transform(self.viewport))

        if self.show_grid:
            self._paint_grid(painter)

        dragged_id = self.controller.dragged_id
        selected_id = self.selection.selected_id
        for shape in self.store.all():
            if shape.id == dragged_id:
                continue
            self._paint_shape(painter, shape, shape.id == selected_id)

        preview = self.controller.preview
        if preview is not None:
            if dragged_id is not None:
                self._paint_shape(painter, preview, preview.id == selected_id)
            else:
                painter.setOpacity(PREVIEW_OPACITY)
                self._paint_shape(painter, preview.normalized(), False)
                painter.setOpacity(1.0)

        painter.restore()

    def _paint_grid(self, painter):
        """World-aligned grid, skipped when zoomed too far out to read."""
        if GRID_SPACING * self.viewport.scale < GRID_MIN_SCREEN_SPACING:
            return
        top_left = self.viewport.screen_to_world(ScreenPoint(0.0, 0.0))
        bottom_right = self.viewport.screen_to_world(ScreenPoint(float(self.width()), float(self.height())))

        pen = QPen(QColor(GRID_COLOR))
        pen.setCosmetic(True)  # 1px regardless of zoom
        painter.setPen(pen)

        xs = np.arange(np.floor(top_left.x / GRID_SPACING), np.ceil(bottom_right.x / GRID_SPACING) + 1) * GRID_SPACING
        ys = np.arange(np.floor(top_left.y / GRID_SPACING), np.ceil(bottom_right.y / GRID_SPACING) + 1) * GRID_SPACING
        for x in xs:
            painter.drawLine(QPointF(x, top_left.y), QPointF(x, bottom_right.y))
        for y in ys:
            painter.drawLine(QPointF(top_left.x, y), QPointF(bottom_right.x, y))

    def _paint_shape(self, painter, shape, selected):
        """Draw one shape in world coordinates."""
        stroke = SELECTION_HIGHLIGHT if selected else shape.stroke
        pen = QPen(QColor(stroke))
        pen.setWidthF(shape.stroke_width)
        pen.setJoinStyle(Qt.MiterJoin)
        painter.setPen(pen)
        painter.setBrush(QBrush(QColor(shape.fill)))

        if shape.kind is ShapeKind.RECTANGLE:
            painter.drawRect(QRectF(shape.x, shape.y, shape.width, shape.height))
        elif shape.kind is ShapeKind.CIRCLE:
            center = shape.center
            painter.drawEllipse(QPointF(center.x, center.y), shape.radius, shape.radius)
        elif shape.kind is ShapeKind.TRIANGLE:
            painter.drawPolygon(QPolygonF([QPointF(x, y) for x, y in shape.outline()]))
