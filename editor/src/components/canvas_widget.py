# PyQt5 imports
from PyQt5.QtWidgets import QWidget, QSizePolicy
from PyQt5.QtCore import Qt, QEvent, pyqtSignal
from PyQt5.QtGui import QPainter

# Canvas mixins
from components.canvas_widgets.canvas_zoom_pan_mixin import CanvasZoomPanMixin
from components.canvas_widgets.canvas_rendering_mixin import CanvasRenderingMixin

from models.transform import ScreenPoint
from controllers.interaction import InteractionState


# Cursor per interaction state (IDLE depends on whether a tool is armed)
STATE_CURSORS = {
	InteractionState.PANNING: Qt.ClosedHandCursor,
	InteractionState.DRAWING: Qt.CrossCursor,
	InteractionState.DRAGGING_SHAPE: Qt.SizeAllCursor,
	InteractionState.SELECTING: Qt.PointingHandCursor,
}


class ShapeCanvas(CanvasZoomPanMixin, CanvasRenderingMixin, QWidget):
	"""Infinite canvas: paints the models and feeds pointer input to the controller.

	The widget is a thin host. It converts Qt mouse/wheel events into screen
	points and hands them to the InteractionController; everything it paints
	is read back from the models.
	"""

	zoom_changed = pyqtSignal(int)  # Emits zoom percentage
	pointer_moved = pyqtSignal(float, float)  # Emits world position under the cursor

	def __init__(self, controller, parent=None):
		super().__init__(parent)
		self.controller = controller
		ctx = controller.context
		self.viewport = ctx.viewport
		self.store = ctx.store
		self.tools = ctx.tools
		self.selection = ctx.selection
		self.show_grid = True

		self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
		self.setMinimumSize(400, 300)
		self.setMouseTracking(True)  # status bar pointer position
		self.setFocusPolicy(Qt.StrongFocus)

		self.viewport.add_listener(self._on_viewport_changed)
		self.store.add_listener(self.update)
		self.selection.add_listener(self.update)
		self.tools.add_listener(self._update_cursor)
		self.controller.add_listener(self._on_interaction_changed)
		self._update_cursor()

	def detach(self):
		"""Remove model listeners (the models may outlive the widget)"""
		self.viewport.remove_listener(self._on_viewport_changed)
		self.store.remove_listener(self.update)
		self.selection.remove_listener(self.update)
		self.tools.remove_listener(self._update_cursor)
		self.controller.remove_listener(self._on_interaction_changed)

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		painter = QPainter(self)
		try:
			self._paint_scene(painter)
		finally:
			painter.end()

	def _on_interaction_changed(self):
		self._update_cursor()
		self.update()

	def _update_cursor(self):
		state = self.controller.state
		if state in STATE_CURSORS:
			self.setCursor(STATE_CURSORS[state])
		elif self.tools.is_armed:
			self.setCursor(Qt.CrossCursor)
		else:
			self.setCursor(Qt.OpenHandCursor)

	# ========================================
	# Mouse Event Handlers
	# ========================================

	def mousePressEvent(self, event):
		if event.button() != Qt.LeftButton:
			super().mousePressEvent(event)
			return
		self.setFocus()
		self.controller.pointer_down(self._screen_point(event), self._modifier_names(event))
		event.accept()

	def mouseMoveEvent(self, event):
		point = self._screen_point(event)
		world = self.viewport.screen_to_world(point)
		self.pointer_moved.emit(world.x, world.y)
		# Qt keeps delivering moves to this widget while the button is held,
		# even outside its bounds (implicit grab)
		if self.controller.state is not InteractionState.IDLE:
			self.controller.pointer_move(point, self._modifier_names(event))
		event.accept()

	def mouseReleaseEvent(self, event):
		if event.button() != Qt.LeftButton:
			super().mouseReleaseEvent(event)
			return
		self.controller.pointer_up(self._screen_point(event), self._modifier_names(event))
		event.accept()

	def changeEvent(self, event):
		# Window lost activation mid-gesture: the grab is gone, finish the gesture
		if event.type() == QEvent.ActivationChange and not self.isActiveWindow():
			self.cancel_gesture()
		super().changeEvent(event)

	def hideEvent(self, event):
		self.cancel_gesture()
		super().hideEvent(event)

	def cancel_gesture(self):
		"""Finish any gesture in progress as if the pointer were released in place"""
		if self.controller.state is not InteractionState.IDLE:
			self.controller.cancel()

	@staticmethod
	def _screen_point(event):
		pos = event.localPos()
		return ScreenPoint(pos.x(), pos.y())
