from PyQt5 import QtCore
from PyQt5.QtWidgets import QToolBar, QPushButton, QWidget, QSizePolicy

from models.shape import ShapeKind
from components.gui_widgets.zoom_toolbar import ZoomToolbar


def create_toolbar(parent, tools):
	"""Create the main toolbar: shape tool buttons on the left, zoom on the right

	Each shape button toggles its kind in the ToolState; the buttons follow
	the ToolState so disarming after a click placement unchecks them.

	Args:
		parent: QMainWindow receiving the toolbar
		tools: ToolState the buttons arm

	Returns:
		The QToolBar, with shape_buttons ({ShapeKind: QPushButton}) and
		zoom_toolbar attributes
	"""
	toolbar = QToolBar("Main Toolbar")
	toolbar.setMovable(False)
	toolbar.setIconSize(QtCore.QSize(24, 24))
	parent.addToolBar(toolbar)

	toolbar.shape_buttons = {}
	for kind in ShapeKind:
		btn = QPushButton(kind.label)
		btn.setCheckable(True)
		btn.setToolTip(f"Click to place a {kind.label.lower()}, drag to draw one")
		btn.clicked.connect(lambda checked, k=kind: tools.arm(k))
		toolbar.addWidget(btn)
		toolbar.shape_buttons[kind] = btn

	def sync_buttons():
		for kind, btn in toolbar.shape_buttons.items():
			btn.setChecked(kind is tools.armed_kind)

	tools.add_listener(sync_buttons)
	toolbar.destroyed.connect(lambda *_: tools.remove_listener(sync_buttons))
	sync_buttons()

	# Add spacer to push zoom controls to the right
	spacer_widget = QWidget()
	spacer_widget.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
	toolbar.addWidget(spacer_widget)

	toolbar.addSeparator()
	toolbar.zoom_toolbar = ZoomToolbar()
	toolbar.addWidget(toolbar.zoom_toolbar)

	return toolbar
