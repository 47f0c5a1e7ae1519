import argparse
import logging
import sys

from PyQt5 import QtWidgets
from PyQt5.QtWidgets import QMainWindow, QWidget, QHBoxLayout, QSplitter, QLabel
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

# Models and controller
from models import Viewport, ShapeStore, ToolState, SelectionModel
from controllers import InteractionController

# Component imports
from components.canvas_widget import ShapeCanvas
from components.property_panel import PropertyPanel
from components.toolbar import create_toolbar

# Utility imports
from utils.logger import set_main_window
from constants import DEFAULT_FILL, DEFAULT_STROKE, DEFAULT_STROKE_WIDTH


class ShapeEditorWindow(QMainWindow):
    def __init__(self, viewport=None, store=None, tools=None, selection=None):
        super().__init__()
        self.setWindowTitle("Shape Editor")
        self.resize(1280, 720)

        self._logger = logging.getLogger('ShapeEditor')

        # Models (single source of truth); injectable for tests
        self.viewport = viewport if viewport is not None else Viewport()
        self.store = store if store is not None else ShapeStore()
        self.tools = tools if tools is not None else ToolState(DEFAULT_FILL, DEFAULT_STROKE, DEFAULT_STROKE_WIDTH)
        self.selection = selection if selection is not None else SelectionModel()
        self.controller = InteractionController(self.viewport, self.store, self.tools, self.selection)

        # Drop the selection when its shape disappears from the store
        self.store.add_listener(self._on_store_changed)

        set_main_window(self)
        self.setup_ui()

    # ============= UI Setup =============

    def setup_ui(self):
        self.toolbar = create_toolbar(self, self.tools)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        layout = QHBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Horizontal)
        self.canvas = ShapeCanvas(self.controller)
        self.property_panel = PropertyPanel(self.store, self.selection)
        splitter.addWidget(self.canvas)
        splitter.addWidget(self.property_panel)
        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 0)
        layout.addWidget(splitter)

        # Zoom toolbar <-> canvas
        zoom_toolbar = self.toolbar.zoom_toolbar
        zoom_toolbar.zoom_changed.connect(self.canvas.set_zoom_level)
        zoom_toolbar.zoom_in_requested.connect(self.canvas.zoom_in)
        zoom_toolbar.zoom_out_requested.connect(self.canvas.zoom_out)
        self.canvas.zoom_changed.connect(self._on_canvas_zoom_changed)

        # Status bar
        self.zoom_status = QLabel()
        self.pointer_status = QLabel()
        self.statusBar().addWidget(self.pointer_status)
        self.statusBar().addPermanentWidget(self.zoom_status)
        self.canvas.pointer_moved.connect(self._on_pointer_moved)
        self._on_canvas_zoom_changed(self.canvas.get_zoom_percent())

    def _on_canvas_zoom_changed(self, percent):
        self.toolbar.zoom_toolbar.set_zoom_percent(percent, emit_signal=False)
        self.zoom_status.setText(f"Zoom: {percent}%")

    def _on_pointer_moved(self, x, y):
        self.pointer_status.setText(f"X: {x:.1f}  Y: {y:.1f}")

    def _on_store_changed(self):
        selected = self.selection.selected_id
        if selected is not None and selected not in self.store:
            self.selection.clear()

    # ============= Editing =============

    def delete_selected(self):
        """Delete the selected shape, if any"""
        selected = self.selection.selected_id
        if selected is None:
            return False
        deleted = self.store.delete(selected)
        self.selection.clear()
        if deleted:
            self._logger.info(f"Deleted shape {selected}")
        return deleted

    def keyPressEvent(self, event):
        key = event.key()
        ctrl = bool(event.modifiers() & Qt.ControlModifier)

        if key in (Qt.Key_Delete, Qt.Key_Backspace):
            self.delete_selected()
        elif key == Qt.Key_Escape:
            self.canvas.cancel_gesture()
            self.tools.disarm()
        elif ctrl and key in (Qt.Key_Equal, Qt.Key_Plus):
            self.canvas.zoom_in()
        elif ctrl and key == Qt.Key_Minus:
            self.canvas.zoom_out()
        elif ctrl and key == Qt.Key_0:
            self.canvas.zoom_reset()
        else:
            super().keyPressEvent(event)
            return
        event.accept()

    def closeEvent(self, event):
        self.canvas.detach()
        self.property_panel.detach()
        self.store.remove_listener(self._on_store_changed)
        super().closeEvent(event)


def _parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Interactive 2D shape editor.')
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose (debug) logging.',
    )
    # Qt consumes its own arguments from sys.argv
    args, _ = parser.parse_known_args(argv)
    return args


def main():
    """Main entry point for the Shape Editor application"""
    args = _parse_args()

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QtWidgets.QApplication(sys.argv)

    # Use Fusion style with dark palette
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.AlternateBase, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)
    app.setPalette(dark_palette)

    window = ShapeEditorWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
