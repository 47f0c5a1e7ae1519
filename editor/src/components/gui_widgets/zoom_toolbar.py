"""Zoom toolbar widget with zoom controls."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QToolButton, QComboBox
from PyQt5.QtCore import pyqtSignal

from constants import ZOOM_PRESETS


class ZoomToolbar(QWidget):
    """Toolbar with zoom in/out buttons and a preset dropdown showing the exact zoom"""

    zoom_changed = pyqtSignal(int)  # Emits requested zoom percentage
    zoom_in_requested = pyqtSignal()
    zoom_out_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)

        layout = QHBoxLayout()
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(4)

        # Zoom out button
        self.zoom_out_btn = QToolButton()
        self.zoom_out_btn.setText("−")
        self.zoom_out_btn.setToolTip("Zoom Out (Ctrl+-)")
        self.zoom_out_btn.clicked.connect(self.zoom_out_requested.emit)
        layout.addWidget(self.zoom_out_btn)

        # Zoom level dropdown. activated fires even when the shown item is
        # picked again; an extra leading item shows an off-preset zoom.
        self.zoom_combo = QComboBox()
        self.zoom_combo.setEditable(False)
        self.zoom_combo.setMinimumWidth(80)
        for preset in ZOOM_PRESETS:
            self.zoom_combo.addItem(f"{preset}%", preset)
        self.zoom_combo.setCurrentIndex(ZOOM_PRESETS.index(100))
        self.zoom_combo.activated.connect(self._on_combo_activated)
        layout.addWidget(self.zoom_combo)
        self._has_custom_item = False

        # Zoom in button
        self.zoom_in_btn = QToolButton()
        self.zoom_in_btn.setText("+")
        self.zoom_in_btn.setToolTip("Zoom In (Ctrl+=)")
        self.zoom_in_btn.clicked.connect(self.zoom_in_requested.emit)
        layout.addWidget(self.zoom_in_btn)

        self.setLayout(layout)
        self._percent = 100

    def _on_combo_activated(self, index):
        """Handle a user pick in the combo box"""
        if index >= 0:
            self.zoom_changed.emit(self.zoom_combo.itemData(index))

    def set_zoom_percent(self, percent, emit_signal=True):
        """Show a zoom level exactly, as a preset or as an extra leading item

        Args:
            percent: Zoom percentage to display
            emit_signal: Also emit zoom_changed (False when reflecting the canvas)
        """
        self._percent = percent

        # Block signals to prevent recursive updates
        self.zoom_combo.blockSignals(True)
        if self._has_custom_item:
            self.zoom_combo.removeItem(0)
            self._has_custom_item = False
        index = self.zoom_combo.findData(percent)
        if index < 0:
            self.zoom_combo.insertItem(0, f"{percent}%", percent)
            self._has_custom_item = True
            index = 0
        self.zoom_combo.setCurrentIndex(index)
        self.zoom_combo.blockSignals(False)

        if emit_signal:
            self.zoom_changed.emit(percent)

    def get_zoom_percent(self):
        """Get current zoom percentage"""
        return self._percent
