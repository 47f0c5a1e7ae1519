"""
Shape Editor - Properties Panel

Form for the selected shape. The form edits a private copy of the shape's
fields; nothing reaches the store until "Apply Changes", which pushes one
replace_by_id with every field, kind included. When the selection changes,
or the selected shape changes in the store (e.g. after a drag), the copy is
reloaded.
"""

from PyQt5.QtWidgets import (
	QFrame, QVBoxLayout, QFormLayout, QLabel, QComboBox, QDoubleSpinBox,
	QPushButton, QColorDialog
)
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QColor

from models.shape import ShapeKind
from models.shape_store import ShapeStoreError
from utils.logger import loggerRaise

# Range of the position/size editors (world units)
COORD_LIMIT = 1e6
MIN_SIZE = 0.1


class PropertyPanel(QFrame):
	"""Properties form collaborator for the single selected shape"""

	shapeApplied = pyqtSignal(str)  # Emits shape id after a successful apply

	def __init__(self, store, selection, parent=None):
		super().__init__(parent)
		self.store = store
		self.selection = selection
		self._shape_id = None
		self._loaded = None  # Shape snapshot the form was loaded from
		self._form_values = {}

		self.setMinimumWidth(220)
		self._setup_ui()

		self.selection.add_listener(self._on_selection_changed)
		self.store.add_listener(self._on_store_changed)
		self._on_selection_changed()

	def detach(self):
		"""Remove model listeners (the models may outlive the panel)"""
		self.selection.remove_listener(self._on_selection_changed)
		self.store.remove_listener(self._on_store_changed)

	def _setup_ui(self):
		"""Setup the form"""
		layout = QVBoxLayout(self)
		layout.setContentsMargins(10, 10, 10, 10)

		title = QLabel("Properties")
		title.setStyleSheet("font-size: 13px; font-weight: bold;")
		layout.addWidget(title)

		form = QFormLayout()

		self.kind_combo = QComboBox()
		for kind in ShapeKind:
			self.kind_combo.addItem(kind.label, kind.value)
		self.kind_combo.currentIndexChanged.connect(self._on_kind_changed)
		form.addRow("Type:", self.kind_combo)

		self.x_input = self._spin_box(-COORD_LIMIT, 'x')
		form.addRow("X:", self.x_input)
		self.y_input = self._spin_box(-COORD_LIMIT, 'y')
		form.addRow("Y:", self.y_input)
		self.width_input = self._spin_box(MIN_SIZE, 'width')
		form.addRow("Width:", self.width_input)
		self.height_input = self._spin_box(MIN_SIZE, 'height')
		form.addRow("Height:", self.height_input)
		self.stroke_width_input = self._spin_box(MIN_SIZE, 'stroke_width')
		self.stroke_width_input.setMaximum(1000.0)
		form.addRow("Stroke width:", self.stroke_width_input)

		self.fill_button = QPushButton()
		self.fill_button.clicked.connect(lambda: self._pick_color('fill'))
		form.addRow("Fill:", self.fill_button)

		self.stroke_button = QPushButton()
		self.stroke_button.clicked.connect(lambda: self._pick_color('stroke'))
		form.addRow("Stroke:", self.stroke_button)

		layout.addLayout(form)

		self.apply_button = QPushButton("Apply Changes")
		self.apply_button.clicked.connect(self.apply_changes)
		layout.addWidget(self.apply_button)
		layout.addStretch()

	def _spin_box(self, minimum, field_name):
		spin = QDoubleSpinBox()
		spin.setDecimals(2)
		spin.setRange(minimum, COORD_LIMIT)
		spin.valueChanged.connect(lambda value: self._set_field(field_name, value))
		return spin

	# ========================================
	# Form state
	# ========================================

	@property
	def shape_id(self):
		return self._shape_id

	@property
	def form_values(self):
		"""Copy of the pending (unapplied) field values"""
		return dict(self._form_values)

	def _set_field(self, field_name, value):
		if self._shape_id is not None:
			self._form_values[field_name] = value

	def _on_kind_changed(self, index):
		if index >= 0:
			self._set_field('kind', ShapeKind(self.kind_combo.itemData(index)))

	def set_fill_color(self, hex_color):
		self._set_color('fill', hex_color)

	def set_stroke_color(self, hex_color):
		self._set_color('stroke', hex_color)

	def _set_color(self, field_name, hex_color):
		self._set_field(field_name, hex_color)
		button = self.fill_button if field_name == 'fill' else self.stroke_button
		self._style_swatch(button, hex_color)

	def _pick_color(self, field_name):
		"""Open the colour dialog for fill or stroke"""
		current = QColor(self._form_values.get(field_name, '#000000'))
		color = QColorDialog.getColor(current, self, f"Choose {field_name} colour")
		if color.isValid():
			self._set_color(field_name, color.name())

	@staticmethod
	def _style_swatch(button, hex_color):
		button.setText(hex_color)
		button.setStyleSheet(f"""
			QPushButton {{
				background-color: {hex_color};
				border-radius: 3px;
				border: 1px solid rgba(255, 255, 255, 30);
				padding: 4px;
			}}
		""")

	def _load(self, shape):
		"""Copy a shape's fields into the form"""
		self._shape_id = None  # editors fire valueChanged while loading
		self._loaded = shape
		self._form_values = {
			'kind': shape.kind,
			'x': shape.x,
			'y': shape.y,
			'width': shape.width,
			'height': shape.height,
			'fill': shape.fill,
			'stroke': shape.stroke,
			'stroke_width': shape.stroke_width,
		}
		self.kind_combo.setCurrentIndex(self.kind_combo.findData(shape.kind.value))
		self.x_input.setValue(shape.x)
		self.y_input.setValue(shape.y)
		self.width_input.setValue(shape.width)
		self.height_input.setValue(shape.height)
		self.stroke_width_input.setValue(shape.stroke_width)
		self._style_swatch(self.fill_button, shape.fill)
		self._style_swatch(self.stroke_button, shape.stroke)
		self._shape_id = shape.id

	# ========================================
	# Model listeners
	# ========================================

	def _on_selection_changed(self):
		shape = self.store.get(self.selection.selected_id)
		if shape is None:
			self._shape_id = None
			self._loaded = None
			self._form_values = {}
			self.setVisible(False)
			return
		self._load(shape)
		self.setVisible(True)

	def _on_store_changed(self):
		if self._loaded is None:
			return
		shape = self.store.get(self._loaded.id)
		if shape is None:
			self._on_selection_changed()
		elif shape != self._loaded:
			self._load(shape)

	# ========================================
	# Apply
	# ========================================

	def apply_changes(self):
		"""Push the whole form back to the store in one update"""
		if self._shape_id is None:
			return
		shape_id = self._shape_id
		try:
			self.store.replace_by_id(shape_id, **self._form_values)
		except ShapeStoreError as e:
			loggerRaise(e, "The selected shape no longer exists.", "Apply Changes")
		self.shapeApplied.emit(shape_id)
