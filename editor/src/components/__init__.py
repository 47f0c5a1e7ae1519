"""UI components for the Shape Editor

- canvas_widgets: mixins composed into the canvas widget
- gui_widgets: small reusable widgets (zoom toolbar)
"""

from .canvas_widget import ShapeCanvas
from .property_panel import PropertyPanel
from .toolbar import create_toolbar

__all__ = [
    'ShapeCanvas',
    'PropertyPanel',
    'create_toolbar',
]
