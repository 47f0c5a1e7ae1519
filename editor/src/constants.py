"""
Shape Editor - Constants and Configuration

This module contains all constant values used throughout the application:
- Default style for newly created shapes
- Placement and drag thresholds
- Viewport zoom limits and wheel step
- Rendering colours for the canvas
"""

# ======================================================================
# DEFAULT SHAPE STYLE
# ======================================================================

DEFAULT_FILL = '#ff0000'
DEFAULT_STROKE = '#000000'
DEFAULT_STROKE_WIDTH = 2.0

# ======================================================================
# PLACEMENT
# ======================================================================

# Size of a shape placed by a single click (world units)
# Circle uses 2x as diameter so its radius equals INITIAL_SIZE,
# triangle height is INITIAL_SIZE * sqrt(3) / 2 (equilateral bounding box)
INITIAL_SIZE = 50.0

# Drawn shapes smaller than this on either axis are discarded (world units)
MIN_EXTENT = 5.0

# A press that travels less than this is a click, not a drag (screen pixels)
CLICK_SLOP_PX = 2.0

# ======================================================================
# VIEWPORT
# ======================================================================

WHEEL_ZOOM_FACTOR = 1.1
MIN_SCALE = 0.05
MAX_SCALE = 40.0

# Keyboard / toolbar zoom step
KEY_ZOOM_FACTOR = 1.25

# Zoom toolbar presets (percent)
ZOOM_PRESETS = [10, 25, 50, 100, 150, 200, 300, 400, 800]

# ======================================================================
# RENDERING
# ======================================================================

# Stroke colour of the selected shape (display only, never stored)
SELECTION_HIGHLIGHT = '#00ff00'

CANVAS_BACKGROUND = '#1e1e1e'
GRID_COLOR = '#2c2c2c'
GRID_SPACING = 50.0  # world units
# Grid is skipped when lines would be closer than this on screen
GRID_MIN_SCREEN_SPACING = 8.0
PREVIEW_OPACITY = 0.6
