"""GUI widgets package - reusable UI components"""

from .zoom_toolbar import ZoomToolbar

__all__ = ['ZoomToolbar']
