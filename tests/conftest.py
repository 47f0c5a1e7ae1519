"""
Shared fixtures for Shape Editor tests.

Provides fresh models, a controller with deterministic ids, and a shape
factory for seeding the store.
"""
import sys
import os
import itertools
import pytest

# Run Qt headless when no display is available
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

from models import Viewport, ShapeStore, ToolState, SelectionModel, Shape, ShapeKind
from controllers import InteractionController


# ── Models ──────────────────────────────────────────────────────────────

@pytest.fixture
def viewport():
    return Viewport()


@pytest.fixture
def store():
    return ShapeStore()


@pytest.fixture
def tools():
    return ToolState()


@pytest.fixture
def selection():
    return SelectionModel()


@pytest.fixture
def id_factory():
    """Deterministic ids: shape-1, shape-2, ..."""
    counter = itertools.count(1)
    return lambda: f"shape-{next(counter)}"


@pytest.fixture
def controller(viewport, store, tools, selection, id_factory):
    """Controller over an identity viewport (screen == world)."""
    return InteractionController(viewport, store, tools, selection, id_factory=id_factory)


# ── Shapes ──────────────────────────────────────────────────────────────

def build_shape(shape_id="s1", kind=ShapeKind.RECTANGLE, x=0.0, y=0.0, width=100.0, height=100.0,
                fill="#ff0000", stroke="#000000", stroke_width=2.0):
    return Shape(
        id=shape_id, kind=kind, x=x, y=y, width=width, height=height,
        fill=fill, stroke=stroke, stroke_width=stroke_width,
    )


@pytest.fixture
def make_shape():
    """Factory fixture building Shape instances with sensible defaults."""
    return build_shape
