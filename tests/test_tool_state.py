"""
Tests for ToolState and SelectionModel.

Covers:
- Arm toggling and replacement
- New shapes carry the pending defaults
- Selection holds at most one id
"""
import pytest

from models.shape import ShapeKind
from models.tool_state import ToolState
from models.selection import SelectionModel


# ══════════════════════════════════════════════════════════════════════════
# ToolState
# ══════════════════════════════════════════════════════════════════════════

class TestArming:

    def test_starts_disarmed(self, tools):
        assert tools.armed_kind is None
        assert not tools.is_armed

    def test_arm_same_kind_toggles_off(self, tools):
        tools.arm(ShapeKind.RECTANGLE)
        tools.arm(ShapeKind.RECTANGLE)
        assert tools.armed_kind is None

    def test_arm_other_kind_replaces(self, tools):
        tools.arm(ShapeKind.RECTANGLE)
        tools.arm(ShapeKind.CIRCLE)
        assert tools.armed_kind is ShapeKind.CIRCLE

    def test_arm_accepts_kind_value(self, tools):
        tools.arm('triangle')
        assert tools.armed_kind is ShapeKind.TRIANGLE
        tools.arm('triangle')
        assert tools.armed_kind is None

    def test_arm_unknown_kind_rejected(self, tools):
        with pytest.raises(ValueError):
            tools.arm('hexagon')

    def test_disarm(self, tools):
        tools.arm(ShapeKind.CIRCLE)
        tools.disarm()
        assert not tools.is_armed

    def test_listeners_only_on_change(self, tools):
        calls = []
        tools.add_listener(lambda: calls.append(tools.armed_kind))
        tools.disarm()
        tools.arm(ShapeKind.CIRCLE)
        tools.disarm()
        assert calls == [ShapeKind.CIRCLE, None]


class TestNewShape:

    def test_uses_armed_kind_and_defaults(self):
        tools = ToolState(default_fill="#123456", default_stroke="#abcdef", default_stroke_width=3.0)
        tools.arm(ShapeKind.TRIANGLE)
        shape = tools.new_shape("t1", 5.0, 6.0, 10.0, 20.0)
        assert shape.kind is ShapeKind.TRIANGLE
        assert (shape.x, shape.y, shape.width, shape.height) == (5.0, 6.0, 10.0, 20.0)
        assert (shape.fill, shape.stroke, shape.stroke_width) == ("#123456", "#abcdef", 3.0)

    def test_requires_armed_tool(self, tools):
        with pytest.raises(RuntimeError):
            tools.new_shape("x", 0, 0)

    def test_explicit_kind_without_arming(self, tools):
        shape = tools.new_shape("x", 0, 0, 1, 1, kind=ShapeKind.CIRCLE)
        assert shape.kind is ShapeKind.CIRCLE

    def test_set_defaults_applies_to_later_shapes(self, tools):
        tools.set_defaults(fill="#00ff00", stroke_width=4.5)
        shape = tools.new_shape("x", 0, 0, 1, 1, kind=ShapeKind.RECTANGLE)
        assert shape.fill == "#00ff00"
        assert shape.stroke_width == 4.5

    def test_set_defaults_rejects_bad_stroke(self, tools):
        with pytest.raises(ValueError):
            tools.set_defaults(stroke_width=0)


# ══════════════════════════════════════════════════════════════════════════
# SelectionModel
# ══════════════════════════════════════════════════════════════════════════

class TestSelection:

    def test_starts_empty(self, selection):
        assert selection.selected_id is None

    def test_select_replaces(self, selection):
        selection.select("a")
        selection.select("b")
        assert selection.selected_id == "b"
        assert selection.is_selected("b")
        assert not selection.is_selected("a")

    def test_clear(self, selection):
        selection.select("a")
        selection.clear()
        assert selection.selected_id is None
        assert not selection.is_selected(None)

    def test_notifies_only_on_change(self, selection):
        calls = []
        selection.add_listener(lambda: calls.append(selection.selected_id))
        selection.select("a")
        selection.select("a")
        selection.clear()
        selection.clear()
        assert calls == ["a", None]
