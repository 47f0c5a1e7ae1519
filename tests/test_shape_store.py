"""
Tests for ShapeStore.

Covers:
- Insert / get / all ordering
- Duplicate id and missing id errors
- update_by_id keeps identity and z-order
- Idempotent delete
- Topmost hit testing
- Change notifications
"""
import pytest

from models.shape import ShapeKind
from models.shape_store import (
    ShapeStore, ShapeStoreError, DuplicateIdError, ShapeNotFoundError
)
from models.transform import WorldPoint


# ══════════════════════════════════════════════════════════════════════════
# Insert / query
# ══════════════════════════════════════════════════════════════════════════

class TestInsert:

    def test_insert_and_get(self, store, make_shape):
        shape = make_shape("a")
        store.insert(shape)
        assert store.get("a") is shape
        assert "a" in store
        assert len(store) == 1

    def test_all_in_insertion_order(self, store, make_shape):
        for shape_id in ("c", "a", "b"):
            store.insert(make_shape(shape_id))
        assert [s.id for s in store.all()] == ["c", "a", "b"]

    def test_get_missing_returns_none(self, store):
        assert store.get("nope") is None
        assert store.get(None) is None

    def test_duplicate_id_rejected(self, store, make_shape):
        store.insert(make_shape("a"))
        with pytest.raises(DuplicateIdError):
            store.insert(make_shape("a", x=50))
        assert len(store) == 1
        assert store.get("a").x == 0.0

    def test_duplicate_is_store_error(self):
        assert issubclass(DuplicateIdError, ShapeStoreError)
        assert issubclass(ShapeNotFoundError, ShapeStoreError)

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-5, 10)])
    def test_degenerate_rejected(self, store, make_shape, width, height):
        with pytest.raises(ValueError):
            store.insert(make_shape(width=width, height=height))
        assert len(store) == 0

    def test_non_positive_stroke_rejected(self, store, make_shape):
        with pytest.raises(ValueError):
            store.insert(make_shape(stroke_width=0))


# ══════════════════════════════════════════════════════════════════════════
# Update
# ══════════════════════════════════════════════════════════════════════════

class TestUpdate:

    def test_update_changes_fields(self, store, make_shape):
        store.insert(make_shape("a"))
        updated = store.update_by_id("a", x=12.0, fill="#00ff00")
        assert updated.x == 12.0
        assert updated.fill == "#00ff00"
        assert store.get("a") == updated

    def test_update_keeps_identity(self, store, make_shape):
        store.insert(make_shape("a", kind=ShapeKind.CIRCLE))
        updated = store.update_by_id("a", width=30.0, height=30.0)
        assert updated.id == "a"
        assert updated.kind is ShapeKind.CIRCLE

    def test_update_keeps_z_order(self, store, make_shape):
        for shape_id in ("a", "b", "c"):
            store.insert(make_shape(shape_id))
        store.update_by_id("a", y=99.0)
        assert [s.id for s in store.all()] == ["a", "b", "c"]

    @pytest.mark.parametrize("field,value", [("id", "z"), ("kind", ShapeKind.TRIANGLE), ("color", "#fff")])
    def test_identity_and_unknown_fields_rejected(self, store, make_shape, field, value):
        store.insert(make_shape("a"))
        with pytest.raises(ValueError):
            store.update_by_id("a", **{field: value})
        assert store.get("a") == make_shape("a")

    def test_update_missing_raises(self, store):
        with pytest.raises(ShapeNotFoundError):
            store.update_by_id("ghost", x=1.0)

    def test_update_cannot_make_degenerate(self, store, make_shape):
        store.insert(make_shape("a"))
        with pytest.raises(ValueError):
            store.update_by_id("a", width=0.0)
        assert store.get("a").width == 100.0


class TestReplace:

    def test_replace_changes_kind_keeps_id_and_order(self, store, make_shape):
        for shape_id in ("a", "b"):
            store.insert(make_shape(shape_id))
        updated = store.replace_by_id("a", kind=ShapeKind.CIRCLE, width=60.0)
        assert (updated.id, updated.kind, updated.width) == ("a", ShapeKind.CIRCLE, 60.0)
        assert store.get("a") == updated
        assert [s.id for s in store.all()] == ["a", "b"]

    def test_replace_without_kind_is_plain_update(self, store, make_shape):
        store.insert(make_shape("a", kind=ShapeKind.TRIANGLE))
        updated = store.replace_by_id("a", x=4.0)
        assert (updated.kind, updated.x) == (ShapeKind.TRIANGLE, 4.0)

    def test_replace_notifies(self, store, make_shape):
        store.insert(make_shape("a"))
        calls = []
        store.add_listener(lambda: calls.append(1))
        store.replace_by_id("a", kind=ShapeKind.TRIANGLE)
        store.replace_by_id("a", kind=ShapeKind.TRIANGLE)
        assert calls == [1]

    def test_replace_rejects_id_change(self, store, make_shape):
        store.insert(make_shape("a"))
        with pytest.raises(ValueError):
            store.replace_by_id("a", id="z")
        assert store.get("a") == make_shape("a")

    def test_replace_missing_raises(self, store):
        with pytest.raises(ShapeNotFoundError):
            store.replace_by_id("ghost", kind=ShapeKind.CIRCLE)


# ══════════════════════════════════════════════════════════════════════════
# Delete
# ══════════════════════════════════════════════════════════════════════════

class TestDelete:

    def test_delete_removes(self, store, make_shape):
        store.insert(make_shape("a"))
        store.insert(make_shape("b"))
        assert store.delete("a") is True
        assert [s.id for s in store.all()] == ["b"]

    def test_delete_is_idempotent(self, store, make_shape):
        store.insert(make_shape("a"))
        store.delete("a")
        assert store.delete("a") is False
        assert store.delete("never") is False

    def test_clear(self, store, make_shape):
        store.insert(make_shape("a"))
        store.insert(make_shape("b"))
        store.clear()
        assert len(store) == 0


# ══════════════════════════════════════════════════════════════════════════
# Hit testing
# ══════════════════════════════════════════════════════════════════════════

class TestShapeAt:

    def test_topmost_wins(self, store, make_shape):
        store.insert(make_shape("bottom", x=0, y=0, width=100, height=100))
        store.insert(make_shape("top", x=50, y=50, width=100, height=100))
        assert store.shape_at(WorldPoint(75, 75)).id == "top"
        assert store.shape_at(WorldPoint(25, 25)).id == "bottom"

    def test_miss_returns_none(self, store, make_shape):
        store.insert(make_shape("a", x=0, y=0, width=10, height=10))
        assert store.shape_at(WorldPoint(50, 50)) is None

    def test_circle_corner_is_a_miss(self, store, make_shape):
        # Bounding-box corner lies outside the disc
        store.insert(make_shape("c", kind=ShapeKind.CIRCLE, x=0, y=0, width=100, height=100))
        assert store.shape_at(WorldPoint(2, 2)) is None
        assert store.shape_at(WorldPoint(50, 50)).id == "c"

    def test_falls_through_to_lower_shape(self, store, make_shape):
        store.insert(make_shape("rect", x=0, y=0, width=100, height=100))
        store.insert(make_shape("circle", kind=ShapeKind.CIRCLE, x=0, y=0, width=100, height=100))
        assert store.shape_at(WorldPoint(2, 2)).id == "rect"


# ══════════════════════════════════════════════════════════════════════════
# Listeners
# ══════════════════════════════════════════════════════════════════════════

class TestStoreListeners:

    def test_mutations_notify(self, store, make_shape):
        calls = []
        store.add_listener(lambda: calls.append(len(store)))
        store.insert(make_shape("a"))
        store.update_by_id("a", x=5.0)
        store.delete("a")
        assert calls == [1, 1, 0]

    def test_no_op_update_does_not_notify(self, store, make_shape):
        store.insert(make_shape("a"))
        calls = []
        store.add_listener(lambda: calls.append(1))
        store.update_by_id("a", x=0.0)
        store.delete("missing")
        assert calls == []
