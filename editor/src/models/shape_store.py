"""
Shape Editor - Shape Store

Ordered collection of committed shapes keyed by id. Insertion order is the
z-order: earlier shapes render first, later ones on top. The store performs
no geometry of its own beyond the topmost-hit lookup.

Errors raised here indicate a caller bug (id collision or stale id) and are
logged before being raised.
"""

import logging
from typing import Dict, List, Optional

from models.shape import Shape


class ShapeStoreError(Exception):
    """Base class for shape store programming errors"""


class DuplicateIdError(ShapeStoreError, ValueError):
    """Raised when inserting a shape whose id is already stored"""


class ShapeNotFoundError(ShapeStoreError, KeyError):
    """Raised when updating a shape id that is not stored"""

    def __str__(self):
        return Exception.__str__(self)


class ShapeStore:
    """Insertion-ordered, id-keyed shape collection with change listeners.

    Usage:
        store = ShapeStore()
        store.insert(shape)
        store.update_by_id(shape.id, x=10.0, y=20.0)
        for shape in store.all():
            ...
    """

    def __init__(self):
        self._logger = logging.getLogger('ShapeStore')
        # dicts keep insertion order; replacing a value keeps its position
        self._shapes: Dict[str, Shape] = {}
        self._listeners = []

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self):
        return iter(list(self._shapes.values()))

    def __contains__(self, shape_id) -> bool:
        return shape_id in self._shapes

    def __repr__(self) -> str:
        return f"ShapeStore({len(self._shapes)} shapes)"

    # ========================================
    # Contract
    # ========================================

    def insert(self, shape: Shape) -> Shape:
        """Append a shape on top of the z-order.

        Raises:
            DuplicateIdError: If shape.id is already stored
            ValueError: If the shape has non-positive extents or stroke width
        """
        if shape.id in self._shapes:
            error = DuplicateIdError(f"Shape id already exists: {shape.id}")
            self._logger.error(str(error))
            raise error
        if shape.is_degenerate:
            raise ValueError(f"Cannot store degenerate shape {shape.id}: {shape.width} x {shape.height}")
        if shape.stroke_width <= 0:
            raise ValueError(f"Stroke width must be positive, got {shape.stroke_width}")

        self._shapes[shape.id] = shape
        self._logger.debug(f"Inserted {shape.kind.value} {shape.id} at ({shape.x:.2f}, {shape.y:.2f})")
        self._notify_listeners()
        return shape

    def update_by_id(self, shape_id: str, **changes) -> Shape:
        """Replace mutable fields of a stored shape, keeping id, kind and order.

        Args:
            shape_id: Id of the shape to update
            **changes: New values for any of x, y, width, height, fill,
                stroke, stroke_width

        Returns:
            The updated Shape instance

        Raises:
            ShapeNotFoundError: If no shape has this id
            ValueError: If a change targets id/kind/unknown fields, or would
                make the shape degenerate
        """
        current = self._require(shape_id)
        return self._commit(current, current.with_changes(**changes), sorted(changes))

    def replace_by_id(self, shape_id: str, kind=None, **changes) -> Shape:
        """Apply a full edit from the properties form, kind included.

        Like update_by_id, but the shape may also be redrawn as another kind.
        The id and the z-order position are kept.

        Raises:
            ShapeNotFoundError: If no shape has this id
            ValueError: If a change targets id or an unknown field, the kind is
                not a ShapeKind value, or the shape would become degenerate
        """
        current = self._require(shape_id)
        updated = current.with_changes(**changes)
        names = sorted(changes)
        if kind is not None:
            updated = updated.retyped(kind)
            names.append('kind')
        return self._commit(current, updated, names)

    def _require(self, shape_id) -> Shape:
        current = self._shapes.get(shape_id)
        if current is None:
            error = ShapeNotFoundError(f"No shape with id: {shape_id}")
            self._logger.error(str(error))
            raise error
        return current

    def _commit(self, current: Shape, updated: Shape, names) -> Shape:
        shape_id = current.id
        if updated.is_degenerate:
            raise ValueError(f"Shape {shape_id} would become degenerate: {updated.width} x {updated.height}")
        if updated.stroke_width <= 0:
            raise ValueError(f"Stroke width must be positive, got {updated.stroke_width}")
        if updated == current:
            return current

        self._shapes[shape_id] = updated
        self._logger.debug(f"Updated {shape_id}: {names}")
        self._notify_listeners()
        return updated

    def get(self, shape_id: Optional[str]) -> Optional[Shape]:
        """Get a shape by id, or None"""
        if shape_id is None:
            return None
        return self._shapes.get(shape_id)

    def all(self) -> List[Shape]:
        """All shapes in insertion (z) order"""
        return list(self._shapes.values())

    def delete(self, shape_id: str) -> bool:
        """Remove a shape if present (idempotent).

        Returns:
            True if a shape was removed
        """
        if self._shapes.pop(shape_id, None) is None:
            return False
        self._logger.debug(f"Deleted {shape_id}")
        self._notify_listeners()
        return True

    def clear(self):
        """Remove every shape"""
        if not self._shapes:
            return
        self._shapes.clear()
        self._notify_listeners()

    # ========================================
    # Queries
    # ========================================

    def shape_at(self, point) -> Optional[Shape]:
        """Topmost shape whose geometry contains a world point.

        Linear scan in reverse insertion order; fine for the tens to low
        hundreds of shapes this editor targets.
        """
        for shape in reversed(list(self._shapes.values())):
            if shape.contains(point):
                return shape
        return None

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback):
        """Register a callback invoked (with no arguments) after every change"""
        self._listeners.append(callback)

    def remove_listener(self, callback):
        """Remove a listener"""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self):
        for callback in list(self._listeners):
            callback()
