"""Single-shape selection model."""

import logging
from typing import Optional


class SelectionModel:
    """Holds the id of at most one selected shape."""

    def __init__(self):
        self._logger = logging.getLogger('Selection')
        self._selected_id: Optional[str] = None
        self._listeners = []

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    def select(self, shape_id: Optional[str]):
        """Select a shape, replacing any previous selection (None clears)"""
        if shape_id == self._selected_id:
            return
        self._selected_id = shape_id
        self._logger.debug(f"Selected: {shape_id}")
        for callback in list(self._listeners):
            callback()

    def clear(self):
        self.select(None)

    def is_selected(self, shape_id) -> bool:
        return shape_id is not None and shape_id == self._selected_id

    def add_listener(self, callback):
        self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)
