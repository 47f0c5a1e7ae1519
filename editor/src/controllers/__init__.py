"""
Shape Editor - Controllers

Input routing between the host widget and the data models.
"""

from .interaction import (
    InteractionController, InteractionState, InputEvent, InputKind,
    Gesture, EditorContext, transition,
)

__all__ = [
    'InteractionController', 'InteractionState', 'InputEvent', 'InputKind',
    'Gesture', 'EditorContext', 'transition',
]
