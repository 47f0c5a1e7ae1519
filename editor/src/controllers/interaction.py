"""
Shape Editor - Interaction Controller

THE CONTROLLER in the MVC architecture. Routes raw pointer and wheel input
(screen pixels) to exactly one behaviour per gesture:

    IDLE ──press on background, tool armed──> DRAWING
    IDLE ──press on background, no tool────> PANNING
    IDLE ──press on a shape────────────────> SELECTING ──travel──> DRAGGING_SHAPE
    any ──release──> IDLE   (an untravelled release resolves as a click)

The state machine itself is the pure function transition(), which maps
(gesture, event) to (gesture', effects) while only reading the models.
InteractionController owns the current Gesture and applies the returned
effects to the viewport, store, tool state and selection.

Placement rule:
- press and release without travelling CLICK_SLOP_PX places a fixed-size
  shape at the press point and disarms the tool
- a travelled drag sizes the shape from the drag, is discarded below
  MIN_EXTENT on either axis, and leaves the tool armed for the next one
"""

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Tuple

from models.transform import ScreenPoint, Vec2, WorldPoint
from models.shape import Shape, default_size, new_shape_id
from models.viewport import Viewport
from models.shape_store import ShapeStore
from models.tool_state import ToolState
from models.selection import SelectionModel
from constants import MIN_EXTENT, CLICK_SLOP_PX, INITIAL_SIZE


class InteractionState(Enum):
    IDLE = 'idle'
    PANNING = 'panning'
    DRAWING = 'drawing'
    DRAGGING_SHAPE = 'dragging_shape'
    SELECTING = 'selecting'  # pressed on a shape, not yet travelled


class InputKind(Enum):
    WHEEL = 'wheel'
    POINTER_DOWN = 'pointer_down'
    POINTER_MOVE = 'pointer_move'
    POINTER_UP = 'pointer_up'
    CLICK = 'click'
    CANCEL = 'cancel'  # pointer capture lost


@dataclass(frozen=True)
class InputEvent:
    """Narrow input contract delivered by the host widget.

    Attributes:
        kind: InputKind
        screen_point: Pointer position in screen pixels (None for CANCEL,
            which reuses the last known position)
        delta_y: Wheel delta, DOM convention (negative zooms in)
        modifiers: Held modifier names, e.g. {'shift', 'ctrl'}
    """
    kind: InputKind
    screen_point: Optional[ScreenPoint] = None
    delta_y: float = 0.0
    modifiers: frozenset = frozenset()


@dataclass(frozen=True)
class Gesture:
    """Transient state of the gesture in progress."""
    state: InteractionState = InteractionState.IDLE
    press_screen: Optional[ScreenPoint] = None
    last_screen: Optional[ScreenPoint] = None
    press_world: Optional[WorldPoint] = None
    travelled: bool = False
    shape_id: Optional[str] = None  # shape under the press (SELECTING / DRAGGING_SHAPE)
    grab_offset: Optional[Vec2] = None  # press world point minus shape origin
    preview: Optional[Shape] = None  # shape being drawn or dragged, never stored


IDLE_GESTURE = Gesture()


@dataclass
class EditorContext:
    """Models and tunables threaded through the state machine."""
    viewport: Viewport
    store: ShapeStore
    tools: ToolState
    selection: SelectionModel
    id_factory: Callable[[], str] = new_shape_id
    min_extent: float = MIN_EXTENT
    click_slop: float = CLICK_SLOP_PX
    initial_size: float = INITIAL_SIZE


# ========================================
# Effects
# ========================================

@dataclass(frozen=True)
class ZoomViewport:
    pivot: ScreenPoint
    factor: float

    def apply(self, ctx):
        ctx.viewport.zoom_around_screen_point(self.pivot, self.factor)


@dataclass(frozen=True)
class PanViewport:
    delta: Vec2

    def apply(self, ctx):
        ctx.viewport.pan_by(self.delta)


@dataclass(frozen=True)
class InsertShape:
    shape: Shape

    def apply(self, ctx):
        ctx.store.insert(self.shape)


@dataclass(frozen=True)
class MoveShape:
    shape_id: str
    x: float
    y: float

    def apply(self, ctx):
        ctx.store.update_by_id(self.shape_id, x=self.x, y=self.y)


@dataclass(frozen=True)
class SelectShape:
    shape_id: Optional[str]

    def apply(self, ctx):
        ctx.selection.select(self.shape_id)


@dataclass(frozen=True)
class DisarmTool:

    def apply(self, ctx):
        ctx.tools.disarm()


# ========================================
# Pure transitions
# ========================================

def transition(gesture: Gesture, event: InputEvent, ctx: EditorContext) -> Tuple[Gesture, list]:
    """Advance the state machine by one input event.

    Reads ctx but never mutates it; every change is returned as an effect.

    Returns:
        (next_gesture, effects)
    """
    return _HANDLERS[event.kind](gesture, event, ctx)


def _on_wheel(gesture, event, ctx):
    factor = Viewport.wheel_factor(event.delta_y)
    if factor == 1.0:
        return gesture, []
    return gesture, [ZoomViewport(event.screen_point, factor)]


def _on_pointer_down(gesture, event, ctx):
    if gesture.state is not InteractionState.IDLE:
        return gesture, []

    world = ctx.viewport.screen_to_world(event.screen_point)
    base = Gesture(press_screen=event.screen_point, last_screen=event.screen_point, press_world=world)

    hit = ctx.store.shape_at(world)
    if hit is not None:
        return replace(
            base,
            state=InteractionState.SELECTING,
            shape_id=hit.id,
            grab_offset=Vec2(world.x - hit.x, world.y - hit.y),
        ), []

    if ctx.tools.is_armed:
        draft = ctx.tools.new_shape(ctx.id_factory(), world.x, world.y, 0.0, 0.0)
        return replace(base, state=InteractionState.DRAWING, preview=draft), []

    return replace(base, state=InteractionState.PANNING), []


def _on_pointer_move(gesture, event, ctx):
    if gesture.state is InteractionState.IDLE:
        return gesture, []

    point = event.screen_point
    travelled = gesture.travelled or (point - gesture.press_screen).length() >= ctx.click_slop
    moved = replace(gesture, last_screen=point, travelled=travelled)
    state = gesture.state

    if state is InteractionState.PANNING:
        delta = point - gesture.last_screen
        if delta.x == 0 and delta.y == 0:
            return moved, []
        return moved, [PanViewport(Vec2(delta.x, delta.y))]

    world = ctx.viewport.screen_to_world(point)

    if state is InteractionState.DRAWING:
        draft = gesture.preview
        width = world.x - draft.x
        height = world.y - draft.y
        if 'shift' in event.modifiers:
            side = max(abs(width), abs(height))
            width = math.copysign(side, width)
            height = math.copysign(side, height)
        return replace(moved, preview=replace(draft, width=width, height=height)), []

    if state is InteractionState.SELECTING:
        if not travelled:
            return moved, []
        stored = ctx.store.get(gesture.shape_id)
        if stored is None:
            return IDLE_GESTURE, []
        moved = replace(moved, state=InteractionState.DRAGGING_SHAPE, preview=stored)

    # DRAGGING_SHAPE: only the preview follows the pointer
    target = moved.preview.moved_to(world.x - gesture.grab_offset.x, world.y - gesture.grab_offset.y)
    return replace(moved, preview=target), []


def _on_pointer_up(gesture, event, ctx):
    if gesture.state is InteractionState.IDLE:
        return gesture, []

    gesture, effects = _on_pointer_move(gesture, replace(event, kind=InputKind.POINTER_MOVE), ctx)
    state = gesture.state

    if state is InteractionState.IDLE:
        return IDLE_GESTURE, effects

    if not gesture.travelled:
        return IDLE_GESTURE, effects + _resolve_click(gesture.press_world, ctx)

    if state is InteractionState.DRAWING:
        draft = gesture.preview
        if abs(draft.width) >= ctx.min_extent and abs(draft.height) >= ctx.min_extent:
            effects.append(InsertShape(draft.normalized()))
    elif state is InteractionState.DRAGGING_SHAPE:
        if gesture.shape_id in ctx.store:
            effects.append(MoveShape(gesture.shape_id, gesture.preview.x, gesture.preview.y))

    return IDLE_GESTURE, effects


def _on_click(gesture, event, ctx):
    if gesture.state is not InteractionState.IDLE:
        return gesture, []
    return gesture, _resolve_click(ctx.viewport.screen_to_world(event.screen_point), ctx)


def _on_cancel(gesture, event, ctx):
    if gesture.state is InteractionState.IDLE:
        return gesture, []
    point = event.screen_point or gesture.last_screen
    return _on_pointer_up(gesture, replace(event, kind=InputKind.POINTER_UP, screen_point=point), ctx)


def _resolve_click(world, ctx) -> List:
    """Click semantics: place with an armed tool, otherwise select what is hit."""
    if ctx.tools.is_armed:
        width, height = default_size(ctx.tools.armed_kind, ctx.initial_size)
        shape = ctx.tools.new_shape(ctx.id_factory(), world.x, world.y, width, height)
        return [InsertShape(shape), DisarmTool()]

    hit = ctx.store.shape_at(world)
    return [SelectShape(hit.id if hit is not None else None)]


_HANDLERS = {
    InputKind.WHEEL: _on_wheel,
    InputKind.POINTER_DOWN: _on_pointer_down,
    InputKind.POINTER_MOVE: _on_pointer_move,
    InputKind.POINTER_UP: _on_pointer_up,
    InputKind.CLICK: _on_click,
    InputKind.CANCEL: _on_cancel,
}


# ========================================
# Controller
# ========================================

class InteractionController:
    """Applies transition() results to the editor models.

    The models are injected so the controller can be driven without a
    rendering host:

        controller = InteractionController(viewport, store, tools, selection)
        controller.pointer_down(ScreenPoint(10, 10))
        controller.pointer_move(ScreenPoint(80, 60))
        controller.pointer_up(ScreenPoint(80, 60))
    """

    def __init__(self, viewport: Viewport, store: ShapeStore, tools: ToolState,
                 selection: SelectionModel, id_factory: Callable[[], str] = new_shape_id,
                 min_extent: float = MIN_EXTENT, click_slop: float = CLICK_SLOP_PX,
                 initial_size: float = INITIAL_SIZE):
        self._logger = logging.getLogger('Interaction')
        self._ctx = EditorContext(
            viewport=viewport,
            store=store,
            tools=tools,
            selection=selection,
            id_factory=id_factory,
            min_extent=min_extent,
            click_slop=click_slop,
            initial_size=initial_size,
        )
        self._gesture = IDLE_GESTURE
        self._listeners = []

    @property
    def context(self) -> EditorContext:
        return self._ctx

    @property
    def gesture(self) -> Gesture:
        return self._gesture

    @property
    def state(self) -> InteractionState:
        return self._gesture.state

    @property
    def preview(self) -> Optional[Shape]:
        """Shape being drawn (may have negative extents) or dragged, else None"""
        return self._gesture.preview

    @property
    def dragged_id(self) -> Optional[str]:
        """Id of the stored shape whose preview replaces it on screen"""
        if self._gesture.state is InteractionState.DRAGGING_SHAPE:
            return self._gesture.shape_id
        return None

    # ========================================
    # Input
    # ========================================

    def handle(self, event: InputEvent) -> list:
        """Run one event through the state machine and apply its effects.

        Returns:
            The list of applied effects
        """
        previous = self._gesture
        self._gesture, effects = transition(previous, event, self._ctx)

        for effect in effects:
            self._logger.debug(f"{event.kind.value}: {effect}")
            effect.apply(self._ctx)

        if previous.state is not self._gesture.state:
            self._logger.debug(f"State {previous.state.value} -> {self._gesture.state.value}")
        if previous.state is not self._gesture.state or previous.preview != self._gesture.preview:
            self._notify_listeners()
        return effects

    def wheel(self, screen_point, delta_y: float, modifiers=frozenset()) -> list:
        return self.handle(InputEvent(InputKind.WHEEL, _screen(screen_point), delta_y, frozenset(modifiers)))

    def pointer_down(self, screen_point, modifiers=frozenset()) -> list:
        return self.handle(InputEvent(InputKind.POINTER_DOWN, _screen(screen_point), modifiers=frozenset(modifiers)))

    def pointer_move(self, screen_point, modifiers=frozenset()) -> list:
        return self.handle(InputEvent(InputKind.POINTER_MOVE, _screen(screen_point), modifiers=frozenset(modifiers)))

    def pointer_up(self, screen_point, modifiers=frozenset()) -> list:
        return self.handle(InputEvent(InputKind.POINTER_UP, _screen(screen_point), modifiers=frozenset(modifiers)))

    def click(self, screen_point, modifiers=frozenset()) -> list:
        """Resolve a standalone click (for hosts that report clicks separately)"""
        return self.handle(InputEvent(InputKind.CLICK, _screen(screen_point), modifiers=frozenset(modifiers)))

    def cancel(self) -> list:
        """Pointer capture lost: finish the gesture as if released in place"""
        return self.handle(InputEvent(InputKind.CANCEL))

    # ========================================
    # Listeners
    # ========================================

    def add_listener(self, callback):
        """Register a callback invoked when the state or preview changes"""
        self._listeners.append(callback)

    def remove_listener(self, callback):
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify_listeners(self):
        for callback in list(self._listeners):
            callback()


def _screen(point) -> ScreenPoint:
    if isinstance(point, ScreenPoint):
        return point
    x, y = point
    return ScreenPoint(float(x), float(y))
