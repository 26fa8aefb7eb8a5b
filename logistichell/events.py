"""Input events and the system that hands them to controller nodes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from .nodes import EngineContext, NodeType


class EventType(Enum):
    """Kinds of window events."""

    CLOSED = auto()
    KEY_PRESSED = auto()
    KEY_RELEASED = auto()
    MOUSE_BUTTON_PRESSED = auto()
    MOUSE_BUTTON_RELEASED = auto()
    MOUSE_MOVED = auto()
    MOUSE_WHEEL_SCROLLED = auto()


class MouseButton(Enum):
    """Mouse buttons."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    X1 = auto()
    X2 = auto()


@dataclass(frozen=True)
class Event:
    """A single window event."""

    type: EventType
    key: Optional[str] = None
    button: Optional[MouseButton] = None
    position: tuple[int, int] = (0, 0)
    delta: float = 0.0
    vertical_wheel: bool = True


_HANDLERS = {
    EventType.KEY_PRESSED: "on_key_press",
    EventType.KEY_RELEASED: "on_key_release",
    EventType.MOUSE_BUTTON_PRESSED: "on_mouse_press",
    EventType.MOUSE_BUTTON_RELEASED: "on_mouse_release",
    EventType.MOUSE_MOVED: "on_mouse_moved",
    EventType.MOUSE_WHEEL_SCROLLED: "on_mouse_wheel_scrolled",
}

_CONTROLLER_KINDS = (NodeType.CONTROLLER, NodeType.CAMERA_CONTROLLER)


class ControlSystem:
    """Collects input events during a frame and dispatches them to active controllers."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    def collect_event(self, event: Event) -> None:
        """Queue an event if it is one that controllers handle."""
        if event.type in _HANDLERS:
            self._events.append(event)

    @property
    def pending(self) -> tuple[Event, ...]:
        """Events queued for the next dispatch."""
        return tuple(self._events)

    def update(self, ctx: EngineContext) -> None:
        """Send queued events to every controller updated this frame, then clear the queue."""
        tree = ctx.app.tree
        for node, active in zip(tree.nodes, tree.active_update):
            if not active or node.node_type not in _CONTROLLER_KINDS:
                continue
            for event in self._events:
                getattr(node, _HANDLERS[event.type])(event, ctx)
        self._events.clear()