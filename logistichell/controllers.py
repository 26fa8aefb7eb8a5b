"""Controller nodes that receive input events."""

from __future__ import annotations

from .events import Event
from .nodes import ContainerNode, ContentNode, EngineContext, NodeType


class Controller(ContentNode):
    """A leaf node whose handlers are called for each input event of the frame."""

    @classmethod
    def create(cls, parent: ContainerNode, render_priority: int = 0):
        """Build a controller and attach it to ``parent``."""
        node = cls(parent, render_priority)
        parent.add_node(node)
        return node

    @property
    def node_type(self) -> NodeType:
        return NodeType.CONTROLLER

    def on_key_press(self, event: Event, ctx: EngineContext) -> None:
        """Called for a key press."""

    def on_key_release(self, event: Event, ctx: EngineContext) -> None:
        """Called for a key release."""

    def on_mouse_press(self, event: Event, ctx: EngineContext) -> None:
        """Called for a mouse button press."""

    def on_mouse_release(self, event: Event, ctx: EngineContext) -> None:
        """Called for a mouse button release."""

    def on_mouse_moved(self, event: Event, ctx: EngineContext) -> None:
        """Called when the mouse moves."""

    def on_mouse_wheel_scrolled(self, event: Event, ctx: EngineContext) -> None:
        """Called when the mouse wheel scrolls."""