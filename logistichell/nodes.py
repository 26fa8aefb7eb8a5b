"""Scene-graph node types: the base node, containers, content leaves and scenes."""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional


@dataclass
class EngineContext:
    """State shared with every node during a frame."""

    app: Any = None
    last_frame_delta_time: float = 0.0


class NodeType(IntEnum):
    """Kind tag used by the engine systems to dispatch on nodes."""

    CONTENT = 1
    CONTAINER = 2
    SCENE = 3
    POLYGON = 4
    CONTROLLER = 5
    CAMERA = 6
    CAMERA_CONTROLLER = 7


class Node(ABC):
    """Base of every node in the scene graph."""

    def __init__(self, parent: Optional["ContainerNode"] = None, render_priority: int = 0) -> None:
        self._parent_ref: Optional[weakref.ref] = None
        self.parent = parent
        self.render_priority = render_priority
        self.render_enabled = True
        self.update_enabled = True
        self.frames_rendered = 0
        self.elapsed_time = 0.0

    @property
    def parent(self) -> Optional["ContainerNode"]:
        """The owning container, or None if there is none or it is gone."""
        return self._parent_ref() if self._parent_ref is not None else None

    @parent.setter
    def parent(self, value: Optional["ContainerNode"]) -> None:
        self._parent_ref = weakref.ref(value) if value is not None else None

    def render(self, ctx: EngineContext) -> None:
        """Draw this node for the current frame; the base node only counts frames."""
        self.frames_rendered += 1

    def update(self, ctx: EngineContext) -> None:
        """Advance this node by one frame; the base node only accumulates time."""
        self.elapsed_time += ctx.last_frame_delta_time

    @property
    @abstractmethod
    def node_type(self) -> NodeType:
        """The kind of this node."""


class ContainerNode(Node):
    """A node holding content leaves and child containers ordered by render layer."""

    def __init__(self, parent: Optional["ContainerNode"] = None, render_priority: int = 0) -> None:
        super().__init__(parent, render_priority)
        self._container_volume = 0
        self._container_nodes: list[list[ContainerNode]] = []
        self._content_nodes: list[ContentNode] = []

    @classmethod
    def create(cls, parent: "ContainerNode", render_priority: int = 0, render_priority_layers: int = 10):
        """Build a container with ``render_priority_layers + 1`` layers and attach it to ``parent``."""
        node = cls(parent, render_priority)
        node.render_layers_count = render_priority_layers + 1
        parent.add_node(node)
        return node

    def add_node(self, new_node: Node) -> None:
        """Attach a child: containers go to their render layer, anything else to the content list."""
        if isinstance(new_node, ContainerNode):
            priority = new_node.render_priority
            if not 0 <= priority < len(self._container_nodes):
                raise IndexError(
                    f"render priority {priority} outside of {len(self._container_nodes)} layers"
                )
            self._container_nodes[priority].append(new_node)
        else:
            self._content_nodes.append(new_node)
        new_node.parent = self
        self._container_volume += 1

    def render_layer(self, index: int) -> list["ContainerNode"]:
        """Child containers on the given render layer."""
        return self._container_nodes[index]

    @property
    def container_volume(self) -> int:
        """Number of direct children attached."""
        return self._container_volume

    @property
    def content_layer(self) -> list["ContentNode"]:
        """Content children in insertion order."""
        return self._content_nodes

    @property
    def render_layers_count(self) -> int:
        """Number of render layers."""
        return len(self._container_nodes)

    @render_layers_count.setter
    def render_layers_count(self, count: int) -> None:
        if count < 0:
            raise ValueError("render layer count must not be negative")
        current = len(self._container_nodes)
        if count < current:
            del self._container_nodes[count:]
        else:
            self._container_nodes.extend([] for _ in range(count - current))

    @property
    def node_type(self) -> NodeType:
        return NodeType.CONTAINER


class ContentNode(Node):
    """A leaf node."""

    @classmethod
    def create(cls, parent: ContainerNode, render_priority: int = 0):
        """Build a leaf and attach it to ``parent``."""
        node = cls(parent, render_priority)
        parent.add_node(node)
        return node

    @property
    def node_type(self) -> NodeType:
        return NodeType.CONTENT


class Scene(ContainerNode):
    """The root container of a scene graph."""

    def __init__(self) -> None:
        super().__init__(None)
        self.context: Optional[EngineContext] = None

    @classmethod
    def create(cls, render_priority_layers: int):
        """Build a scene with ``render_priority_layers + 1`` layers."""
        node = cls()
        node.render_layers_count = render_priority_layers + 1
        return node

    @property
    def node_type(self) -> NodeType:
        return NodeType.SCENE

    def init_tree(self, ctx: EngineContext) -> None:
        """Populate the scene; the base scene only remembers the context it was built with."""
        self.context = ctx