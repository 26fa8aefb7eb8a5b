"""Flattened view of the scene graph and the per-frame render and update passes."""

from __future__ import annotations

from .nodes import ContainerNode, EngineContext, Node, NodeType

_CONTAINER_KINDS = (NodeType.CONTAINER, NodeType.SCENE, NodeType.CAMERA)


class Tree:
    """Depth-first flattening of the scene graph, reused from frame to frame."""

    def __init__(self) -> None:
        self._size = 0
        self._nodes: list[Node] = []
        self._active_render: list[bool] = []
        self._active_update: list[bool] = []
        self._branch_tracker: list[list[int]] = []

    def add_node(self, node: Node) -> None:
        """Append a node, reusing a slot left from an earlier frame when one is free."""
        if self._size == len(self._nodes):
            self._nodes.append(node)
            self._active_render.append(True)
            self._active_update.append(True)
        else:
            self._nodes[self._size] = node
            self._active_render[self._size] = True
            self._active_update[self._size] = True
        self._size += 1

    def drop_tree(self) -> None:
        """Forget the flattened nodes while keeping their storage."""
        self._size = 0

    def traverse(self, node: ContainerNode) -> None:
        """Flatten ``node``: itself, its content, then child containers layer by layer."""
        self.add_node(node)
        for content in node.content_layer:
            self.add_node(content)
        for layer in range(node.render_layers_count):
            for child in node.render_layer(layer):
                self.traverse(child)

    @property
    def nodes(self) -> list[Node]:
        """The nodes flattened this frame, in order."""
        return self._nodes[: self._size]

    @property
    def size(self) -> int:
        """Number of nodes flattened this frame."""
        return self._size

    @property
    def active_render(self) -> list[bool]:
        """Whether each flattened node was rendered in the last render pass."""
        return self._active_render[: self._size]

    @property
    def active_update(self) -> list[bool]:
        """Whether each flattened node was updated in the last update pass."""
        return self._active_update[: self._size]

    def render(self, ctx: EngineContext) -> None:
        """Render every enabled node, skipping subtrees of disabled containers."""
        delay = 0
        for index, node in enumerate(self._nodes[: self._size]):
            kind = node.node_type
            if not node.render_enabled and not delay:
                if kind == NodeType.CONTAINER:
                    delay += node.container_volume + 1
                else:
                    delay += 1
            elif delay and kind == NodeType.CONTAINER:
                delay += node.container_volume

            if kind in _CONTAINER_KINDS and self._branch_tracker:
                self._branch_tracker[-1][1] += node.container_volume

            if self._branch_tracker:
                self._branch_tracker[-1][1] -= 1
                if self._branch_tracker[-1][1] == 0:
                    camera_index, _ = self._branch_tracker.pop()
                    self._nodes[camera_index].rollback_view_point(ctx)

            if delay:
                delay -= 1
                self._active_render[index] = False
            else:
                self._active_render[index] = True
                node.render(ctx)
                if kind == NodeType.CAMERA:
                    self._branch_tracker.append([index, node.container_volume])

    def update(self, ctx: EngineContext) -> None:
        """Update every enabled node, skipping subtrees of disabled containers."""
        delay = 0
        for index, node in enumerate(self._nodes[: self._size]):
            kind = node.node_type
            if not node.update_enabled and not delay:
                if kind == NodeType.CONTAINER:
                    delay += node.container_volume + 1
                else:
                    delay += 1
            elif delay and kind == NodeType.CONTAINER:
                delay += node.container_volume

            if delay:
                delay -= 1
                self._active_update[index] = False
            else:
                self._active_update[index] = True
                node.update(ctx)