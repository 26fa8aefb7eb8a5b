"""Drawable shapes and the polygon node."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .nodes import ContainerNode, ContentNode, EngineContext, NodeType

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
GREEN: Color = (0, 255, 0)
YELLOW: Color = (255, 255, 0)


@dataclass
class ConvexShape:
    """A filled convex polygon given by its points."""

    points: list[tuple[float, float]] = field(default_factory=list)
    fill_color: Color = WHITE

    @property
    def point_count(self) -> int:
        """Number of points."""
        return len(self.points)


class Polygon(ContentNode):
    """A leaf node that draws a convex shape."""

    def __init__(self, parent: Optional[ContainerNode] = None, render_priority: int = 0) -> None:
        super().__init__(parent, render_priority)
        self.polygon = ConvexShape()

    @classmethod
    def create(cls, parent: ContainerNode, render_priority: int = 0):
        """Build a polygon node and attach it to ``parent``."""
        node = cls(parent, render_priority)
        parent.add_node(node)
        return node

    def set_polygon(self, points: Iterable[tuple[float, float]]) -> None:
        """Replace the shape's points and reset its fill to green."""
        self.polygon.points = [(float(x), float(y)) for x, y in points]
        self.polygon.fill_color = GREEN

    def render(self, ctx: EngineContext) -> None:
        ctx.app.window.draw(self.polygon)

    @property
    def node_type(self) -> NodeType:
        return NodeType.POLYGON