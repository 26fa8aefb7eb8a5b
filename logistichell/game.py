"""The demo scene: a movable polygon under a camera and a fixed UI panel."""

from __future__ import annotations

import argparse
import math
from typing import Optional

from .application import Application
from .camera import CameraNode
from .controllers import Controller
from .nodes import ContainerNode, EngineContext, Scene
from .shapes import GREEN, YELLOW, Polygon

_SPEED = 300.0

_KEY_DIRECTIONS = (
    ("d", (1.0, 0.0)),
    ("w", (0.0, -1.0)),
    ("a", (-1.0, 0.0)),
    ("s", (0.0, 1.0)),
)


class MainScene(Scene):
    """Scene with a camera-space polygon, its keyboard controller and a UI layer."""

    def __init__(self) -> None:
        super().__init__()
        self.polygon_controller: Optional[PolygonController] = None
        self.polygon_1: Optional[Polygon] = None
        self.camera_node: Optional[CameraNode] = None
        self.ui_test_node: Optional[Polygon] = None
        self.ui_layer: Optional[ContainerNode] = None

    @classmethod
    def create(cls, render_priority_layers: int):
        """Build the scene with ``render_priority_layers + 1`` layers."""
        return super().create(render_priority_layers)

    def init_tree(self, ctx: EngineContext) -> None:
        self.camera_node = CameraNode.create(self, ctx, 0, 10)
        self.ui_layer = ContainerNode.create(self, 1)

        self.polygon_1 = Polygon.create(self.camera_node)
        self.polygon_1.set_polygon([(150, 100), (250, 100), (250, 200), (150, 200)])
        self.polygon_1.polygon.fill_color = YELLOW
        self.polygon_controller = PolygonController.create(self.camera_node)

        self.ui_test_node = Polygon.create(self.ui_layer, 1)
        self.ui_test_node.set_polygon([(0, 0), (1000, 0), (1000, 200), (0, 200)])
        self.ui_test_node.polygon.fill_color = GREEN

    def update(self, ctx: EngineContext) -> None:
        delta = ctx.last_frame_delta_time
        print(1 / delta if delta else math.inf)


class PolygonController(Controller):
    """Moves the scene's polygon with the W, A, S and D keys."""

    @classmethod
    def create(cls, parent: ContainerNode, render_priority: int = 0):
        """Build the controller and attach it to ``parent``."""
        return super().create(parent, render_priority)

    def update(self, ctx: EngineContext) -> None:
        scene = ctx.app.current_scene()
        shape = scene.polygon_1.polygon
        step = _SPEED * ctx.last_frame_delta_time
        for key, (dx, dy) in _KEY_DIRECTIONS:
            if ctx.app.is_key_pressed(key):
                shape.points = [(x + dx * step, y + dy * step) for x, y in shape.points]


def main(argv=None) -> int:
    """Open the game window and run it until closed."""
    parser = argparse.ArgumentParser(prog="logistichell", description="Run the demo scene.")
    parser.parse_args(argv)
    app = Application((1600, 900), "LogisticHell")
    app.scene_system.register_scene(0, lambda: MainScene.create(10))
    app.set_new_scene(0)
    app.start()
    return 0