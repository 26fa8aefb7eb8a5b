"""Camera views, camera container nodes and their mouse controller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .controllers import Controller
from .events import Event, MouseButton
from .nodes import ContainerNode, EngineContext, NodeType

Vector = tuple[float, float]

_ZOOM_STEP = 0.7


@dataclass
class View:
    """A 2D camera: the world rectangle given by its centre and size."""

    center: Vector = (500.0, 500.0)
    size: Vector = (1000.0, 1000.0)

    def move(self, offset: Vector) -> None:
        """Shift the centre by ``offset``."""
        self.center = (self.center[0] + offset[0], self.center[1] + offset[1])

    def zoom(self, factor: float) -> None:
        """Scale the visible size by ``factor``."""
        self.size = (self.size[0] * factor, self.size[1] * factor)

    def map_pixel_to_coords(self, pixel: tuple[float, float], viewport_size: tuple[float, float]) -> Vector:
        """World coordinates of a pixel in a viewport of the given size showing this view."""
        return (
            self.center[0] + (pixel[0] / viewport_size[0] - 0.5) * self.size[0],
            self.center[1] + (pixel[1] / viewport_size[1] - 0.5) * self.size[1],
        )


class CameraNode(ContainerNode):
    """A container whose subtree is drawn through its own view."""

    def __init__(self, parent: Optional[ContainerNode] = None, render_priority: int = 0) -> None:
        super().__init__(parent, render_priority)
        self.view_point = View()
        self.original_size: Vector = self.view_point.size
        self.zoom = 1.0
        self.camera_controller: Optional[CameraController] = None

    @classmethod
    def create(
        cls,
        parent: ContainerNode,
        ctx: EngineContext,
        render_priority: int = 0,
        render_priority_layers: int = 10,
    ):
        """Build a camera sized to the application window, with its controller, under ``parent``."""
        node = cls(parent, render_priority)
        node.render_layers_count = render_priority_layers + 1
        parent.add_node(node)
        width, height = ctx.app.size
        node.original_size = (float(width), float(height))
        node.view_point = View(center=(0.0, 0.0), size=node.original_size)
        node.view_point.zoom(1)
        node.zoom = 1.0
        node.camera_controller = CameraController.create(node, node, 0)
        return node

    def set_zoom(self, zoom: float) -> None:
        """Set the zoom relative to the original view size."""
        self.zoom = zoom
        self.view_point.size = self.original_size
        self.view_point.zoom(zoom)

    def set_camera_target(self, target: Vector) -> None:
        """Centre the view on ``target``."""
        self.view_point.center = (target[0], target[1])

    @property
    def node_type(self) -> NodeType:
        return NodeType.CAMERA

    def render(self, ctx: EngineContext) -> None:
        ctx.app.window.set_view(self.view_point)

    def rollback_view_point(self, ctx: EngineContext) -> None:
        """Restore the application's standard view."""
        ctx.app.window.set_view(ctx.app.standard_view)


class CameraController(Controller):
    """Pans its camera while the middle button is held and zooms with the wheel."""

    def __init__(self, parent: Optional[ContainerNode] = None, render_priority: int = 0) -> None:
        super().__init__(parent, render_priority)
        self.wheel_pressed = False
        self.start_mouse_pos: Vector = (0.0, 0.0)
        self.camera: Optional[CameraNode] = None

    @classmethod
    def create(cls, parent: ContainerNode, camera: CameraNode, render_priority: int = 0):
        """Build a controller for ``camera`` and attach it to ``parent``."""
        node = cls(parent, render_priority)
        parent.add_node(node)
        node.start_mouse_pos = (0.0, 0.0)
        node.camera = camera
        return node

    @property
    def node_type(self) -> NodeType:
        return NodeType.CAMERA_CONTROLLER

    @staticmethod
    def _mouse_coords(ctx: EngineContext) -> Vector:
        return ctx.app.window.map_pixel_to_coords(ctx.app.mouse_position())

    def on_mouse_press(self, event: Event, ctx: EngineContext) -> None:
        if event.button is MouseButton.MIDDLE:
            self.wheel_pressed = True
            self.start_mouse_pos = self._mouse_coords(ctx)

    def on_mouse_release(self, event: Event, ctx: EngineContext) -> None:
        if event.button is MouseButton.MIDDLE:
            self.wheel_pressed = False

    def on_mouse_moved(self, event: Event, ctx: EngineContext) -> None:
        if not self.wheel_pressed:
            return
        current = self._mouse_coords(ctx)
        dx = current[0] - self.start_mouse_pos[0]
        dy = current[1] - self.start_mouse_pos[1]
        self.start_mouse_pos = current
        zoom = self.camera.zoom
        self.camera.view_point.move((-dx * zoom, -dy * zoom))

    def on_mouse_wheel_scrolled(self, event: Event, ctx: EngineContext) -> None:
        if not event.vertical_wheel:
            return
        if event.delta > 0:
            self.camera.set_zoom(self.camera.zoom * _ZOOM_STEP)
        else:
            self.camera.set_zoom(self.camera.zoom / _ZOOM_STEP)