"""The application window, the frame loop and the input state it tracks."""

from __future__ import annotations

import time
from dataclasses import replace
from typing import Iterable, Optional

from .camera import View
from .events import ControlSystem, Event, EventType, MouseButton
from .nodes import EngineContext, Scene
from .scenes import SceneSystem
from .shapes import Color, ConvexShape
from .tree import Tree

Size = tuple[int, int]

_BACKGROUND: Color = (0, 0, 0)

_PYGAME_BUTTONS = {
    1: MouseButton.LEFT,
    2: MouseButton.MIDDLE,
    3: MouseButton.RIGHT,
    6: MouseButton.X1,
    7: MouseButton.X2,
}


def _standard_view(size: Size) -> View:
    width, height = float(size[0]), float(size[1])
    return View(center=(width / 2, height / 2), size=(width, height))


class Window:
    """A render target seen through a view; draws onto a display surface when one is attached."""

    def __init__(self, size: Size, view: Optional[View] = None, surface=None) -> None:
        self.size: Size = (int(size[0]), int(size[1]))
        self.view = replace(view) if view is not None else _standard_view(self.size)
        self.surface = surface
        self.is_open = True

    def set_view(self, view: View) -> None:
        """Draw through a copy of ``view`` from now on."""
        self.view = replace(view)

    def map_pixel_to_coords(self, pixel: tuple[float, float]) -> tuple[float, float]:
        """World coordinates of a window pixel under the current view."""
        return self.view.map_pixel_to_coords(pixel, self.size)

    def map_coords_to_pixel(self, point: tuple[float, float]) -> tuple[float, float]:
        """Window pixel of a world point under the current view."""
        (cx, cy), (vw, vh) = self.view.center, self.view.size
        width, height = self.size
        return (
            ((point[0] - cx) / vw + 0.5) * width,
            ((point[1] - cy) / vh + 0.5) * height,
        )

    def draw(self, shape: ConvexShape) -> list[tuple[float, float]]:
        """Draw ``shape`` and return the pixel positions of its points."""
        pixels = [self.map_coords_to_pixel(point) for point in shape.points]
        if self.surface is not None and len(pixels) >= 3:
            import pygame

            pygame.draw.polygon(self.surface, shape.fill_color, pixels)
        return pixels

    def clear(self, color: Color = _BACKGROUND) -> None:
        """Fill the surface with ``color``."""
        if self.surface is not None:
            self.surface.fill(color)

    def display(self) -> None:
        """Show what was drawn this frame."""
        if self.surface is not None:
            import pygame

            pygame.display.flip()

    def close(self) -> None:
        """Mark the window closed; the frame loop stops."""
        self.is_open = False


def _translate_event(pygame, raw) -> Optional[Event]:
    if raw.type == pygame.QUIT:
        return Event(EventType.CLOSED)
    if raw.type == pygame.KEYDOWN:
        return Event(EventType.KEY_PRESSED, key=pygame.key.name(raw.key))
    if raw.type == pygame.KEYUP:
        return Event(EventType.KEY_RELEASED, key=pygame.key.name(raw.key))
    if raw.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
        button = _PYGAME_BUTTONS.get(raw.button)
        if button is None:
            return None
        kind = (
            EventType.MOUSE_BUTTON_PRESSED
            if raw.type == pygame.MOUSEBUTTONDOWN
            else EventType.MOUSE_BUTTON_RELEASED
        )
        return Event(kind, button=button, position=tuple(raw.pos))
    if raw.type == pygame.MOUSEMOTION:
        return Event(EventType.MOUSE_MOVED, position=tuple(raw.pos))
    if raw.type == pygame.MOUSEWHEEL:
        vertical = raw.y != 0
        return Event(
            EventType.MOUSE_WHEEL_SCROLLED,
            position=tuple(pygame.mouse.get_pos()),
            delta=float(raw.y if vertical else raw.x),
            vertical_wheel=vertical,
        )
    return None


class Application:
    """Owns the window and the engine systems and runs the frame loop."""

    def __init__(self, size: Size, title: str) -> None:
        self.size: Size = (int(size[0]), int(size[1]))
        self.title = title
        self.ctx = EngineContext(app=self)
        self.tree = Tree()
        self.scene_system = SceneSystem()
        self.control_system = ControlSystem()
        self.standard_view = _standard_view(self.size)
        self.window = Window(self.size, self.standard_view)
        self._keys_down: set[str] = set()
        self._mouse_pos: tuple[int, int] = (0, 0)

    def set_new_scene(self, scene_id: int) -> Scene:
        """Build the scene registered under ``scene_id`` and make it current."""
        return self.scene_system.set_new_scene(scene_id, self.ctx)

    def set_loaded_scene(self, scene_id: int) -> Scene:
        """Switch back to a scene built earlier."""
        return self.scene_system.set_loaded_scene(scene_id, self.ctx)

    def current_scene(self) -> Optional[Scene]:
        """The active scene, if any."""
        return self.scene_system.current_scene

    def is_key_pressed(self, key: str) -> bool:
        """Whether the named key is held down."""
        return key.lower() in self._keys_down

    def mouse_position(self) -> tuple[int, int]:
        """Last known mouse position in window pixels."""
        return self._mouse_pos

    def _track_input(self, event: Event) -> None:
        if event.type is EventType.KEY_PRESSED and event.key:
            self._keys_down.add(event.key.lower())
        elif event.type is EventType.KEY_RELEASED and event.key:
            self._keys_down.discard(event.key.lower())
        elif event.type in (
            EventType.MOUSE_MOVED,
            EventType.MOUSE_BUTTON_PRESSED,
            EventType.MOUSE_BUTTON_RELEASED,
            EventType.MOUSE_WHEEL_SCROLLED,
        ):
            self._mouse_pos = (int(event.position[0]), int(event.position[1]))

    def step(
        self,
        delta_time: float,
        events: Iterable[Event] = (),
        scene: Optional[Scene] = None,
    ) -> None:
        """Run one frame on ``scene`` (the current scene by default)."""
        if scene is None:
            scene = self.current_scene()
        if scene is None:
            raise RuntimeError("no scene has been set")
        self.ctx.last_frame_delta_time = delta_time
        self.tree.drop_tree()
        self.tree.traverse(scene)
        for event in events:
            if event.type is EventType.CLOSED:
                self.window.close()
            self._track_input(event)
            self.control_system.collect_event(event)
        self.tree.update(self.ctx)
        self.control_system.update(self.ctx)
        self.window.clear()
        self.tree.render(self.ctx)
        self.window.display()

    def start(self) -> None:
        """Open a display window and run frames until it is closed."""
        import pygame

        pygame.init()
        try:
            self.window.surface = pygame.display.set_mode(self.size)
            pygame.display.set_caption(self.title)
            self.window.is_open = True
            scene = self.current_scene()
            last = time.perf_counter()
            while self.window.is_open:
                now = time.perf_counter()
                delta, last = now - last, now
                events = [
                    event
                    for event in (_translate_event(pygame, raw) for raw in pygame.event.get())
                    if event is not None
                ]
                self.step(delta, events, scene)
        finally:
            self.window.surface = None
            pygame.quit()