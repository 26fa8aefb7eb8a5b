"""Registry of scene factories and the currently active scene."""

from __future__ import annotations

from typing import Callable, Optional

from .nodes import EngineContext, Scene

SceneFactory = Callable[[], Scene]


class SceneNotFoundError(LookupError):
    """Raised when a scene id is neither registered nor loaded."""

    def __init__(self, scene_id: int) -> None:
        super().__init__(f"Scene ID {scene_id} not found")
        self.scene_id = scene_id


class SceneSystem:
    """Builds scenes from registered factories and switches between them."""

    def __init__(self) -> None:
        self.current_scene: Optional[Scene] = None
        self._factories: dict[int, SceneFactory] = {}
        self._loaded_scenes: dict[int, Scene] = {}

    def register_scene(self, scene_id: int, factory: SceneFactory) -> None:
        """Register (or replace) the factory for ``scene_id``."""
        self._factories[scene_id] = factory

    def set_new_scene(self, scene_id: int, ctx: EngineContext) -> Scene:
        """Build a fresh scene, initialise its tree and make it current."""
        try:
            factory = self._factories[scene_id]
        except KeyError:
            raise SceneNotFoundError(scene_id) from None
        scene = factory()
        self.current_scene = scene
        scene.init_tree(ctx)
        self._loaded_scenes[scene_id] = scene
        return scene

    def set_loaded_scene(self, scene_id: int, ctx: EngineContext) -> Scene:
        """Make a previously built scene current again."""
        try:
            scene = self._loaded_scenes[scene_id]
        except KeyError:
            raise SceneNotFoundError(scene_id) from None
        self.current_scene = scene
        return scene