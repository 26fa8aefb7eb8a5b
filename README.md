# logistichell

A small 2D game engine built around a scene graph, drawing through pygame.

A `Scene` is the root container. Container nodes hold child containers in
render-priority layers and content nodes (polygons, controllers) in insertion
order. Each frame the graph is flattened depth first into a `Tree`, updated,
given the frame's input events, and rendered. A `CameraNode` draws everything
beneath it through its own `View` and restores the application's standard
view once its branch has been drawn. Disabling a node's `render_enabled` or
`update_enabled` flag skips it and, for a plain container, its subtree.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running the demo

```
logistichell
```

This opens a 1600x900 window titled "LogisticHell" containing:

- a yellow square under a camera, moved with the W, A, S and D keys at 300
  units per second;
- a green bar on a separate UI layer, drawn in screen space.

Hold the middle mouse button and drag to pan the camera. Scrolling the wheel
up zooms in (the visible size is multiplied by 0.7), scrolling down zooms out.
The frame rate is printed to standard output every frame. Close the window to
quit.

## Building your own scene

```python
from logistichell.application import Application
from logistichell.camera import CameraNode
from logistichell.nodes import Scene
from logistichell.shapes import Polygon


class MyScene(Scene):
    def init_tree(self, ctx):
        camera = CameraNode.create(self, ctx, 0, 10)
        square = Polygon.create(camera, 0)
        square.set_polygon([(0, 0), (100, 0), (100, 100), (0, 100)])


app = Application((800, 600), "My game")
app.scene_system.register_scene(0, lambda: MyScene.create(10))
app.set_new_scene(0)
app.start()
```

`Application.start()` opens a pygame window and runs frames until it is
closed. For scripted or headless use, `Application.step(delta_time, events)`
runs a single frame on the current scene with a list of `Event` objects and
draws nothing unless a display surface is attached to the window.

## Modules

- `logistichell.nodes` – `EngineContext`, `NodeType`, `Node`,
  `ContainerNode`, `ContentNode` and `Scene`.
- `logistichell.tree` – `Tree`, the flattened per-frame view of the graph with
  its render and update passes.
- `logistichell.scenes` – `SceneSystem` for registering scene factories and
  switching between new and already loaded scenes; an unknown id raises
  `SceneNotFoundError`.
- `logistichell.events` – `Event`, `EventType`, `MouseButton` and
  `ControlSystem`, which queues key and mouse events and hands them to every
  controller updated in the frame.
- `logistichell.controllers` – `Controller`, the base class for input
  handlers (`on_key_press`, `on_mouse_moved`, and so on).
- `logistichell.camera` – `View`, `CameraNode` and `CameraController`.
- `logistichell.shapes` – `ConvexShape` and the `Polygon` node.
- `logistichell.application` – `Window` and `Application`, the frame loop.
- `logistichell.game` – the demo: `MainScene`, `PolygonController` and
  `main`, the entry point of the `logistichell` command.

## What it does not do

Shapes are limited to filled convex polygons: there are no textures, text,
sprites or sound. The only command is the demo above; it takes no options.