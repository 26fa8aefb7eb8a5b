from types import SimpleNamespace

from logistichell.nodes import EngineContext, NodeType, Scene
from logistichell.shapes import GREEN, WHITE, ConvexShape, Polygon


class FakeWindow:
    def __init__(self):
        self.drawn = []

    def draw(self, shape):
        self.drawn.append(shape)


def test_convex_shape_defaults():
    shape = ConvexShape()
    assert shape.point_count == 0
    assert shape.fill_color == WHITE


def test_create_attaches_polygon():
    scene = Scene.create(0)
    polygon = Polygon.create(scene, 1)
    assert scene.content_layer == [polygon]
    assert polygon.parent is scene
    assert polygon.render_priority == 1
    assert polygon.node_type == NodeType.POLYGON


def test_set_polygon_stores_points_and_fill():
    scene = Scene.create(0)
    polygon = Polygon.create(scene)
    points = [(150, 100), (250, 100), (250, 200), (150, 200)]
    polygon.set_polygon(points)
    assert polygon.polygon.points == [(150.0, 100.0), (250.0, 100.0), (250.0, 200.0), (150.0, 200.0)]
    assert polygon.polygon.point_count == len(points)
    assert polygon.polygon.fill_color == GREEN


def test_set_polygon_replaces_previous_points():
    scene = Scene.create(0)
    polygon = Polygon.create(scene)
    polygon.set_polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
    polygon.polygon.fill_color = WHITE
    polygon.set_polygon([(0, 0), (2, 0), (0, 2)])
    assert polygon.polygon.points == [(0.0, 0.0), (2.0, 0.0), (0.0, 2.0)]
    assert polygon.polygon.fill_color == GREEN


def test_render_draws_shape():
    scene = Scene.create(0)
    polygon = Polygon.create(scene)
    window = FakeWindow()
    polygon.render(EngineContext(app=SimpleNamespace(window=window)))
    assert window.drawn == [polygon.polygon]