import pytest

from logistichell.application import Application
from logistichell.camera import CameraNode
from logistichell.events import Event, EventType
from logistichell.game import MainScene, PolygonController
from logistichell.nodes import NodeType
from logistichell.shapes import GREEN, YELLOW

START = [(150.0, 100.0), (250.0, 100.0), (250.0, 200.0), (150.0, 200.0)]


@pytest.fixture
def app():
    application = Application((1600, 900), "LogisticHell")
    application.scene_system.register_scene(0, lambda: MainScene.create(10))
    application.set_new_scene(0)
    return application


def test_scene_layout(app):
    scene = app.current_scene()
    assert isinstance(scene, MainScene)
    assert scene.render_layers_count == 11
    assert scene.polygon_1.polygon.points == START
    assert scene.polygon_1.polygon.fill_color == YELLOW
    assert scene.ui_test_node.polygon.fill_color == GREEN
    assert scene.ui_test_node.polygon.point_count == 4
    assert scene.ui_layer.render_priority == 1
    assert scene.ui_test_node.render_priority == 1
    assert isinstance(scene.polygon_controller, PolygonController)
    assert scene.polygon_controller.parent is scene.camera_node


def test_camera_is_sized_to_window(app):
    camera = app.current_scene().camera_node
    assert isinstance(camera, CameraNode)
    assert camera.view_point.center == (0.0, 0.0)
    assert camera.view_point.size == (1600.0, 900.0)
    assert camera.zoom == 1.0


def test_flattened_tree_order(app):
    app.step(0.5)
    scene = app.current_scene()
    kinds = [node.node_type for node in app.tree.nodes]
    assert app.tree.nodes[0] is scene
    assert app.tree.nodes[1] is scene.camera_node
    assert kinds.count(NodeType.POLYGON) == 2
    assert app.tree.nodes[-1] is scene.ui_test_node


def test_render_restores_standard_view(app):
    app.step(0.5)
    assert app.window.view == app.standard_view


def test_no_keys_no_movement(app):
    app.step(0.5)
    assert app.current_scene().polygon_1.polygon.points == START


def test_right_then_left_round_trip(app):
    scene = app.current_scene()
    app.step(0.5, [Event(EventType.KEY_PRESSED, key="d")])
    moved = scene.polygon_1.polygon.points
    assert all(m[0] > s[0] and m[1] == s[1] for m, s in zip(moved, START))
    app.step(0.5, [Event(EventType.KEY_RELEASED, key="d"), Event(EventType.KEY_PRESSED, key="a")])
    assert scene.polygon_1.polygon.points == pytest.approx(START)


def test_up_moves_up(app):
    scene = app.current_scene()
    app.step(0.25, [Event(EventType.KEY_PRESSED, key="w")])
    moved = scene.polygon_1.polygon.points
    assert all(m[1] < s[1] and m[0] == s[0] for m, s in zip(moved, START))
    app.step(0.25, [Event(EventType.KEY_RELEASED, key="w"), Event(EventType.KEY_PRESSED, key="s")])
    assert scene.polygon_1.polygon.points == pytest.approx(START)


def test_wheel_zooms_camera(app):
    camera = app.current_scene().camera_node
    app.step(0.5, [Event(EventType.MOUSE_WHEEL_SCROLLED, delta=1.0)])
    assert camera.zoom == pytest.approx(0.7)
    app.step(0.5, [Event(EventType.MOUSE_WHEEL_SCROLLED, delta=-1.0)])
    assert camera.zoom == pytest.approx(1.0)
    assert camera.view_point.size == pytest.approx((1600.0, 900.0))


def test_scene_prints_frame_rate(app, capsys):
    app.step(0.5)
    assert capsys.readouterr().out == "2.0\n"