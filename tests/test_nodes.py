import pytest

from logistichell.nodes import (
    ContainerNode,
    ContentNode,
    EngineContext,
    Node,
    NodeType,
    Scene,
)


def test_engine_context_defaults():
    ctx = EngineContext()
    assert ctx.app is None
    assert ctx.last_frame_delta_time == 0


def test_node_is_abstract():
    with pytest.raises(TypeError):
        Node(None)


def test_node_type_values_match_engine_tags():
    assert Scene.create(1).node_type == NodeType.SCENE == 3
    scene = Scene.create(1)
    assert ContainerNode.create(scene).node_type == NodeType.CONTAINER == 2
    assert ContentNode.create(scene).node_type == NodeType.CONTENT == 1


def test_scene_create_has_extra_layer():
    scene = Scene.create(4)
    assert scene.render_layers_count == 5
    assert scene.parent is None
    assert scene.container_volume == 0


def test_container_create_attaches_to_parent_layer():
    scene = Scene.create(3)
    child = ContainerNode.create(scene, 2, 5)
    assert child.render_layers_count == 6
    assert child.parent is scene
    assert scene.render_layer(2) == [child]
    assert scene.render_layer(0) == []
    assert scene.container_volume == 1


def test_content_create_goes_to_content_layer():
    scene = Scene.create(1)
    first = ContentNode.create(scene)
    second = ContentNode.create(scene, 7)
    assert scene.content_layer == [first, second]
    assert first.parent is scene
    assert scene.container_volume == 2


def test_volume_counts_direct_children_only():
    scene = Scene.create(1)
    child = ContainerNode.create(scene)
    ContentNode.create(child)
    ContentNode.create(child)
    assert child.container_volume == 2
    assert scene.container_volume == 1


def test_add_node_priority_out_of_range():
    scene = Scene.create(1)
    stray = ContainerNode(None, 5)
    with pytest.raises(IndexError):
        scene.add_node(stray)
    assert scene.container_volume == 0


def test_negative_priority_rejected():
    scene = Scene.create(2)
    with pytest.raises(IndexError):
        scene.add_node(ContainerNode(None, -1))


def test_render_layers_count_resize():
    node = ContainerNode()
    assert node.render_layers_count == 0
    node.render_layers_count = 3
    assert node.render_layers_count == 3
    node.render_layers_count = 1
    assert node.render_layers_count == 1
    with pytest.raises(ValueError):
        node.render_layers_count = -1


def test_flags_default_enabled_and_settable():
    scene = Scene.create(0)
    leaf = ContentNode.create(scene)
    assert leaf.render_enabled and leaf.update_enabled
    leaf.render_enabled = False
    assert leaf.render_enabled is False
    assert leaf.update_enabled is True


def test_parent_is_weak():
    scene = Scene.create(0)
    leaf = ContentNode.create(scene)
    del scene
    import gc

    gc.collect()
    assert leaf.parent is None


def test_base_scene_init_tree_leaves_tree_empty():
    scene = Scene.create(2)
    scene.init_tree(EngineContext())
    assert scene.container_volume == 0
    assert scene.content_layer == []