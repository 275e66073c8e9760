import numpy as np

from yukiengine.entity import Entity
from yukiengine.mesh import Mesh
from yukiengine.model import Model


class RecordingEntity(Entity):
    def __init__(self, name, model=None):
        super().__init__(name, model)
        self.calls = []

    def on_create(self):
        self.calls.append("create")

    def on_awake(self):
        self.calls.append("awake")

    def on_update(self):
        self.calls.append("update")

    def on_render(self):
        self.calls.append("render")

    def on_destroy(self):
        self.calls.append("destroy")


def _mesh(name):
    return Mesh([((0, 0, 0),), ((1, 0, 0),), ((0, 1, 0),)], [0, 1, 2], name=name)


def test_name_and_default_position():
    entity = Entity("player")
    assert entity.name == "player"
    assert np.array_equal(entity.position, np.zeros(3))
    assert entity.model is None


def test_hooks_run_in_order():
    mesh = Mesh([((0, 0, 0),), ((1, 0, 0),), ((0, 1, 0),)], [0, 1, 2], name="a")
    model = Model("m", {"a": mesh})
    model.destroy()
    entity = RecordingEntity("e", model)
    entity.create()
    assert mesh.created is True
    entity.awake()
    entity.update()
    assert entity.render(camera=None) == [mesh]
    entity.destroy()
    assert entity.calls == ["create", "awake", "update", "render", "destroy"]


def test_create_creates_model_meshes():
    mesh = _mesh("a")
    model = Model("m", {"a": mesh})
    model.destroy()
    assert mesh.created is False
    entity = Entity("e", model)
    entity.create()
    assert mesh.created is True


def test_render_without_model_returns_nothing():
    assert Entity("plain").render(camera=None) == []
    entity = RecordingEntity("e")
    assert entity.render(camera=None) == []
    assert entity.calls == ["render"]


def test_render_returns_present_meshes():
    first = _mesh("a")
    model = Model("m", {"a": first, "b": None})
    entity = Entity("e")
    entity.model = model
    assert entity.render(camera=None) == [first]