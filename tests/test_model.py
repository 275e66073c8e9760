import numpy as np

from yukiengine.mesh import Mesh, MeshVertex
from yukiengine.model import Model


def _mesh(name):
    return Mesh([MeshVertex((0, 0, 0)), MeshVertex((1, 0, 0))], [0, 1], name)


def test_meshes_created_with_model():
    first, second = _mesh("a"), _mesh("b")
    model = Model("thing", {"a": first, "b": second})
    assert first.created and second.created
    assert model.name == "thing"


def test_get_mesh():
    first = _mesh("a")
    model = Model("thing", {"a": first})
    assert model.get_mesh("a") is first
    assert model.get_mesh("missing") is None
    assert "missing" not in model.meshes


def test_destroy_skips_empty_entries():
    first = _mesh("a")
    model = Model("thing", {"a": first, "b": None})
    model.destroy()
    assert first.created is False


def test_context_manager_destroys():
    first = _mesh("a")
    with Model("thing", {"a": first}) as model:
        assert model.get_mesh("a").created is True
    assert first.created is False


def test_model_matrix_identity():
    model = Model("empty", {})
    assert np.array_equal(model.model_matrix, np.identity(4))
    assert model.meshes == {}