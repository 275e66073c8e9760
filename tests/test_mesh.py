import math

import numpy as np
import pytest

from yukiengine.mesh import (
    Material,
    Mesh,
    MeshIndexData,
    MeshVertex,
    TRIANGLE_LIST,
    decompose,
    generate_solid_material,
)


def _triangle(**kwargs):
    vertices = [
        MeshVertex((0.0, 0.0, 0.0), (0.0, 0.0, 1.0), (0.0, 0.0)),
        MeshVertex((1.0, 0.0, 0.0), (0.0, 0.0, 1.0), (1.0, 0.0)),
        MeshVertex((0.0, 1.0, 0.0), (0.0, 0.0, 1.0), (0.0, 1.0)),
    ]
    return Mesh(vertices, MeshIndexData(TRIANGLE_LIST, [0, 1, 2]), "tri", **kwargs)


def test_decompose_identity():
    info = decompose(np.identity(4))
    assert np.allclose(info.scale, [1, 1, 1])
    assert np.allclose(info.rotation, [1, 0, 0, 0])
    assert np.allclose(info.translation, [0, 0, 0])
    assert np.allclose(info.skew, [0, 0, 0])


def test_decompose_rejects_zero_w():
    matrix = np.identity(4)
    matrix[3, 3] = 0.0
    with pytest.raises(ValueError):
        decompose(matrix)


def test_translate_shows_in_transformation_info():
    mesh = _triangle()
    mesh.translate([1.0, 2.0, 3.0])
    assert np.allclose(mesh.transformation_info().translation, [1.0, 2.0, 3.0])


def test_set_translation_replaces_previous():
    mesh = _triangle()
    mesh.translate([5.0, -4.0, 2.0])
    mesh.set_translation([1.0, 1.0, 1.0])
    assert np.allclose(mesh.transformation_info().translation, [1.0, 1.0, 1.0])


def test_set_scale_reaches_target():
    mesh = _triangle()
    mesh.scale([2.0, 2.0, 2.0])
    mesh.set_scale([3.0, 4.0, 5.0])
    assert np.allclose(mesh.transformation_info().scale, [3.0, 4.0, 5.0])


def test_rotation_keeps_scale_and_unit_quaternion():
    mesh = _triangle()
    mesh.rotate([0.0, 1.0, 1.0], 0.7)
    info = mesh.transformation_info()
    assert np.allclose(info.scale, [1, 1, 1])
    assert math.isclose(float(np.linalg.norm(info.rotation)), 1.0)


def test_set_rotation_matches_fresh_rotation():
    mesh = _triangle()
    mesh.rotate([1.0, 0.0, 0.0], 1.1)
    mesh.set_rotation([0.0, 0.0, 1.0], 0.5)
    fresh = _triangle()
    fresh.rotate([0.0, 0.0, 1.0], 0.5)
    assert np.allclose(mesh.matrix, fresh.matrix)


def test_rotate_and_back_is_identity():
    mesh = _triangle()
    mesh.rotate([1.0, 2.0, 3.0], 0.9)
    mesh.rotate([1.0, 2.0, 3.0], -0.9)
    assert np.allclose(mesh.matrix, np.identity(4))


def test_renormal_is_inverse():
    mesh = _triangle()
    mesh.translate([1.0, 0.0, 0.0])
    mesh.scale([2.0, 3.0, 4.0])
    assert np.allclose(mesh.matrix @ mesh.renormal_matrix, np.identity(4))


def test_vertex_buffer_layout():
    mesh = _triangle()
    buffer = mesh.vertex_buffer()
    assert len(buffer) == 3 * 32
    floats = np.frombuffer(buffer, dtype=np.float32).reshape(3, 8)
    assert floats[1].tolist() == [1.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 0.0]


def test_index_buffer_roundtrip():
    mesh = _triangle()
    assert np.frombuffer(mesh.index_buffer(), dtype=np.uint32).tolist() == [0, 1, 2]
    assert mesh.topology == TRIANGLE_LIST


def test_plain_sequences_accepted():
    mesh = Mesh([((0, 0, 0),), ((1, 1, 1),)], [0, 1], "line")
    assert mesh.indices.data == [0, 1]
    assert mesh.vertices[1].position == (1.0, 1.0, 1.0)


def test_index_out_of_range():
    with pytest.raises(ValueError):
        Mesh([MeshVertex((0, 0, 0))], [0, 1], "bad")


def test_bad_vertex_shape():
    with pytest.raises(ValueError):
        MeshVertex((0.0, 0.0))


def test_generate_solid_material():
    material = generate_solid_material([1.0, 1.0, 1.0, 1.0], 1.0, 0.0)
    assert isinstance(material, Material)
    assert material.ambient_map.channels == 4
    assert material.specular_map.channels == 1
    assert int(material.ambient_map.data.max()) == 255
    assert int(material.specular_map.data.min()) == 255
    assert int(material.diffuse_map.data.max()) == 0


def test_create_and_destroy_flag():
    mesh = _triangle()
    mesh.create()
    assert mesh.created is True
    mesh.destroy()
    assert mesh.created is False