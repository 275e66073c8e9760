"""Triangle meshes with a model matrix, and solid-colour materials."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

import numpy as np

from yukiengine.images import Image, create_solid_color_image

TRIANGLE_LIST = "TRIANGLE_LIST"

_VERTEX_DTYPE = np.dtype(
    [("position", np.float32, 3), ("normal", np.float32, 3), ("texcoord", np.float32, 2)]
)


def _vec(value: Sequence[float] | np.ndarray, size: int) -> np.ndarray:
    return np.asarray(value, dtype=np.float64).reshape(size).copy()


def _normalize(value: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(value))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return value / length


@dataclass(frozen=True)
class MeshVertex:
    """One vertex: position, normal and texture coordinate."""

    position: tuple[float, float, float]
    normal: tuple[float, float, float] = (0.0, 0.0, 0.0)
    texcoord: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "position", tuple(float(v) for v in self.position))
        object.__setattr__(self, "normal", tuple(float(v) for v in self.normal))
        object.__setattr__(self, "texcoord", tuple(float(v) for v in self.texcoord))
        if len(self.position) != 3 or len(self.normal) != 3 or len(self.texcoord) != 2:
            raise ValueError("a vertex needs a 3D position, a 3D normal and a 2D texcoord")


@dataclass
class MeshIndexData:
    """The primitive topology and the vertex indices that draw it."""

    topology: str = TRIANGLE_LIST
    data: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.data = [int(index) for index in self.data]
        if any(index < 0 for index in self.data):
            raise ValueError("indices must not be negative")


@dataclass(frozen=True)
class TransformationInfo:
    """Scale, rotation quaternion (w, x, y, z), translation and skew of a matrix."""

    scale: np.ndarray
    rotation: np.ndarray
    translation: np.ndarray
    skew: np.ndarray


def decompose(matrix) -> TransformationInfo:
    """Split an affine 4x4 matrix into scale, rotation, translation and skew."""
    m = np.asarray(matrix, dtype=np.float64).reshape(4, 4)
    if m[3, 3] == 0.0:
        raise ValueError("matrix cannot be decomposed")
    m = m / m[3, 3]
    translation = m[:3, 3].copy()
    rows = [m[:3, column].copy() for column in range(3)]
    scale = np.zeros(3)
    skew = np.zeros(3)

    scale[0] = np.linalg.norm(rows[0])
    rows[0] = _normalize(rows[0])

    skew[2] = np.dot(rows[0], rows[1])
    rows[1] = rows[1] - skew[2] * rows[0]
    scale[1] = np.linalg.norm(rows[1])
    rows[1] = _normalize(rows[1])
    skew[2] /= scale[1]

    skew[1] = np.dot(rows[0], rows[2])
    rows[2] = rows[2] - skew[1] * rows[0]
    skew[0] = np.dot(rows[1], rows[2])
    rows[2] = rows[2] - skew[0] * rows[1]
    scale[2] = np.linalg.norm(rows[2])
    rows[2] = _normalize(rows[2])
    skew[1] /= scale[2]
    skew[0] /= scale[2]

    if np.dot(rows[0], np.cross(rows[1], rows[2])) < 0.0:
        scale = -scale
        rows = [-row for row in rows]

    trace = rows[0][0] + rows[1][1] + rows[2][2]
    quat = np.zeros(4)  # w, x, y, z
    if trace > 0.0:
        root = math.sqrt(trace + 1.0)
        quat[0] = 0.5 * root
        root = 0.5 / root
        quat[1] = root * (rows[1][2] - rows[2][1])
        quat[2] = root * (rows[2][0] - rows[0][2])
        quat[3] = root * (rows[0][1] - rows[1][0])
    else:
        following = (1, 2, 0)
        i = 0
        if rows[1][1] > rows[0][0]:
            i = 1
        if rows[2][2] > rows[i][i]:
            i = 2
        j = following[i]
        k = following[j]
        root = math.sqrt(rows[i][i] - rows[j][j] - rows[k][k] + 1.0)
        quat[1 + i] = 0.5 * root
        root = 0.5 / root
        quat[1 + j] = root * (rows[i][j] + rows[j][i])
        quat[1 + k] = root * (rows[i][k] + rows[k][i])
        quat[0] = root * (rows[j][k] - rows[k][j])

    return TransformationInfo(scale=scale, rotation=quat, translation=translation, skew=skew)


def _quat_angle(quat: np.ndarray) -> float:
    return 2.0 * math.atan2(float(np.linalg.norm(quat[1:])), float(quat[0]))


def _quat_axis(quat: np.ndarray) -> np.ndarray:
    remainder = 1.0 - quat[0] * quat[0]
    if remainder <= 0.0:
        return np.array([0.0, 0.0, 1.0])
    return quat[1:] / math.sqrt(remainder)


def _translation_matrix(offset: np.ndarray) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = offset
    return matrix


def _rotation_matrix(axis: np.ndarray, angle: float) -> np.ndarray:
    x, y, z = _normalize(axis)
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [c + x * x * t, x * y * t - z * s, x * z * t + y * s],
        [y * x * t + z * s, c + y * y * t, y * z * t - x * s],
        [z * x * t - y * s, z * y * t + x * s, c + z * z * t],
    ]
    return matrix


def _scale_matrix(factors: np.ndarray) -> np.ndarray:
    return np.diag([factors[0], factors[1], factors[2], 1.0])


class Material:
    """Ambient, specular and diffuse maps of a mesh surface."""

    def __init__(self, ambient_map: Image, specular_map: Image, diffuse_map: Image) -> None:
        self.ambient_map = ambient_map
        self.specular_map = specular_map
        self.diffuse_map = diffuse_map


class Mesh:
    """Vertex and index data placed in the world by a model matrix."""

    def __init__(
        self,
        vertices: Iterable[MeshVertex | Sequence[Any]],
        indices: MeshIndexData | Iterable[int],
        name: str = "",
        texture: Optional[Image] = None,
        material: Optional[Material] = None,
    ) -> None:
        self.vertices = [
            vertex if isinstance(vertex, MeshVertex) else MeshVertex(*vertex)
            for vertex in vertices
        ]
        self.indices = (
            indices if isinstance(indices, MeshIndexData) else MeshIndexData(data=list(indices))
        )
        if any(index >= len(self.vertices) for index in self.indices.data):
            raise ValueError("index refers past the last vertex")
        self.name = name
        self.texture = texture
        self.material = material
        self.created = False
        self._matrix = np.identity(4)
        self._renormal_matrix = np.identity(4)

    @property
    def topology(self) -> str:
        return self.indices.topology

    @property
    def matrix(self) -> np.ndarray:
        """The model matrix."""
        return self._matrix.copy()

    @matrix.setter
    def matrix(self, value) -> None:
        self._matrix = np.asarray(value, dtype=np.float64).reshape(4, 4).copy()

    @property
    def renormal_matrix(self) -> np.ndarray:
        """The inverse of the model matrix as of the last transform."""
        return self._renormal_matrix.copy()

    def _apply(self, transform: np.ndarray) -> None:
        self._matrix = self._matrix @ transform
        self._renormal_matrix = np.linalg.inv(self._matrix)

    def transformation_info(self) -> TransformationInfo:
        """The model matrix broken into its parts."""
        return decompose(self._matrix)

    def set_translation(self, position) -> None:
        """Undo the current translation, then move to ``position``."""
        info = self.transformation_info()
        self.translate(-info.translation)
        self.translate(position)

    def set_rotation(self, axis, angle: float) -> None:
        """Undo the current rotation, then rotate ``angle`` radians around ``axis``."""
        info = self.transformation_info()
        self.rotate(_quat_axis(info.rotation), -_quat_angle(info.rotation))
        self.rotate(axis, angle)

    def set_scale(self, scale) -> None:
        """Rescale so the overall scale becomes ``scale``."""
        info = self.transformation_info()
        self.scale(_vec(scale, 3) / info.scale)

    def translate(self, direction) -> None:
        self._apply(_translation_matrix(_vec(direction, 3)))

    def rotate(self, axis, angle: float) -> None:
        self._apply(_rotation_matrix(_vec(axis, 3), float(angle)))

    def scale(self, scale) -> None:
        self._apply(_scale_matrix(_vec(scale, 3)))

    def vertex_buffer(self) -> bytes:
        """Interleaved float32 position, normal and texcoord of every vertex."""
        array = np.zeros(len(self.vertices), dtype=_VERTEX_DTYPE)
        for slot, vertex in zip(array, self.vertices):
            slot["position"] = vertex.position
            slot["normal"] = vertex.normal
            slot["texcoord"] = vertex.texcoord
        return array.tobytes()

    def index_buffer(self) -> bytes:
        """The indices as unsigned 32-bit integers."""
        return np.asarray(self.indices.data, dtype=np.uint32).tobytes()

    def create(self) -> None:
        self.created = True

    def destroy(self) -> None:
        self.created = False


def generate_solid_material(ambient, specular: float, diffuse: float) -> Material:
    """A material whose maps are solid fills of the given colour and strengths."""
    return Material(
        create_solid_color_image(ambient),
        create_solid_color_image(specular),
        create_solid_color_image(diffuse),
    )