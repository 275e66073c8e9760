"""A perspective camera and the matrix helpers it builds on."""

from __future__ import annotations

import itertools
import math
from typing import Sequence

import numpy as np

DEFAULT_VIEWPORT_WIDTH = 800
DEFAULT_VIEWPORT_HEIGHT = 600

_camera_ids = itertools.count()


def _vec3(value: Sequence[float] | np.ndarray) -> np.ndarray:
    return np.asarray(value, dtype=np.float64).reshape(3).copy()


def _normalize(value: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(value))
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return value / length


def look_at(eye, center, up) -> np.ndarray:
    """A right-handed view matrix looking from ``eye`` towards ``center``."""
    eye = _vec3(eye)
    forward = _normalize(_vec3(center) - eye)
    side = _normalize(np.cross(forward, _vec3(up)))
    upward = np.cross(side, forward)
    matrix = np.identity(4)
    matrix[0, :3] = side
    matrix[1, :3] = upward
    matrix[2, :3] = -forward
    matrix[0, 3] = -np.dot(side, eye)
    matrix[1, 3] = -np.dot(upward, eye)
    matrix[2, 3] = np.dot(forward, eye)
    return matrix


def perspective(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """A right-handed projection matrix mapping depth to [-1, 1]."""
    if aspect == 0.0:
        raise ValueError("aspect ratio must not be zero")
    if far == near:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fov / 2.0)
    matrix = np.zeros((4, 4))
    matrix[0, 0] = 1.0 / (aspect * tan_half)
    matrix[1, 1] = 1.0 / tan_half
    matrix[2, 2] = -(far + near) / (far - near)
    matrix[2, 3] = -(2.0 * far * near) / (far - near)
    matrix[3, 2] = -1.0
    return matrix


def rotate_vector(vector, angle: float, axis) -> np.ndarray:
    """Rotate ``vector`` by ``angle`` radians around ``axis``."""
    v = _vec3(vector)
    k = _normalize(_vec3(axis))
    cos, sin = math.cos(angle), math.sin(angle)
    return v * cos + np.cross(k, v) * sin + k * np.dot(k, v) * (1.0 - cos)


def _rotate_z(vector: np.ndarray, angle: float) -> np.ndarray:
    cos, sin = math.cos(angle), math.sin(angle)
    x, y, z = vector
    return np.array([x * cos - y * sin, x * sin + y * cos, z])


class Camera:
    """A camera with a position, a view direction and a perspective frustum."""

    def __init__(self) -> None:
        self.camera_id = next(_camera_ids)
        self.view_matrix = np.identity(4)
        self.projection_matrix = np.identity(4)
        self.position = np.zeros(3)
        self.direction = np.array([0.0, 0.0, 1.0])
        self.top = np.array([0.0, 1.0, 0.0])
        self.fov = math.radians(120.0)
        self.aspect_ratio = DEFAULT_VIEWPORT_WIDTH / DEFAULT_VIEWPORT_HEIGHT
        self.near = 0.01
        self.far = 100.0

    def top_axis(self) -> np.ndarray:
        """The camera's up axis, orthogonal to the other two."""
        return _normalize(np.cross(self.horizontal_axis(), self.vertical_axis()))

    def horizontal_axis(self) -> np.ndarray:
        """The sideways axis of the camera."""
        return _normalize(np.cross(self.vertical_axis(), self.top))

    def vertical_axis(self) -> np.ndarray:
        """The normalised view direction."""
        return _normalize(self.direction)

    def rotate_viewport(self, rad: float) -> None:
        """Roll the camera's top vector around the Z axis."""
        self.top = _rotate_z(self.top, rad)

    def rotate_direction(self, axis, rad: float) -> None:
        """Turn the view direction around ``axis``."""
        self.direction = rotate_vector(self.direction, rad, axis)

    def look_at_point(self, point) -> None:
        """Aim the camera at ``point``."""
        self.direction = _normalize(_vec3(point) - self.position)

    def set_direction(self, direction) -> None:
        """Set the view direction, normalised."""
        self.direction = _normalize(_vec3(direction))

    def move(self, offset) -> None:
        """Shift the camera position by ``offset``."""
        self.position = self.position + _vec3(offset)

    def set_aspect_ratio(self, width: float, height: float | None = None) -> None:
        """Set the aspect ratio directly, or from a width and a height."""
        self.aspect_ratio = float(width) if height is None else width / height

    def update(self) -> None:
        """Recompute the view and projection matrices."""
        self.view_matrix = look_at(self.position, self.position + self.direction, self.top)
        self.projection_matrix = perspective(self.fov, self.aspect_ratio, self.near, self.far)