"""4x4 homogeneous transforms for right-handed OpenGL scenes.

Matrices are numpy arrays in mathematical layout: ``m[row, col]``, acting on
column vectors as ``m @ v``. OpenGL expects column-major data, so upload
``m.T`` (or pass ``transpose=True`` to the uniform call).
"""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np


def _vector(values: Iterable[float]) -> np.ndarray:
    vector = np.asarray(tuple(values), dtype=np.float64)
    if vector.shape != (3,):
        raise ValueError("expected three components")
    return vector


def _normalized(vector: np.ndarray, what: str) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0:
        raise ValueError(f"{what} must not be a zero vector")
    return vector / length


def _matrix(matrix: np.ndarray) -> np.ndarray:
    result = np.asarray(matrix, dtype=np.float64)
    if result.shape != (4, 4):
        raise ValueError("expected a 4x4 matrix")
    return result


def identity() -> np.ndarray:
    """The 4x4 identity matrix."""
    return np.eye(4, dtype=np.float64)


def translate(matrix: np.ndarray, offset: Iterable[float]) -> np.ndarray:
    """Return ``matrix`` followed (on the right) by a translation by ``offset``."""
    step = identity()
    step[:3, 3] = _vector(offset)
    return _matrix(matrix) @ step


def rotate(matrix: np.ndarray, angle: float, axis: Iterable[float]) -> np.ndarray:
    """Return ``matrix`` followed by a rotation of ``angle`` radians about ``axis``."""
    x, y, z = _normalized(_vector(axis), "rotation axis")
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    step = identity()
    step[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return _matrix(matrix) @ step


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Perspective projection mapping the view frustum to clip space [-1, 1]."""
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if near == far:
        raise ValueError("near and far planes must differ")
    f = 1.0 / math.tan(fovy / 2.0)
    result = np.zeros((4, 4), dtype=np.float64)
    result[0, 0] = f / aspect
    result[1, 1] = f
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -2.0 * far * near / (far - near)
    result[3, 2] = -1.0
    return result


def look_at(
    eye: Iterable[float], target: Iterable[float], up: Iterable[float]
) -> np.ndarray:
    """View matrix placing the camera at ``eye`` looking towards ``target``."""
    eye_v = _vector(eye)
    forward = _normalized(_vector(target) - eye_v, "view direction")
    side = _normalized(np.cross(forward, _vector(up)), "camera side vector")
    upward = np.cross(side, forward)
    result = identity()
    result[0, :3] = side
    result[1, :3] = upward
    result[2, :3] = -forward
    result[0, 3] = -float(side @ eye_v)
    result[1, 3] = -float(upward @ eye_v)
    result[2, 3] = float(forward @ eye_v)
    return result


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> np.ndarray:
    """Orthographic projection mapping the given box to [-1, 1] on every axis."""
    if left == right or bottom == top or near == far:
        raise ValueError("orthographic box must have non-zero extent")
    result = identity()
    result[0, 0] = 2.0 / (right - left)
    result[1, 1] = 2.0 / (top - bottom)
    result[2, 2] = -2.0 / (far - near)
    result[0, 3] = -(right + left) / (right - left)
    result[1, 3] = -(top + bottom) / (top - bottom)
    result[2, 3] = -(far + near) / (far - near)
    return result