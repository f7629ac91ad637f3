"""Vector helpers and 4x4 matrices in row-vector convention.

A point transforms as ``p @ m``; translation lives in the bottom row,
and composing ``a @ b`` applies ``a`` first.
"""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np


def _vec3(vector: Sequence[float]) -> np.ndarray:
    return np.asarray(vector, dtype=float)[:3]


def length(vector: Sequence[float]) -> float:
    """Euclidean norm of a 3-D vector."""
    v = _vec3(vector)
    return float(math.sqrt(float(v @ v)))


def normalize(vector: Sequence[float]) -> np.ndarray:
    """Unit vector in the same direction; a zero vector stays zero."""
    v = _vec3(vector)
    norm = length(v)
    if norm == 0.0:
        return np.zeros(3)
    return v / norm


def calculate_angle(first: Sequence[float], second: Sequence[float]) -> float:
    """Angle in radians between two 3-D vectors."""
    a, b = _vec3(first), _vec3(second)
    denominator = length(a) * length(b)
    if denominator == 0.0:
        raise ValueError("angle is undefined for a zero-length vector")
    cos = float(a @ b) / denominator
    return math.acos(min(1.0, max(-1.0, cos)))


def identity() -> np.ndarray:
    """The 4x4 identity matrix."""
    return np.eye(4)


def translation(x: float, y: float, z: float) -> np.ndarray:
    """Matrix that moves a point by (x, y, z)."""
    m = np.eye(4)
    m[3, :3] = (x, y, z)
    return m


def scaling(x: float, y: float, z: float) -> np.ndarray:
    """Matrix that scales along each axis."""
    return np.diag([float(x), float(y), float(z), 1.0])


def rotation_y(angle: float) -> np.ndarray:
    """Rotation about the y axis, turning +z towards +x for positive angles."""
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    m[0, 0], m[0, 2] = c, -s
    m[2, 0], m[2, 2] = s, c
    return m


def rotation_axis(axis: Sequence[float], angle: float) -> np.ndarray:
    """Rotation about an arbitrary axis, which need not be normalised."""
    x, y, z = normalize(axis)
    c, s = math.cos(angle), math.sin(angle)
    t = 1.0 - c
    m = np.eye(4)
    m[0, :3] = (t * x * x + c, t * x * y + s * z, t * x * z - s * y)
    m[1, :3] = (t * x * y - s * z, t * y * y + c, t * y * z + s * x)
    m[2, :3] = (t * x * z + s * y, t * y * z - s * x, t * z * z + c)
    return m


def position_of(matrix: np.ndarray) -> np.ndarray:
    """The translation part of a world matrix."""
    return np.array(matrix[3, :3], dtype=float)