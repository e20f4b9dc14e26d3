"""Orthographic 2D camera."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

# Matrices are 4x4 numpy arrays in conventional row-major notation,
# transforming column vectors as ``matrix @ vector``.


def _frozen(array: np.ndarray) -> np.ndarray:
    array.flags.writeable = False
    return array


def _ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    matrix = np.identity(4, dtype=np.float32)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -1.0
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    return matrix


def _translation(position: np.ndarray) -> np.ndarray:
    matrix = np.identity(4, dtype=np.float32)
    matrix[:3, 3] = position
    return matrix


def _rotation_z(degrees: float) -> np.ndarray:
    angle = math.radians(degrees)
    c, s = math.cos(angle), math.sin(angle)
    matrix = np.identity(4, dtype=np.float32)
    matrix[0, 0], matrix[0, 1] = c, -s
    matrix[1, 0], matrix[1, 1] = s, c
    return matrix


class OrthographicCamera:
    """A camera with an orthographic projection, a position and a z rotation in degrees."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = _frozen(_ortho(left, right, bottom, top))
        self._position = _frozen(np.zeros(3, dtype=np.float32))
        self._rotation = 0.0
        self._view = _frozen(np.identity(4, dtype=np.float32))
        self._view_projection = _frozen(self._projection @ self._view)

    @property
    def position(self) -> np.ndarray:
        return self._position

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        position = np.array(value, dtype=np.float32)
        if position.shape != (3,):
            raise ValueError("position must have three components")
        self._position = _frozen(position)
        self._recalculate_view_matrix()

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self._recalculate_view_matrix()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection

    def _recalculate_view_matrix(self) -> None:
        transform = _translation(self._position) @ _rotation_z(self._rotation)
        self._view = _frozen(np.linalg.inv(transform).astype(np.float32))
        self._view_projection = _frozen(self._projection @ self._view)