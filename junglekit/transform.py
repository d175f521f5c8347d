"""World transform: translation, Euler rotation and scale."""

from __future__ import annotations

from typing import Iterable

import numpy as np

__all__ = ["Transform"]


def _vector(values: Iterable[float]) -> np.ndarray:
    array = np.array(values, dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def _rotation_matrix(roll: float, pitch: float, yaw: float) -> np.ndarray:
    """Rotation about X by roll, then Y by pitch, then Z by yaw."""
    cr, sr = np.cos(roll), np.sin(roll)
    cp, sp = np.cos(pitch), np.sin(pitch)
    cy, sy = np.cos(yaw), np.sin(yaw)
    rx = np.array([[1.0, 0.0, 0.0], [0.0, cr, -sr], [0.0, sr, cr]])
    ry = np.array([[cp, 0.0, sp], [0.0, 1.0, 0.0], [-sp, 0.0, cp]])
    rz = np.array([[cy, -sy, 0.0], [sy, cy, 0.0], [0.0, 0.0, 1.0]])
    return rz @ ry @ rx


class Transform:
    """Position, rotation (radians, X-Y-Z Euler angles) and scale of an entity."""

    __slots__ = ("_position", "_rotation", "_scale")

    def __init__(self, position=None, rotation=None, scale=None) -> None:
        self.position = (0.0, 0.0, 0.0) if position is None else position
        self.rotation = (0.0, 0.0, 0.0) if rotation is None else rotation
        self.scale = (1.0, 1.0, 1.0) if scale is None else scale

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = _vector(value)

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value) -> None:
        self._rotation = _vector(value)

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value) -> None:
        self._scale = _vector(value)

    def translate(self, delta) -> None:
        """Move the position by ``delta``."""
        self._position = self._position + _vector(delta)

    def rotate(self, delta) -> None:
        """Add ``delta`` (radians) to the rotation."""
        self._rotation = self._rotation + _vector(delta)

    def rescale(self, delta) -> None:
        """Add ``delta`` to the scale factors."""
        self._scale = self._scale + _vector(delta)

    def matrix(self) -> np.ndarray:
        """Homogeneous 4x4 matrix: translation x rotation x scale."""
        result = np.eye(4)
        result[:3, :3] = _rotation_matrix(*self._rotation) @ np.diag(self._scale)
        result[:3, 3] = self._position
        return result

    def apply(self, point) -> np.ndarray:
        """Transform a local-space point into world space."""
        homogeneous = np.append(_vector(point), 1.0)
        transformed = self.matrix() @ homogeneous
        return transformed[:3] / transformed[3]

    def __repr__(self) -> str:
        return (
            f"Transform(position={self._position.tolist()}, "
            f"rotation={self._rotation.tolist()}, scale={self._scale.tolist()})"
        )