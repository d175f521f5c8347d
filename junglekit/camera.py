"""Camera orientation basis and conversion into camera space."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

__all__ = ["CameraBasis", "world_to_camera_space"]


def _vector(values: Iterable[float]) -> np.ndarray:
    array = np.array(list(values), dtype=float)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {array.shape}")
    return array


def _unit(vector: np.ndarray) -> np.ndarray:
    length = float(np.linalg.norm(vector))
    if length == 0.0 or not np.isfinite(length):
        raise ValueError("cannot normalise a zero-length or non-finite vector")
    return vector / length


@dataclass(frozen=True)
class CameraBasis:
    """Right, up and forward axes of a camera in world space."""

    right: np.ndarray
    up: np.ndarray
    forward: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, "right", _vector(self.right))
        object.__setattr__(self, "up", _vector(self.up))
        object.__setattr__(self, "forward", _vector(self.forward))

    def normalized(self) -> "CameraBasis":
        """Return the basis with every axis scaled to unit length."""
        return CameraBasis(_unit(self.right), _unit(self.up), _unit(self.forward))


def world_to_camera_space(offset, basis: CameraBasis) -> np.ndarray:
    """Project a world-space offset from the camera onto the camera's axes.

    The result holds the components along right, up and forward.
    """
    vector = _vector(offset)
    return np.array(
        [
            float(np.dot(vector, basis.right)),
            float(np.dot(vector, basis.up)),
            float(np.dot(vector, basis.forward)),
        ]
    )