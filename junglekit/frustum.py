"""View-frustum tests for triangles seen from a camera."""

from __future__ import annotations

import math
from typing import Iterable

import numpy as np

from junglekit.camera import CameraBasis, world_to_camera_space

__all__ = [
    "horizontal_from_vertical",
    "triangle_intersects_frustum",
    "triangle_visible",
]


def horizontal_from_vertical(vertical_fov: float, aspect_ratio: float) -> float:
    """Horizontal field of view (radians) for a vertical one and a width/height ratio."""
    half_vertical = 0.5 * vertical_fov
    return 2.0 * math.atan(math.tan(half_vertical) * aspect_ratio)


def _triangle(vertices: Iterable) -> np.ndarray:
    array = np.array([list(vertex) for vertex in vertices], dtype=float)
    if array.shape != (3, 3):
        raise ValueError(
            f"a triangle needs three 3-component vertices, got shape {array.shape}"
        )
    return array


def triangle_intersects_frustum(
    vertices,
    horizontal_tan: float,
    vertical_tan: float,
    near_plane: float,
    far_plane: float,
) -> bool:
    """Whether a camera-space triangle may be visible.

    The triangle is rejected only when one frustum plane excludes all three
    vertices, so triangles whose edges cross the view stay visible. Depth is
    measured along the camera's forward axis (the z component).
    """
    tri = _triangle(vertices)
    x, y, z = tri[:, 0], tri[:, 1], tri[:, 2]

    if np.all(z < near_plane) or np.all(z > far_plane):
        return False
    if np.all(x > z * horizontal_tan) or np.all(x < -z * horizontal_tan):
        return False
    if np.all(y > z * vertical_tan) or np.all(y < -z * vertical_tan):
        return False
    return True


def triangle_visible(
    triangle,
    camera_position,
    basis: CameraBasis,
    horizontal_tan: float,
    vertical_tan: float,
    near_plane: float,
    far_plane: float,
) -> bool:
    """Whether a world-space triangle may be visible from the camera."""
    position = np.array(list(camera_position), dtype=float)
    camera_space = [
        world_to_camera_space(vertex - position, basis) for vertex in _triangle(triangle)
    ]
    return triangle_intersects_frustum(
        camera_space, horizontal_tan, vertical_tan, near_plane, far_plane
    )