"""Per-entity collections of world-space triangles ready for rendering."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

import numpy as np

from junglekit.entity import Entity
from junglekit.shape import Shape
from junglekit.transform import Transform

__all__ = ["RenderableBundle"]


def _triangle(corners: Iterable) -> np.ndarray:
    array = np.array([list(corner) for corner in corners], dtype=float)
    if array.shape != (3, 3):
        raise ValueError(
            f"a triangle needs three 3-component vertices, got shape {array.shape}"
        )
    return array


@dataclass
class RenderableBundle:
    """World-space triangles of one entity, with its optional material."""

    entity: Entity
    triangles: list[np.ndarray] = field(default_factory=list)
    material: Any = None

    def __post_init__(self) -> None:
        self.triangles = [_triangle(triangle) for triangle in self.triangles]

    @classmethod
    def from_shape(
        cls,
        entity: Entity,
        shape: Shape,
        transform: Transform | None = None,
        material: Any = None,
    ) -> "RenderableBundle":
        """Collect a shape's faces, moved into world space by ``transform``."""
        if transform is None:
            triangles = [np.array(face) for face in shape.triangles()]
        else:
            triangles = [
                np.array([transform.apply(vertex) for vertex in face])
                for face in shape.triangles()
            ]
        return cls(entity, triangles, material)

    def triangle_count(self) -> int:
        """Number of triangles in the bundle."""
        return len(self.triangles)

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.triangles)

    def __len__(self) -> int:
        return len(self.triangles)