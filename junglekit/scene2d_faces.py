"""Collection of the unoccluded triangles of a 2D scene, grouped by entity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from junglekit.entity import Entity

__all__ = [
    "DEPTH_EPSILON",
    "XY_EPSILON",
    "FaceGroup",
    "normalize_coordinate",
    "visible_faces",
]

DEPTH_EPSILON = 1e-4
XY_EPSILON = 1e-4
_NORMALIZED_MAX = 1.0 - 1e-9


@dataclass
class FaceGroup:
    """Consecutive visible world-space triangles that belong to one entity."""

    entity: Entity
    faces: list[np.ndarray] = field(default_factory=list)

    def __iter__(self):
        return iter(self.faces)

    def __len__(self) -> int:
        return len(self.faces)


@dataclass(frozen=True)
class _FaceRecord:
    entity: Entity
    vertices: np.ndarray
    min_z: float
    max_z: float
    min_xy: tuple[float, float]
    max_xy: tuple[float, float]

    @classmethod
    def of(cls, entity: Entity, triangle) -> "_FaceRecord":
        vertices = np.array([list(vertex) for vertex in triangle], dtype=float)
        if vertices.shape != (3, 3):
            raise ValueError(
                f"a triangle needs three 3-component vertices, got shape {vertices.shape}"
            )
        low = vertices.min(axis=0)
        high = vertices.max(axis=0)
        return cls(
            entity=entity,
            vertices=vertices,
            min_z=float(low[2]),
            max_z=float(high[2]),
            min_xy=(float(low[0]), float(low[1])),
            max_xy=(float(high[0]), float(high[1])),
        )

    def contains_box_of(self, other: "_FaceRecord") -> bool:
        return (
            self.min_xy[0] - XY_EPSILON <= other.min_xy[0]
            and self.min_xy[1] - XY_EPSILON <= other.min_xy[1]
            and self.max_xy[0] + XY_EPSILON >= other.max_xy[0]
            and self.max_xy[1] + XY_EPSILON >= other.max_xy[1]
        )

    def occludes(self, other: "_FaceRecord") -> bool:
        return self.min_z - DEPTH_EPSILON > other.max_z and self.contains_box_of(other)


def normalize_coordinate(value: float) -> float:
    """Map a coordinate from [-1, 1] into [0, 1), clamping values outside."""
    clamped = np.clip(np.float32(value), np.float32(-1.0), np.float32(1.0))
    normalized = float((clamped + np.float32(1.0)) * np.float32(0.5))
    return float(np.clip(normalized, 0.0, _NORMALIZED_MAX))


def visible_faces(bundles: Iterable) -> list[FaceGroup]:
    """Triangles not fully hidden behind another, grouped by consecutive entity.

    Each bundle supplies an ``entity`` and its world-space ``triangles``. A
    triangle is hidden when another triangle lies entirely in front of it
    (larger z) and its x/y bounding box covers the hidden one's. The result
    keeps the bundles' order; consecutive triangles of the same entity share
    one group.
    """
    records = [
        _FaceRecord.of(bundle.entity, triangle)
        for bundle in bundles
        for triangle in bundle.triangles
    ]

    kept = [
        face
        for index, face in enumerate(records)
        if not any(
            other.occludes(face)
            for other_index, other in enumerate(records)
            if other_index != index
        )
    ]

    groups: list[FaceGroup] = []
    for face in kept:
        if groups and groups[-1].entity == face.entity:
            groups[-1].faces.append(face.vertices)
        else:
            groups.append(FaceGroup(face.entity, [face.vertices]))
    return groups