"""Triangle mesh shape: vertices plus indexed triangular faces."""

from __future__ import annotations

from typing import Iterable, Iterator

import numpy as np

__all__ = ["Shape"]


class Shape:
    """Mesh described by local-space vertices and index triples."""

    __slots__ = ("vertices", "faces")

    def __init__(self, vertices: Iterable = (), faces: Iterable = ()) -> None:
        self.vertices = np.array(list(vertices), dtype=float).reshape(-1, 3)
        self.faces: list[tuple[int, int, int]] = []
        count = len(self.vertices)
        for face in faces:
            indices = tuple(int(index) for index in face)
            if len(indices) != 3:
                raise ValueError(f"face {face!r} must have exactly three indices")
            if any(index < 0 or index >= count for index in indices):
                raise ValueError(
                    f"face {indices!r} refers to a vertex outside 0..{count - 1}"
                )
            self.faces.append(indices)

    @classmethod
    def from_triangles(cls, triangles: Iterable) -> "Shape":
        """Build a shape from explicit triangles, three fresh vertices per face."""
        vertices = []
        faces = []
        for triangle in triangles:
            corners = list(triangle)
            if len(corners) != 3:
                raise ValueError("each triangle needs exactly three vertices")
            base = len(vertices)
            vertices.extend(corners)
            faces.append((base, base + 1, base + 2))
        return cls(vertices, faces)

    def triangle_count(self) -> int:
        """Number of triangular faces."""
        return len(self.faces)

    def triangles(self) -> Iterator[tuple[np.ndarray, np.ndarray, np.ndarray]]:
        """Yield each face as a tuple of its three vertices, in face order."""
        for a, b, c in self.faces:
            yield self.vertices[a], self.vertices[b], self.vertices[c]

    def __repr__(self) -> str:
        return f"Shape(vertices={self.vertices.tolist()}, faces={self.faces})"