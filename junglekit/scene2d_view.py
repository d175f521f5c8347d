"""Two-dimensional scene view: visible world bounds and pixel-to-world mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

__all__ = [
    "DEFAULT_PIXELS_PER_UNIT",
    "FLOAT32_EPSILON",
    "Viewport",
    "VisibleWorldBounds",
    "Scene2D",
    "viewport_framebuffer_size",
]

DEFAULT_PIXELS_PER_UNIT = 100.0
FLOAT32_EPSILON = 1.1920929e-07


@dataclass(frozen=True)
class Viewport:
    """Sub-rectangle of the framebuffer, in normalised [0, 1] coordinates."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def normalized(cls, x: float, y: float, width: float, height: float) -> "Viewport":
        """Build a viewport from normalised origin and size."""
        return cls(float(x), float(y), float(width), float(height))


@dataclass(frozen=True)
class VisibleWorldBounds:
    """Axis-aligned world-space rectangle visible in the viewport.

    ``min`` holds the left and bottom edges, ``max`` the right and top edges.
    """

    min: tuple[float, float]
    max: tuple[float, float]


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def viewport_framebuffer_size(
    framebuffer_size: tuple[int, int], viewport: Viewport | None = None
) -> tuple[int, int]:
    """Pixel size of the viewport clipped to the framebuffer, at least 1x1."""
    fb_w = max(int(framebuffer_size[0]), 1)
    fb_h = max(int(framebuffer_size[1]), 1)
    if viewport is None:
        return fb_w, fb_h

    values = (viewport.x, viewport.y, viewport.width, viewport.height)
    if not all(math.isfinite(value) for value in values):
        return fb_w, fb_h

    x = _clamp(viewport.x, 0.0, 1.0)
    y = _clamp(viewport.y, 0.0, 1.0)
    w = _clamp(viewport.width, 0.0, 1.0)
    h = _clamp(viewport.height, 0.0, 1.0)
    x2 = _clamp(x + w, 0.0, 1.0)
    y2 = _clamp(y + h, 0.0, 1.0)

    x_px = int(_clamp(math.floor(x * fb_w), 0, fb_w))
    y_px = int(_clamp(math.floor(y * fb_h), 0, fb_h))
    x2_px = int(_clamp(math.ceil(x2 * fb_w), 0, fb_w))
    y2_px = int(_clamp(math.ceil(y2 * fb_h), 0, fb_h))

    return max(x2_px - x_px, 1), max(y2_px - y_px, 1)


class Scene2D:
    """View settings of a 2D render layer.

    ``offset`` is the world coordinate at the centre of the viewport and
    ``pixels_per_unit`` the number of pixels one world unit covers. World x
    grows to the right and y grows upwards.
    """

    __slots__ = ("_offset", "_pixels_per_unit", "_framebuffer_size")

    def __init__(self, offset: Iterable[float] = (0.0, 0.0)) -> None:
        self.offset = offset
        self._pixels_per_unit = DEFAULT_PIXELS_PER_UNIT
        self._framebuffer_size: tuple[int, int] | None = None

    @property
    def offset(self) -> tuple[float, float]:
        return self._offset

    @offset.setter
    def offset(self, value: Iterable[float]) -> None:
        components = tuple(float(component) for component in value)
        if len(components) != 2:
            raise ValueError(f"offset needs two components, got {len(components)}")
        self._offset = components

    @property
    def pixels_per_unit(self) -> float:
        return self._pixels_per_unit

    @property
    def framebuffer_size(self) -> tuple[int, int] | None:
        """Render target size in pixels, or None before it is known."""
        return self._framebuffer_size

    def set_pixels_per_unit(self, value: float) -> None:
        """Set pixels per world unit; non-finite or negative values are ignored."""
        value = float(value)
        if math.copysign(1.0, value) > 0 and math.isfinite(value):
            self._pixels_per_unit = max(value, FLOAT32_EPSILON)

    def set_framebuffer_size(self, framebuffer_size: tuple[int, int]) -> None:
        """Record the render target size, each side at least one pixel."""
        width, height = framebuffer_size
        self._framebuffer_size = (max(int(width), 1), max(int(height), 1))

    def visible_world_bounds(
        self, viewport: Viewport | None = None
    ) -> VisibleWorldBounds | None:
        """World rectangle visible in the (optionally clipped) viewport.

        Returns None while the framebuffer size is unknown.
        """
        if self._framebuffer_size is None:
            return None
        vp_w, vp_h = viewport_framebuffer_size(self._framebuffer_size, viewport)
        ppu = max(self._pixels_per_unit, FLOAT32_EPSILON)
        dx = vp_w * 0.5 / ppu
        dy = vp_h * 0.5 / ppu
        ox, oy = self._offset
        return VisibleWorldBounds((ox - dx, oy - dy), (ox + dx, oy + dy))

    def pixel_to_world(
        self, pixel: Iterable[float], viewport: Viewport | None = None
    ) -> tuple[float, float] | None:
        """Map a pixel position (origin top-left, y down) to world coordinates.

        Returns None if the framebuffer size is unknown or the pixel is not finite.
        """
        px, py = (float(component) for component in pixel)
        if not (math.isfinite(px) and math.isfinite(py)):
            return None
        bounds = self.visible_world_bounds(viewport)
        if bounds is None:
            return None
        ppu = max(self._pixels_per_unit, FLOAT32_EPSILON)
        return bounds.min[0] + px / ppu, bounds.max[1] - py / ppu

    def __repr__(self) -> str:
        return (
            f"Scene2D(offset={self._offset}, pixels_per_unit={self._pixels_per_unit}, "
            f"framebuffer_size={self._framebuffer_size})"
        )