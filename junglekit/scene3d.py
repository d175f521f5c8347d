"""Three-dimensional scene settings and frustum culling of renderables."""

from __future__ import annotations

import math
from typing import Iterable

from junglekit.bundle import RenderableBundle
from junglekit.camera import CameraBasis
from junglekit.frustum import horizontal_from_vertical, triangle_visible

__all__ = [
    "MIN_VERTICAL_FOV",
    "MAX_VERTICAL_FOV",
    "DEFAULT_VERTICAL_FOV",
    "DEFAULT_NEAR_PLANE",
    "DEFAULT_VIEW_DISTANCE",
    "FRUSTUM_MARGIN",
    "DEFAULT_REFERENCE_FRAMEBUFFER_HEIGHT",
    "Scene3DPropertyError",
    "Scene3DViewportError",
    "Scene3DVisibilityError",
    "Scene3D",
]

MIN_VERTICAL_FOV = math.pi / 180.0
MAX_VERTICAL_FOV = math.pi - MIN_VERTICAL_FOV
DEFAULT_VERTICAL_FOV = math.radians(60.0)
DEFAULT_NEAR_PLANE = 0.1
DEFAULT_VIEW_DISTANCE = 1024.0
FRUSTUM_MARGIN = math.radians(1.0)
DEFAULT_REFERENCE_FRAMEBUFFER_HEIGHT = 1080


def _fov_in_range(fov: float) -> bool:
    return MIN_VERTICAL_FOV <= fov < MAX_VERTICAL_FOV


class Scene3DPropertyError(ValueError):
    """A scene property was given a value outside its allowed range."""


class Scene3DViewportError(ValueError):
    """A viewport had a zero width or height."""

    def __init__(self, width: int, height: int) -> None:
        super().__init__(
            f"invalid viewport size: width {width} and height {height} must be positive"
        )
        self.width = width
        self.height = height


class Scene3DVisibilityError(ValueError):
    """Visible geometry could not be computed for the given camera and viewport."""


class Scene3D:
    """View frustum settings of a 3D render layer."""

    __slots__ = (
        "_vertical_fov",
        "_reference_framebuffer_height",
        "_near_plane",
        "_view_distance",
    )

    def __init__(self) -> None:
        self._vertical_fov = DEFAULT_VERTICAL_FOV
        self._reference_framebuffer_height = DEFAULT_REFERENCE_FRAMEBUFFER_HEIGHT
        self._near_plane = DEFAULT_NEAR_PLANE
        self._view_distance = DEFAULT_VIEW_DISTANCE

    @property
    def vertical_fov(self) -> float:
        """Vertical field of view in radians at the reference height."""
        return self._vertical_fov

    @property
    def reference_framebuffer_height(self) -> int:
        return self._reference_framebuffer_height

    @property
    def near_plane(self) -> float:
        return self._near_plane

    @property
    def view_distance(self) -> float:
        """Far clipping distance of the scene."""
        return self._view_distance

    def set_vertical_fov(self, fov: float) -> None:
        """Set the vertical field of view (radians)."""
        if not _fov_in_range(fov):
            raise Scene3DPropertyError(f"vertical field of view out of range: {fov}")
        self._vertical_fov = fov

    def set_reference_framebuffer_height(self, height: int) -> None:
        """Set the framebuffer height at which the vertical FOV applies unscaled."""
        if height <= 0:
            raise Scene3DPropertyError(
                f"reference framebuffer height must be positive, got {height}"
            )
        self._reference_framebuffer_height = height

    def set_near_plane(self, near_plane: float) -> None:
        """Set the near clipping distance; it must lie in (0, view_distance)."""
        if near_plane <= 0.0:
            raise Scene3DPropertyError(f"near plane must be positive, got {near_plane}")
        if near_plane >= self._view_distance:
            raise Scene3DPropertyError(
                f"view distance ({self._view_distance}) must exceed the near plane "
                f"({near_plane})"
            )
        self._near_plane = near_plane

    def set_view_distance(self, distance: float) -> None:
        """Set the far clipping distance; it must exceed the near plane."""
        if distance <= self._near_plane:
            raise Scene3DPropertyError(
                f"view distance ({distance}) must exceed the near plane "
                f"({self._near_plane})"
            )
        self._view_distance = distance

    def vertical_fov_for_height(self, framebuffer_height: int) -> float:
        """Vertical FOV (radians) scaled to a framebuffer height."""
        if framebuffer_height <= 0:
            raise Scene3DViewportError(0, framebuffer_height)
        scale = framebuffer_height / self._reference_framebuffer_height
        scaled_tan = math.tan(0.5 * self._vertical_fov) * scale
        return 2.0 * math.atan(scaled_tan)

    def horizontal_fov(self, framebuffer_size: tuple[int, int]) -> float:
        """Horizontal FOV (radians) for a framebuffer of the given width and height."""
        width, height = framebuffer_size
        if width <= 0 or height <= 0:
            raise Scene3DViewportError(width, height)
        vertical = self.vertical_fov_for_height(height)
        return horizontal_from_vertical(vertical, width / height)

    def visible_bundles(
        self,
        bundles: Iterable[RenderableBundle],
        camera_position,
        basis: CameraBasis,
        framebuffer_size: tuple[int, int],
        camera_vertical_fov: float,
        camera_near: float,
        camera_far: float,
    ) -> list[RenderableBundle]:
        """Keep the triangles that fall inside the combined scene/camera frustum.

        ``camera_vertical_fov`` is the camera's vertical FOV already scaled to
        the framebuffer height. Bundles left with no triangle are dropped; the
        others keep their entity and material.
        """
        width, height = framebuffer_size
        if width <= 0 or height <= 0:
            raise Scene3DVisibilityError(
                f"invalid viewport size: width {width} and height {height} "
                "must be positive"
            )
        try:
            scene_vertical = self.vertical_fov_for_height(height)
        except Scene3DViewportError as error:
            raise Scene3DVisibilityError(str(error)) from error

        vertical_fov = min(scene_vertical, camera_vertical_fov)
        if not _fov_in_range(vertical_fov):
            raise Scene3DVisibilityError(
                f"effective vertical field of view out of range: {vertical_fov}"
            )
        horizontal_fov = horizontal_from_vertical(vertical_fov, width / height)

        near_plane = max(camera_near, self._near_plane)
        far_plane = min(camera_far, self._view_distance)
        if near_plane >= far_plane:
            raise Scene3DVisibilityError(
                f"far plane ({far_plane}) must exceed near plane ({near_plane})"
            )

        unit_basis = basis.normalized()
        horizontal_tan = math.tan(0.5 * horizontal_fov + FRUSTUM_MARGIN)
        vertical_tan = math.tan(0.5 * vertical_fov + FRUSTUM_MARGIN)

        visible = []
        for bundle in bundles:
            triangles = [
                triangle
                for triangle in bundle.triangles
                if triangle_visible(
                    triangle,
                    camera_position,
                    unit_basis,
                    horizontal_tan,
                    vertical_tan,
                    near_plane,
                    far_plane,
                )
            ]
            if triangles:
                visible.append(RenderableBundle(bundle.entity, triangles, bundle.material))
        return visible

    def __repr__(self) -> str:
        return (
            f"Scene3D(vertical_fov={self._vertical_fov}, "
            f"reference_framebuffer_height={self._reference_framebuffer_height}, "
            f"near_plane={self._near_plane}, view_distance={self._view_distance})"
        )