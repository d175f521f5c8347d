import math

import pytest

from junglekit.scene2d_view import (
    FLOAT32_EPSILON,
    Scene2D,
    Viewport,
    VisibleWorldBounds,
    viewport_framebuffer_size,
)

TOL = 1e-6


def test_offset_and_scale_configuration():
    scene = Scene2D()
    scene.offset = (3.0, -2.0)
    scene.set_pixels_per_unit(64.0)
    assert scene.offset == (3.0, -2.0)
    assert scene.pixels_per_unit == pytest.approx(64.0)

    scene.set_pixels_per_unit(-10.0)
    assert scene.pixels_per_unit == pytest.approx(64.0)


@pytest.mark.parametrize("bad", [math.inf, -math.inf, math.nan, -0.0])
def test_invalid_pixels_per_unit_ignored(bad):
    scene = Scene2D()
    scene.set_pixels_per_unit(bad)
    assert scene.pixels_per_unit == 100.0


def test_zero_pixels_per_unit_becomes_epsilon():
    scene = Scene2D()
    scene.set_pixels_per_unit(0.0)
    assert scene.pixels_per_unit == FLOAT32_EPSILON


def test_default_pixels_per_unit():
    assert Scene2D().pixels_per_unit == 100.0
    assert Scene2D().offset == (0.0, 0.0)


def test_bounds_none_before_framebuffer_size():
    scene = Scene2D()
    assert scene.visible_world_bounds() is None
    assert scene.pixel_to_world((0.0, 0.0)) is None


def test_framebuffer_size_clamped_to_one():
    scene = Scene2D()
    scene.set_framebuffer_size((0, 0))
    assert scene.framebuffer_size == (1, 1)


def test_visible_world_bounds_defaults_to_center_origin():
    scene = Scene2D()
    scene.set_framebuffer_size((200, 100))
    bounds = scene.visible_world_bounds()
    assert abs(bounds.min[0] - (-1.0)) < TOL
    assert abs(bounds.max[0] - 1.0) < TOL
    assert abs(bounds.min[1] - (-0.5)) < TOL
    assert abs(bounds.max[1] - 0.5) < TOL


def test_visible_world_bounds_uses_viewport():
    scene = Scene2D()
    scene.set_pixels_per_unit(100.0)
    scene.set_framebuffer_size((200, 100))
    bounds = scene.visible_world_bounds(Viewport.normalized(0.0, 0.0, 0.5, 0.5))
    assert abs(bounds.min[0] - (-0.5)) < TOL
    assert abs(bounds.max[0] - 0.5) < TOL
    assert abs(bounds.min[1] - (-0.25)) < TOL
    assert abs(bounds.max[1] - 0.25) < TOL


def test_visible_world_bounds_respects_offset_and_pixels_per_unit():
    scene = Scene2D(offset=(10.0, -4.0))
    scene.set_pixels_per_unit(50.0)
    scene.set_framebuffer_size((400, 200))
    bounds = scene.visible_world_bounds()
    assert abs(bounds.min[0] - 6.0) < TOL
    assert abs(bounds.max[0] - 14.0) < TOL
    assert abs(bounds.min[1] - (-6.0)) < TOL
    assert abs(bounds.max[1] - (-2.0)) < TOL


def test_pixel_to_world_axis_directions():
    scene = Scene2D()
    scene.set_framebuffer_size((200, 100))
    scene.set_pixels_per_unit(100.0)

    p0 = scene.pixel_to_world((0.0, 0.0))
    assert abs(p0[0] - (-1.0)) < TOL
    assert abs(p0[1] - 0.5) < TOL

    center = scene.pixel_to_world((100.0, 50.0))
    assert abs(center[0]) < TOL
    assert abs(center[1]) < TOL

    br = scene.pixel_to_world((200.0, 100.0))
    assert abs(br[0] - 1.0) < TOL
    assert abs(br[1] - (-0.5)) < TOL


def test_pixel_to_world_uses_viewport():
    scene = Scene2D()
    scene.set_framebuffer_size((200, 100))
    viewport = Viewport.normalized(0.0, 0.0, 0.5, 0.5)

    p0 = scene.pixel_to_world((0.0, 0.0), viewport)
    assert abs(p0[0] - (-0.5)) < TOL
    assert abs(p0[1] - 0.25) < TOL

    center = scene.pixel_to_world((50.0, 25.0), viewport)
    assert abs(center[0]) < TOL
    assert abs(center[1]) < TOL


def test_pixel_to_world_rejects_non_finite_pixel():
    scene = Scene2D()
    scene.set_framebuffer_size((200, 100))
    assert scene.pixel_to_world((math.nan, 0.0)) is None
    assert scene.pixel_to_world((0.0, math.inf)) is None


def test_viewport_framebuffer_size_without_viewport():
    assert viewport_framebuffer_size((200, 100)) == (200, 100)
    assert viewport_framebuffer_size((0, 0)) == (1, 1)


def test_viewport_framebuffer_size_half():
    viewport = Viewport.normalized(0.0, 0.0, 0.5, 0.5)
    assert viewport_framebuffer_size((200, 100), viewport) == (100, 50)


def test_viewport_framebuffer_size_clipped_to_framebuffer():
    viewport = Viewport.normalized(0.75, 0.5, 0.5, 1.0)
    assert viewport_framebuffer_size((200, 100), viewport) == (50, 50)


def test_viewport_framebuffer_size_empty_is_one_pixel():
    viewport = Viewport.normalized(0.5, 0.5, 0.0, 0.0)
    assert viewport_framebuffer_size((200, 100), viewport) == (1, 1)


def test_viewport_framebuffer_size_non_finite_falls_back():
    viewport = Viewport.normalized(math.nan, 0.0, 0.5, 0.5)
    assert viewport_framebuffer_size((200, 100), viewport) == (200, 100)


def test_bounds_value_equality():
    scene = Scene2D()
    scene.set_framebuffer_size((200, 200))
    assert scene.visible_world_bounds() == VisibleWorldBounds((-1.0, -1.0), (1.0, 1.0))


def test_offset_requires_two_components():
    with pytest.raises(ValueError):
        Scene2D(offset=(1.0, 2.0, 3.0))