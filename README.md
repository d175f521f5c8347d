# junglekit

Building blocks for a small game engine, in plain Python with numpy.

## What is in it

- **Entities** (`junglekit.entity`) – `Entity` is a lightweight, hashable
  handle around an `EntityId` (a UUID). `new_entity()` and `new_entity_id()`
  make fresh ones; `EntityId.short()` gives the first eight hex digits, and
  `Entity.default_node_name()` returns `entity_<short id>`.
- **Transforms** (`junglekit.transform.Transform`) – position, Euler rotation
  (radians, applied about X, then Y, then Z) and scale. `translate`, `rotate`
  and `rescale` add a delta; `matrix()` returns the 4×4 homogeneous matrix
  translation × rotation × scale, and `apply(point)` moves a local point into
  world space.
- **Shapes** (`junglekit.shape.Shape`) – triangle meshes given as vertices plus
  index triples (indices are checked against the vertex count), or built with
  `Shape.from_triangles`, which gives every triangle three fresh vertices.
  `triangles()` yields each face's three vertices; `triangle_count()` counts
  faces.
- **Renderable bundles** (`junglekit.bundle.RenderableBundle`) – one entity's
  world-space triangles plus an optional material. `RenderableBundle.from_shape`
  collects a shape's faces, moved by an optional `Transform`.
- **Cameras and frustums** (`junglekit.camera`, `junglekit.frustum`) –
  `CameraBasis` holds right/up/forward axes (`normalized()` makes them unit
  length), `world_to_camera_space` projects an offset onto them.
  `triangle_intersects_frustum` and `triangle_visible` reject a triangle only
  when all three vertices lie outside the same frustum plane, so triangles that
  straddle an edge of the view are kept. `horizontal_from_vertical` converts a
  vertical field of view to a horizontal one for an aspect ratio.
- **3D scenes** (`junglekit.scene3d.Scene3D`) – vertical FOV (default 60°),
  reference framebuffer height (default 1080), near plane (default 0.1) and
  view distance (default 1024), each setter validated and raising
  `Scene3DPropertyError` on a bad value. `vertical_fov_for_height` scales the
  FOV with the framebuffer height and `horizontal_fov` derives the horizontal
  one; both raise `Scene3DViewportError` for a zero size. `visible_bundles`
  combines the scene's and the camera's FOV and clip range, culls triangles
  and drops bundles left empty, raising `Scene3DVisibilityError` when the
  viewport, FOV or clip range is unusable.
- **2D scenes** (`junglekit.scene2d_view`) – `Scene2D` has an `offset` (the
  world point at the viewport centre) and `pixels_per_unit` (default 100;
  negative or non-finite values are ignored). Once `set_framebuffer_size` has
  been called, `visible_world_bounds(viewport)` returns a `VisibleWorldBounds`
  and `pixel_to_world(pixel, viewport)` maps a pixel (origin top-left, y down)
  to world coordinates (y up); before that both return `None`. A `Viewport`
  (see `Viewport.normalized`) clips the view to part of the framebuffer, as
  computed by `viewport_framebuffer_size`.
- **2D visible faces** (`junglekit.scene2d_faces`) – `visible_faces(bundles)`
  drops every triangle that another triangle hides and groups the rest into
  `FaceGroup`s of consecutive triangles of one entity, in bundle order.
  `normalize_coordinate` maps a coordinate from [-1, 1] into [0, 1).

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## A quick look

```python
from junglekit.transform import Transform
from junglekit.scene2d_view import Scene2D, Viewport

t = Transform()
t.translate((1.0, 2.0, 3.0))
print(t.apply((0.0, 0.0, 0.0)))      # [1. 2. 3.]

scene = Scene2D()
scene.set_framebuffer_size((200, 100))
print(scene.visible_world_bounds())  # x in [-1, 1], y in [-0.5, 0.5]
print(scene.pixel_to_world((100.0, 50.0)))  # (0.0, 0.0), the view centre

quarter = Viewport.normalized(0.0, 0.0, 0.5, 0.5)
print(scene.visible_world_bounds(quarter))  # x in [-0.5, 0.5], y in [-0.25, 0.25]
```

In a 2D scene the world `z` of each vertex orders faces: a larger `z` is closer
to the viewer. A triangle is hidden when another triangle lies wholly in front
of it (its smallest `z` exceeds the hidden one's largest `z`) and that
triangle's x/y bounding box covers the hidden one's.

## What it does not do

junglekit computes; it does not draw. There is no window, GPU rendering,
shader loading, component registry or node hierarchy: you keep your entities'
transforms, shapes and cameras yourself and pass the resulting bundles,
camera basis and framebuffer size to the scene functions.