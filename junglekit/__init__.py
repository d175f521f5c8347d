"""Entities, transforms, shapes, renderable bundles and 2D/3D scene visibility helpers."""

__version__ = "0.1.0"

__all__ = [
    "bundle",
    "camera",
    "entity",
    "frustum",
    "scene2d_faces",
    "scene2d_view",
    "scene3d",
    "shape",
    "transform",
]