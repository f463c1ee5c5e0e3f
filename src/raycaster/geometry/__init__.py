"""Geometric primitives and intersections.

Components:
    shape: Shape record tagged with a ShapeKind, and the shared dispatch
    sphere: Unit sphere in object space
    plane: xz-plane in object space
    intersection: Intersection records and hit selection

Every shape intersects and computes normals through the same steps:
transform into object space, run the kind's local routine, transform back.
"""

from .intersection import Intersection, hit, intersections
from .plane import intersect_plane, plane_normal
from .shape import Shape, ShapeKind, plane, sphere
from .sphere import intersect_sphere, sphere_normal

__all__ = [
    "Shape",
    "ShapeKind",
    "sphere",
    "plane",
    "Intersection",
    "intersections",
    "hit",
    "intersect_sphere",
    "sphere_normal",
    "intersect_plane",
    "plane_normal",
]
