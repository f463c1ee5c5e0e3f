"""Unit sphere in object space.

The sphere is centered at the origin with radius 1; position and size in the
world come from the owning shape's transform. Both routines here work
entirely in object space.

The ray-sphere intersection solves ``|O + tD|^2 = 1``:

    a = D . D
    b = 2 (D . O)
    c = O . O - 1
    t = (-b -/+ sqrt(b^2 - 4ac)) / 2a

``D`` is not assumed to be unit length, since object-space rays carry the
scale of the shape's inverse transform.
"""

import math

from raycaster.core.ray import Ray
from raycaster.core.tuples import ORIGIN, Coordinate


def intersect_sphere(local_ray: Ray) -> list[float]:
    """Intersect an object-space ray with the unit sphere.

    Args:
        local_ray: Ray already transformed into the sphere's object space.

    Returns:
        An empty list if the ray misses, otherwise both roots in ascending
        order. A tangent ray yields the same root twice. Roots behind the
        ray origin are kept.
    """
    sphere_to_ray = local_ray.origin - ORIGIN
    direction = local_ray.direction

    a = direction.dot(direction)
    b = 2.0 * direction.dot(sphere_to_ray)
    c = sphere_to_ray.dot(sphere_to_ray) - 1.0

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return []

    root = math.sqrt(discriminant)
    return [(-b - root) / (2.0 * a), (-b + root) / (2.0 * a)]


def sphere_normal(local_point: Coordinate) -> Coordinate:
    """Object-space normal of the unit sphere at ``local_point``."""
    return local_point - ORIGIN
