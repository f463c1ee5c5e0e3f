"""Infinite plane in object space.

In object space the plane is y = 0 (the xz-plane) with its normal along +y.
"""

from raycaster.core.ray import Ray
from raycaster.core.tuples import EPSILON, Coordinate, vector

PLANE_NORMAL = vector(0.0, 1.0, 0.0)


def intersect_plane(local_ray: Ray) -> list[float]:
    """Intersect an object-space ray with the xz-plane.

    A ray whose direction has (almost) no y component is parallel to the
    plane, or lies in it, and is reported as a miss.
    """
    if abs(local_ray.direction.y) < EPSILON:
        return []
    return [-local_ray.origin.y / local_ray.direction.y]


def plane_normal(local_point: Coordinate) -> Coordinate:
    return PLANE_NORMAL
