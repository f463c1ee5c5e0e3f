"""Per-hit shading inputs.

``prepare_computations`` turns a chosen intersection into everything the
lighting model needs: the surface point, the eye vector, a normal facing the
eye, and a point lifted slightly off the surface for the shadow test.
"""

from __future__ import annotations

from dataclasses import dataclass

from raycaster.core.ray import Ray
from raycaster.core.tuples import EPSILON, Coordinate
from raycaster.geometry.intersection import Intersection
from raycaster.geometry.shape import Shape


@dataclass(frozen=True)
class IntersectionInfo:
    """Precomputed values for shading one intersection.

    Attributes:
        t: Ray parameter of the hit.
        object: The shape that was struck.
        point: World-space hit point.
        eye: Unit vector from the hit point back toward the ray origin.
        normal: Unit surface normal, flipped if needed to face the eye.
        inside: True if the normal was flipped, i.e. the ray started inside
            the shape.
        over_point: ``point`` moved ``EPSILON`` along the normal. Shadow rays
            start here so they do not re-hit the surface they leave
            ("shadow acne").
    """

    t: float
    object: Shape
    point: Coordinate
    eye: Coordinate
    normal: Coordinate
    inside: bool
    over_point: Coordinate


def prepare_computations(hit: Intersection, ray: Ray) -> IntersectionInfo:
    """Compute the shading inputs for ``hit`` along ``ray``."""
    point = ray.position(hit.t)
    eye = -ray.direction
    normal = hit.object.normal(point)

    inside = normal.dot(eye) < 0.0
    if inside:
        normal = -normal

    return IntersectionInfo(
        t=hit.t,
        object=hit.object,
        point=point,
        eye=eye,
        normal=normal,
        inside=inside,
        over_point=point + normal * EPSILON,
    )
