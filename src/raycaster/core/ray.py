"""Ray data structure.

A ray is an origin point and a direction vector. Rays built through the
public constructor always carry a unit direction. Rays produced by
``Ray.transform`` keep whatever length the transform gives the direction:
intersection routines in object space rely on that length so the parameter
``t`` they solve for is the same ``t`` as along the original world ray.

Example:
    >>> from raycaster.core.ray import Ray
    >>> from raycaster.core.tuples import point, vector
    >>> ray = Ray(point(2.0, 3.0, 4.0), vector(1.0, 0.0, 0.0))
    >>> ray.position(2.5)
    point(4.5, 3.0, 4.0)
"""

from __future__ import annotations

from raycaster.core.matrix import Transform
from raycaster.core.tuples import Coordinate


class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector, normalized at construction.
    """

    def __init__(self, origin: Coordinate, direction: Coordinate) -> None:
        self.origin = origin
        self.direction = direction.normalize()

    @classmethod
    def _unnormalized(cls, origin: Coordinate, direction: Coordinate) -> Ray:
        ray = cls.__new__(cls)
        ray.origin = origin
        ray.direction = direction
        return ray

    def position(self, t: float) -> Coordinate:
        """Return the point at parameter ``t``.

        Negative ``t`` lies behind the origin and is still a valid position.
        """
        return self.origin + self.direction * t

    def transform(self, m: Transform) -> Ray:
        """Map the ray by ``m``, leaving the direction's length as transformed."""
        return Ray._unnormalized(m * self.origin, m * self.direction)

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self.direction!r})"
