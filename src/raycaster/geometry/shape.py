"""Shape record and the shared object-space dispatch.

Every primitive is a ``Shape`` tagged with a ``ShapeKind``. The kind selects
the object-space routines (from ``sphere`` and ``plane``); everything that
depends on the shape's transform lives here, once, for all kinds:

- ``intersect`` maps the world ray into object space with the inverse
  transform before calling the local routine.
- ``normal`` maps the world point into object space, asks for the local
  normal, and maps it back with the inverse-transpose. Normals transform
  with the inverse-transpose because they must stay perpendicular to the
  surface under non-uniform scaling; the w component picked up from the
  translation column is then reset to 0 and the result renormalized.

The same integer tags are used by the Taichi renderer in ``raycaster.accel``.

Example:
    >>> from raycaster.core.matrix import Transform
    >>> from raycaster.core.ray import Ray
    >>> from raycaster.core.tuples import point, vector
    >>> from raycaster.geometry.shape import sphere
    >>> s = sphere(transform=Transform.scaling(2.0, 2.0, 2.0))
    >>> [x.t for x in s.intersect(Ray(point(0.0, 0.0, -5.0), vector(0.0, 0.0, 1.0)))]
    [3.0, 7.0]
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from enum import IntEnum

from raycaster.core.matrix import Transform
from raycaster.core.ray import Ray
from raycaster.core.tuples import Coordinate
from raycaster.geometry.intersection import Intersection
from raycaster.geometry.plane import intersect_plane, plane_normal
from raycaster.geometry.sphere import intersect_sphere, sphere_normal
from raycaster.materials.phong import Material


class ShapeKind(IntEnum):
    """Enumeration of primitive kinds.

    Used to dispatch to the object-space intersection and normal routines.
    """

    SPHERE = 0
    PLANE = 1


LocalIntersect = Callable[[Ray], list[float]]
LocalNormal = Callable[[Coordinate], Coordinate]

_LOCAL_INTERSECT: dict[ShapeKind, LocalIntersect] = {
    ShapeKind.SPHERE: intersect_sphere,
    ShapeKind.PLANE: intersect_plane,
}

_LOCAL_NORMAL: dict[ShapeKind, LocalNormal] = {
    ShapeKind.SPHERE: sphere_normal,
    ShapeKind.PLANE: plane_normal,
}


@dataclass(frozen=True, eq=False)
class Shape:
    """A primitive placed in the world.

    Shapes compare by identity, so an ``Intersection`` refers to exactly the
    shape that produced it even when two shapes have equal fields.

    Attributes:
        kind: Which primitive this is.
        transform: Object-to-world transform.
        material: Surface material.
    """

    kind: ShapeKind
    transform: Transform = field(default_factory=Transform.identity)
    material: Material = field(default_factory=Material)

    def with_transform(self, transform: Transform) -> Shape:
        return replace(self, transform=transform)

    def with_material(self, material: Material) -> Shape:
        return replace(self, material=material)

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect a world-space ray with this shape.

        Args:
            ray: Ray in world space.

        Returns:
            Intersections in ascending ``t``, each referring to this shape.

        Raises:
            SingularMatrixError: If the shape's transform is not invertible.
        """
        local_ray = ray.transform(self.transform.inverse())
        return [Intersection(t, self) for t in _LOCAL_INTERSECT[self.kind](local_ray)]

    def normal(self, world_point: Coordinate) -> Coordinate:
        """Unit surface normal, in world space, at ``world_point``."""
        inverse = self.transform.inverse()
        local_normal = _LOCAL_NORMAL[self.kind](inverse * world_point)
        world_normal = inverse.transpose() * local_normal
        return Coordinate(world_normal.x, world_normal.y, world_normal.z, 0.0).normalize()

    def __repr__(self) -> str:
        return f"Shape(kind={self.kind.name}, transform={self.transform!r})"


def sphere(transform: Transform | None = None, material: Material | None = None) -> Shape:
    """Create a sphere; defaults to the unit sphere with the default material."""
    return Shape(
        ShapeKind.SPHERE,
        transform if transform is not None else Transform.identity(),
        material if material is not None else Material(),
    )


def plane(transform: Transform | None = None, material: Material | None = None) -> Shape:
    """Create a plane; defaults to the xz-plane with the default material."""
    return Shape(
        ShapeKind.PLANE,
        transform if transform is not None else Transform.identity(),
        material if material is not None else Material(),
    )
