"""Scene aggregate: one point light and an ordered collection of shapes.

The scene answers the three questions the renderer asks of a ray:

1. Where does it hit? (``intersect``, then ``hit``)
2. Is the hit point lit? (``is_shadowed``)
3. What color results? (``shade_hit`` / ``color``)

Scenes are immutable. ``with_shape`` and ``with_light`` return new scenes
sharing the existing shapes.

Example:
    >>> from raycaster.core.color import Color
    >>> from raycaster.core.ray import Ray
    >>> from raycaster.core.tuples import point, vector
    >>> from raycaster.geometry.shape import sphere
    >>> from raycaster.materials.phong import PointLight
    >>> from raycaster.scene.world import Scene
    >>> scene = Scene(PointLight(point(-10.0, 10.0, -10.0), Color.white()), [sphere()])
    >>> scene.color(Ray(point(0.0, 0.0, -5.0), vector(0.0, 1.0, 0.0)))
    Color(red=0.0, green=0.0, blue=0.0)
"""

from __future__ import annotations

from collections.abc import Iterable

from raycaster.core.color import Color
from raycaster.core.ray import Ray
from raycaster.core.tuples import Coordinate
from raycaster.geometry.intersection import Intersection, hit
from raycaster.geometry.shape import Shape
from raycaster.materials.phong import PointLight
from raycaster.scene.computations import IntersectionInfo, prepare_computations


class Scene:
    """A point light plus the shapes it illuminates.

    Args:
        light: The scene's single point light.
        shapes: Shapes in insertion order. Order only matters for breaking
            ties between intersections with exactly equal ``t``.
    """

    def __init__(self, light: PointLight, shapes: Iterable[Shape] = ()) -> None:
        self._light = light
        self._shapes = tuple(shapes)

    @property
    def light(self) -> PointLight:
        return self._light

    @property
    def shapes(self) -> tuple[Shape, ...]:
        return self._shapes

    def with_shape(self, shape: Shape) -> Scene:
        return Scene(self._light, self._shapes + (shape,))

    def with_light(self, light: PointLight) -> Scene:
        return Scene(light, self._shapes)

    # -------------------------------------------------------------------------
    # Ray queries
    # -------------------------------------------------------------------------

    def intersect(self, ray: Ray) -> list[Intersection]:
        """Intersect ``ray`` with every shape.

        Returns:
            All intersections, including negative ``t``, sorted ascending by
            ``t``. The sort is stable, so equal ``t`` keeps shape order.
        """
        xs = [x for shape in self._shapes for x in shape.intersect(ray)]
        xs.sort(key=lambda x: x.t)
        return xs

    def is_shadowed(self, point: Coordinate) -> bool:
        """Return True if a shape lies strictly between ``point`` and the light.

        A point at the light's position is never shadowed.
        """
        to_light = self._light.position - point
        distance = to_light.magnitude()
        if distance == 0.0:
            return False
        shadow_ray = Ray(point, to_light)

        nearest = hit(self.intersect(shadow_ray))
        return nearest is not None and nearest.t < distance

    def shade_hit(self, comps: IntersectionInfo) -> Color:
        """Light a prepared intersection, testing for shadow at ``over_point``."""
        in_shadow = self.is_shadowed(comps.over_point)
        return comps.object.material.lighting(
            self._light,
            comps.point,
            comps.eye,
            comps.normal,
            in_shadow,
        )

    def color(self, ray: Ray) -> Color:
        """Return the color seen along ``ray``; black if nothing is hit.

        Only intersections in front of the ray origin are considered, so a
        ray starting inside a shape shades the first surface ahead of it.
        """
        nearest = hit(self.intersect(ray))
        if nearest is None:
            return Color.black()
        return self.shade_hit(prepare_computations(nearest, ray))

    def __repr__(self) -> str:
        return f"Scene(light={self._light!r}, shapes={len(self._shapes)})"
