"""Phong material model and point light.

The Phong model sums three terms at a surface point:

- ambient: a constant fraction of the surface color, present even in shadow
- diffuse: Lambertian term, proportional to the cosine between the light
  direction and the surface normal
- specular: view-dependent highlight, proportional to the cosine between the
  reflected light direction and the eye direction raised to ``shininess``

When the point is in shadow only the ambient term remains.

Example:
    >>> from raycaster.core.color import Color
    >>> from raycaster.core.tuples import point, vector
    >>> from raycaster.materials.phong import Material, PointLight, lighting
    >>> light = PointLight(point(0.0, 0.0, -10.0), Color(1.0, 1.0, 1.0))
    >>> eye = normal = vector(0.0, 0.0, -1.0)
    >>> lighting(Material(), light, point(0.0, 0.0, 0.0), eye, normal) == Color(1.9, 1.9, 1.9)
    True
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from raycaster.core.color import Color
from raycaster.core.tuples import Coordinate

# =============================================================================
# Default Material Parameters
# =============================================================================

DEFAULT_AMBIENT = 0.1
DEFAULT_DIFFUSE = 0.9
DEFAULT_SPECULAR = 0.9
DEFAULT_SHININESS = 200.0


@dataclass(frozen=True)
class PointLight:
    """A light with no size, emitting equally in all directions.

    Attributes:
        position: Light position (point).
        intensity: Light color and brightness.
    """

    position: Coordinate
    intensity: Color


@dataclass(frozen=True)
class Material:
    """Surface reflectance parameters for Phong shading.

    Attributes:
        color: Surface color.
        ambient: Fraction of the effective color reflected as ambient light.
        diffuse: Weight of the Lambertian term.
        specular: Weight of the highlight term.
        shininess: Phong exponent; larger values give smaller, sharper
            highlights.
    """

    color: Color = field(default_factory=Color.white)
    ambient: float = DEFAULT_AMBIENT
    diffuse: float = DEFAULT_DIFFUSE
    specular: float = DEFAULT_SPECULAR
    shininess: float = DEFAULT_SHININESS

    def with_changes(self, **changes) -> Material:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def lighting(
        self,
        light: PointLight,
        point: Coordinate,
        eye: Coordinate,
        normal: Coordinate,
        in_shadow: bool = False,
    ) -> Color:
        """Shade ``point`` with this material. See :func:`lighting`."""
        return lighting(self, light, point, eye, normal, in_shadow)


def lighting(
    material: Material,
    light: PointLight,
    point: Coordinate,
    eye: Coordinate,
    normal: Coordinate,
    in_shadow: bool = False,
) -> Color:
    """Evaluate the Phong model at a surface point.

    Args:
        material: Surface material.
        light: The scene's point light.
        point: Surface point being shaded.
        eye: Unit vector from the point toward the viewer.
        normal: Unit surface normal at the point, facing the viewer.
        in_shadow: If True, only the ambient term is returned.

    Returns:
        The reflected color. Values are not clamped and may exceed 1.
    """
    effective_color = material.color * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    light_vector = (light.position - point).normalize()

    # Cosine of the angle between the light vector and the normal; a negative
    # value means the light is on the other side of the surface.
    light_dot_normal = light_vector.dot(normal)
    if light_dot_normal < 0.0:
        return ambient

    diffuse = effective_color * (material.diffuse * light_dot_normal)

    reflect_vector = (-light_vector).reflect(normal)
    reflect_dot_eye = reflect_vector.dot(eye)
    if reflect_dot_eye <= 0.0:
        specular = Color.black()
    else:
        factor = reflect_dot_eye**material.shininess
        specular = light.intensity * (material.specular * factor)

    return ambient + diffuse + specular
