"""Ready-made scenes.

``default_scene`` is the small two-sphere scene most shading tests are
written against. ``showcase_scene`` and ``showcase_camera`` build a larger
scene (floor, backdrop and three spheres) for the example script.

Example:
    >>> import math
    >>> from raycaster.scene.presets import showcase_camera, showcase_scene
    >>> camera = showcase_camera(200, 100, math.pi / 3)
    >>> canvas = camera.render(showcase_scene())
"""

import math

from raycaster.camera.camera import Camera
from raycaster.core.color import Color
from raycaster.core.matrix import Transform
from raycaster.core.tuples import point, vector
from raycaster.geometry.shape import plane, sphere
from raycaster.materials.phong import Material, PointLight
from raycaster.scene.world import Scene

# =============================================================================
# Default Scene Parameters
# =============================================================================

DEFAULT_LIGHT_POSITION = (-10.0, 10.0, -10.0)

OUTER_SPHERE_COLOR = (0.8, 1.0, 0.6)
OUTER_SPHERE_DIFFUSE = 0.7
OUTER_SPHERE_SPECULAR = 0.2

INNER_SPHERE_SCALE = 0.5

# =============================================================================
# Showcase Scene Parameters
# =============================================================================

FLOOR_COLOR = (1.0, 0.9, 0.9)
BACKDROP_COLOR = (0.6, 0.7, 0.9)
MIDDLE_SPHERE_COLOR = (0.1, 1.0, 0.5)
RIGHT_SPHERE_COLOR = (0.5, 1.0, 0.1)
LEFT_SPHERE_COLOR = (1.0, 0.8, 0.1)


def default_light() -> PointLight:
    """White point light above, left of and in front of the origin."""
    return PointLight(point(*DEFAULT_LIGHT_POSITION), Color.white())


def default_scene() -> Scene:
    """Two concentric spheres under the default light.

    - Outer: unit sphere, color (0.8, 1.0, 0.6), diffuse 0.7, specular 0.2
    - Inner: unit sphere scaled by 0.5, default material
    """
    outer = sphere(
        material=Material(
            color=Color(*OUTER_SPHERE_COLOR),
            diffuse=OUTER_SPHERE_DIFFUSE,
            specular=OUTER_SPHERE_SPECULAR,
        )
    )
    inner = sphere(
        transform=Transform.scaling(INNER_SPHERE_SCALE, INNER_SPHERE_SCALE, INNER_SPHERE_SCALE)
    )
    return Scene(default_light(), [outer, inner])


def showcase_scene() -> Scene:
    """Three spheres resting on a floor in front of a tilted backdrop."""
    floor_material = Material(color=Color(*FLOOR_COLOR), specular=0.0)
    floor = plane(material=floor_material)

    backdrop = plane(
        transform=Transform.identity().rotate_x(math.pi / 2).translate(0.0, 0.0, 5.0),
        material=Material(color=Color(*BACKDROP_COLOR), specular=0.1),
    )

    middle = sphere(
        transform=Transform.translation(-0.5, 1.0, 0.5),
        material=Material(color=Color(*MIDDLE_SPHERE_COLOR), diffuse=0.7, specular=0.3),
    )
    right = sphere(
        transform=Transform.identity().scale(0.5, 0.5, 0.5).translate(1.5, 0.5, -0.5),
        material=Material(color=Color(*RIGHT_SPHERE_COLOR), diffuse=0.7, specular=0.3),
    )
    left = sphere(
        transform=Transform.identity().scale(0.33, 0.33, 0.33).translate(-1.5, 0.33, -0.75),
        material=Material(color=Color(*LEFT_SPHERE_COLOR), diffuse=0.7, specular=0.3),
    )

    return Scene(default_light(), [floor, backdrop, middle, right, left])


def showcase_camera(width: int, height: int, field_of_view: float = math.pi / 3) -> Camera:
    """Camera looking at the showcase scene from slightly above and in front."""
    return Camera(
        width,
        height,
        field_of_view,
        transform=Transform.view(point(0.0, 1.5, -5.0), point(0.0, 1.0, 0.0), vector(0.0, 1.0, 0.0)),
    )
