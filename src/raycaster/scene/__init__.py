"""Scene description and shading.

Components:
    world: Scene aggregate (light and shapes) with intersection, shadow and
        color queries
    computations: Per-hit shading inputs
    presets: Ready-made scenes and cameras
"""

from .computations import IntersectionInfo, prepare_computations
from .presets import default_light, default_scene, showcase_camera, showcase_scene
from .world import Scene

__all__ = [
    "Scene",
    "IntersectionInfo",
    "prepare_computations",
    "default_light",
    "default_scene",
    "showcase_scene",
    "showcase_camera",
]
