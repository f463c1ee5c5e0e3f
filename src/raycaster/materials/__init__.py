"""Surface materials.

Components:
    phong: Phong material, point light, and the lighting function
"""

from .phong import Material, PointLight, lighting

__all__ = [
    "Material",
    "PointLight",
    "lighting",
]
