"""Core math and data types.

Components:
    tuples: Homogeneous points and vectors
    color: RGB colors
    matrix: 4x4 transforms with cofactor inversion
    ray: Rays and ray transformation
    canvas: Frame buffer of colors
"""

from .canvas import Canvas
from .color import Color
from .matrix import SingularMatrixError, Transform
from .ray import Ray
from .tuples import EPSILON, ORIGIN, Coordinate, approx_equal, point, vector

__all__ = [
    "EPSILON",
    "ORIGIN",
    "Coordinate",
    "approx_equal",
    "point",
    "vector",
    "Color",
    "Transform",
    "SingularMatrixError",
    "Ray",
    "Canvas",
]
