"""Homogeneous coordinates for points and vectors.

A single 4-component type represents both points and free vectors. The
``w`` component tells them apart: ``w = 1.0`` is a point, ``w = 0.0`` is a
vector. Because every operation acts on all four components, the algebra
keeps the distinction automatically:

    point + vector  -> point   (w = 1)
    vector + vector -> vector  (w = 0)
    point - point   -> vector  (w = 0)

Translation in a 4x4 transform is carried by the fourth column, so it is
multiplied by ``w`` and has no effect on vectors.

Example:
    >>> from raycaster.core.tuples import point, vector
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = vector(0.0, 1.0, 0.0)
    >>> (p + v).is_point()
    True
    >>> v.magnitude()
    1.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Absolute per-component tolerance for approximate equality, and the offset
# used to lift shading points off their surface.
EPSILON = 1e-5


def approx_equal(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Return True if two floats differ by less than ``epsilon``."""
    return abs(a - b) < epsilon


@dataclass(frozen=True, eq=False)
class Coordinate:
    """A homogeneous 4-tuple (x, y, z, w).

    Attributes:
        x: First component.
        y: Second component.
        z: Third component.
        w: 1.0 for points, 0.0 for vectors.
    """

    x: float
    y: float
    z: float
    w: float

    # -------------------------------------------------------------------------
    # Classification
    # -------------------------------------------------------------------------

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Coordinate) -> Coordinate:
        return Coordinate(
            self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w
        )

    def __sub__(self, other: Coordinate) -> Coordinate:
        return Coordinate(
            self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w
        )

    def __neg__(self) -> Coordinate:
        return Coordinate(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, scalar: float) -> Coordinate:
        return Coordinate(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __rmul__(self, scalar: float) -> Coordinate:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Coordinate:
        return Coordinate(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return (
            approx_equal(self.x, other.x)
            and approx_equal(self.y, other.y)
            and approx_equal(self.z, other.z)
            and approx_equal(self.w, other.w)
        )

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z, self.w)[index]

    # -------------------------------------------------------------------------
    # Vector operations
    # -------------------------------------------------------------------------

    def dot(self, other: Coordinate) -> float:
        """Dot product over all four components.

        For two vectors the w terms are zero, so this is the usual 3-D dot
        product.
        """
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def cross(self, other: Coordinate) -> Coordinate:
        """Cross product of two vectors.

        Only defined for vectors; the w components are ignored and the result
        is always a vector.
        """
        return vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z + self.w * self.w)

    def normalize(self) -> Coordinate:
        """Scale to unit magnitude.

        A zero vector has no direction; dividing by its zero magnitude raises
        ZeroDivisionError.
        """
        return self / self.magnitude()

    def reflect(self, normal: Coordinate) -> Coordinate:
        """Reflect this vector about ``normal`` (which should be unit length)."""
        return self - normal * (2.0 * self.dot(normal))

    def to_array(self) -> npt.NDArray[np.float64]:
        """Return the components as a float64 array of shape (4,)."""
        return np.array((self.x, self.y, self.z, self.w), dtype=np.float64)

    def __repr__(self) -> str:
        if self.w == 1.0:
            return f"point({self.x}, {self.y}, {self.z})"
        if self.w == 0.0:
            return f"vector({self.x}, {self.y}, {self.z})"
        return f"Coordinate({self.x}, {self.y}, {self.z}, {self.w})"


def point(x: float, y: float, z: float) -> Coordinate:
    """Create a point (w = 1)."""
    return Coordinate(float(x), float(y), float(z), 1.0)


def vector(x: float, y: float, z: float) -> Coordinate:
    """Create a vector (w = 0)."""
    return Coordinate(float(x), float(y), float(z), 0.0)


ORIGIN = point(0.0, 0.0, 0.0)
