"""4x4 affine transforms with cofactor-expansion inversion.

A ``Transform`` wraps a read-only 4x4 float64 NumPy array. Transforms are
values: every constructor, product and fluent helper returns a new instance.

Composition order:
    Multiplying ``A * B`` applies ``B`` first, then ``A``. The fluent helpers
    left-multiply, so a chain reads in application order::

        Transform.identity().rotate_x(pi / 2).scale(5, 5, 5).translate(10, 5, 7)

    rotates, then scales, then translates. ``A.then(B)`` is ``B * A``.

Inversion:
    The determinant is computed by cofactor expansion along the first row,
    recursing through 3x3 and 2x2 submatrices. The inverse is the transposed
    cofactor matrix divided by the determinant, and fails with
    ``SingularMatrixError`` when the determinant is exactly zero. Each
    Transform computes its inverse at most once.

Example:
    >>> from raycaster.core.matrix import Transform
    >>> from raycaster.core.tuples import point
    >>> m = Transform.translation(5.0, -3.0, 2.0)
    >>> m * point(-3.0, 4.0, 5.0)
    point(2.0, 1.0, 7.0)
    >>> m.inverse() * point(-3.0, 4.0, 5.0)
    point(-8.0, 7.0, 3.0)
"""

from __future__ import annotations

import math
from typing import overload

import numpy as np
import numpy.typing as npt

from raycaster.core.tuples import EPSILON, Coordinate

Matrix = npt.NDArray[np.float64]


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is zero."""


# =============================================================================
# Cofactor Expansion (4x4, 3x3 and 2x2)
# =============================================================================


def submatrix(m: Matrix, row: int, col: int) -> Matrix:
    """Return ``m`` with one row and one column removed."""
    return np.delete(np.delete(m, row, axis=0), col, axis=1)


def minor(m: Matrix, row: int, col: int) -> float:
    """Determinant of the submatrix obtained by removing ``row`` and ``col``."""
    return determinant(submatrix(m, row, col))


def cofactor(m: Matrix, row: int, col: int) -> float:
    """Minor with the checkerboard sign applied."""
    value = minor(m, row, col)
    return value if (row + col) % 2 == 0 else -value


def determinant(m: Matrix) -> float:
    """Determinant of a 2x2, 3x3 or 4x4 matrix.

    Larger matrices expand along the first row; 2x2 is the base case.

    Raises:
        ValueError: If the matrix is not square or has an unsupported size.
    """
    size = m.shape[0]
    if m.shape != (size, size) or size not in (2, 3, 4):
        raise ValueError(f"Unsupported matrix shape for determinant: {m.shape}")

    if size == 2:
        return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])

    return float(sum(m[0, col] * cofactor(m, 0, col) for col in range(size)))


# =============================================================================
# Transform
# =============================================================================


class Transform:
    """An immutable 4x4 affine transform.

    Args:
        data: Any 4x4 array-like of numbers. Defaults to the identity.
    """

    def __init__(self, data: npt.ArrayLike | None = None) -> None:
        matrix = np.identity(4) if data is None else np.array(data, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValueError(f"Transform requires a 4x4 matrix, got shape {matrix.shape}")
        matrix.setflags(write=False)
        self._data = matrix
        self._inverse: Transform | None = None

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def translation(cls, x: float, y: float, z: float) -> Transform:
        return cls(
            [
                [1.0, 0.0, 0.0, x],
                [0.0, 1.0, 0.0, y],
                [0.0, 0.0, 1.0, z],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def scaling(cls, x: float, y: float, z: float) -> Transform:
        return cls(
            [
                [x, 0.0, 0.0, 0.0],
                [0.0, y, 0.0, 0.0],
                [0.0, 0.0, z, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_x(cls, radians: float) -> Transform:
        c, s = math.cos(radians), math.sin(radians)
        return cls(
            [
                [1.0, 0.0, 0.0, 0.0],
                [0.0, c, -s, 0.0],
                [0.0, s, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_y(cls, radians: float) -> Transform:
        c, s = math.cos(radians), math.sin(radians)
        return cls(
            [
                [c, 0.0, s, 0.0],
                [0.0, 1.0, 0.0, 0.0],
                [-s, 0.0, c, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def rotation_z(cls, radians: float) -> Transform:
        c, s = math.cos(radians), math.sin(radians)
        return cls(
            [
                [c, -s, 0.0, 0.0],
                [s, c, 0.0, 0.0],
                [0.0, 0.0, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def shearing(
        cls, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> Transform:
        """Shear each axis in proportion to the other two.

        ``xy`` moves x in proportion to y, ``xz`` moves x in proportion to z,
        and so on.
        """
        return cls(
            [
                [1.0, xy, xz, 0.0],
                [yx, 1.0, yz, 0.0],
                [zx, zy, 1.0, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )

    @classmethod
    def view(cls, from_: Coordinate, to: Coordinate, up: Coordinate) -> Transform:
        """Build a view transform for an eye at ``from_`` looking at ``to``.

        The result moves the world in front of a camera that sits at the
        origin looking down -z.

        Args:
            from_: Eye position (point).
            to: Point the eye looks at.
            up: Approximate up direction (vector); need not be exactly
                perpendicular to the view direction.

        Returns:
            The orientation matrix composed with a translation by ``-from_``.
        """
        forward = (to - from_).normalize()
        left = forward.cross(up.normalize()).normalize()
        true_up = left.cross(forward)
        orientation = cls(
            [
                [left.x, left.y, left.z, 0.0],
                [true_up.x, true_up.y, true_up.z, 0.0],
                [-forward.x, -forward.y, -forward.z, 0.0],
                [0.0, 0.0, 0.0, 1.0],
            ]
        )
        return orientation * cls.translation(-from_.x, -from_.y, -from_.z)

    # -------------------------------------------------------------------------
    # Fluent composition (each call is applied after the previous ones)
    # -------------------------------------------------------------------------

    def then(self, other: Transform) -> Transform:
        """Return the transform that applies ``self`` and then ``other``."""
        return other * self

    def translate(self, x: float, y: float, z: float) -> Transform:
        return Transform.translation(x, y, z) * self

    def scale(self, x: float, y: float, z: float) -> Transform:
        return Transform.scaling(x, y, z) * self

    def rotate_x(self, radians: float) -> Transform:
        return Transform.rotation_x(radians) * self

    def rotate_y(self, radians: float) -> Transform:
        return Transform.rotation_y(radians) * self

    def rotate_z(self, radians: float) -> Transform:
        return Transform.rotation_z(radians) * self

    def shear(
        self, xy: float, xz: float, yx: float, yz: float, zx: float, zy: float
    ) -> Transform:
        return Transform.shearing(xy, xz, yx, yz, zx, zy) * self

    # -------------------------------------------------------------------------
    # Products
    # -------------------------------------------------------------------------

    @overload
    def __mul__(self, other: Transform) -> Transform: ...

    @overload
    def __mul__(self, other: Coordinate) -> Coordinate: ...

    def __mul__(self, other):
        if isinstance(other, Transform):
            return Transform(self._data @ other._data)
        if isinstance(other, Coordinate):
            x, y, z, w = (self._data @ other.to_array()).tolist()
            return Coordinate(x, y, z, w)
        return NotImplemented

    __matmul__ = __mul__

    # -------------------------------------------------------------------------
    # Transpose, determinant, inverse
    # -------------------------------------------------------------------------

    def transpose(self) -> Transform:
        return Transform(self._data.T)

    def submatrix(self, row: int, col: int) -> Matrix:
        return submatrix(self._data, row, col)

    def minor(self, row: int, col: int) -> float:
        return minor(self._data, row, col)

    def cofactor(self, row: int, col: int) -> float:
        return cofactor(self._data, row, col)

    def determinant(self) -> float:
        return determinant(self._data)

    def is_invertible(self) -> bool:
        return self.determinant() != 0.0

    def inverse(self) -> Transform:
        """Return the inverse transform.

        Raises:
            SingularMatrixError: If the determinant is exactly zero.
        """
        if self._inverse is None:
            det = self.determinant()
            if det == 0.0:
                raise SingularMatrixError(f"Matrix is not invertible:\n{self._data}")

            result = np.empty((4, 4), dtype=np.float64)
            for row in range(4):
                for col in range(4):
                    # Transposed on store
                    result[col, row] = self.cofactor(row, col) / det

            inverse = Transform(result)
            inverse._inverse = self
            self._inverse = inverse
        return self._inverse

    # -------------------------------------------------------------------------
    # Access and comparison
    # -------------------------------------------------------------------------

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        return float(self._data[row, col])

    def to_numpy(self) -> Matrix:
        """Return a writable float64 copy of the matrix."""
        return self._data.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.all(np.abs(self._data - other._data) < EPSILON))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows = ", ".join(str(row) for row in self._data.tolist())
        return f"Transform([{rows}])"
