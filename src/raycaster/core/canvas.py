"""Frame buffer holding one linear RGB color per pixel.

The canvas stores colors in a float64 NumPy array of shape
(height, width, 3), row-major with the top row first, which is the layout
Pillow and most image tools expect. Values are not clamped.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from raycaster.core.color import Color


class Canvas:
    """A width x height grid of colors, initialized to black.

    Args:
        width: Number of columns (positive).
        height: Number of rows (positive).

    Raises:
        ValueError: If either dimension is not positive.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @classmethod
    def from_numpy(cls, image: npt.ArrayLike) -> Canvas:
        """Create a canvas from an array of shape (height, width, 3)."""
        array = np.asarray(image, dtype=np.float64)
        if array.ndim != 3 or array.shape[2] != 3:
            raise ValueError(f"Expected an array of shape (height, width, 3), got {array.shape}")
        canvas = cls(array.shape[1], array.shape[0])
        canvas._pixels[...] = array
        return canvas

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def write(self, x: int, y: int, color: Color) -> None:
        """Store ``color`` at column ``x``, row ``y``.

        Raises:
            IndexError: If (x, y) is outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = (color.red, color.green, color.blue)

    def pixel_at(self, x: int, y: int) -> Color:
        """Return the color at column ``x``, row ``y``.

        Raises:
            IndexError: If (x, y) is outside the canvas.
        """
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x].tolist()
        return Color(r, g, b)

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the pixels as an array of shape (height, width, 3)."""
        return self._pixels.copy()

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"
