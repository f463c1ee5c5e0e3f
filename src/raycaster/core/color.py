"""RGB color values.

Colors are unbounded linear floats. Nothing in the shading pipeline clamps
them; clamping to [0, 1] happens only when a canvas is converted to 8-bit
pixels (see ``raycaster.preview.export``).
"""

from __future__ import annotations

from dataclasses import dataclass

# Reference colors are quoted to five significant digits.
COLOR_EPSILON = 1e-4


@dataclass(frozen=True, eq=False)
class Color:
    """A linear RGB color.

    Attributes:
        red: Red channel.
        green: Green channel.
        blue: Blue channel.
    """

    red: float
    green: float
    blue: float

    @staticmethod
    def black() -> Color:
        return Color(0.0, 0.0, 0.0)

    @staticmethod
    def white() -> Color:
        return Color(1.0, 1.0, 1.0)

    def __add__(self, other: Color) -> Color:
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: Color) -> Color:
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __neg__(self) -> Color:
        return Color(-self.red, -self.green, -self.blue)

    def __mul__(self, other: Color | float) -> Color:
        """Scale by a number, or take the component-wise (Hadamard) product."""
        if isinstance(other, Color):
            return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)
        return Color(self.red * other, self.green * other, self.blue * other)

    def __rmul__(self, scalar: float) -> Color:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Color:
        return Color(self.red / scalar, self.green / scalar, self.blue / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            abs(self.red - other.red) < COLOR_EPSILON
            and abs(self.green - other.green) < COLOR_EPSILON
            and abs(self.blue - other.blue) < COLOR_EPSILON
        )

    __hash__ = None  # type: ignore[assignment]

    def __iter__(self):
        return iter((self.red, self.green, self.blue))

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.red, self.green, self.blue)
