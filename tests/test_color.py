"""Unit tests for RGB colors."""

from raycaster.core.color import COLOR_EPSILON, Color


class TestColor:
    """Tests for color arithmetic and comparison."""

    def test_components(self):
        c = Color(-0.5, 0.4, 1.7)
        assert (c.red, c.green, c.blue) == (-0.5, 0.4, 1.7)
        assert c.to_tuple() == (-0.5, 0.4, 1.7)
        assert list(c) == [-0.5, 0.4, 1.7]

    def test_add_and_subtract(self):
        c1 = Color(0.9, 0.6, 0.75)
        c2 = Color(0.7, 0.1, 0.25)
        assert c1 + c2 == Color(1.6, 0.7, 1.0)
        assert c1 - c2 == Color(0.2, 0.5, 0.5)

    def test_scalar_multiplication(self):
        assert Color(0.2, 0.3, 0.4) * 2 == Color(0.4, 0.6, 0.8)
        assert 2 * Color(0.2, 0.3, 0.4) == Color(0.4, 0.6, 0.8)

    def test_hadamard_product(self):
        assert Color(1, 0.2, 0.4) * Color(0.9, 1, 0.1) == Color(0.9, 0.2, 0.04)

    def test_division_and_negation(self):
        assert Color(0.4, 0.6, 0.8) / 2 == Color(0.2, 0.3, 0.4)
        assert -Color(0.1, -0.2, 0.3) == Color(-0.1, 0.2, -0.3)

    def test_black_and_white(self):
        assert Color.black() == Color(0, 0, 0)
        assert Color.white() == Color(1, 1, 1)

    def test_values_are_not_clamped(self):
        assert Color(0.8, 0.8, 0.8) + Color(0.8, 0.8, 0.8) == Color(1.6, 1.6, 1.6)

    def test_approximate_equality(self):
        assert Color(0.5, 0.5, 0.5) == Color(0.5 + COLOR_EPSILON / 2, 0.5, 0.5)
        assert Color(0.5, 0.5, 0.5) != Color(0.5 + COLOR_EPSILON * 2, 0.5, 0.5)
