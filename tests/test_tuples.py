"""Unit tests for points and vectors.

Tests cover:
- Point/vector classification by w
- Arithmetic closure (point + vector, point - point, ...)
- Magnitude, normalization, dot and cross products
- Reflection about a normal
- Approximate equality
"""

import math

import pytest

from raycaster.core.tuples import EPSILON, Coordinate, approx_equal, point, vector


class TestClassification:
    """Tests for telling points from vectors."""

    def test_point_has_w_one(self):
        p = Coordinate(4.3, -4.2, 3.1, 1.0)
        assert p.is_point()
        assert not p.is_vector()

    def test_vector_has_w_zero(self):
        v = Coordinate(4.3, -4.2, 3.1, 0.0)
        assert v.is_vector()
        assert not v.is_point()

    def test_factories(self):
        assert point(4, -4, 3) == Coordinate(4.0, -4.0, 3.0, 1.0)
        assert vector(4, -4, 3) == Coordinate(4.0, -4.0, 3.0, 0.0)

    def test_repr(self):
        assert repr(point(1.0, 2.0, 3.0)) == "point(1.0, 2.0, 3.0)"
        assert repr(vector(1.0, 2.0, 3.0)) == "vector(1.0, 2.0, 3.0)"


class TestArithmetic:
    """Tests for component-wise arithmetic."""

    def test_point_plus_vector_is_point(self):
        result = point(3, -2, 5) + vector(-2, 3, 1)
        assert result == point(1, 1, 6)
        assert result.is_point()

    def test_point_minus_point_is_vector(self):
        result = point(3, 2, 1) - point(5, 6, 7)
        assert result == vector(-2, -4, -6)
        assert result.is_vector()

    def test_point_minus_vector_is_point(self):
        assert point(3, 2, 1) - vector(5, 6, 7) == point(-2, -4, -6)

    def test_vector_minus_vector(self):
        assert vector(3, 2, 1) - vector(5, 6, 7) == vector(-2, -4, -6)

    def test_negation(self):
        assert -Coordinate(1, -2, 3, -4) == Coordinate(-1, 2, -3, 4)

    def test_scalar_multiplication(self):
        a = Coordinate(1, -2, 3, -4)
        assert a * 3.5 == Coordinate(3.5, -7, 10.5, -14)
        assert 0.5 * a == Coordinate(0.5, -1, 1.5, -2)

    def test_scalar_division(self):
        assert Coordinate(1, -2, 3, -4) / 2 == Coordinate(0.5, -1, 1.5, -2)


class TestVectorOperations:
    """Tests for magnitude, normalization, dot and cross."""

    @pytest.mark.parametrize(
        "v, expected",
        [
            (vector(1, 0, 0), 1.0),
            (vector(0, 1, 0), 1.0),
            (vector(0, 0, 1), 1.0),
            (vector(1, 2, 3), math.sqrt(14)),
            (vector(-1, -2, -3), math.sqrt(14)),
        ],
    )
    def test_magnitude(self, v, expected):
        assert approx_equal(v.magnitude(), expected)

    def test_normalize(self):
        assert vector(4, 0, 0).normalize() == vector(1, 0, 0)
        assert vector(1, 2, 3).normalize() == vector(0.26726, 0.53452, 0.80178)

    def test_normalized_vector_has_unit_magnitude(self):
        assert approx_equal(vector(1, 2, 3).normalize().magnitude(), 1.0)

    def test_normalize_zero_vector_raises(self):
        with pytest.raises(ZeroDivisionError):
            vector(0, 0, 0).normalize()

    def test_dot(self):
        assert vector(1, 2, 3).dot(vector(2, 3, 4)) == 20.0

    def test_cross(self):
        a = vector(1, 2, 3)
        b = vector(2, 3, 4)
        assert a.cross(b) == vector(-1, 2, -1)
        assert b.cross(a) == vector(1, -2, 1)

    def test_cross_is_orthogonal_to_inputs(self):
        a = vector(0.3, -1.2, 2.5)
        b = vector(4.0, 0.7, -0.1)
        c = a.cross(b)
        assert abs(c.dot(a)) < EPSILON
        assert abs(c.dot(b)) < EPSILON
        assert c.is_vector()

    def test_reflect_at_45_degrees(self):
        assert vector(1, -1, 0).reflect(vector(0, 1, 0)) == vector(1, 1, 0)

    def test_reflect_off_slanted_surface(self):
        half = math.sqrt(2) / 2
        assert vector(0, -1, 0).reflect(vector(half, half, 0)) == vector(1, 0, 0)


class TestEquality:
    """Tests for approximate equality."""

    def test_within_epsilon_is_equal(self):
        assert point(1.0, 2.0, 3.0) == point(1.0 + EPSILON / 2, 2.0, 3.0)

    def test_beyond_epsilon_is_not_equal(self):
        assert point(1.0, 2.0, 3.0) != point(1.0 + EPSILON * 2, 2.0, 3.0)

    def test_point_is_not_vector(self):
        assert point(1, 2, 3) != vector(1, 2, 3)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(point(1, 2, 3))
