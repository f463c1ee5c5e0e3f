"""Unit tests for sphere intersection and normals.

Tests cover:
- Ray hitting sphere from outside
- Ray missing sphere
- Ray tangent to sphere
- Ray starting inside sphere
- Sphere behind the ray
- Transformed spheres (scaled, translated)
- Normals, including under non-uniform transforms
"""

import math

import pytest

from raycaster.core.matrix import SingularMatrixError, Transform
from raycaster.core.ray import Ray
from raycaster.core.tuples import approx_equal, point, vector
from raycaster.geometry.shape import ShapeKind, sphere
from raycaster.geometry.sphere import intersect_sphere, sphere_normal
from raycaster.materials.phong import Material

SQRT3_3 = math.sqrt(3) / 3


class TestSphereBasics:
    """Tests for sphere construction."""

    def test_defaults(self):
        s = sphere()
        assert s.kind == ShapeKind.SPHERE
        assert s.transform == Transform.identity()
        assert s.material == Material()

    def test_with_transform_and_material(self):
        s = sphere()
        moved = s.with_transform(Transform.translation(2, 3, 4))
        assert moved.transform == Transform.translation(2, 3, 4)
        assert s.transform == Transform.identity()

        shiny = s.with_material(Material(ambient=1.0))
        assert shiny.material.ambient == 1.0

    def test_shapes_compare_by_identity(self):
        assert sphere() != sphere()
        s = sphere()
        assert s == s


class TestSphereIntersection:
    """Tests for ray-sphere intersection."""

    def test_two_points(self):
        xs = sphere().intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [x.t for x in xs] == pytest.approx([4.0, 6.0])

    def test_tangent(self):
        xs = sphere().intersect(Ray(point(0, 1, -5), vector(0, 0, 1)))
        assert [x.t for x in xs] == pytest.approx([5.0, 5.0])

    def test_miss(self):
        assert sphere().intersect(Ray(point(0, 2, -5), vector(0, 0, 1))) == []

    def test_ray_inside_sphere(self):
        xs = sphere().intersect(Ray(point(0, 0, 0), vector(0, 0, 1)))
        assert [x.t for x in xs] == pytest.approx([-1.0, 1.0])

    def test_sphere_behind_ray(self):
        xs = sphere().intersect(Ray(point(0, 0, 5), vector(0, 0, 1)))
        assert [x.t for x in xs] == pytest.approx([-6.0, -4.0])

    def test_intersections_refer_to_shape(self):
        s = sphere()
        xs = s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert all(x.object is s for x in xs)

    def test_scaled_sphere(self):
        s = sphere(transform=Transform.scaling(2, 2, 2))
        xs = s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))
        assert [x.t for x in xs] == pytest.approx([3.0, 7.0])

    def test_translated_sphere(self):
        s = sphere(transform=Transform.translation(5, 0, 0))
        assert s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1))) == []

    def test_singular_transform_raises(self):
        s = sphere(transform=Transform.scaling(0, 1, 1))
        with pytest.raises(SingularMatrixError):
            s.intersect(Ray(point(0, 0, -5), vector(0, 0, 1)))

    def test_local_intersection_with_unnormalized_direction(self):
        local = Ray(point(0, 0, -5), vector(0, 0, 1)).transform(Transform.scaling(0.5, 0.5, 0.5))
        assert intersect_sphere(local) == pytest.approx([3.0, 7.0])


class TestSphereNormal:
    """Tests for sphere surface normals."""

    @pytest.mark.parametrize(
        "p, expected",
        [
            (point(1, 0, 0), vector(1, 0, 0)),
            (point(0, 1, 0), vector(0, 1, 0)),
            (point(0, 0, 1), vector(0, 0, 1)),
            (point(SQRT3_3, SQRT3_3, SQRT3_3), vector(SQRT3_3, SQRT3_3, SQRT3_3)),
        ],
    )
    def test_unit_sphere(self, p, expected):
        assert sphere().normal(p) == expected

    def test_local_normal(self):
        assert sphere_normal(point(0, 0, 1)) == vector(0, 0, 1)

    def test_normal_is_normalized(self):
        n = sphere().normal(point(SQRT3_3, SQRT3_3, SQRT3_3))
        assert approx_equal(n.magnitude(), 1.0)
        assert n.is_vector()

    def test_translated_sphere(self):
        s = sphere(transform=Transform.translation(0, 1, 0))
        assert s.normal(point(0, 1.70711, -0.70711)) == vector(0, 0.70711, -0.70711)

    def test_transformed_sphere(self):
        s = sphere(transform=Transform.scaling(1, 0.5, 1) * Transform.rotation_z(math.pi / 5))
        half = math.sqrt(2) / 2
        assert s.normal(point(0, half, -half)) == vector(0, 0.97014, -0.24254)
