"""Tests for the perspective camera.

Tests cover:
- Canvas sizing and pixel size for landscape and portrait grids
- Ray generation through the center and corner of the canvas
- Rays from a transformed camera
- Rendering with the Python backend and progress callbacks
- Argument validation
"""

import math

import pytest

from raycaster.camera.camera import Camera
from raycaster.core.color import Color
from raycaster.core.matrix import Transform
from raycaster.core.tuples import approx_equal, point, vector
from raycaster.scene.presets import showcase_camera


class TestCameraConstruction:
    """Tests for camera properties."""

    def test_defaults(self):
        camera = Camera(160, 120, math.pi / 2)
        assert camera.hsize == 160
        assert camera.vsize == 120
        assert camera.field_of_view == math.pi / 2
        assert camera.transform == Transform.identity()

    def test_pixel_size_horizontal_canvas(self):
        assert approx_equal(Camera(200, 125, math.pi / 2).pixel_size, 0.01)

    def test_pixel_size_vertical_canvas(self):
        assert approx_equal(Camera(125, 200, math.pi / 2).pixel_size, 0.01)

    def test_half_extents_follow_longer_side(self):
        camera = Camera(125, 200, math.pi / 2)
        assert approx_equal(camera.half_height, 1.0)
        assert approx_equal(camera.half_width, 0.625)

    @pytest.mark.parametrize("hsize, vsize", [(0, 10), (10, 0), (-1, 10)])
    def test_rejects_non_positive_size(self, hsize, vsize):
        with pytest.raises(ValueError):
            Camera(hsize, vsize, math.pi / 2)

    def test_with_transform(self):
        camera = Camera(10, 10, math.pi / 2)
        moved = camera.with_transform(Transform.translation(0, 0, -5))
        assert moved.transform == Transform.translation(0, 0, -5)
        assert camera.transform == Transform.identity()
        assert moved.pixel_size == camera.pixel_size


class TestRayForPixel:
    """Tests for Camera.ray_for_pixel."""

    def test_center_of_canvas(self):
        ray = Camera(201, 101, math.pi / 2).ray_for_pixel(100, 50)
        assert ray.origin == point(0, 0, 0)
        assert ray.direction == vector(0, 0, -1)

    def test_corner_of_canvas(self):
        ray = Camera(201, 101, math.pi / 2).ray_for_pixel(0, 0)
        assert ray.origin == point(0, 0, 0)
        assert ray.direction == vector(0.66519, 0.33259, -0.66851)

    def test_transformed_camera(self):
        transform = Transform.rotation_y(math.pi / 4) * Transform.translation(0, -2, 5)
        ray = Camera(201, 101, math.pi / 2, transform).ray_for_pixel(100, 50)
        half = math.sqrt(2) / 2
        assert ray.origin == point(0, 2, -5)
        assert ray.direction == vector(half, 0, -half)

    @pytest.mark.parametrize("px, py", [(201, 0), (0, 101), (-1, 0), (0, -1)])
    def test_out_of_range_pixel(self, px, py):
        with pytest.raises(IndexError):
            Camera(201, 101, math.pi / 2).ray_for_pixel(px, py)


class TestRender:
    """Tests for Camera.render with the Python backend."""

    @pytest.fixture
    def camera(self):
        transform = Transform.view(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0))
        return Camera(11, 11, math.pi / 2, transform)

    def test_render_default_scene(self, camera, default_scene):
        canvas = camera.render(default_scene)
        assert canvas.width == 11
        assert canvas.height == 11
        assert canvas.pixel_at(5, 5) == Color(0.38066, 0.47583, 0.2855)

    def test_corners_miss(self, camera, default_scene):
        canvas = camera.render(default_scene)
        assert canvas.pixel_at(0, 0) == Color.black()
        assert canvas.pixel_at(10, 10) == Color.black()

    def test_progress_callback_once_per_row(self, camera, default_scene):
        calls = []
        camera.render(default_scene, callback=lambda current, total: calls.append((current, total)))
        assert calls == [(row, 11) for row in range(1, 12)]

    def test_unknown_backend(self, camera, default_scene):
        with pytest.raises(ValueError, match="backend"):
            camera.render(default_scene, backend="opengl")

    def test_showcase_camera(self):
        camera = showcase_camera(40, 20)
        assert camera.hsize == 40
        assert camera.vsize == 20
        assert camera.ray_for_pixel(20, 10).origin == point(0, 1.5, -5)
