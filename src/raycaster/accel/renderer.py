"""Data-parallel Taichi renderer.

``TaichiRenderer`` evaluates the same pipeline as ``Camera.render`` with the
Python backend (primary ray, nearest hit, normal, shadow test, Phong
lighting) in one kernel that runs over every pixel in parallel. Each pixel
is independent, so no synchronization is needed.

Scene data is uploaded into Taichi fields owned by the renderer instance:

- per shape: kind tag, inverse transform, inverse-transpose transform,
  color, and packed (ambient, diffuse, specular, shininess)
- the light position and intensity
- the camera's inverse view transform

Taichi must be initialized with ``default_fp=ti.f64`` (see
:func:`init_backend`) so kernel results match the Python backend.

Example:
    >>> import math
    >>> from raycaster.accel.renderer import init_backend, render_taichi
    >>> from raycaster.camera.camera import Camera
    >>> from raycaster.scene.presets import default_scene
    >>> init_backend()
    >>> canvas = render_taichi(Camera(64, 64, math.pi / 2), default_scene())
"""

from typing import TYPE_CHECKING

import numpy as np
import taichi as ti

from raycaster.accel.geometry import intersect_local, normal_local, vec3, vec4
from raycaster.accel.shading import phong_lighting
from raycaster.core.canvas import Canvas
from raycaster.core.tuples import EPSILON

if TYPE_CHECKING:
    from raycaster.camera.camera import Camera
    from raycaster.scene.world import Scene


def init_backend(arch=None) -> None:
    """Initialize Taichi in double precision.

    Args:
        arch: Taichi arch to use (for example ``ti.cpu``). When omitted, the
            GPU is tried first and the CPU is used if that fails.
    """
    if arch is not None:
        ti.init(arch=arch, default_fp=ti.f64)
        return

    # Use GPU if available, fall back to CPU
    try:
        ti.init(arch=ti.gpu, default_fp=ti.f64)
    except Exception:
        ti.init(arch=ti.cpu, default_fp=ti.f64)


@ti.data_oriented
class TaichiRenderer:
    """Renders one scene through one camera with a Taichi kernel.

    Args:
        camera: Camera supplying the pixel grid and view transform.
        scene: Scene to render.

    Raises:
        SingularMatrixError: If the camera or any shape has a transform that
            cannot be inverted.
    """

    def __init__(self, camera: "Camera", scene: "Scene") -> None:
        self._camera = camera
        shapes = scene.shapes
        # Fields need at least one element even for an empty scene
        capacity = max(len(shapes), 1)

        self.shape_count = ti.field(dtype=ti.i32, shape=())
        self.shape_kinds = ti.field(dtype=ti.i32, shape=capacity)
        self.inverse_transforms = ti.Matrix.field(4, 4, dtype=ti.f64, shape=capacity)
        self.normal_transforms = ti.Matrix.field(4, 4, dtype=ti.f64, shape=capacity)
        self.colors = ti.Vector.field(3, dtype=ti.f64, shape=capacity)
        self.coefficients = ti.Vector.field(4, dtype=ti.f64, shape=capacity)

        self.light_position = ti.Vector.field(4, dtype=ti.f64, shape=())
        self.light_intensity = ti.Vector.field(3, dtype=ti.f64, shape=())
        self.camera_inverse = ti.Matrix.field(4, 4, dtype=ti.f64, shape=())

        # Indexed (x, y) like the camera; transposed on readback
        self.pixels = ti.Vector.field(3, dtype=ti.f64, shape=(camera.hsize, camera.vsize))

        self._upload(scene)

    def _upload(self, scene: "Scene") -> None:
        shapes = scene.shapes
        self.shape_count[None] = len(shapes)

        if shapes:
            inverses = np.stack([shape.transform.inverse().to_numpy() for shape in shapes])
            self.shape_kinds.from_numpy(
                np.array([int(shape.kind) for shape in shapes], dtype=np.int32)
            )
            self.inverse_transforms.from_numpy(inverses)
            self.normal_transforms.from_numpy(np.ascontiguousarray(inverses.transpose(0, 2, 1)))
            self.colors.from_numpy(
                np.array([shape.material.color.to_tuple() for shape in shapes], dtype=np.float64)
            )
            self.coefficients.from_numpy(
                np.array(
                    [
                        (m.ambient, m.diffuse, m.specular, m.shininess)
                        for m in (shape.material for shape in shapes)
                    ],
                    dtype=np.float64,
                )
            )

        light = scene.light
        self.light_position[None] = list(light.position)
        self.light_intensity[None] = list(light.intensity.to_tuple())
        self.camera_inverse[None] = self._camera.transform.inverse().to_numpy().tolist()

    # -------------------------------------------------------------------------
    # Kernel functions
    # -------------------------------------------------------------------------

    @ti.func
    def _nearest_hit(self, origin, direction):
        """Return (shape index, t) of the nearest hit with t >= 0, or (-1, 0)."""
        nearest = -1
        nearest_t = ti.cast(0.0, ti.f64)
        for i in range(self.shape_count[None]):
            inverse = self.inverse_transforms[i]
            count, t0, t1 = intersect_local(self.shape_kinds[i], inverse @ origin, inverse @ direction)
            if count > 0:
                # Strict comparison keeps the earlier shape on equal t
                if t0 >= 0.0 and (nearest < 0 or t0 < nearest_t):
                    nearest = i
                    nearest_t = t0
                if t1 >= 0.0 and (nearest < 0 or t1 < nearest_t):
                    nearest = i
                    nearest_t = t1
        return nearest, nearest_t

    @ti.func
    def _world_normal(self, index, world_point):
        local_point = self.inverse_transforms[index] @ world_point
        normal = self.normal_transforms[index] @ normal_local(self.shape_kinds[index], local_point)
        normal[3] = 0.0
        return normal.normalized()

    @ti.func
    def _is_shadowed(self, point):
        to_light = self.light_position[None] - point
        distance = to_light.norm()
        index, t = self._nearest_hit(point, to_light.normalized())
        shadowed = 0
        if index >= 0 and t < distance:
            shadowed = 1
        return shadowed

    @ti.func
    def _color(self, origin, direction):
        result = vec3(0.0)
        index, t = self._nearest_hit(origin, direction)
        if index >= 0:
            point = origin + direction * t
            eye = -direction
            normal = self._world_normal(index, point)
            if normal.dot(eye) < 0.0:
                normal = -normal
            over_point = point + normal * EPSILON

            result = phong_lighting(
                self.colors[index],
                self.coefficients[index],
                self.light_position[None],
                self.light_intensity[None],
                point,
                eye,
                normal,
                self._is_shadowed(over_point),
            )
        return result

    @ti.func
    def _primary_ray(self, x, y, half_width, half_height, pixel_size):
        world_x = half_width - (x + 0.5) * pixel_size
        world_y = half_height - (y + 0.5) * pixel_size

        inverse = self.camera_inverse[None]
        pixel = inverse @ vec4(world_x, world_y, -1.0, 1.0)
        origin = inverse @ vec4(0.0, 0.0, 0.0, 1.0)
        return origin, (pixel - origin).normalized()

    @ti.kernel
    def _render(self, half_width: ti.f64, half_height: ti.f64, pixel_size: ti.f64):
        for x, y in self.pixels:
            origin, direction = self._primary_ray(x, y, half_width, half_height, pixel_size)
            self.pixels[x, y] = self._color(origin, direction)

    # -------------------------------------------------------------------------
    # Python API
    # -------------------------------------------------------------------------

    def render(self) -> Canvas:
        """Run the kernel and return the image as a canvas."""
        camera = self._camera
        self._render(camera.half_width, camera.half_height, camera.pixel_size)
        image = self.pixels.to_numpy()
        return Canvas.from_numpy(np.transpose(image, (1, 0, 2)))

    def __repr__(self) -> str:
        return (
            f"TaichiRenderer({self._camera.hsize}x{self._camera.vsize}, "
            f"shapes={self.shape_count[None]})"
        )


def render_taichi(camera: "Camera", scene: "Scene") -> Canvas:
    """Render ``scene`` through ``camera`` on the Taichi backend."""
    return TaichiRenderer(camera, scene).render()
