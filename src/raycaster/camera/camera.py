"""Perspective camera mapping a pixel grid to primary rays.

The camera sits at the origin looking down -z, with a virtual canvas one
unit in front of it. The canvas is sized from the field of view so that its
longer side spans ``2 * tan(fov / 2)``; the shorter side follows from the
aspect ratio. The camera ``transform`` is a view transform (see
``Transform.view``): it moves the world relative to the camera, so rays are
mapped into the world with its inverse.

Pixel (0, 0) is the top-left corner. Rays pass through pixel centers.

Example:
    >>> import math
    >>> from raycaster.camera.camera import Camera
    >>> from raycaster.core.tuples import vector
    >>> camera = Camera(201, 101, math.pi / 2)
    >>> camera.ray_for_pixel(100, 50).direction == vector(0.0, 0.0, -1.0)
    True
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import TYPE_CHECKING, Literal

from raycaster.core.canvas import Canvas
from raycaster.core.matrix import Transform
from raycaster.core.ray import Ray
from raycaster.core.tuples import point

if TYPE_CHECKING:
    from raycaster.scene.world import Scene

# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]

RenderBackend = Literal["python", "taichi"]


class Camera:
    """A pinhole camera with a pixel grid and a view transform.

    Args:
        hsize: Horizontal size in pixels (positive).
        vsize: Vertical size in pixels (positive).
        field_of_view: Angle, in radians, spanned by the longer canvas side.
        transform: View transform. Defaults to the identity (camera at the
            origin looking down -z with +y up).

    Raises:
        ValueError: If either size is not positive.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Transform | None = None,
    ) -> None:
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera dimensions must be positive, got {hsize}x{vsize}")

        self._hsize = hsize
        self._vsize = vsize
        self._field_of_view = field_of_view
        self._transform = transform if transform is not None else Transform.identity()

        half_view = math.tan(field_of_view / 2.0)
        aspect = hsize / vsize
        if hsize > vsize:
            self._half_width = half_view
            self._half_height = half_view / aspect
        else:
            self._half_width = half_view * aspect
            self._half_height = half_view
        self._pixel_size = self._half_width * 2.0 / hsize

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def hsize(self) -> int:
        return self._hsize

    @property
    def vsize(self) -> int:
        return self._vsize

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @property
    def transform(self) -> Transform:
        return self._transform

    @property
    def half_width(self) -> float:
        return self._half_width

    @property
    def half_height(self) -> float:
        return self._half_height

    @property
    def pixel_size(self) -> float:
        """World-space size of one pixel on the canvas at z = -1."""
        return self._pixel_size

    def with_transform(self, transform: Transform) -> Camera:
        return Camera(self._hsize, self._vsize, self._field_of_view, transform)

    # -------------------------------------------------------------------------
    # Ray generation
    # -------------------------------------------------------------------------

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Return the world-space ray through the center of pixel (px, py).

        Raises:
            IndexError: If the pixel is outside the camera's grid.
            SingularMatrixError: If the view transform is not invertible.
        """
        if not (0 <= px < self._hsize and 0 <= py < self._vsize):
            raise IndexError(
                f"Pixel ({px}, {py}) is outside the {self._hsize}x{self._vsize} camera grid"
            )

        # Offset from the canvas edge to the pixel's center
        x_offset = (px + 0.5) * self._pixel_size
        y_offset = (py + 0.5) * self._pixel_size

        # Untransformed coordinates of the pixel; the camera looks toward -z,
        # so +x is to the left.
        world_x = self._half_width - x_offset
        world_y = self._half_height - y_offset

        inverse = self._transform.inverse()
        pixel = inverse * point(world_x, world_y, -1.0)
        origin = inverse * point(0.0, 0.0, 0.0)
        return Ray(origin, pixel - origin)

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def render(
        self,
        scene: Scene,
        callback: ProgressCallback | None = None,
        backend: RenderBackend = "python",
    ) -> Canvas:
        """Render ``scene`` into a new canvas, one ray per pixel.

        Args:
            scene: Scene to render.
            callback: Optional progress callback, called after each row with
                (rows_completed, total_rows). The Taichi backend renders all
                rows at once and calls it a single time.
            backend: "python" evaluates ``scene.color`` pixel by pixel;
                "taichi" evaluates the same pipeline in a compiled kernel
                (``raycaster.accel`` must be initialized first).

        Returns:
            A canvas of size hsize x vsize.

        Raises:
            ValueError: If ``backend`` is unknown.
        """
        if backend == "taichi":
            from raycaster.accel.renderer import render_taichi

            canvas = render_taichi(self, scene)
            if callback is not None:
                callback(self._vsize, self._vsize)
            return canvas

        if backend != "python":
            raise ValueError(f"Unknown render backend: {backend!r}")

        canvas = Canvas(self._hsize, self._vsize)
        for y in range(self._vsize):
            for x in range(self._hsize):
                canvas.write(x, y, scene.color(self.ray_for_pixel(x, y)))
            if callback is not None:
                callback(y + 1, self._vsize)
        return canvas

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self._hsize}, vsize={self._vsize}, "
            f"field_of_view={self._field_of_view})"
        )
