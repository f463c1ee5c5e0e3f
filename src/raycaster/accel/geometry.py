"""Object-space sphere and plane routines as Taichi functions.

These mirror ``raycaster.geometry.sphere`` and ``raycaster.geometry.plane``
for use inside kernels. Points and vectors are homogeneous ``vec4`` values
(w = 1 for points, w = 0 for vectors) so they can be multiplied directly by
4x4 transform matrices.

Both intersection routines return ``(count, t0, t1)``; when ``count`` is 0
the t values are meaningless, and a plane hit repeats its single root in both
slots. Keeping one signature lets the renderer branch on the shape kind
without differently typed results.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from raycaster.accel.geometry import intersect_sphere_local
    >>> # Use intersect_sphere_local within a Taichi kernel
"""

import taichi as ti

from raycaster.core.tuples import EPSILON
from raycaster.geometry.shape import ShapeKind

vec3 = ti.types.vector(3, ti.f64)
vec4 = ti.types.vector(4, ti.f64)
mat4 = ti.types.matrix(4, 4, ti.f64)

# Integer tags stored in the renderer's shape-kind field
SHAPE_SPHERE = int(ShapeKind.SPHERE)
SHAPE_PLANE = int(ShapeKind.PLANE)


@ti.func
def intersect_sphere_local(origin, direction):
    """Intersect an object-space ray with the unit sphere.

    Args:
        origin: Ray origin in object space (vec4 point).
        direction: Ray direction in object space (vec4 vector, any length).

    Returns:
        Tuple of (count, t0, t1) with t0 <= t1; count is 0 or 2.
    """
    o = vec3(origin[0], origin[1], origin[2])
    d = vec3(direction[0], direction[1], direction[2])

    a = d.dot(d)
    b = 2.0 * d.dot(o)
    c = o.dot(o) - 1.0
    discriminant = b * b - 4.0 * a * c

    count = 0
    t0 = ti.cast(0.0, ti.f64)
    t1 = ti.cast(0.0, ti.f64)
    if discriminant >= 0.0:
        root = ti.sqrt(discriminant)
        t0 = (-b - root) / (2.0 * a)
        t1 = (-b + root) / (2.0 * a)
        count = 2
    return count, t0, t1


@ti.func
def intersect_plane_local(origin, direction):
    """Intersect an object-space ray with the xz-plane.

    Rays whose y direction is within ``EPSILON`` of zero are treated as
    parallel and miss, including rays lying in the plane.

    Returns:
        Tuple of (count, t, t); count is 0 or 1.
    """
    count = 0
    t = ti.cast(0.0, ti.f64)
    if ti.abs(direction[1]) >= EPSILON:
        t = -origin[1] / direction[1]
        count = 1
    return count, t, t


@ti.func
def intersect_local(kind, origin, direction):
    """Dispatch to the object-space intersection for ``kind``."""
    count = 0
    t0 = ti.cast(0.0, ti.f64)
    t1 = ti.cast(0.0, ti.f64)
    if kind == SHAPE_SPHERE:
        count, t0, t1 = intersect_sphere_local(origin, direction)
    else:
        count, t0, t1 = intersect_plane_local(origin, direction)
    return count, t0, t1


@ti.func
def normal_local(kind, local_point):
    """Object-space normal of shape ``kind`` at ``local_point``."""
    normal = vec4(0.0, 1.0, 0.0, 0.0)
    if kind == SHAPE_SPHERE:
        normal = local_point - vec4(0.0, 0.0, 0.0, 1.0)
    return normal
