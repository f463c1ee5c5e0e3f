"""Phong lighting as a Taichi function.

Matches ``raycaster.materials.phong.lighting`` term for term. Material
coefficients are packed into one ``vec4`` as (ambient, diffuse, specular,
shininess) so a shape's material fits in two fields: color and coefficients.
"""

import taichi as ti

from raycaster.accel.geometry import vec3


@ti.func
def reflect(v, n):
    """Reflect ``v`` around the unit normal ``n``."""
    return v - n * 2.0 * v.dot(n)


@ti.func
def phong_lighting(
    color,
    coefficients,
    light_position,
    light_intensity,
    point,
    eye,
    normal,
    in_shadow,
):
    """Evaluate the Phong model at a surface point.

    Args:
        color: Surface color (vec3).
        coefficients: (ambient, diffuse, specular, shininess) as a vec4.
        light_position: Light position (vec4 point).
        light_intensity: Light color (vec3).
        point: Surface point (vec4 point).
        eye: Unit vector toward the viewer (vec4 vector).
        normal: Unit normal facing the viewer (vec4 vector).
        in_shadow: Nonzero if the light is blocked.

    Returns:
        Reflected color (vec3), unclamped.
    """
    effective_color = color * light_intensity
    ambient = effective_color * coefficients[0]
    result = ambient

    if in_shadow == 0:
        light_vector = (light_position - point).normalized()
        light_dot_normal = light_vector.dot(normal)
        if light_dot_normal >= 0.0:
            diffuse = effective_color * (coefficients[1] * light_dot_normal)

            reflect_dot_eye = reflect(-light_vector, normal).dot(eye)
            specular = vec3(0.0)
            if reflect_dot_eye > 0.0:
                factor = ti.pow(reflect_dot_eye, coefficients[3])
                specular = light_intensity * (coefficients[2] * factor)

            result = ambient + diffuse + specular

    return result
