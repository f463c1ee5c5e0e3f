"""Ray-casting renderer with Phong shading and hard shadows.

The renderer traces one primary ray per pixel through a scene of spheres and
planes lit by a single point light, with a shadow ray toward the light at
each hit.

Subpackages:
    core: Points and vectors, colors, 4x4 transforms, rays, and the canvas
    geometry: Sphere and plane primitives, intersections, and hit selection
    materials: Phong material and point light
    scene: Scene aggregate, shading preparation, and ready-made scenes
    camera: Perspective camera with ray generation and the render loop
    accel: Taichi kernels rendering the same pipeline in parallel
    preview: Canvas export (PNG)
"""

__version__ = "0.1.0"
