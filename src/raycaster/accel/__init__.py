"""Taichi-accelerated rendering.

Components:
    geometry: Object-space sphere and plane routines (@ti.func)
    shading: Phong lighting (@ti.func)
    renderer: TaichiRenderer and backend initialization

Importing this package imports Taichi. Call ``init_backend()`` before
creating a renderer.
"""

from .renderer import TaichiRenderer, init_backend, render_taichi

__all__ = ["TaichiRenderer", "init_backend", "render_taichi"]
