"""Output utilities for rendered canvases.

Components:
    export: 8-bit conversion and PNG export via Pillow
"""

from .export import canvas_to_uint8, save_png

__all__ = ["canvas_to_uint8", "save_png"]
