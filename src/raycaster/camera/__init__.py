"""Camera models.

Components:
    camera: Perspective camera with per-pixel ray generation and rendering
"""

from .camera import Camera, ProgressCallback

__all__ = ["Camera", "ProgressCallback"]
