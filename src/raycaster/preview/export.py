"""Image export utilities for rendered canvases.

Supported formats:
    - PNG (8-bit RGB via Pillow)

Colors are written as-is after clamping to [0, 1]; no tone mapping or gamma
correction is applied.

Example:
    >>> import math
    >>> from raycaster.camera.camera import Camera
    >>> from raycaster.preview.export import save_png
    >>> from raycaster.scene.presets import default_scene
    >>>
    >>> canvas = Camera(100, 100, math.pi / 2).render(default_scene())
    >>> save_png(canvas, "output.png")
"""

from __future__ import annotations

from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from raycaster.core.canvas import Canvas


def canvas_to_uint8(canvas: Canvas) -> npt.NDArray[np.uint8]:
    """Convert a canvas to an 8-bit image.

    Each channel is clamped to [0, 1], scaled to [0, 255] and rounded to the
    nearest integer.

    Returns:
        Array of shape (height, width, 3) with dtype uint8.
    """
    image = np.clip(canvas.to_numpy(), 0.0, 1.0)
    return np.rint(image * 255.0).astype(np.uint8)


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Save a canvas as an 8-bit RGB PNG file.

    Args:
        canvas: Canvas to save.
        filepath: Output file path (should end in .png).
    """
    pil_image = PILImage.fromarray(canvas_to_uint8(canvas))
    pil_image.save(str(filepath))
