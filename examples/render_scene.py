#!/usr/bin/env python3
"""Render the showcase scene.

This script renders three spheres on a floor in front of a backdrop, lit by
a single point light with hard shadows, and saves the result as a PNG.

Usage:
    python -m examples.render_scene [options]

Options:
    --width WIDTH       Image width in pixels (default: 200)
    --height HEIGHT     Image height in pixels (default: 100)
    --fov DEGREES       Field of view of the longer side (default: 60)
    --output OUTPUT     Output file path (default: scene.png)
    --backend BACKEND   "python" or "taichi" (default: python)
    --default-scene     Render the two-sphere default scene instead
    --quiet             Suppress progress output

Example:
    python -m examples.render_scene --width 400 --height 200 --backend taichi
"""

from __future__ import annotations

import argparse
import math
import sys
import time
from pathlib import Path


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the showcase scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=200,
        help="Image width in pixels (default: 200)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=100,
        help="Image height in pixels (default: 100)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=60.0,
        help="Field of view across the longer image side, in degrees (default: 60)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="scene.png",
        help="Output file path (default: scene.png)",
    )
    parser.add_argument(
        "--backend",
        choices=("python", "taichi"),
        default="python",
        help="Render backend (default: python)",
    )
    parser.add_argument(
        "--default-scene",
        action="store_true",
        help="Render the two-sphere default scene instead",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    return parser.parse_args()


def render_scene(
    width: int = 200,
    height: int = 100,
    fov_degrees: float = 60.0,
    output_path: str = "scene.png",
    backend: str = "python",
    use_default_scene: bool = False,
    quiet: bool = False,
) -> Path:
    """Render the selected scene and save it to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Field of view in degrees.
        output_path: Output file path (PNG).
        backend: "python" or "taichi".
        use_default_scene: Render the default two-sphere scene.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    from raycaster.core.matrix import Transform
    from raycaster.core.tuples import point, vector
    from raycaster.preview.export import save_png
    from raycaster.scene.presets import default_scene, showcase_camera, showcase_scene

    field_of_view = math.radians(fov_degrees)

    if use_default_scene:
        scene = default_scene()
        camera = showcase_camera(width, height, field_of_view).with_transform(
            Transform.view(point(0.0, 0.0, -5.0), point(0.0, 0.0, 0.0), vector(0.0, 1.0, 0.0))
        )
    else:
        scene = showcase_scene()
        camera = showcase_camera(width, height, field_of_view)

    if not quiet:
        print(f"Rendering {len(scene.shapes)} shapes at {width}x{height} ({backend})...")

    start_time = time.time()

    def progress_callback(current: int, total: int) -> None:
        if not quiet:
            progress_pct = (current / total) * 100 if total > 0 else 0
            print(f"\r  Progress: {current}/{total} rows ({progress_pct:.1f}%)", end="", flush=True)

    canvas = camera.render(scene, callback=progress_callback, backend=backend)

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    save_png(canvas, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    try:
        if args.backend == "taichi":
            from raycaster.accel.renderer import init_backend

            init_backend()

        render_scene(
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            output_path=args.output,
            backend=args.backend,
            use_default_scene=args.default_scene,
            quiet=args.quiet,
        )
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
