"""Smoke tests for the render_scene example script.

Tests cover:
- Rendering the showcase and default scenes to PNG
- The Taichi backend path
- Command-line entry point exit codes
"""

import sys

import pytest
from PIL import Image as PILImage

from examples.render_scene import main, render_scene


class TestRenderScene:
    """Tests for render_scene() at a tiny resolution."""

    def test_showcase_scene(self, tmp_path):
        output = render_scene(width=8, height=4, output_path=str(tmp_path / "scene.png"), quiet=True)

        assert output == tmp_path / "scene.png"
        with PILImage.open(output) as image:
            assert image.size == (8, 4)
            assert image.mode == "RGB"

    def test_default_scene(self, tmp_path):
        output = render_scene(
            width=6,
            height=6,
            output_path=str(tmp_path / "default.png"),
            use_default_scene=True,
            quiet=True,
        )

        with PILImage.open(output) as image:
            assert image.size == (6, 6)

    def test_progress_output(self, tmp_path, capsys):
        render_scene(width=4, height=2, output_path=str(tmp_path / "scene.png"))

        out = capsys.readouterr().out
        assert "Progress: 2/2 rows" in out
        assert "Saved to:" in out

    def test_taichi_backend(self, tmp_path, taichi_runtime):
        output = render_scene(
            width=8,
            height=4,
            output_path=str(tmp_path / "taichi.png"),
            backend="taichi",
            quiet=True,
        )

        with PILImage.open(output) as image:
            assert image.size == (8, 4)


class TestMain:
    """Tests for the command-line entry point."""

    def test_success(self, tmp_path, monkeypatch):
        output = tmp_path / "cli.png"
        monkeypatch.setattr(
            sys,
            "argv",
            ["render_scene", "--width", "4", "--height", "2", "--output", str(output), "--quiet"],
        )

        assert main() == 0
        assert output.exists()

    def test_error_returns_one(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setattr(
            sys,
            "argv",
            ["render_scene", "--width", "0", "--output", str(tmp_path / "bad.png"), "--quiet"],
        )

        assert main() == 1
        assert "Error:" in capsys.readouterr().err

    def test_rejects_unknown_backend(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["render_scene", "--backend", "opengl"])

        with pytest.raises(SystemExit):
            main()
