"""Pytest configuration for raycaster tests.

This module provides shared fixtures for all test modules. Taichi is only
initialized for tests that request ``taichi_runtime``; it must happen once
per session.
"""

import pytest

from raycaster.core.color import Color
from raycaster.core.tuples import point
from raycaster.materials.phong import PointLight
from raycaster.scene.presets import default_scene as build_default_scene


@pytest.fixture(scope="session")
def taichi_runtime():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts. Tests using this
    fixture are skipped when Taichi is not installed.
    """
    ti = pytest.importorskip("taichi")
    ti.init(arch=ti.cpu, default_fp=ti.f64, random_seed=42)
    yield ti
    # Note: We don't call ti.reset() here as it can cause issues
    # with subsequent tests if any cleanup happens after


@pytest.fixture
def default_scene():
    """The two concentric spheres under the light at (-10, 10, -10)."""
    return build_default_scene()


@pytest.fixture
def front_light():
    """White light straight in front of the origin, on the -z side."""
    return PointLight(point(0.0, 0.0, -10.0), Color.white())
