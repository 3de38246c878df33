"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization for the interactive preview tests, which must happen
once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Using session scope prevents multiple ti.init() calls which can cause
    segmentation faults due to Taichi runtime conflicts.
    """
    ti.init(arch=ti.cpu)
    yield


@pytest.fixture
def tiny_config():
    """A small render configuration that traces quickly."""
    from raytracer.core.config import RenderConfig

    return RenderConfig(canvas_width=16, canvas_height=12, num_workers=4)


@pytest.fixture
def red_sphere_scene():
    """A single matte red sphere in front of the camera, lit by ambient 0.2."""
    from raytracer.scene.manager import SceneBuilder

    builder = SceneBuilder()
    builder.add_material("red", color="red")
    builder.add_sphere(center=(0.0, 0.0, 3.0), radius=1.0, material="red")
    builder.add_ambient_light(0.2)
    return builder.build()
