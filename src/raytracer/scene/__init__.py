"""Scene module for scene data and ray-scene queries.

Components:
    scene: Immutable Scene container
    lights: Ambient, point and directional light sources
    intersection: Brute-force closest-hit and any-hit queries
    manager: SceneBuilder with validation and dict/JSON loading
    demo: The demo scene used by the command line

A Scene is built once and only read afterwards, so render worker threads
share it without any locking.
"""

from raytracer.scene.demo import DemoSceneParams, create_demo_builder, create_demo_scene
from raytracer.scene.intersection import HitMode, SceneHit, find_hit, is_occluded
from raytracer.scene.lights import Light, LightKind
from raytracer.scene.manager import (
    NAMED_COLORS,
    PlaneInfo,
    SceneBuilder,
    SphereInfo,
    load_scene,
    parse_color,
)
from raytracer.scene.scene import Scene

__all__ = [
    # Scene container
    "Scene",
    # Lights
    "Light",
    "LightKind",
    # Intersection module
    "HitMode",
    "SceneHit",
    "find_hit",
    "is_occluded",
    # Builder module
    "SceneBuilder",
    "SphereInfo",
    "PlaneInfo",
    "NAMED_COLORS",
    "parse_color",
    "load_scene",
    # Demo scene
    "DemoSceneParams",
    "create_demo_builder",
    "create_demo_scene",
]
