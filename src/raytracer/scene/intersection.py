"""Scene-level ray intersection testing.

Every ray is tested against every primitive (no acceleration structure).
Two query modes are supported:

    - CLOSEST: scan everything and keep the smallest qualifying t, used for
      primary and secondary visibility
    - ANY: stop at the first qualifying t, used for shadow probes where only
      the existence of an occluder matters

A root qualifies when t_min < t < t_max (both bounds exclusive). Finding
nothing is an ordinary result and is reported as None.

Example:
    >>> from raytracer.scene.intersection import HitMode, find_hit
    >>> hit = find_hit(scene, ray, 1.0, math.inf)
    >>> if hit is not None:
    ...     point = ray.point_at(hit.t)
"""

from __future__ import annotations

import math
from enum import Enum
from typing import NamedTuple

from raytracer.core.ray import Ray
from raytracer.geometry.shape import Shape
from raytracer.scene.scene import Scene


class HitMode(Enum):
    """Intersection query mode."""

    CLOSEST = "closest"
    ANY = "any"


class SceneHit(NamedTuple):
    """Record of a ray-scene intersection.

    Attributes:
        t: The ray parameter of the intersection.
        shape: The primitive that was hit.
    """

    t: float
    shape: Shape


def find_hit(
    scene: Scene,
    ray: Ray,
    t_min: float,
    t_max: float,
    mode: HitMode = HitMode.CLOSEST,
) -> SceneHit | None:
    """Test a ray against all primitives in the scene.

    Args:
        scene: The scene to search.
        ray: The ray to test.
        t_min: Exclusive lower bound on t.
        t_max: Exclusive upper bound on t.
        mode: CLOSEST for the nearest hit, ANY for the first hit found.

    Returns:
        A SceneHit with the qualifying t and its shape, or None if no
        primitive is hit inside (t_min, t_max).
    """
    closest_t = math.inf
    closest_shape: Shape | None = None

    for shape in scene.shapes():
        for t in shape.intersect(ray):
            if not t_min < t < t_max:
                continue
            if mode is HitMode.ANY:
                return SceneHit(t, shape)
            if t < closest_t:
                closest_t = t
                closest_shape = shape

    if closest_shape is None:
        return None
    return SceneHit(closest_t, closest_shape)


def is_occluded(scene: Scene, ray: Ray, t_min: float, t_max: float) -> bool:
    """Check whether anything blocks the ray inside (t_min, t_max)."""
    return find_hit(scene, ray, t_min, t_max, HitMode.ANY) is not None
