"""Local illumination model: ambient, diffuse and specular terms with shadows.

For a surface point with unit normal N, viewed along ray direction D, each
light contributes:

    ambient:     I
    diffuse:     I * dot(N, L) / (|N| |L|)                 if dot(N, L) > 0
    specular:    I * (dot(R, -D) / (|R| |D|)) ^ s          if s > 0 and dot(R, -D) > 0

where L is the direction toward the light and R is L reflected across N. The
specular term is the non-physical Phong-style highlight.

Point and directional lights are skipped entirely when a shadow probe from
the point toward the light hits anything. For point lights the probe covers
t in (epsilon, 1), which ends at the light itself because L is not normalized.
For directional lights it is unbounded. Ambient light is never occluded.

The returned intensity is the plain sum over lights and may exceed 1;
clamping happens only when it is applied to a color.
"""

from __future__ import annotations

import math

from raytracer.core.ray import Ray, Vec3, dot, length, reflect
from raytracer.scene.intersection import is_occluded
from raytracer.scene.lights import LightKind
from raytracer.scene.scene import Scene


def shade(
    scene: Scene,
    point: Vec3,
    normal: Vec3,
    ray_direction: Vec3,
    specularity: float,
    epsilon: float,
) -> float:
    """Compute the lighting intensity at a surface point.

    Args:
        scene: The scene providing lights and occluders.
        point: The surface point being lit.
        normal: The unit surface normal at the point.
        ray_direction: Direction of the ray that reached the point.
        specularity: Highlight exponent; 0 disables the specular term.
        epsilon: Start offset for shadow probes.

    Returns:
        The unclamped total intensity from all lights.
    """
    intensity = 0.0

    for light in scene.lights:
        if light.kind is LightKind.AMBIENT:
            intensity += light.intensity
            continue

        if light.kind is LightKind.POINT:
            direction = light.position - point
            max_t = 1.0
        else:
            direction = light.direction
            max_t = math.inf

        # Shadow check: anything between the point and the light blocks it
        if is_occluded(scene, Ray(origin=point, direction=direction), epsilon, max_t):
            continue

        intensity += light.intensity * _diffuse(normal, direction)
        if specularity > 0.0:
            intensity += light.intensity * _specular(normal, direction, ray_direction, specularity)

    return intensity


def _diffuse(normal: Vec3, direction: Vec3) -> float:
    n_dot_l = dot(normal, direction)
    if n_dot_l <= 0.0:
        return 0.0
    return n_dot_l / (length(normal) * length(direction))


def _specular(normal: Vec3, direction: Vec3, ray_direction: Vec3, specularity: float) -> float:
    # Mirror of the light direction about the normal, pointing away from the surface
    reflection = reflect(-direction, normal)
    r_dot_v = -dot(reflection, ray_direction)
    if r_dot_v <= 0.0:
        return 0.0
    cos_alpha = r_dot_v / (length(reflection) * length(ray_direction))
    return cos_alpha**specularity
