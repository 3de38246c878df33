"""Recursive Whitted-style ray tracing integrator.

trace() finds the closest surface along a ray, lights it with the local
illumination model, and blends in recursively traced reflected and
transmitted rays:

    local       = color * (1 - reflectivity - transparency)
    reflected   = trace(reflected ray, depth - 1) * reflectivity
    transmitted = trace(refracted ray, depth - 1) * transparency

Recursion stops when depth reaches 0 or a ray escapes the scene. Each level
branches at most twice, so the cost of one primary ray is bounded by
2^(max_depth + 1) - 1 traced rays.

Lighting is computed once per level, from that level's hit point. The
configured lighting mode decides what it scales:

    "local":   color = local * I + reflected + transmitted
    "blended": color = (local + reflected + transmitted) * I

In "local" mode every contribution is lit exactly once, by the lights of the
surface it came from. In "blended" mode a contribution from recursion depth k
is lit k + 1 times.

Secondary rays start at t = epsilon so they do not hit the surface they leave
from.

Example:
    >>> from raytracer.core.config import RenderConfig
    >>> from raytracer.core.integrator import trace
    >>> from raytracer.core.ray import make_ray
    >>> config = RenderConfig()
    >>> color = trace(scene, make_ray((0, 0, 0), (0, 0, 1)), 1.0, math.inf, config.max_depth, config)
"""

from __future__ import annotations

from raytracer.core.config import T_MAX, RenderConfig
from raytracer.core.lighting import shade
from raytracer.core.ray import Ray, reflect, refract
from raytracer.materials.material import BLACK, Color, add_colors, scale_color
from raytracer.scene.intersection import HitMode, find_hit
from raytracer.scene.scene import Scene


def trace(
    scene: Scene,
    ray: Ray,
    t_min: float,
    t_max: float,
    depth: int,
    config: RenderConfig,
) -> Color:
    """Trace a ray and return the color it sees.

    Args:
        scene: The scene to render.
        ray: The ray to trace.
        t_min: Exclusive lower bound on the hit parameter.
        t_max: Exclusive upper bound on the hit parameter.
        depth: Remaining recursion depth. At 0, reflection and transmission
            are skipped whatever the material says.
        config: Render configuration (epsilon, background, lighting mode).

    Returns:
        The RGB color, every channel clamped to [0, 255].
    """
    hit = find_hit(scene, ray, t_min, t_max, HitMode.CLOSEST)
    if hit is None:
        return config.background

    point = ray.point_at(hit.t)
    normal = hit.shape.normal(point)
    material = hit.shape.material

    local_color = scale_color(material.color, material.local_fraction)

    reflected_color = BLACK
    if depth > 0 and material.reflectivity > 0.0:
        reflected_ray = Ray(origin=point, direction=reflect(ray.direction, normal))
        reflected_color = scale_color(
            trace(scene, reflected_ray, config.epsilon, T_MAX, depth - 1, config),
            material.reflectivity,
        )

    transmitted_color = BLACK
    if depth > 0 and material.transparency > 0.0:
        transmitted_ray = Ray(
            origin=point,
            direction=refract(ray.direction, normal, material.refractivity),
        )
        transmitted_color = scale_color(
            trace(scene, transmitted_ray, config.epsilon, T_MAX, depth - 1, config),
            material.transparency,
        )

    intensity = shade(
        scene,
        point,
        normal,
        ray.direction,
        material.specularity,
        config.epsilon,
    )

    if config.lighting == "blended":
        blend = add_colors(local_color, reflected_color, transmitted_color)
        return scale_color(blend, intensity)

    return add_colors(scale_color(local_color, intensity), reflected_color, transmitted_color)
