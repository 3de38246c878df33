"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    ray: Ray data structure, vector helpers, reflection and refraction
    config: RenderConfig with the tunables the tracer depends on
    lighting: Ambient/diffuse/specular illumination with shadow probes
    integrator: Recursive Whitted-style trace()
    canvas: Centre-addressed RGB framebuffer with put_pixel()
    renderer: Column-partitioned parallel render driver

Everything here runs on the CPU in plain Python and NumPy. Parallelism comes
from OS threads in the render driver; recursion in the tracer is sequential
within each worker.
"""

from raytracer.core.ray import (
    Ray,
    Vec3,
    as_vec3,
    cross,
    dot,
    length,
    length_squared,
    make_ray,
    near_zero,
    normalize,
    reflect,
    refract,
    vec3,
)

# Note: integrator, lighting and renderer are NOT imported here to avoid
# circular imports with the scene package. Import them directly, e.g.
#   from raytracer.core.renderer import Renderer

__all__ = [
    "Ray",
    "Vec3",
    "vec3",
    "as_vec3",
    "make_ray",
    "length",
    "length_squared",
    "normalize",
    "dot",
    "cross",
    "reflect",
    "refract",
    "near_zero",
]
