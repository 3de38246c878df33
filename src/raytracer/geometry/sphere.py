"""Sphere primitive with ray-sphere intersection.

The ray-sphere intersection is found by solving:
    |origin + t * direction - center|^2 = radius^2

Expanding and rearranging gives the quadratic equation:
    a*t^2 + b*t + c = 0

where:
    a = dot(direction, direction)
    b = 2 * dot(oc, direction)
    c = dot(oc, oc) - radius^2
    oc = origin - center

Both roots are returned without range filtering; the intersection search
decides which of them are usable.

Example:
    >>> from raytracer.core.ray import make_ray, vec3
    >>> from raytracer.geometry.sphere import Sphere
    >>> from raytracer.materials.material import Material, RED
    >>> sphere = Sphere(center=vec3(0, 0, 3), radius=1.0, material=Material(RED))
    >>> sorted(sphere.intersect(make_ray((0, 0, 0), (0, 0, 1))))
    [2.0, 4.0]
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from raytracer.core.ray import Ray, Vec3, dot, normalize
from raytracer.geometry.shape import ShapeKind
from raytracer.materials.material import Material


@dataclass(frozen=True, eq=False)
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
        material: Surface material.
    """

    center: Vec3
    radius: float
    material: Material
    kind: ShapeKind = field(default=ShapeKind.SPHERE, init=False)

    def intersect(self, ray: Ray) -> tuple[float, ...]:
        """Solve for the ray parameters where the ray meets the sphere.

        Args:
            ray: The ray to test. The direction need not be normalized.

        Returns:
            An empty tuple when the ray misses (negative discriminant or a
            zero-length direction), otherwise both roots. A tangent ray
            yields two equal roots.
        """
        oc = ray.origin - self.center

        a = dot(ray.direction, ray.direction)
        if a == 0.0:
            return ()
        b = 2.0 * dot(oc, ray.direction)
        c = dot(oc, oc) - self.radius * self.radius

        discriminant = b * b - 4.0 * a * c
        if discriminant < 0.0:
            return ()

        sqrt_d = math.sqrt(discriminant)
        return ((-b + sqrt_d) / (2.0 * a), (-b - sqrt_d) / (2.0 * a))

    def normal(self, point: Vec3) -> Vec3:
        """Outward unit normal at a surface point."""
        return normalize(point - self.center)
