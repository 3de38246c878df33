"""Infinite plane primitive.

A plane is defined by any point on it and a normal vector. A ray meets it at

    t = dot(point - origin, normal) / dot(direction, normal)

Rays (nearly) parallel to the plane and planes behind the ray origin report
no intersection.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from raytracer.core.ray import Ray, Vec3, dot, normalize
from raytracer.geometry.shape import ShapeKind
from raytracer.materials.material import Material

# Below this |dot(direction, normal)| the ray is treated as parallel
PARALLEL_EPSILON = 1e-3


@dataclass(frozen=True, eq=False)
class Plane:
    """An infinite plane.

    Attributes:
        point: Any point on the plane.
        normal: The plane normal. Need not be unit length; normal() returns
            the normalized direction.
        material: Surface material.
    """

    point: Vec3
    normal_vector: Vec3
    material: Material
    kind: ShapeKind = field(default=ShapeKind.PLANE, init=False)

    def intersect(self, ray: Ray) -> tuple[float, ...]:
        """Find the single ray parameter where the ray crosses the plane.

        Args:
            ray: The ray to test.

        Returns:
            A one-element tuple with t >= 0, or an empty tuple if the ray is
            parallel to the plane or the plane lies behind the ray origin.
        """
        denominator = dot(ray.direction, self.normal_vector)
        if abs(denominator) < PARALLEL_EPSILON:
            return ()

        t = dot(self.point - ray.origin, self.normal_vector) / denominator
        if t < 0.0:
            return ()
        return (t,)

    def normal(self, point: Vec3) -> Vec3:
        """Unit normal; the same everywhere on the plane."""
        return normalize(self.normal_vector)
