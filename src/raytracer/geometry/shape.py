"""Shape interface shared by all geometric primitives.

The set of primitives is closed (spheres and planes), but the tracer only
relies on this small capability interface, so new primitives slot in without
touching the intersection search or the lighting model.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from raytracer.core.ray import Ray, Vec3
    from raytracer.materials.material import Material


class ShapeKind(Enum):
    """Enumeration of supported primitive types."""

    SPHERE = "sphere"
    PLANE = "plane"


class Shape(Protocol):
    """A primitive that can be hit by rays.

    Attributes:
        kind: The primitive type tag.
        material: Surface material of the primitive.
    """

    kind: ShapeKind
    material: Material

    def intersect(self, ray: Ray) -> tuple[float, ...]:
        """Return the ray parameters of all intersections, in no particular order."""
        ...

    def normal(self, point: Vec3) -> Vec3:
        """Return the unit surface normal at a point on the surface."""
        ...
