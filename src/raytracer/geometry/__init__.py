"""Geometry module for shape primitives.

Components:
    shape: The Shape capability interface and ShapeKind tag
    sphere: Sphere primitive with quadratic ray intersection
    plane: Infinite plane primitive

Every primitive answers two queries:
    roots = shape.intersect(ray)     # zero, one or two t values, unordered
    n = shape.normal(point)          # unit surface normal

There is no acceleration structure; the scene-level search tests every
primitive for every ray.
"""

from raytracer.geometry.plane import PARALLEL_EPSILON, Plane
from raytracer.geometry.shape import Shape, ShapeKind
from raytracer.geometry.sphere import Sphere

__all__ = [
    "Shape",
    "ShapeKind",
    "Sphere",
    "Plane",
    "PARALLEL_EPSILON",
]
