"""Ray data structure and vector utilities for CPU ray tracing.

This module provides the fundamental Ray dataclass and the vector helpers used
throughout the tracer. Vectors are plain float64 NumPy arrays of shape (3,),
which keeps the arithmetic readable (``origin + t * direction``) while letting
callers pass in any sequence of three numbers.

Degenerate inputs never raise: normalizing a zero-length vector yields the
zero vector, so geometry built from it simply reports no intersection.

Example:
    >>> from raytracer.core.ray import Ray, vec3
    >>> ray = Ray(origin=vec3(0.0, 0.0, 0.0), direction=vec3(0.0, 0.0, 1.0))
    >>> ray.point_at(5.0)  # Point 5 units along the ray
    array([0., 0., 5.])
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
import numpy.typing as npt

# Type alias for 3D vectors
Vec3 = npt.NDArray[np.float64]

# Vectors shorter than this are treated as zero-length
_ZERO_LENGTH = 1e-12


def vec3(x: float, y: float, z: float) -> Vec3:
    """Create a 3D vector."""
    return np.array((x, y, z), dtype=np.float64)


def as_vec3(value: Sequence[float] | Vec3) -> Vec3:
    """Convert a sequence of three numbers to a vector.

    Args:
        value: Any sequence (tuple, list, array) with three components.

    Returns:
        A new float64 array of shape (3,).

    Raises:
        ValueError: If the value does not have exactly three components.
    """
    result = np.array(value, dtype=np.float64).reshape(-1)
    if result.shape != (3,):
        raise ValueError(f"Expected 3 components, got {result.shape[0]}")
    return result


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not required to be unit
            length; t values are measured in multiples of this vector.
    """

    origin: Vec3
    direction: Vec3

    def point_at(self, t: float) -> Vec3:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + t * self.direction


def make_ray(origin: Sequence[float] | Vec3, direction: Sequence[float] | Vec3) -> Ray:
    """Create a ray from anything convertible to vectors."""
    return Ray(origin=as_vec3(origin), direction=as_vec3(direction))


# =============================================================================
# Vector Utility Functions
# =============================================================================


def dot(a: Vec3, b: Vec3) -> float:
    """Compute the dot product a . b."""
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Compute the cross product a x b."""
    return np.cross(a, b)


def length_squared(v: Vec3) -> float:
    """Compute the squared length of a vector.

    Cheaper than length() when only comparing magnitudes.
    """
    return dot(v, v)


def length(v: Vec3) -> float:
    """Compute the Euclidean length (magnitude) of a vector."""
    return math.sqrt(length_squared(v))


def normalize(v: Vec3) -> Vec3:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v.
        If v is zero-length, returns a zero vector.
    """
    n = length(v)
    if n < _ZERO_LENGTH:
        return np.zeros(3, dtype=np.float64)
    return v / n


def near_zero(v: Vec3) -> bool:
    """Check if a vector is near zero in all components."""
    return length_squared(v) < _ZERO_LENGTH * _ZERO_LENGTH


def reflect(incident: Vec3, normal: Vec3) -> Vec3:
    """Reflect an incident vector about a normal.

    The normal should be unit length for correct results. The result has the
    same length as the incident vector.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector.
    """
    return incident - 2.0 * dot(incident, normal) * normal


def refract(incoming: Vec3, normal: Vec3, refractivity: float) -> Vec3:
    """Bend a vector through a surface with a single-parameter refraction model.

    The refractivity is a positive delta standing in for a relative index of
    refraction: the ratio is 1 / (1 + refractivity) when the ray enters the
    shape and 1 + refractivity when it leaves. Whether the ray is entering is
    decided by the sign of dot(normal, incoming), with the normal pointing out
    of the shape.

    Args:
        incoming: The arriving direction vector (any length).
        normal: The outward surface normal (any length).
        refractivity: 0 (or less) disables bending, otherwise positive.

    Returns:
        The transmitted direction (unit length), or the reflection of the
        arriving vector across the normal on total internal reflection. When
        refractivity is not positive, ``incoming`` is returned unchanged.
    """
    if refractivity <= 0.0:
        return incoming

    unit_in = normalize(incoming)
    unit_normal = normalize(normal)

    cos_i = -dot(unit_normal, unit_in)
    if cos_i > 0.0:
        # Entering: normal already faces the arriving ray
        ratio = 1.0 / (1.0 + refractivity)
    else:
        # Exiting: work against the inward-facing normal
        unit_normal = -unit_normal
        cos_i = -cos_i
        ratio = 1.0 + refractivity

    radicand = 1.0 - ratio * ratio * (1.0 - cos_i * cos_i)
    if radicand < 0.0:
        # Total internal reflection
        return reflect(unit_in, unit_normal)

    return ratio * unit_in + (ratio * cos_i - math.sqrt(radicand)) * unit_normal
