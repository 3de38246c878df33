"""Light sources for the local illumination model.

Three kinds of light are supported:
    - Ambient: constant intensity added everywhere, never occluded
    - Point: radiates from a position; occluders must lie between the
      surface and the light
    - Directional: arrives from a fixed direction at infinite distance

Intensities are unitless scale factors. A well-lit scene typically has its
intensities summing to about 1.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from raytracer.core.ray import Vec3, as_vec3


class LightKind(Enum):
    """Enumeration of supported light types."""

    AMBIENT = "ambient"
    POINT = "point"
    DIRECTIONAL = "directional"


@dataclass(frozen=True, eq=False)
class Light:
    """A light source.

    Use the make_* constructors rather than building instances directly.

    Attributes:
        kind: The light type.
        intensity: Light intensity.
        position: Light position (point lights only).
        direction: Direction toward the light (directional lights only).
    """

    kind: LightKind
    intensity: float
    position: Vec3 = field(default_factory=lambda: np.zeros(3))
    direction: Vec3 = field(default_factory=lambda: np.zeros(3))

    @classmethod
    def make_ambient(cls, intensity: float) -> Light:
        """Create an ambient light."""
        return cls(kind=LightKind.AMBIENT, intensity=intensity)

    @classmethod
    def make_point(cls, intensity: float, position: Sequence[float] | Vec3) -> Light:
        """Create a point light at a world-space position."""
        return cls(kind=LightKind.POINT, intensity=intensity, position=as_vec3(position))

    @classmethod
    def make_directional(cls, intensity: float, direction: Sequence[float] | Vec3) -> Light:
        """Create a directional light.

        Args:
            intensity: Light intensity.
            direction: Vector pointing from the surface toward the light.
        """
        return cls(kind=LightKind.DIRECTIONAL, intensity=intensity, direction=as_vec3(direction))
