"""Surface material and 8-bit color arithmetic.

A material describes how a surface looks under the local illumination model
and how much of its final color comes from recursively traced rays:

    final = color * (1 - reflectivity - transparency)
          + reflected * reflectivity
          + transmitted * transparency

The weights sum to one only when reflectivity + transparency <= 1. The tracer
does not check this; the scene builder does.

Colors are RGB tuples of ints in [0, 255]. Scaling truncates toward zero and
saturates, and addition saturates, so color arithmetic never leaves the valid
range whatever the inputs.
"""

from __future__ import annotations

from dataclasses import dataclass

# RGB color with integer channels in [0, 255]
Color = tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)
BLUE: Color = (0, 0, 255)
YELLOW: Color = (255, 255, 0)

CHANNEL_MAX = 255


def _clamp_channel(value: float) -> int:
    return min(max(int(value), 0), CHANNEL_MAX)


def scale_color(color: Color, intensity: float) -> Color:
    """Scale each channel by intensity, truncating and saturating.

    Args:
        color: The color to scale.
        intensity: Scale factor. May exceed 1 or be negative.

    Returns:
        The scaled color with every channel clamped to [0, 255].
    """
    return (
        _clamp_channel(color[0] * intensity),
        _clamp_channel(color[1] * intensity),
        _clamp_channel(color[2] * intensity),
    )


def add_colors(*colors: Color) -> Color:
    """Add colors channel-wise, saturating at 255."""
    r = g = b = 0
    for c in colors:
        r += c[0]
        g += c[1]
        b += c[2]
    return (_clamp_channel(r), _clamp_channel(g), _clamp_channel(b))


@dataclass(frozen=True)
class Material:
    """Surface appearance parameters.

    Attributes:
        color: Base RGB color, channels in [0, 255].
        specularity: Highlight exponent. 0 disables specular highlights.
        reflectivity: Weight of the reflected ray in [0, 1].
        transparency: Weight of the transmitted ray in [0, 1].
        refractivity: Bending strength. 0 lets transmitted rays continue
            straight, otherwise a positive index-of-refraction delta.
    """

    color: Color
    specularity: float = 0.0
    reflectivity: float = 0.0
    transparency: float = 0.0
    refractivity: float = 0.0

    @property
    def local_fraction(self) -> float:
        """Weight of the surface's own color in the final blend."""
        return 1.0 - self.reflectivity - self.transparency

    def validate(self) -> None:
        """Check the parameter ranges.

        Raises:
            ValueError: If any parameter is out of range, or if reflectivity
                and transparency sum to more than 1.
        """
        if len(self.color) != 3 or any(not 0 <= c <= CHANNEL_MAX for c in self.color):
            raise ValueError(f"Color channels must be in [0, 255], got {self.color}")
        if self.specularity < 0.0:
            raise ValueError(f"Specularity must be non-negative, got {self.specularity}")
        if not 0.0 <= self.reflectivity <= 1.0:
            raise ValueError(f"Reflectivity must be in [0, 1], got {self.reflectivity}")
        if not 0.0 <= self.transparency <= 1.0:
            raise ValueError(f"Transparency must be in [0, 1], got {self.transparency}")
        if self.refractivity < 0.0:
            raise ValueError(f"Refractivity must be non-negative, got {self.refractivity}")
        if self.reflectivity + self.transparency > 1.0 + 1e-9:
            raise ValueError(
                f"Reflectivity + transparency must be <= 1, got "
                f"{self.reflectivity} + {self.transparency}"
            )
