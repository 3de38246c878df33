"""Materials module for surface appearance.

Components:
    material: Material parameters and saturating 8-bit color arithmetic
"""

from raytracer.materials.material import (
    BLACK,
    BLUE,
    GREEN,
    RED,
    WHITE,
    YELLOW,
    Color,
    Material,
    add_colors,
    scale_color,
)

__all__ = [
    "Material",
    "Color",
    "scale_color",
    "add_colors",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
]
