"""Rendering configuration.

All tunables the tracer and the render driver depend on live in a single
frozen dataclass that callers construct and pass down explicitly. Module-level
constants hold the defaults.

Example:
    >>> from raytracer.core.config import RenderConfig
    >>> config = RenderConfig(canvas_width=320, canvas_height=240, num_workers=4)
    >>> config.max_depth
    2
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Any, Literal

from raytracer.materials.material import WHITE, Color

# =============================================================================
# Rendering Constants
# =============================================================================

# Maximum recursion depth for reflected/transmitted rays
MAX_DEPTH = 2

# Offset excluding the surface a secondary ray starts from
EPSILON = 1e-3

# Worker threads per render pass
NUM_WORKERS = 8

# Canvas size in pixels
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600

# Viewport plane size and distance from the camera, in world units
VIEWPORT_WIDTH = 1.0
VIEWPORT_HEIGHT = 0.75
VIEWPORT_DEPTH = 0.75

# Primary rays only see geometry beyond the viewport plane
T_MIN_PRIMARY = 1.0
T_MAX = math.inf

# How the lighting intensity is applied at each recursion level:
#   "local":   scales only the surface's own color; recursive contributions
#              arrive already lit by their own level
#   "blended": scales the full local + reflected + transparent blend
LightingMode = Literal["local", "blended"]
LIGHTING_MODES: tuple[str, ...] = ("local", "blended")


@dataclass(frozen=True)
class RenderConfig:
    """Configuration for a render pass.

    Attributes:
        max_depth: Maximum recursion depth for reflection/transmission.
        epsilon: Start offset for secondary and shadow rays.
        num_workers: Number of worker threads spawned per render pass.
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
        viewport_width: Width of the viewport plane in world units.
        viewport_height: Height of the viewport plane in world units.
        viewport_depth: Distance from the camera to the viewport plane.
        t_min_primary: Lower t bound for primary rays.
        background: Color returned for rays that hit nothing.
        lighting: Lighting application mode ("local" or "blended").
    """

    max_depth: int = MAX_DEPTH
    epsilon: float = EPSILON
    num_workers: int = NUM_WORKERS
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    viewport_width: float = VIEWPORT_WIDTH
    viewport_height: float = VIEWPORT_HEIGHT
    viewport_depth: float = VIEWPORT_DEPTH
    t_min_primary: float = T_MIN_PRIMARY
    background: Color = WHITE
    lighting: LightingMode = "local"

    def __post_init__(self) -> None:
        """Validate the configuration.

        Raises:
            ValueError: If any value is out of range.
        """
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")
        if self.epsilon <= 0.0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon}")
        if self.num_workers < 1:
            raise ValueError(f"num_workers must be at least 1, got {self.num_workers}")
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ValueError(
                f"Canvas dimensions must be positive, got "
                f"{self.canvas_width}x{self.canvas_height}"
            )
        if self.viewport_width <= 0.0 or self.viewport_height <= 0.0:
            raise ValueError(
                f"Viewport dimensions must be positive, got "
                f"{self.viewport_width}x{self.viewport_height}"
            )
        if self.viewport_depth <= 0.0:
            raise ValueError(f"viewport_depth must be positive, got {self.viewport_depth}")
        if len(self.background) != 3 or any(not 0 <= c <= 255 for c in self.background):
            raise ValueError(f"background must be an RGB color in [0, 255], got {self.background}")
        if self.lighting not in LIGHTING_MODES:
            raise ValueError(f"Unknown lighting mode: {self.lighting}")

    def with_overrides(self, **overrides: Any) -> RenderConfig:
        """Return a copy with the given non-None fields replaced.

        Convenient for command-line handling where unset options are None.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes)
