"""Camera transform and viewport mapping for primary ray generation.

Canvas pixels are addressed with the origin at the canvas centre, +x to the
right and +y up. Each pixel maps to a point on a viewport plane placed
``depth`` units in front of the camera:

    viewport(x, y) = (x * Vw / Cw, y * Vh / Ch, depth)

The camera is a rigid transform. Its orientation matrix takes the viewport
direction into world space and its position becomes the ray origin. In camera
space +z points forward.

Example:
    >>> from raytracer.camera.viewport import Camera, Viewport
    >>> camera = Camera.look_at(lookfrom=(0, 1, -2), lookat=(0, 0, 3))
    >>> viewport = Viewport(1.0, 0.75, 0.75, canvas_width=800, canvas_height=600)
    >>> ray = viewport.primary_ray(camera, 0, 0)  # Ray through the canvas centre
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt

from raytracer.core.ray import Ray, Vec3, as_vec3, cross, length, normalize, vec3

if TYPE_CHECKING:
    from raytracer.core.config import RenderConfig

Mat3 = npt.NDArray[np.float64]


# =============================================================================
# Camera
# =============================================================================


@dataclass(frozen=True, eq=False)
class Camera:
    """A rigid camera transform.

    Attributes:
        orientation: 3x3 rotation matrix whose columns are the camera's right,
            up and forward axes in world space.
        position: Camera position in world space.
    """

    orientation: Mat3
    position: Vec3

    @classmethod
    def make(
        cls,
        orientation: Sequence[Sequence[float]] | Mat3 | None = None,
        position: Sequence[float] | Vec3 = (0.0, 0.0, 0.0),
    ) -> Camera:
        """Create a camera from an orientation matrix and a position.

        Args:
            orientation: 3x3 matrix (row-major nested sequence). Defaults to
                the identity, looking down +z with +y up.
            position: Camera position.

        Raises:
            ValueError: If the orientation is not a 3x3 matrix.
        """
        if orientation is None:
            matrix = np.eye(3, dtype=np.float64)
        else:
            matrix = np.array(orientation, dtype=np.float64)
        if matrix.shape != (3, 3):
            raise ValueError(f"Camera orientation must be 3x3, got shape {matrix.shape}")
        return cls(orientation=matrix, position=as_vec3(position))

    @classmethod
    def look_at(
        cls,
        lookfrom: Sequence[float],
        lookat: Sequence[float],
        vup: Sequence[float] = (0.0, 1.0, 0.0),
    ) -> Camera:
        """Build a camera from look-at parameters.

        Args:
            lookfrom: Camera position in world space.
            lookat: Point the camera is looking at.
            vup: Up direction used to orient the camera.

        Raises:
            ValueError: If lookfrom equals lookat or vup is parallel to the
                view direction.
        """
        origin = as_vec3(lookfrom)
        forward = as_vec3(lookat) - origin
        if length(forward) == 0.0:
            raise ValueError("lookfrom and lookat must differ")
        forward = normalize(forward)

        right = cross(as_vec3(vup), forward)
        if length(right) < 1e-9:
            raise ValueError("vup must not be parallel to the view direction")
        right = normalize(right)
        up = cross(forward, right)

        orientation = np.column_stack((right, up, forward))
        return cls(orientation=orientation, position=origin)

    def to_world(self, viewport_point: Vec3) -> Ray:
        """Map a viewport-space point to a world-space ray from the camera."""
        return Ray(origin=self.position, direction=self.orientation @ viewport_point)


# =============================================================================
# Viewport
# =============================================================================


@dataclass(frozen=True)
class Viewport:
    """The viewport plane and the canvas it is sampled with.

    Attributes:
        width: Viewport width in world units.
        height: Viewport height in world units.
        depth: Distance from the camera to the viewport plane.
        canvas_width: Canvas width in pixels.
        canvas_height: Canvas height in pixels.
    """

    width: float
    height: float
    depth: float
    canvas_width: int
    canvas_height: int

    @classmethod
    def from_config(cls, config: RenderConfig) -> Viewport:
        """Create the viewport described by a render configuration."""
        return cls(
            width=config.viewport_width,
            height=config.viewport_height,
            depth=config.viewport_depth,
            canvas_width=config.canvas_width,
            canvas_height=config.canvas_height,
        )

    def canvas_to_viewport(self, x: int, y: int) -> Vec3:
        """Convert centred canvas pixel coordinates to a viewport point."""
        return vec3(
            x * self.width / self.canvas_width,
            y * self.height / self.canvas_height,
            self.depth,
        )

    def primary_ray(self, camera: Camera, x: int, y: int) -> Ray:
        """World-space ray from the camera through canvas pixel (x, y)."""
        return camera.to_world(self.canvas_to_viewport(x, y))
