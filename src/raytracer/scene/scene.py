"""Immutable scene container.

A Scene bundles every primitive, light, camera and named material needed for
rendering. It is built once (see scene.manager.SceneBuilder), handed to the
render driver, and only ever read afterwards, so worker threads can share it
without locking.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from raytracer.camera.viewport import Camera
from raytracer.geometry.plane import Plane
from raytracer.geometry.shape import Shape
from raytracer.geometry.sphere import Sphere
from raytracer.materials.material import Material
from raytracer.scene.lights import Light


@dataclass(frozen=True, eq=False)
class Scene:
    """Read-only collection of scene objects.

    Attributes:
        spheres: All spheres in the scene.
        planes: All planes in the scene.
        lights: All light sources.
        cameras: Available cameras; index 0 is the default. An empty tuple
            is replaced by the identity camera at the origin looking down +z.
        materials: Named materials the primitives were built from.
    """

    spheres: tuple[Sphere, ...] = ()
    planes: tuple[Plane, ...] = ()
    lights: tuple[Light, ...] = ()
    cameras: tuple[Camera, ...] = ()
    materials: Mapping[str, Material] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        # Freeze the material table without copying the caller's mapping twice
        if not isinstance(self.materials, MappingProxyType):
            object.__setattr__(self, "materials", MappingProxyType(dict(self.materials)))
        if not self.cameras:
            object.__setattr__(self, "cameras", (Camera.make(),))

    def shapes(self) -> Iterator[Shape]:
        """Iterate over every primitive across all shape collections."""
        yield from self.spheres
        yield from self.planes

    def get_camera(self, index: int = 0) -> Camera:
        """Get a camera by index.

        Raises:
            ValueError: If the index is out of range.
        """
        if not 0 <= index < len(self.cameras):
            raise ValueError(
                f"Camera index {index} out of range (scene has {len(self.cameras)} cameras)"
            )
        return self.cameras[index]

    def get_primitive_count(self) -> int:
        """Get the total number of primitives in the scene."""
        return len(self.spheres) + len(self.planes)
