"""Scene builder coordinating materials, primitives, lights and cameras.

The tracer treats a Scene as an immutable value and never validates it. This
module is where scenes are put together and checked. SceneBuilder accumulates
named materials, spheres, planes, lights and cameras, validates each as it is
added, and produces the frozen Scene with build().

Scenes can also be described as plain dictionaries (for JSON files):

    {
        "materials": {
            "red": {"color": [255, 0, 0], "specularity": 500, "reflectivity": 0.2}
        },
        "spheres": [{"center": [0, -1, 3], "radius": 1, "material": "red"}],
        "planes": [{"point": [0, -1, 0], "normal": [0, 1, 0], "material": "red"}],
        "lights": [
            {"type": "ambient", "intensity": 0.2},
            {"type": "point", "intensity": 0.6, "position": [2, 1, 0]},
            {"type": "directional", "intensity": 0.2, "direction": [1, 4, 4]}
        ],
        "cameras": [
            {"orientation": [[1, 0, 0], [0, 1, 0], [0, 0, 1]], "position": [0, 0, 0]},
            {"lookfrom": [0, 2, -3], "lookat": [0, 0, 3]}
        ]
    }

Example:
    >>> from raytracer.scene.manager import SceneBuilder
    >>> builder = SceneBuilder()
    >>> builder.add_material("red", color=(255, 0, 0), specularity=500, reflectivity=0.2)
    >>> builder.add_sphere(center=(0, -1, 3), radius=1.0, material="red")
    >>> builder.add_ambient_light(0.2)
    >>> builder.add_camera()
    >>> scene = builder.build()
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from raytracer.camera.viewport import Camera
from raytracer.core.ray import as_vec3, length
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.materials.material import (
    BLACK,
    BLUE,
    GREEN,
    RED,
    WHITE,
    YELLOW,
    Color,
    Material,
)
from raytracer.scene.lights import Light, LightKind
from raytracer.scene.scene import Scene

logger = logging.getLogger(__name__)

NAMED_COLORS: dict[str, Color] = {
    "black": BLACK,
    "white": WHITE,
    "red": RED,
    "green": GREEN,
    "blue": BLUE,
    "yellow": YELLOW,
}


def parse_color(value: Sequence[int] | str) -> Color:
    """Parse a color given as a name or three channel values.

    Raises:
        ValueError: If the name is unknown or the value is not three channels.
    """
    if isinstance(value, str):
        try:
            return NAMED_COLORS[value.lower()]
        except KeyError:
            raise ValueError(f"Unknown color name: {value}") from None
    if len(value) != 3:
        raise ValueError(f"Color must have 3 channels, got {len(value)}")
    return (int(value[0]), int(value[1]), int(value[2]))


@dataclass
class SphereInfo:
    """Information about a sphere in the scene.

    Attributes:
        center: The center of the sphere.
        radius: The radius of the sphere.
        material: Name of the material assigned to the sphere.
    """

    center: tuple[float, float, float]
    radius: float
    material: str


@dataclass
class PlaneInfo:
    """Information about a plane in the scene.

    Attributes:
        point: A point on the plane.
        normal: The plane normal.
        material: Name of the material assigned to the plane.
    """

    point: tuple[float, float, float]
    normal: tuple[float, float, float]
    material: str


def _triple(value: Sequence[float]) -> tuple[float, float, float]:
    v = as_vec3(value)
    return (float(v[0]), float(v[1]), float(v[2]))


class SceneBuilder:
    """Builder that validates scene contents and produces an immutable Scene.

    Attributes:
        materials: Registered materials by name, in insertion order.
        spheres: SphereInfo for every sphere added.
        planes: PlaneInfo for every plane added.
        lights: Lights added so far.
        cameras: Cameras added so far.
    """

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self.materials: dict[str, Material] = {}
        self.spheres: list[SphereInfo] = []
        self.planes: list[PlaneInfo] = []
        self.lights: list[Light] = []
        self.cameras: list[Camera] = []

    # =========================================================================
    # Material Management
    # =========================================================================

    def add_material(
        self,
        name: str,
        color: Sequence[int] | str,
        specularity: float = 0.0,
        reflectivity: float = 0.0,
        transparency: float = 0.0,
        refractivity: float = 0.0,
    ) -> Material:
        """Register a named material.

        Args:
            name: Unique material name.
            color: RGB channels in [0, 255] or a color name.
            specularity: Highlight exponent (0 disables).
            reflectivity: Reflected ray weight in [0, 1].
            transparency: Transmitted ray weight in [0, 1].
            refractivity: Refraction strength (0 disables bending).

        Returns:
            The validated Material.

        Raises:
            ValueError: If the name is taken or any parameter is invalid.
        """
        if name in self.materials:
            raise ValueError(f"Duplicate material name: {name}")
        material = Material(
            color=parse_color(color),
            specularity=float(specularity),
            reflectivity=float(reflectivity),
            transparency=float(transparency),
            refractivity=float(refractivity),
        )
        material.validate()
        self.materials[name] = material
        return material

    def get_material(self, name: str) -> Material:
        """Look up a registered material.

        Raises:
            ValueError: If no material has that name.
        """
        try:
            return self.materials[name]
        except KeyError:
            raise ValueError(f"Unknown material: {name}") from None

    # =========================================================================
    # Primitive Management
    # =========================================================================

    def add_sphere(
        self,
        center: Sequence[float],
        radius: float,
        material: str,
    ) -> int:
        """Add a sphere.

        Args:
            center: The center point as (x, y, z).
            radius: The radius (must be positive).
            material: Name of a registered material.

        Returns:
            The index of the added sphere.

        Raises:
            ValueError: If the radius is not positive or the material is unknown.
        """
        if radius <= 0.0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        self.get_material(material)
        self.spheres.append(SphereInfo(center=_triple(center), radius=float(radius), material=material))
        return len(self.spheres) - 1

    def add_plane(
        self,
        point: Sequence[float],
        normal: Sequence[float],
        material: str,
    ) -> int:
        """Add an infinite plane.

        Args:
            point: Any point on the plane.
            normal: The plane normal (non-zero).
            material: Name of a registered material.

        Returns:
            The index of the added plane.

        Raises:
            ValueError: If the normal is zero-length or the material is unknown.
        """
        if length(as_vec3(normal)) == 0.0:
            raise ValueError("Plane normal must be non-zero")
        self.get_material(material)
        self.planes.append(PlaneInfo(point=_triple(point), normal=_triple(normal), material=material))
        return len(self.planes) - 1

    # =========================================================================
    # Lights and Cameras
    # =========================================================================

    def add_light(self, light: Light) -> int:
        """Add a light source.

        Raises:
            ValueError: If the intensity is negative or a directional light
                has a zero direction.
        """
        if light.intensity < 0.0:
            raise ValueError(f"Light intensity must be non-negative, got {light.intensity}")
        if light.kind is LightKind.DIRECTIONAL and length(light.direction) == 0.0:
            raise ValueError("Directional light direction must be non-zero")
        self.lights.append(light)
        return len(self.lights) - 1

    def add_ambient_light(self, intensity: float) -> int:
        """Add an ambient light."""
        return self.add_light(Light.make_ambient(intensity))

    def add_point_light(self, intensity: float, position: Sequence[float]) -> int:
        """Add a point light."""
        return self.add_light(Light.make_point(intensity, position))

    def add_directional_light(self, intensity: float, direction: Sequence[float]) -> int:
        """Add a directional light."""
        return self.add_light(Light.make_directional(intensity, direction))

    def add_camera(
        self,
        orientation: Sequence[Sequence[float]] | None = None,
        position: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> int:
        """Add a camera from an orientation matrix and position.

        Returns:
            The camera index.
        """
        self.cameras.append(Camera.make(orientation, position))
        return len(self.cameras) - 1

    def add_look_at_camera(
        self,
        lookfrom: Sequence[float],
        lookat: Sequence[float],
        vup: Sequence[float] = (0.0, 1.0, 0.0),
    ) -> int:
        """Add a camera from look-at parameters.

        Returns:
            The camera index.
        """
        self.cameras.append(Camera.look_at(lookfrom, lookat, vup))
        return len(self.cameras) - 1

    # =========================================================================
    # Build
    # =========================================================================

    def build(self) -> Scene:
        """Produce the immutable Scene."""
        scene = Scene(
            spheres=tuple(
                Sphere(
                    center=as_vec3(info.center),
                    radius=info.radius,
                    material=self.materials[info.material],
                )
                for info in self.spheres
            ),
            planes=tuple(
                Plane(
                    point=as_vec3(info.point),
                    normal_vector=as_vec3(info.normal),
                    material=self.materials[info.material],
                )
                for info in self.planes
            ),
            lights=tuple(self.lights),
            cameras=tuple(self.cameras),
            materials=self.materials,
        )
        logger.debug(
            "Built scene: %d spheres, %d planes, %d lights, %d cameras",
            len(scene.spheres),
            len(scene.planes),
            len(scene.lights),
            len(scene.cameras),
        )
        return scene

    # =========================================================================
    # Scene Serialization
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Export the builder contents to a dictionary (for JSON serialization)."""
        return {
            "materials": {
                name: {
                    "color": list(mat.color),
                    "specularity": mat.specularity,
                    "reflectivity": mat.reflectivity,
                    "transparency": mat.transparency,
                    "refractivity": mat.refractivity,
                }
                for name, mat in self.materials.items()
            },
            "spheres": [
                {"center": list(s.center), "radius": s.radius, "material": s.material}
                for s in self.spheres
            ],
            "planes": [
                {"point": list(p.point), "normal": list(p.normal), "material": p.material}
                for p in self.planes
            ],
            "lights": [_light_to_dict(light) for light in self.lights],
            "cameras": [
                {
                    "orientation": camera.orientation.tolist(),
                    "position": camera.position.tolist(),
                }
                for camera in self.cameras
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SceneBuilder:
        """Load builder contents from a dictionary.

        Args:
            data: Dictionary with optional 'materials', 'spheres', 'planes',
                'lights' and 'cameras' keys.

        Raises:
            ValueError: If the data contains invalid entries.
        """
        builder = cls()

        # Materials first (needed for primitives)
        for name, params in data.get("materials", {}).items():
            builder.add_material(
                name,
                color=params.get("color", [255, 255, 255]),
                specularity=params.get("specularity", 0.0),
                reflectivity=params.get("reflectivity", 0.0),
                transparency=params.get("transparency", 0.0),
                refractivity=params.get("refractivity", 0.0),
            )

        for sphere in data.get("spheres", []):
            builder.add_sphere(
                center=sphere.get("center", [0.0, 0.0, 0.0]),
                radius=sphere.get("radius", 1.0),
                material=_require(sphere, "material", "sphere"),
            )

        for plane in data.get("planes", []):
            builder.add_plane(
                point=plane.get("point", [0.0, 0.0, 0.0]),
                normal=plane.get("normal", [0.0, 1.0, 0.0]),
                material=_require(plane, "material", "plane"),
            )

        for light in data.get("lights", []):
            builder.add_light(_light_from_dict(light))

        for camera in data.get("cameras", []):
            if "lookat" in camera:
                builder.add_look_at_camera(
                    lookfrom=camera.get("lookfrom", [0.0, 0.0, 0.0]),
                    lookat=camera["lookat"],
                    vup=camera.get("vup", [0.0, 1.0, 0.0]),
                )
            else:
                builder.add_camera(
                    orientation=camera.get("orientation"),
                    position=camera.get("position", [0.0, 0.0, 0.0]),
                )

        return builder


def _require(entry: dict[str, Any], key: str, what: str) -> Any:
    if key not in entry:
        raise ValueError(f"Missing '{key}' in {what} entry: {entry}")
    return entry[key]


def _light_to_dict(light: Light) -> dict[str, Any]:
    result: dict[str, Any] = {"type": light.kind.value, "intensity": light.intensity}
    if light.kind is LightKind.POINT:
        result["position"] = light.position.tolist()
    elif light.kind is LightKind.DIRECTIONAL:
        result["direction"] = light.direction.tolist()
    return result


def _light_from_dict(entry: dict[str, Any]) -> Light:
    light_type = str(entry.get("type", "")).lower()
    intensity = float(_require(entry, "intensity", "light"))
    if light_type == LightKind.AMBIENT.value:
        return Light.make_ambient(intensity)
    if light_type == LightKind.POINT.value:
        return Light.make_point(intensity, _require(entry, "position", "point light"))
    if light_type == LightKind.DIRECTIONAL.value:
        return Light.make_directional(intensity, _require(entry, "direction", "directional light"))
    raise ValueError(f"Unknown light type: {light_type}")


def load_scene(path: str | Path) -> Scene:
    """Load and build a scene from a JSON file.

    Raises:
        ValueError: If the file contents describe an invalid scene.
        OSError: If the file cannot be read.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    logger.info("Loading scene from %s", path)
    return SceneBuilder.from_dict(data).build()
