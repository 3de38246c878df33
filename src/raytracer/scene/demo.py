"""Demo scene: three colored spheres resting on a huge yellow "floor" sphere.

The scene consists of:
- Red sphere in front (shiny, slightly reflective)
- Blue sphere to the right and green sphere to the left
- A radius-5000 yellow sphere acting as the ground
- Optionally a small glass sphere to show refraction
- Ambient, point and directional lights
- Three cameras: straight ahead, raised, and from the side

Example:
    >>> from raytracer.scene.demo import create_demo_scene
    >>> scene = create_demo_scene()
    >>> len(scene.cameras)
    3
"""

from dataclasses import dataclass

from raytracer.scene.manager import SceneBuilder
from raytracer.scene.scene import Scene


@dataclass
class DemoSceneParams:
    """Parameters for the demo scene.

    Attributes:
        ambient_intensity: Intensity of the ambient light.
        point_intensity: Intensity of the point light.
        directional_intensity: Intensity of the directional light.
        glass_sphere: Whether to add a transparent, refracting sphere.
    """

    ambient_intensity: float = 0.2
    point_intensity: float = 0.6
    directional_intensity: float = 0.2
    glass_sphere: bool = True


def create_demo_builder(params: DemoSceneParams | None = None) -> SceneBuilder:
    """Create a SceneBuilder populated with the demo scene."""
    if params is None:
        params = DemoSceneParams()

    builder = SceneBuilder()

    builder.add_material("red", color="red", specularity=500.0, reflectivity=0.2)
    builder.add_material("blue", color="blue", specularity=500.0, reflectivity=0.3)
    builder.add_material("green", color="green", specularity=10.0, reflectivity=0.3)
    builder.add_material("yellow", color="yellow", specularity=1000.0, reflectivity=0.2)

    builder.add_sphere(center=(0.0, -1.0, 3.0), radius=1.0, material="red")
    builder.add_sphere(center=(2.0, 0.0, 4.0), radius=1.0, material="blue")
    builder.add_sphere(center=(-2.0, 0.0, 4.0), radius=1.0, material="green")
    builder.add_sphere(center=(0.0, -5001.0, 0.0), radius=5000.0, material="yellow")

    if params.glass_sphere:
        builder.add_material(
            "glass",
            color=(230, 230, 255),
            specularity=500.0,
            reflectivity=0.1,
            transparency=0.8,
            refractivity=0.5,
        )
        builder.add_sphere(center=(-1.0, -0.6, 2.0), radius=0.35, material="glass")

    builder.add_ambient_light(params.ambient_intensity)
    builder.add_point_light(params.point_intensity, (2.1, 1.0, 0.0))
    builder.add_directional_light(params.directional_intensity, (1.0, 4.0, 4.0))

    # Camera 0 matches the fixed viewpoint: origin, looking down +z
    builder.add_camera()
    builder.add_look_at_camera(lookfrom=(0.0, 1.5, -1.0), lookat=(0.0, -0.5, 3.5))
    builder.add_look_at_camera(lookfrom=(4.0, 0.5, 0.5), lookat=(0.0, -0.5, 3.5))

    return builder


def create_demo_scene(params: DemoSceneParams | None = None) -> Scene:
    """Create the demo scene.

    Args:
        params: Optional scene parameters. Uses defaults if None.

    Returns:
        The immutable demo Scene.
    """
    return create_demo_builder(params).build()
