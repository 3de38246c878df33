"""Tests for SceneBuilder validation, serialization and scene loading.

Tests cover:
- Material registration and validation
- Primitive, light and camera validation
- Default camera
- Dictionary round trip
- Loading scenes from JSON files
"""

import json

import numpy as np
import pytest


@pytest.fixture
def builder():
    """A builder with one material, one sphere, one plane and three lights."""
    from raytracer.scene.manager import SceneBuilder

    b = SceneBuilder()
    b.add_material("shiny", color=(10, 20, 30), specularity=100.0, reflectivity=0.4)
    b.add_sphere(center=(0.0, 0.0, 3.0), radius=1.0, material="shiny")
    b.add_plane(point=(0.0, -1.0, 0.0), normal=(0.0, 1.0, 0.0), material="shiny")
    b.add_ambient_light(0.2)
    b.add_point_light(0.6, (2.0, 1.0, 0.0))
    b.add_directional_light(0.2, (1.0, 4.0, 4.0))
    return b


class TestMaterials:
    """Tests for material registration."""

    def test_add_and_get(self, builder):
        """Test materials are stored under their names."""
        material = builder.get_material("shiny")
        assert material.color == (10, 20, 30)
        assert material.reflectivity == 0.4

    def test_named_color(self):
        """Test color names resolve to RGB triples."""
        from raytracer.scene.manager import SceneBuilder

        material = SceneBuilder().add_material("m", color="Yellow")
        assert material.color == (255, 255, 0)

    def test_duplicate_name(self, builder):
        """Test registering a name twice raises ValueError."""
        with pytest.raises(ValueError, match="Duplicate"):
            builder.add_material("shiny", color="red")

    def test_unknown_material(self, builder):
        """Test looking up a missing material raises ValueError."""
        with pytest.raises(ValueError, match="Unknown material"):
            builder.get_material("missing")

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"color": "mauve"},
            {"color": (1, 2)},
            {"color": (0, 0, 0), "reflectivity": 0.7, "transparency": 0.7},
        ],
    )
    def test_invalid_material(self, kwargs):
        """Test invalid material parameters raise ValueError."""
        from raytracer.scene.manager import SceneBuilder

        with pytest.raises(ValueError):
            SceneBuilder().add_material("bad", **kwargs)


class TestPrimitivesAndLights:
    """Tests for primitive and light validation."""

    def test_sphere_radius_must_be_positive(self, builder):
        """Test zero or negative radii raise ValueError."""
        with pytest.raises(ValueError):
            builder.add_sphere(center=(0, 0, 0), radius=0.0, material="shiny")

    def test_sphere_needs_known_material(self, builder):
        """Test primitives must reference a registered material."""
        with pytest.raises(ValueError):
            builder.add_sphere(center=(0, 0, 0), radius=1.0, material="missing")

    def test_plane_normal_must_be_non_zero(self, builder):
        """Test zero plane normals raise ValueError."""
        with pytest.raises(ValueError):
            builder.add_plane(point=(0, 0, 0), normal=(0, 0, 0), material="shiny")

    def test_negative_light_intensity(self, builder):
        """Test negative light intensities raise ValueError."""
        with pytest.raises(ValueError):
            builder.add_ambient_light(-0.1)

    def test_zero_directional_light(self, builder):
        """Test directional lights need a direction."""
        with pytest.raises(ValueError):
            builder.add_directional_light(0.5, (0.0, 0.0, 0.0))

    def test_indices(self, builder):
        """Test add methods return sequential indices."""
        assert builder.add_sphere(center=(1, 1, 1), radius=0.5, material="shiny") == 1
        assert builder.add_point_light(0.1, (0, 5, 0)) == 3


class TestBuild:
    """Tests for building immutable scenes."""

    def test_build(self, builder):
        """Test the built scene mirrors the builder contents."""
        from raytracer.scene.lights import LightKind

        scene = builder.build()
        assert len(scene.spheres) == 1
        assert len(scene.planes) == 1
        assert [light.kind for light in scene.lights] == [
            LightKind.AMBIENT,
            LightKind.POINT,
            LightKind.DIRECTIONAL,
        ]
        assert scene.spheres[0].material is scene.materials["shiny"]

    def test_default_camera(self, builder):
        """Test a scene without cameras gets the identity camera at the origin."""
        scene = builder.build()
        assert len(scene.cameras) == 1
        assert np.allclose(scene.cameras[0].orientation, np.eye(3))
        assert np.allclose(scene.cameras[0].position, 0.0)

    def test_builder_changes_do_not_leak(self, builder):
        """Test a built scene is unaffected by later builder changes."""
        scene = builder.build()
        builder.add_sphere(center=(5, 5, 5), radius=1.0, material="shiny")
        builder.add_material("late", color="red")
        assert len(scene.spheres) == 1
        assert "late" not in scene.materials


class TestSerialization:
    """Tests for dictionary and JSON round trips."""

    def test_round_trip(self, builder):
        """Test from_dict(to_dict()) reproduces the builder."""
        from raytracer.scene.manager import SceneBuilder

        builder.add_look_at_camera((0, 1, -1), (0, 0, 3))
        data = builder.to_dict()
        restored = SceneBuilder.from_dict(data)
        assert restored.to_dict() == data

    def test_from_dict_look_at_camera(self):
        """Test camera entries with 'lookat' build look-at cameras."""
        from raytracer.camera.viewport import Camera
        from raytracer.scene.manager import SceneBuilder

        restored = SceneBuilder.from_dict(
            {"cameras": [{"lookfrom": [4, 0.5, 0.5], "lookat": [0, -0.5, 3.5]}]}
        )
        expected = Camera.look_at((4, 0.5, 0.5), (0, -0.5, 3.5))
        assert np.allclose(restored.cameras[0].orientation, expected.orientation)

    @pytest.mark.parametrize(
        "data",
        [
            {"lights": [{"type": "spot", "intensity": 1.0}]},
            {"lights": [{"type": "point", "intensity": 1.0}]},
            {"lights": [{"type": "ambient"}]},
            {"materials": {"m": {"color": "red"}}, "spheres": [{"radius": 1.0}]},
            {"spheres": [{"radius": 1.0, "material": "missing"}]},
        ],
    )
    def test_from_dict_invalid(self, data):
        """Test malformed entries raise ValueError."""
        from raytracer.scene.manager import SceneBuilder

        with pytest.raises(ValueError):
            SceneBuilder.from_dict(data)

    def test_load_scene(self, tmp_path):
        """Test loading a scene from a JSON file."""
        from raytracer.scene.manager import load_scene

        path = tmp_path / "scene.json"
        path.write_text(
            json.dumps(
                {
                    "materials": {
                        "red": {"color": "red", "specularity": 500, "reflectivity": 0.2},
                        "floor": {"color": [200, 200, 200]},
                    },
                    "spheres": [{"center": [0, -1, 3], "radius": 1, "material": "red"}],
                    "planes": [{"point": [0, -2, 0], "normal": [0, 1, 0], "material": "floor"}],
                    "lights": [
                        {"type": "ambient", "intensity": 0.2},
                        {"type": "point", "intensity": 0.6, "position": [2.1, 1, 0]},
                    ],
                    "cameras": [{"position": [0, 0, -1]}],
                }
            ),
            encoding="utf-8",
        )

        scene = load_scene(path)
        assert scene.get_primitive_count() == 2
        assert len(scene.lights) == 2
        assert np.allclose(scene.get_camera(0).position, [0.0, 0.0, -1.0])
        assert scene.materials["floor"].color == (200, 200, 200)

    def test_load_scene_missing_file(self, tmp_path):
        """Test a missing file raises OSError."""
        from raytracer.scene.manager import load_scene

        with pytest.raises(OSError):
            load_scene(tmp_path / "missing.json")
