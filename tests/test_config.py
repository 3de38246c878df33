"""Tests for render configuration and color arithmetic."""

import dataclasses

import pytest


class TestRenderConfig:
    """Tests for RenderConfig."""

    def test_defaults(self):
        """Test the default configuration."""
        from raytracer.core.config import RenderConfig

        config = RenderConfig()
        assert config.max_depth == 2
        assert config.epsilon == 1e-3
        assert config.num_workers == 8
        assert (config.canvas_width, config.canvas_height) == (800, 600)
        assert (config.viewport_width, config.viewport_height, config.viewport_depth) == (
            1.0,
            0.75,
            0.75,
        )
        assert config.t_min_primary == 1.0
        assert config.background == (255, 255, 255)
        assert config.lighting == "local"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"max_depth": -1},
            {"epsilon": 0.0},
            {"num_workers": 0},
            {"canvas_width": 0},
            {"viewport_height": -1.0},
            {"viewport_depth": 0.0},
            {"background": (256, 0, 0)},
            {"lighting": "global"},
        ],
    )
    def test_invalid_values(self, overrides):
        """Test out-of-range values raise ValueError."""
        from raytracer.core.config import RenderConfig

        with pytest.raises(ValueError):
            RenderConfig(**overrides)

    def test_with_overrides_skips_none(self):
        """Test None values leave fields untouched."""
        from raytracer.core.config import RenderConfig

        config = RenderConfig().with_overrides(canvas_width=320, canvas_height=None, lighting="blended")
        assert config.canvas_width == 320
        assert config.canvas_height == 600
        assert config.lighting == "blended"

    def test_with_overrides_validates(self):
        """Test overrides go through validation."""
        from raytracer.core.config import RenderConfig

        with pytest.raises(ValueError):
            RenderConfig().with_overrides(num_workers=0)

    def test_frozen(self):
        """Test the configuration is immutable."""
        from raytracer.core.config import RenderConfig

        with pytest.raises(dataclasses.FrozenInstanceError):
            RenderConfig().max_depth = 5


class TestColorArithmetic:
    """Tests for saturating color helpers."""

    def test_scale_truncates(self):
        """Test scaling truncates toward zero."""
        from raytracer.materials.material import scale_color

        assert scale_color((255, 100, 3), 0.5) == (127, 50, 1)

    def test_scale_saturates(self):
        """Test scaling clamps to [0, 255]."""
        from raytracer.materials.material import scale_color

        assert scale_color((200, 10, 0), 2.0) == (255, 20, 0)
        assert scale_color((200, 10, 0), -1.0) == (0, 0, 0)

    def test_add_saturates(self):
        """Test addition clamps each channel at 255."""
        from raytracer.materials.material import add_colors

        assert add_colors((200, 100, 0), (100, 100, 5), (0, 0, 5)) == (255, 200, 10)
        assert add_colors() == (0, 0, 0)


class TestMaterial:
    """Tests for Material validation."""

    def test_local_fraction(self):
        """Test the surface color weight is what reflection and transmission leave."""
        from raytracer.materials.material import RED, Material

        material = Material(color=RED, reflectivity=0.25, transparency=0.5)
        assert material.local_fraction == pytest.approx(0.25)

    @pytest.mark.parametrize(
        "params",
        [
            {"color": (0, 0, 300)},
            {"color": (0, 0, 0), "specularity": -1.0},
            {"color": (0, 0, 0), "reflectivity": 1.5},
            {"color": (0, 0, 0), "transparency": -0.1},
            {"color": (0, 0, 0), "refractivity": -0.5},
            {"color": (0, 0, 0), "reflectivity": 0.6, "transparency": 0.6},
        ],
    )
    def test_validate_rejects(self, params):
        """Test invalid material parameters raise ValueError."""
        from raytracer.materials.material import Material

        with pytest.raises(ValueError):
            Material(**params).validate()
