"""Tests for the preview module.

This module tests the preview/export, preview/display and
preview/interactive functionality including:
- Image conversion to 8-bit
- PNG export
- Camera switching keys
- Interactive display field updates

Note: Tests avoid opening actual windows. The interactive preview creates
its window lazily, so everything except the event loop can run headless.
"""

import numpy as np
import pytest
import taichi as ti
from PIL import Image as PILImage


class TestImageToUint8:
    """Test conversion of images to 8-bit."""

    def test_float_image_scaled_and_clamped(self):
        """Test float images in [0, 1] map to [0, 255] with clamping."""
        from raytracer.preview.export import image_to_uint8

        image = np.array([[[0.0, 0.5, 2.0]]], dtype=np.float32)
        result = image_to_uint8(image)
        assert result.dtype == np.uint8
        assert result.tolist() == [[[0, 127, 255]]]

    def test_uint8_passes_through(self):
        """Test 8-bit images are returned unchanged."""
        from raytracer.preview.export import image_to_uint8

        image = np.full((2, 2, 3), 7, dtype=np.uint8)
        assert image_to_uint8(image) is image

    def test_wrong_shape(self):
        """Test non-RGB arrays raise ValueError."""
        from raytracer.preview.export import image_to_uint8

        with pytest.raises(ValueError):
            image_to_uint8(np.zeros((4, 4), dtype=np.float32))


class TestSavePng:
    """Test PNG export."""

    def test_save_canvas(self, tmp_path):
        """Test a saved canvas reloads with identical pixels."""
        from raytracer.core.canvas import Canvas
        from raytracer.preview.export import save_png

        canvas = Canvas(4, 3, color=(10, 20, 30))
        canvas.put_pixel(-2, 1, (255, 0, 0))
        path = tmp_path / "out.png"
        save_png(canvas, path)

        with PILImage.open(path) as img:
            assert img.size == (4, 3)
            assert img.mode == "RGB"
            assert np.array_equal(np.array(img), canvas.to_numpy())

    def test_save_float_array(self, tmp_path):
        """Test saving a float array."""
        from raytracer.preview.export import save_png_from_array

        path = tmp_path / "gray.png"
        save_png_from_array(np.full((2, 5, 3), 0.5, dtype=np.float32), str(path))

        with PILImage.open(path) as img:
            assert img.size == (5, 2)
            assert np.all(np.array(img) == 127)


class TestShowPreview:
    """Test the Matplotlib preview without blocking."""

    def test_show_preview_non_blocking(self):
        """Test a figure is created with the canvas image."""
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        from raytracer.core.canvas import Canvas
        from raytracer.preview.display import show_preview

        show_preview(Canvas(4, 3), title="test", block=False)
        fig = plt.gcf()
        assert fig.axes[0].get_title() == "test"
        plt.close("all")


class TestNextCameraIndex:
    """Test camera switching key handling."""

    def test_arrows_wrap(self):
        """Test left/right arrows cycle through cameras."""
        from raytracer.preview.interactive import next_camera_index

        assert next_camera_index(0, ti.ui.RIGHT, 3) == 1
        assert next_camera_index(2, ti.ui.RIGHT, 3) == 0
        assert next_camera_index(0, ti.ui.LEFT, 3) == 2

    def test_digits_select_directly(self):
        """Test number keys pick cameras counting from 1."""
        from raytracer.preview.interactive import next_camera_index

        assert next_camera_index(0, "3", 3) == 2
        assert next_camera_index(0, "1", 3) is None
        assert next_camera_index(0, "4", 3) is None
        assert next_camera_index(0, "0", 3) is None

    def test_single_camera(self):
        """Test no switching when the scene has one camera."""
        from raytracer.preview.interactive import next_camera_index

        assert next_camera_index(0, ti.ui.RIGHT, 1) is None

    def test_other_keys(self):
        """Test unrelated keys are ignored."""
        from raytracer.preview.interactive import next_camera_index

        assert next_camera_index(0, "a", 3) is None


class TestInteractivePreview:
    """Test the interactive preview without opening a window."""

    def test_display_field_shape(self):
        """Test the frame field uses (width, height) indexing."""
        from raytracer.preview.interactive import InteractivePreview

        preview = InteractivePreview(6, 4)
        assert preview.frame.shape == (6, 4)
        assert preview.camera_index == 0

    def test_load_frame_orientation(self):
        """Test the top image row lands at the top (highest y) of the field."""
        from raytracer.preview.interactive import InteractivePreview

        preview = InteractivePreview(3, 2)
        image = np.zeros((2, 3, 3), dtype=np.float32)
        image[0, :] = (1.0, 0.0, 0.0)
        preview.load_frame(image)

        field = preview.frame.to_numpy()
        assert field.shape == (3, 2, 3)
        assert np.allclose(field[:, 1], (1.0, 0.0, 0.0))
        assert np.allclose(field[:, 0], 0.0)

    def test_load_frame_wrong_shape(self):
        """Test a mismatched image raises ValueError."""
        from raytracer.preview.interactive import InteractivePreview

        preview = InteractivePreview(3, 2)
        with pytest.raises(ValueError):
            preview.load_frame(np.zeros((3, 2, 3), dtype=np.float32))

    def test_handle_key_switches_camera(self, tiny_config):
        """Test arrow and number keys re-render from another camera."""
        from raytracer.core.renderer import Renderer
        from raytracer.preview.interactive import InteractivePreview
        from raytracer.scene.demo import create_demo_scene

        renderer = Renderer(create_demo_scene(), tiny_config)
        preview = InteractivePreview(tiny_config.canvas_width, tiny_config.canvas_height)

        preview.handle_key(renderer, ti.ui.RIGHT)
        assert preview.camera_index == 1
        expected = np.flipud(renderer.canvas.to_float_image()).transpose(1, 0, 2)
        assert np.allclose(preview.frame.to_numpy(), expected)

        preview.handle_key(renderer, "3")
        assert preview.camera_index == 2

        preview.handle_key(renderer, "9")
        assert preview.camera_index == 2

    def test_handle_key_export(self, tiny_config, tmp_path, monkeypatch):
        """Test the 's' key exports the current frame to a PNG."""
        from raytracer.core.renderer import Renderer
        from raytracer.preview.interactive import InteractivePreview
        from raytracer.scene.demo import create_demo_scene

        monkeypatch.chdir(tmp_path)
        renderer = Renderer(create_demo_scene(), tiny_config)
        preview = InteractivePreview(tiny_config.canvas_width, tiny_config.canvas_height)
        preview.select_camera(renderer, 0)

        preview.handle_key(renderer, "s")
        assert len(list(tmp_path.glob("render_camera0_*.png"))) == 1

    def test_escape_without_window(self):
        """Test closing before the window exists is harmless."""
        from raytracer.preview.interactive import InteractivePreview

        preview = InteractivePreview(3, 2)
        preview.handle_key(None, ti.ui.ESCAPE)

    def test_has_display_follows_environment(self, monkeypatch):
        """Test display detection on Linux-like hosts."""
        import raytracer.preview.interactive as interactive

        monkeypatch.setattr(interactive.os, "name", "posix")
        monkeypatch.setattr(interactive.platform, "system", lambda: "Linux")
        monkeypatch.delenv("DISPLAY", raising=False)
        monkeypatch.delenv("WAYLAND_DISPLAY", raising=False)
        assert not interactive.has_display()

        monkeypatch.setenv("WAYLAND_DISPLAY", "wayland-0")
        assert interactive.has_display()
