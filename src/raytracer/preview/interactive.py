"""Interactive preview window using Taichi GGUI.

The window shows the last completed render pass and lets the user switch
between the scene's cameras. Switching triggers a full, blocking render pass
before the new frame is shown; partially rendered frames are never shown.

Controls:
    Left / Right    previous / next camera
    1-9             jump to camera N
    s               export the current frame to a timestamped PNG
    Escape          close the window

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from raytracer.core.renderer import Renderer
    >>> from raytracer.preview.interactive import InteractivePreview
    >>>
    >>> renderer = Renderer(scene, config)
    >>> preview = InteractivePreview(config.canvas_width, config.canvas_height)
    >>> preview.run(renderer)
"""

from __future__ import annotations

import logging
import os
import platform
from datetime import datetime
from typing import TYPE_CHECKING

import numpy as np
import taichi as ti

if TYPE_CHECKING:
    import numpy.typing as npt

    from raytracer.core.canvas import Canvas
    from raytracer.core.renderer import Renderer

logger = logging.getLogger(__name__)


def next_camera_index(current: int, key: str, camera_count: int) -> int | None:
    """Work out which camera a key press selects.

    Args:
        current: The active camera index.
        key: The pressed key as reported by Taichi GGUI.
        camera_count: Number of cameras in the scene.

    Returns:
        The new camera index, or None if the key does not change the camera.
    """
    if camera_count <= 1:
        return None
    if key == ti.ui.LEFT:
        return (current - 1) % camera_count
    if key == ti.ui.RIGHT:
        return (current + 1) % camera_count
    if len(key) == 1 and key.isdigit():
        index = int(key) - 1
        if 0 <= index < camera_count and index != current:
            return index
    return None


def has_display() -> bool:
    """Best-effort check for a desktop session that can open a window."""
    if os.name == "nt":
        return True
    if platform.system() == "Darwin":
        # Local sessions always have one; SSH sessions need X forwarding
        return "SSH_CONNECTION" not in os.environ or "DISPLAY" in os.environ
    return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))


class InteractivePreview:
    """Window that shows finished render passes and switches cameras on key presses.

    Attributes:
        width: Frame width in pixels.
        height: Frame height in pixels.
        title: Window title.
        frame: RGB float field in Taichi (x, y) order, shown by the window.
    """

    def __init__(self, width: int, height: int, *, title: str = "Raytracer View") -> None:
        """Allocate the frame field. The GGUI window opens on first use.

        Note:
            Taichi must be initialized first. Deferring the window lets the
            preview load frames and handle keys in headless environments.
        """
        self.width = width
        self.height = height
        self.title = title
        self.frame: ti.MatrixField = ti.Vector.field(3, dtype=ti.f32, shape=(width, height))
        self._camera_index = 0
        self._gui: ti.ui.Window | None = None

    @property
    def gui(self) -> ti.ui.Window:
        """The GGUI window, opened on first access."""
        if self._gui is None:
            self._gui = ti.ui.Window(name=self.title, res=(self.width, self.height), vsync=True)
        return self._gui

    @property
    def camera_index(self) -> int:
        """Index of the camera currently shown."""
        return self._camera_index

    def load_frame(self, pixels: npt.NDArray[np.float32]) -> None:
        """Copy an image into the frame field.

        Args:
            pixels: Array of shape (height, width, 3) with values in [0, 1].

        Raises:
            ValueError: If the array is not (height, width, 3).
        """
        if pixels.shape != (self.height, self.width, 3):
            raise ValueError(f"Frame must be ({self.height}, {self.width}, 3), got {pixels.shape}")
        # Image rows run top-down, field y runs bottom-up
        columns = np.flipud(pixels).swapaxes(0, 1)
        self.frame.from_numpy(np.ascontiguousarray(columns, dtype=np.float32))

    def load_canvas(self, canvas: Canvas) -> None:
        """Copy a rendered canvas into the frame field."""
        self.load_frame(canvas.to_float_image())

    def select_camera(self, renderer: Renderer, index: int) -> None:
        """Render a full pass from a camera and load it as the current frame."""
        self._camera_index = index
        renderer.render(index)
        self.load_canvas(renderer.canvas)

    def handle_key(self, renderer: Renderer, key: str) -> None:
        """React to a key press."""
        if key == ti.ui.ESCAPE:
            self.close()
        elif key == "s":
            self.export_frame(renderer)
        else:
            index = next_camera_index(self._camera_index, key, len(renderer.scene.cameras))
            if index is not None:
                logger.info("Switching to camera %d", index)
                self.select_camera(renderer, index)

    def run(self, renderer: Renderer, camera_index: int = 0) -> None:
        """Render the first frame and process key presses until the window closes.

        Args:
            renderer: The renderer to drive. Its canvas size must match the
                frame size.
            camera_index: The camera to start from.
        """
        gui = self.gui
        surface = gui.get_canvas()
        self.select_camera(renderer, camera_index)

        while gui.running:
            for event in gui.get_events(ti.ui.PRESS):
                self.handle_key(renderer, event.key)
            if not gui.running:
                break
            surface.set_image(self.frame)
            gui.show()

    def close(self) -> None:
        """Stop the event loop; a window that never opened is left alone."""
        if self._gui is not None:
            self._gui.running = False

    def export_frame(self, renderer: Renderer) -> str:
        """Save the renderer's canvas as render_camera<N>_<timestamp>.png.

        Returns:
            The file name written, relative to the working directory.
        """
        from raytracer.preview.export import save_png

        filename = f"render_camera{self._camera_index}_{datetime.now():%Y%m%d_%H%M%S}.png"
        save_png(renderer.canvas, filename)
        logger.info("Exported %s", filename)
        return filename
