"""Parallel render driver.

The canvas is split into contiguous column segments, one per worker thread.
Every worker walks the pixels of its own columns, builds the primary ray
through the active camera, traces it and writes the color to the canvas.
Segments never overlap, so the workers share the canvas and the read-only
scene without any locking.

A render pass is synchronous: render() spawns a fresh pool of workers, waits
for all of them, and only then returns. Passes never overlap.

Example:
    >>> from raytracer.core.config import RenderConfig
    >>> from raytracer.core.renderer import Renderer
    >>> from raytracer.scene.demo import create_demo_scene
    >>>
    >>> renderer = Renderer(create_demo_scene(), RenderConfig(num_workers=4))
    >>> stats = renderer.render(camera_index=0)
    >>> image = renderer.canvas.to_numpy()
"""

from __future__ import annotations

import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from raytracer.camera.viewport import Camera, Viewport
from raytracer.core.canvas import Canvas
from raytracer.core.config import T_MAX, RenderConfig
from raytracer.core.integrator import trace
from raytracer.scene.scene import Scene

logger = logging.getLogger(__name__)


def partition_columns(width: int, num_workers: int) -> list[range]:
    """Split the centred column range into one contiguous segment per worker.

    Segments cover range(-(width // 2), width - width // 2) exactly once.
    Every segment is width // num_workers columns wide, except the last one,
    which also takes the remainder.

    Args:
        width: Canvas width in pixels.
        num_workers: Number of segments.

    Returns:
        A list of num_workers ranges, in left-to-right order. Some may be
        empty when there are more workers than columns.

    Raises:
        ValueError: If width is negative or num_workers is less than 1.
    """
    if num_workers < 1:
        raise ValueError(f"num_workers must be at least 1, got {num_workers}")
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")

    start = -(width // 2)
    end = start + width
    step = width // num_workers

    segments = [range(start + i * step, start + (i + 1) * step) for i in range(num_workers - 1)]
    segments.append(range(start + (num_workers - 1) * step, end))
    return segments


@dataclass(frozen=True)
class RenderStats:
    """Summary of a completed render pass.

    Attributes:
        camera_index: Index of the camera that was rendered.
        pixels: Number of pixels traced.
        workers: Number of worker threads used.
        elapsed: Wall-clock duration in seconds.
    """

    camera_index: int
    pixels: int
    workers: int
    elapsed: float


class Renderer:
    """Renders a scene into a canvas with a pool of worker threads.

    The renderer holds the scene for its whole lifetime and never mutates
    it. Each call to render() is a complete, blocking pass.

    Attributes:
        scene: The scene being rendered.
        config: The render configuration.
        canvas: The canvas the passes draw into.
        viewport: Canvas-to-viewport mapping derived from the configuration.
    """

    def __init__(
        self,
        scene: Scene,
        config: RenderConfig | None = None,
        canvas: Canvas | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            scene: The scene to render.
            config: Render configuration. Uses defaults if None.
            canvas: Target canvas. A new canvas sized from the configuration
                is created if None.

        Raises:
            ValueError: If the canvas size does not match the configuration.
        """
        self.scene = scene
        self.config = config if config is not None else RenderConfig()
        if canvas is None:
            canvas = Canvas(self.config.canvas_width, self.config.canvas_height)
        elif (canvas.width, canvas.height) != (self.config.canvas_width, self.config.canvas_height):
            raise ValueError(
                f"Canvas size {canvas.width}x{canvas.height} doesn't match configured "
                f"{self.config.canvas_width}x{self.config.canvas_height}"
            )
        self.canvas = canvas
        self.viewport = Viewport.from_config(self.config)
        self._pass_lock = threading.Lock()

    def render(self, camera_index: int = 0) -> RenderStats:
        """Run one full render pass from the given camera.

        Blocks until every worker has finished. An exception raised in any
        worker is re-raised here once all workers have stopped.

        Args:
            camera_index: Index of the scene camera to render from.

        Returns:
            Statistics for the completed pass.

        Raises:
            ValueError: If the camera index is out of range.
        """
        camera = self.scene.get_camera(camera_index)
        segments = partition_columns(self.canvas.width, self.config.num_workers)

        with self._pass_lock:
            start_time = time.perf_counter()
            with ThreadPoolExecutor(
                max_workers=len(segments), thread_name_prefix="render"
            ) as executor:
                futures = [
                    executor.submit(self._render_columns, camera, columns) for columns in segments
                ]
            for future in futures:
                future.result()
            elapsed = time.perf_counter() - start_time

        stats = RenderStats(
            camera_index=camera_index,
            pixels=self.canvas.width * self.canvas.height,
            workers=len(segments),
            elapsed=elapsed,
        )
        logger.info(
            "Rendered %dx%d from camera %d with %d workers in %.2fs",
            self.canvas.width,
            self.canvas.height,
            camera_index,
            stats.workers,
            elapsed,
        )
        return stats

    def _render_columns(self, camera: Camera, columns: range) -> None:
        """Trace every pixel in a column segment."""
        config = self.config
        for x in columns:
            for y in self.canvas.y_range:
                ray = self.viewport.primary_ray(camera, x, y)
                color = trace(
                    self.scene,
                    ray,
                    config.t_min_primary,
                    T_MAX,
                    config.max_depth,
                    config,
                )
                self.canvas.put_pixel(x, y, color)

    def __repr__(self) -> str:
        """Return a string representation of the renderer state."""
        return (
            f"Renderer(width={self.canvas.width}, height={self.canvas.height}, "
            f"workers={self.config.num_workers})"
        )


def render_scene(
    scene: Scene,
    config: RenderConfig | None = None,
    camera_index: int = 0,
) -> Canvas:
    """Render a scene once and return the filled canvas."""
    renderer = Renderer(scene, config)
    renderer.render(camera_index)
    return renderer.canvas
