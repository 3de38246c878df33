"""Pixel canvas the render driver draws into.

The canvas exposes a single drawing primitive, put_pixel(x, y, color), with
the origin at the centre of the canvas, +x to the right and +y up. Pixels are
stored in a (height, width, 3) uint8 NumPy array in standard image order (row
0 at the top), ready for display or export.

Odd sizes are supported. Column x maps to index x + width // 2, so valid x
values are range(-(width // 2), width - width // 2), and likewise for y.

Writes to distinct pixels touch distinct array elements, so worker threads
filling disjoint column ranges need no locking.
"""

from __future__ import annotations

import numpy as np
import numpy.typing as npt

from raytracer.materials.material import BLACK, Color


class Canvas:
    """A fixed-size RGB framebuffer addressed from its centre.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
    """

    def __init__(self, width: int, height: int, color: Color = BLACK) -> None:
        """Create a canvas filled with a color.

        Args:
            width: Canvas width in pixels.
            height: Canvas height in pixels.
            color: Initial fill color (default black).

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels: npt.NDArray[np.uint8] = np.empty((height, width, 3), dtype=np.uint8)
        self.clear(color)

    @property
    def width(self) -> int:
        """Get the canvas width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the canvas height."""
        return self._height

    @property
    def x_range(self) -> range:
        """Valid centred x coordinates."""
        start = -(self._width // 2)
        return range(start, start + self._width)

    @property
    def y_range(self) -> range:
        """Valid centred y coordinates."""
        start = -(self._height // 2)
        return range(start, start + self._height)

    def _index(self, x: int, y: int) -> tuple[int, int]:
        col = x + self._width // 2
        row = self._height - 1 - (y + self._height // 2)
        if not (0 <= col < self._width and 0 <= row < self._height):
            raise ValueError(
                f"Pixel ({x}, {y}) outside {self._width}x{self._height} canvas"
            )
        return row, col

    def put_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the pixel at centred coordinates (x, y).

        Raises:
            ValueError: If the coordinates fall outside the canvas.
        """
        row, col = self._index(x, y)
        self._pixels[row, col] = color

    def get_pixel(self, x: int, y: int) -> Color:
        """Get the pixel at centred coordinates (x, y)."""
        row, col = self._index(x, y)
        r, g, b = self._pixels[row, col]
        return (int(r), int(g), int(b))

    def clear(self, color: Color = BLACK) -> None:
        """Fill the whole canvas with a color."""
        self._pixels[:, :] = color

    def to_numpy(self) -> npt.NDArray[np.uint8]:
        """Get a copy of the pixels as a (height, width, 3) uint8 array."""
        return self._pixels.copy()

    def to_float_image(self) -> npt.NDArray[np.float32]:
        """Get the pixels as a (height, width, 3) float32 array in [0, 1]."""
        return self._pixels.astype(np.float32) / 255.0

    def __repr__(self) -> str:
        """Return a string representation of the canvas."""
        return f"Canvas(width={self._width}, height={self._height})"
