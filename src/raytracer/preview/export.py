"""Image export utilities for rendered canvases.

Supported formats:
    - PNG (8-bit RGB via Pillow); any other extension Pillow recognizes also
      works, since the format is picked from the file name

Example:
    >>> from raytracer.preview.export import save_png
    >>> save_png(renderer.canvas, "output.png")
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

if TYPE_CHECKING:
    from raytracer.core.canvas import Canvas


def image_to_uint8(image: npt.NDArray[np.floating] | npt.NDArray[np.uint8]) -> npt.NDArray[np.uint8]:
    """Convert an image to 8-bit.

    Float images are taken to be in [0, 1] and are clamped; uint8 images are
    returned unchanged.

    Args:
        image: Image array of shape (H, W, 3).

    Returns:
        8-bit image array of shape (H, W, 3).

    Raises:
        ValueError: If the array is not (H, W, 3).
    """
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected image of shape (H, W, 3), got {image.shape}")
    if image.dtype == np.uint8:
        return image
    return (np.clip(image, 0.0, 1.0) * 255).astype(np.uint8)


def save_png_from_array(
    image: npt.NDArray[np.floating] | npt.NDArray[np.uint8],
    filepath: str | Path,
) -> None:
    """Save an image array (uint8, or float in [0, 1]) to a file."""
    pil_image = PILImage.fromarray(image_to_uint8(image), mode="RGB")
    pil_image.save(filepath)


def save_png(canvas: Canvas, filepath: str | Path) -> None:
    """Save a canvas to a PNG file.

    Args:
        canvas: The rendered canvas.
        filepath: Output file path (should end in .png).
    """
    save_png_from_array(canvas.to_numpy(), filepath)
