"""Preview module for output and visualization.

Components:
    export: PNG export via Pillow
    display: Matplotlib-based static preview
    interactive: Taichi GGUI window with camera switching

Example:
    >>> from raytracer.preview import save_png, show_preview
    >>> save_png(renderer.canvas, "output.png")
    >>> show_preview(renderer.canvas)

For the interactive window:
    >>> from raytracer.preview import InteractivePreview
    >>> preview = InteractivePreview(800, 600)
    >>> preview.run(renderer)
"""

from raytracer.preview.display import show_preview
from raytracer.preview.export import image_to_uint8, save_png, save_png_from_array
from raytracer.preview.interactive import InteractivePreview, has_display, next_camera_index

__all__ = [
    # Interactive preview
    "InteractivePreview",
    "next_camera_index",
    "has_display",
    # Display functions
    "show_preview",
    # Export functions
    "save_png",
    "save_png_from_array",
    "image_to_uint8",
]
