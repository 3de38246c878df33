"""Camera module for primary ray generation.

Components:
    viewport: Rigid camera transform, look-at construction, and the
        canvas-to-viewport mapping that turns pixels into world rays

Example:
    >>> from raytracer.camera import Camera, Viewport
    >>> camera = Camera.make()  # Identity orientation at the origin
"""

from raytracer.camera.viewport import Camera, Viewport

__all__ = [
    "Camera",
    "Viewport",
]
