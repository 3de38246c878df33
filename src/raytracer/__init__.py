"""Recursive Whitted-style ray tracer.

Subpackages:
    core: Vector math, configuration, canvas, integrator and render driver
    geometry: Sphere and plane primitives
    materials: Colors and surface materials
    scene: Lights, scene container, intersection and scene building
    camera: Camera placement and viewport mapping
    preview: PNG export, Matplotlib preview and interactive window
"""

__version__ = "0.1.0"
