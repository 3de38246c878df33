"""Command-line entry point: render a scene to a PNG or an interactive window.

Usage:
    raytracer [options]
    python -m raytracer [options]

Options:
    --scene FILE        JSON scene file (default: built-in demo scene)
    --width WIDTH       Canvas width in pixels (default: 800)
    --height HEIGHT     Canvas height in pixels (default: 600)
    --workers N         Worker threads per render pass (default: 8)
    --depth N           Maximum recursion depth (default: 2)
    --camera INDEX      Camera to render from (default: 0)
    --lighting MODE     Lighting mode: local or blended (default: local)
    --output OUTPUT     Output file path (default: render.png)
    --preview           Show the result in a Matplotlib window
    --interactive       Open a Taichi window with camera switching
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    raytracer --width 320 --height 240 --workers 4 --output demo.png
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from raytracer.core.config import LIGHTING_MODES, RenderConfig

if TYPE_CHECKING:
    from raytracer.core.canvas import Canvas


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="raytracer",
        description="Render a scene with the recursive ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene file (default: built-in demo scene)",
    )
    parser.add_argument("--width", type=int, default=None, help="Canvas width in pixels (default: 800)")
    parser.add_argument("--height", type=int, default=None, help="Canvas height in pixels (default: 600)")
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker threads per render pass (default: 8)",
    )
    parser.add_argument("--depth", type=int, default=None, help="Maximum recursion depth (default: 2)")
    parser.add_argument("--camera", type=int, default=0, help="Camera to render from (default: 0)")
    parser.add_argument(
        "--lighting",
        choices=LIGHTING_MODES,
        default=None,
        help="Lighting mode (default: local)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="render.png",
        help="Output file path (default: render.png)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Open an interactive window with camera switching",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RenderConfig:
    """Build the render configuration from parsed arguments."""
    return RenderConfig().with_overrides(
        canvas_width=args.width,
        canvas_height=args.height,
        num_workers=args.workers,
        max_depth=args.depth,
        lighting=args.lighting,
    )


def render_to_file(
    config: RenderConfig,
    output_path: str,
    scene_path: str | None = None,
    camera_index: int = 0,
    quiet: bool = False,
) -> tuple[Path, Canvas]:
    """Render a scene and save it to a file.

    Args:
        config: Render configuration.
        output_path: Output image path (PNG).
        scene_path: JSON scene file, or None for the demo scene.
        camera_index: Camera to render from.
        quiet: If True, suppress progress output.

    Returns:
        Tuple of (path to the saved image file, rendered canvas).
    """
    from raytracer.core.renderer import Renderer
    from raytracer.preview.export import save_png
    from raytracer.scene.demo import create_demo_scene
    from raytracer.scene.manager import load_scene

    scene = load_scene(scene_path) if scene_path else create_demo_scene()

    if not quiet:
        print(
            f"Rendering {config.canvas_width}x{config.canvas_height} from camera "
            f"{camera_index} with {config.num_workers} workers..."
        )

    renderer = Renderer(scene, config)
    stats = renderer.render(camera_index)

    output_file = Path(output_path)
    save_png(renderer.canvas, output_file)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {stats.elapsed:.2f}s")

    return output_file, renderer.canvas


def run_interactive(config: RenderConfig, scene_path: str | None, camera_index: int) -> None:
    """Open the interactive window (requires a display)."""
    import taichi as ti

    # Use GPU if available, fall back to CPU
    try:
        ti.init(arch=ti.gpu)
    except Exception:
        ti.init(arch=ti.cpu)

    from raytracer.core.renderer import Renderer
    from raytracer.preview.interactive import InteractivePreview, has_display
    from raytracer.scene.demo import create_demo_scene
    from raytracer.scene.manager import load_scene

    if not has_display():
        raise RuntimeError("No display available for the interactive window")

    scene = load_scene(scene_path) if scene_path else create_demo_scene()
    renderer = Renderer(scene, config)
    preview = InteractivePreview(config.canvas_width, config.canvas_height)
    preview.run(renderer, camera_index)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = build_config(args)
        if args.interactive:
            run_interactive(config, args.scene, args.camera)
            return 0

        output_file, canvas = render_to_file(
            config,
            output_path=args.output,
            scene_path=args.scene,
            camera_index=args.camera,
            quiet=args.quiet,
        )
        if args.preview:
            from raytracer.preview.display import show_preview

            show_preview(canvas, title=str(output_file))
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
