"""Allow running the renderer with ``python -m raytracer``."""

import sys

from raytracer.cli import main

sys.exit(main())
