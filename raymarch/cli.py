"""
Command-line entry point: pick a resolution and renderer, then run the host.
"""

import argparse
import logging

from .app import RENDERERS, App
from .config import DEFAULT_RESOLUTION, FPS, RESOLUTIONS, Settings
from .errors import RaymarchError

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Ray-marched pseudo-3D walk through a grid map."
    )
    parser.add_argument(
        "--resolution",
        choices=sorted(RESOLUTIONS),
        default=DEFAULT_RESOLUTION,
        help="window size preset (default: %(default)s)",
    )
    parser.add_argument(
        "--renderer",
        choices=RENDERERS,
        default="surface",
        help="pygame surface drawing or OpenGL (default: %(default)s)",
    )
    parser.add_argument("--fps", type=int, default=FPS, help="frame rate cap")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        settings = Settings.from_resolution(args.resolution, fps=args.fps)
        App(settings, renderer=args.renderer).run()
    except RaymarchError as exc:
        logger.error("fatal: %s", exc)
        return 1
    return 0
