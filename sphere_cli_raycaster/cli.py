#
# PROJECT: sphere-cli-raycaster
# MODULE: sphere_cli_raycaster/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

import argparse
import curses
import logging
import math
import sys

from .color import parse_palette
from .config import MODES, RenderConfig
from .demo import main as demo_main
from .errors import RaycasterError
from .logging_config import hold_console, setup_logging
from .math_utils import Vec3

logger = logging.getLogger(__name__)


def _vec3(text):
    try:
        return Vec3.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))

def _palette(text):
    try:
        return parse_palette(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(argv=None):
    """CLI argument parser."""
    epilog = """\
examples:
  %(prog)s                                      Bouncing spheres for 10 seconds
  %(prog)s --mode rotate                        Spin the scene around the Y axis
  %(prog)s --nearest-hit                        Front-most surface wins
  %(prog)s --width 120 --height 40 --focal 0.01 Bigger picture, narrower fan
  %(prog)s --palette FF8800,00FFFF,FF0044       Custom sphere colors
  %(prog)s --mono --duration 30                 Glyphs instead of colors
  %(prog)s --log-level DEBUG --log-file run.log Per-frame timings to a file
"""
    parser = argparse.ArgumentParser(
        prog="sphere-cli-raycaster",
        description="Ray-cast bouncing spheres in the terminal",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--width", type=int, default=80,
                        help="Window columns including the border (default: 80)")
    parser.add_argument("--height", type=int, default=24,
                        help="Window lines including the border (default: 24)")
    parser.add_argument("--focal", type=float, default=0.015,
                        help="Focal factor, larger spreads rays wider (default: 0.015)")
    parser.add_argument("--camera", type=_vec3, default=Vec3(0.0, 0.0, -50.0),
                        help="Camera position as X,Y,Z (default: 0,0,-50)")
    parser.add_argument("--aspect", type=float, default=2.0,
                        help="Vertical stretch for tall terminal cells (default: 2.0)")
    parser.add_argument("--step", type=float, default=0.1,
                        help="Seconds between frames (default: 0.1)")
    parser.add_argument("--duration", type=float, default=10.0,
                        help="Seconds to run (default: 10)")
    parser.add_argument("--mode", choices=MODES, default="bounce",
                        help="bounce: simulate collisions, rotate: spin the scene (default: bounce)")
    parser.add_argument("--rotation", type=float, default=math.pi / 20.0,
                        help="Radians per frame in rotate mode (default: pi/20)")
    parser.add_argument("--nearest-hit", action="store_true",
                        help="Draw the nearest surface instead of the farthest")
    parser.add_argument("--mono", action="store_true",
                        help="Draw glyphs instead of colored cells")
    parser.add_argument("--palette", type=_palette, default=None,
                        help="Sphere colors in hex, comma separated (RRGGBB,...)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file instead of stderr")
    return parser.parse_args(argv)


def build_config(args) -> RenderConfig:
    """RenderConfig from terminal detection + CLI overrides."""
    config = RenderConfig.detect_terminal(
        width=args.width,
        height=args.height,
        focal=args.focal,
        camera=args.camera,
        aspect=args.aspect,
        step_time=args.step,
        duration=args.duration,
        mode=args.mode,
        rotation=args.rotation,
        hit_policy="nearest" if args.nearest_hit else "farthest",
        palette=args.palette,
    )
    if args.mono:
        config.use_color = False
    return config


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    try:
        with hold_console():
            curses.wrapper(lambda s: demo_main(s, config))
    except KeyboardInterrupt:
        return 0
    except RaycasterError as e:
        logger.debug("exiting: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except MemoryError:
        logger.debug("exiting: picture allocation failed")
        print("Error: could not allocate the picture buffer", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
