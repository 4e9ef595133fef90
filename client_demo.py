#!/usr/bin/env python3
#
# PROJECT: maze-cli-renderer
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import argparse
import sys
import os

# Ensure local package is importable
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from maze_cli_renderer.config import RenderConfig, configure_logging
from maze_cli_renderer.demo import DemoApp


def parse_args(argv=None):
    epilog = """\
controls:
  W / Up       walk forward        S / Down     walk backward
  A / Left     turn left           D / Right    turn right
  Q / Esc      quit

examples:
  %(prog)s                                  8x8 maze, detected glyphs
  %(prog)s --rows 12 --cols 20 --seed 7     Larger, reproducible maze
  %(prog)s --ascii --fov 70                 ASCII glyphs, narrower view
  %(prog)s --log-file maze.log --log-level DEBUG
"""
    parser = argparse.ArgumentParser(
        description="First-person terminal maze renderer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--rows", type=int, default=8,
                        help="Maze rows in cells (default: 8)")
    parser.add_argument("--cols", type=int, default=8,
                        help="Maze columns in cells (default: 8)")
    parser.add_argument("--portal-space", type=int, default=6,
                        help="Minimum Manhattan distance from start to finish (default: 6)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for maze generation")
    parser.add_argument("--fov", type=float, default=90.0,
                        help="Horizontal field of view in degrees (default: 90)")
    parser.add_argument("--fill-distance", type=float, default=1.0,
                        help="Distance at which a wall fills the screen height (default: 1.0)")
    parser.add_argument("--horizon", type=float, default=60.0,
                        help="Distance beyond which nothing is drawn (default: 60.0)")
    parser.add_argument("--fps", type=float, default=30.0,
                        help="Target frame rate (default: 30)")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII glyphs even on UTF-8 terminals")
    parser.add_argument("--log-file", default=None,
                        help="Write log records to this file")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Log level for --log-file (default: INFO)")
    return parser.parse_args(argv)


def build_config(args) -> RenderConfig:
    """Terminal-detected defaults overridden by CLI flags."""
    config = RenderConfig() if args.ascii else RenderConfig.detect_terminal()
    config.maze_rows = args.rows
    config.maze_cols = args.cols
    config.portal_space = args.portal_space
    config.seed = args.seed
    config.fov_degrees = args.fov
    config.fill_screen_distance = args.fill_distance
    config.horizon_distance = args.horizon
    config.fps = args.fps
    config.log_file = args.log_file
    config.log_level = args.log_level
    config.validate()
    return config


def main(stdscr, config):
    app = DemoApp(stdscr, config)
    app.run()


def cli(argv=None):
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    configure_logging(config)

    try:
        curses.wrapper(lambda s: main(s, config))
    except KeyboardInterrupt:
        pass
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(cli())
