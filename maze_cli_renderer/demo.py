#
# PROJECT: maze-cli-renderer
# MODULE: maze_cli_renderer/demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import logging
import random
import time

from .canvas import CursesCanvas
from .config import RenderConfig
from .controls import ProgramCommand, move_camera
from .maze import Maze, cell_center, create_pillars_for_maze, create_walls_for_maze
from .scene import Scene

logger = logging.getLogger(__name__)


class DemoApp:
    """
    Interactive walk through a generated maze: poll keys, update the camera,
    render a frame, sleep out the rest of the frame period.
    """

    def __init__(self, stdscr, config: RenderConfig):
        self.stdscr = stdscr
        self.config = config
        self.running = True

        # ── Curses setup ────────────────────────────────────────────────
        curses.curs_set(0)
        stdscr.nodelay(True)

        # ── World ───────────────────────────────────────────────────────
        rng = random.Random(config.seed)
        maze = Maze.generate(config.maze_rows, config.maze_cols,
                             config.portal_space, rng)
        pillars = create_pillars_for_maze(maze, config.cell_spacing)
        self.walls = create_walls_for_maze(maze, pillars)
        logger.info("World built: %d pillars, %d walls",
                    sum(len(row) for row in pillars), len(self.walls))

        # ── Camera at the maze entrance ─────────────────────────────────
        start_x, start_y = cell_center(maze.start, config.cell_spacing)
        self.camera = config.make_camera(start_x, start_y)

        # ── Display ─────────────────────────────────────────────────────
        self.canvas = CursesCanvas(stdscr)
        self.scene = Scene.for_canvas(self.canvas,
                                      fill_char=config.fill_char,
                                      outline_char=config.outline_char)
        self.frame_count = 0

    def step(self):
        """Run one frame; returns False once the user asked to quit."""
        self.camera, command = move_camera(self.stdscr, self.camera, self.config.fps)
        if command == ProgramCommand.QUIT:
            return False
        self.scene.render_frame(self.canvas, self.camera, self.walls)
        self.frame_count += 1
        return True

    def run(self):
        period = self.config.frame_period
        while self.running:
            start_time = time.monotonic()
            self.running = self.step()
            elapsed = time.monotonic() - start_time
            if self.running and elapsed < period:
                time.sleep(period - elapsed)
        logger.info("Quit after %d frames", self.frame_count)