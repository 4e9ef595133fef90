#
# PROJECT: maze-cli-renderer
# MODULE: maze_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from .math_utils import TWO_PI, ScreenCoordinate, normalize_range
from .config import RenderConfig, configure_logging
from .canvas import Canvas, CursesCanvas, PaintBatch
from .rasterizer import (
    RegionFillError, TopAndBottomDoNotAlign, TopIsBelowBottom, TriangleFillError,
    draw_line, fill_triangle, fill_region_between_lines,
)
from .world import Pillar, Wall
from .camera import Camera
from .scene import Scene, FrameStats, PillarCoords
from .maze import Maze, MazeCoordinate, MazeWall, create_pillars_for_maze, create_walls_for_maze
