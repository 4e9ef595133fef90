#
# PROJECT: maze-cli-renderer
# MODULE: maze_cli_renderer/scene.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from .camera import Camera
from .canvas import Canvas, PaintBatch
from .math_utils import ScreenCoordinate, normalize_range
from .rasterizer import TriangleFillError, draw_line, fill_triangle
from .world import Pillar, Wall

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PillarCoords:
    """Screen-space vertical segment a pillar projects to."""
    line_top: ScreenCoordinate
    line_bottom: ScreenCoordinate


@dataclass(frozen=True)
class FrameStats:
    visible_walls: int
    skipped_fills: int


class Scene:
    """
    Composes one frame of the maze view.

    render_frame(canvas, camera, walls) draws a frame to the canvas.  The
    scene keeps nothing between frames apart from the screen extents.
    """

    def __init__(self, screen_rows: int, screen_cols: int,
                 fill_char: str = '.', outline_char: str = '#'):
        if screen_rows <= 0 or screen_cols <= 0:
            raise ValueError(f"Scene needs a positive size, got {screen_rows}x{screen_cols}")
        self.screen_rows = screen_rows
        self.screen_cols = screen_cols
        self.fill_char = fill_char
        self.outline_char = outline_char

    @classmethod
    def for_canvas(cls, canvas: Canvas, **kwargs) -> 'Scene':
        return cls(canvas.rows, canvas.cols, **kwargs)

    def visible_walls_back_to_front(self, camera: Camera, walls: Sequence[Wall]):
        """Cull hidden walls and order the rest farthest first."""
        visible = [wall for wall in walls if camera.can_see_viewable(wall)]
        visible.sort(key=camera.distance_to)
        visible.reverse()
        return visible

    def render_frame(self, canvas: Canvas, camera: Camera,
                     walls: Sequence[Wall]) -> FrameStats:
        """
        Render one frame and commit it to the canvas.

        Pipeline:
          1. Clear the canvas
          2. Drop walls the camera cannot see
          3. Sort by distance, farthest first (painter's algorithm)
          4. Per wall: project both pillars, fill the face, draw the outline
          5. Commit the canvas
        """
        canvas.clear()

        visible = self.visible_walls_back_to_front(camera, walls)
        skipped = 0
        for wall in visible:
            if not self._draw_wall(canvas, camera, wall):
                skipped += 1

        canvas.commit()

        stats = FrameStats(visible_walls=len(visible), skipped_fills=skipped)
        logger.debug("Frame drawn: %d of %d walls visible, %d fills skipped",
                     stats.visible_walls, len(walls), stats.skipped_fills)
        return stats

    def _draw_wall(self, canvas: Canvas, camera: Camera, wall: Wall) -> bool:
        """Draw one wall; returns False if its face fill had to be skipped."""
        coords1 = self.calculate_pillar_coords(camera, wall.pillar1)
        coords2 = self.calculate_pillar_coords(camera, wall.pillar2)

        if coords1.line_top.col <= coords2.line_top.col:
            left, right = coords1, coords2
        else:
            left, right = coords2, coords1

        filled = True
        # Only fill when there is room inside the outline
        if right.line_top.col - left.line_top.col > 2:
            filled = self._fill_face(canvas, wall, left, right)

        outline = self.outline_char
        draw_line(canvas, coords1.line_top, coords1.line_bottom, outline)
        draw_line(canvas, coords2.line_top, coords2.line_bottom, outline)
        draw_line(canvas, coords1.line_top, coords2.line_top, outline)
        draw_line(canvas, coords1.line_bottom, coords2.line_bottom, outline)
        return filled

    def _fill_face(self, canvas: Canvas, wall: Wall,
                   left: PillarCoords, right: PillarCoords) -> bool:
        """
        Fill the face between the outline edges with two triangles.

        The corners are pulled one row toward the interior so the triangle
        edges run parallel to the outline and leave no gap beside it.  The
        pillar columns themselves are repainted by the vertical outline.
        Both triangles are staged first and only land if neither fails.
        """
        top_left = left.line_top.shift(1, 0)
        bottom_left = left.line_bottom.shift(-1, 0)
        top_right = right.line_top.shift(1, 0)
        bottom_right = right.line_bottom.shift(-1, 0)

        batch = PaintBatch()
        try:
            fill_triangle(batch, top_left, bottom_left, top_right, self.fill_char)
            fill_triangle(batch, bottom_left, top_right, bottom_right, self.fill_char)
        except TriangleFillError as err:
            logger.warning("Skipping fill for wall %s -> %s: %s",
                           wall.pillar1, wall.pillar2, err)
            return False
        batch.apply(canvas)
        return True

    def calculate_pillar_coords(self, camera: Camera, pillar: Pillar) -> PillarCoords:
        """
        Project a pillar to a vertical screen segment.

        Height falls off linearly from the full screen at the fill-screen
        distance to nothing at the horizon; the column is proportional to
        the angle off the view centre.
        """
        dist = camera.distance_to(pillar)
        ang = normalize_range(camera.view_angle_from_center(pillar), -math.pi, math.pi)
        half_rows = self.screen_rows // 2
        half_cols = self.screen_cols // 2

        fill_dist = camera.fill_screen_distance
        horizon_rise = half_rows * (
            1.0 - (dist - fill_dist) / (camera.horizon_distance - fill_dist))
        top = int(half_rows - horizon_rise)
        bottom = int(half_rows + horizon_rise)
        column = int((ang / camera.fov_angle) * self.screen_cols + half_cols)

        return PillarCoords(ScreenCoordinate(top, column), ScreenCoordinate(bottom, column))
