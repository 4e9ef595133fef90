#
# PROJECT: maze-cli-renderer
# MODULE: maze_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from typing import Optional

from .canvas import Canvas
from .math_utils import ScreenCoordinate


class RegionFillError(Exception):
    """The top/bottom edges handed to fill_region_between_lines are malformed."""


class TopAndBottomDoNotAlign(RegionFillError):
    """The top and bottom edges do not span the same columns."""


class TopIsBelowBottom(RegionFillError):
    """At one of the shared columns the top edge sits below the bottom edge."""


class TriangleFillError(Exception):
    """
    A trapezoid fill failed while splitting a triangle.

    `part` is 1 or 2 for the halves of a general triangle and None when the
    triangle has a vertical side and was filled as a single region.  The
    four corners are the exact arguments that were passed to
    fill_region_between_lines, so the failure can be replayed.
    """

    def __init__(self, part: Optional[int],
                 top_start: ScreenCoordinate, top_end: ScreenCoordinate,
                 bottom_start: ScreenCoordinate, bottom_end: ScreenCoordinate,
                 fill_error: RegionFillError):
        self.part = part
        self.top_start = top_start
        self.top_end = top_end
        self.bottom_start = bottom_start
        self.bottom_end = bottom_end
        self.fill_error = fill_error
        super().__init__(
            f"{type(fill_error).__name__} in triangle part {part}: "
            f"top {top_start}->{top_end}, bottom {bottom_start}->{bottom_end}")


def draw_line(canvas: Canvas, start: ScreenCoordinate, end: ScreenCoordinate,
              fill_char: str):
    """
    Draws a line with a floating-point DDA stepping one column at a time.

    Vertical lines paint only the rows strictly between the two endpoints.
    """
    # Sort the endpoints by column
    if start.col < end.col:
        low, high = start, end
    else:
        low, high = end, start

    col_change = high.col - low.col
    row_change = high.row - low.row

    if col_change == 0:
        top_row = min(low.row, high.row)
        bottom_row = max(low.row, high.row)
        for row in range(top_row + 1, bottom_row):
            canvas.paint(row, low.col, fill_char)
        return

    row_step = 1 if row_change > 0 else -1

    row = low.row
    for idx in range(col_change + 1):
        col = low.col + idx
        canvas.paint(row, col, fill_char)
        if idx == col_change:
            break

        # Run vertically down this column until the next column's row
        next_row = _edge_row(low.row, row_change, idx + 1, col_change)
        while row != next_row:
            canvas.paint(row, col, fill_char)
            row += row_step


def fill_triangle(canvas: Canvas, corner1: ScreenCoordinate,
                  corner2: ScreenCoordinate, corner3: ScreenCoordinate,
                  fill_char: str):
    """
    Fills an arbitrary triangle.

    Degenerate triangles collapse to draw_line.  Otherwise the triangle is
    split at its middle column into at most two trapezoid regions.
    Raises TriangleFillError if a region cannot be filled.
    """
    low, mid, high = sorted((corner1, corner2, corner3), key=lambda c: c.col)

    # ── Collinear shortcuts ─────────────────────────────────────────────
    if low.row == mid.row == high.row:
        draw_line(canvas, low, high, fill_char)
        return
    if low.col == mid.col == high.col:
        rows = (low.row, mid.row, high.row)
        draw_line(canvas,
                  ScreenCoordinate(min(rows), low.col),
                  ScreenCoordinate(max(rows), low.col),
                  fill_char)
        return

    def fill_region(part, top_start, top_end, bottom_start, bottom_end):
        try:
            fill_region_between_lines(canvas, top_start, top_end,
                                      bottom_start, bottom_end, fill_char)
        except RegionFillError as err:
            raise TriangleFillError(part, top_start, top_end,
                                    bottom_start, bottom_end, err) from err

    # ── Vertical left or right side: a single region ────────────────────
    if low.col == mid.col:
        if low.row <= mid.row:
            top_start, bottom_start = low, mid
        else:
            top_start, bottom_start = mid, low
        fill_region(None, top_start, high, bottom_start, high)
        return
    if mid.col == high.col:
        if mid.row <= high.row:
            top_end, bottom_end = mid, high
        else:
            top_end, bottom_end = high, mid
        fill_region(None, low, top_end, low, bottom_end)
        return

    # ── General case ────────────────────────────────────────────────────
    # Point on the long low->high edge directly above/below the mid corner.
    # Multiply before dividing so integer-collinear points land exactly.
    long_rows = high.row - low.row
    long_cols = high.col - low.col
    mid_rowchange = int(long_rows * (mid.col - low.col) / long_cols)
    second_mid = ScreenCoordinate(low.row + mid_rowchange, mid.col)

    if second_mid.row == mid.row:
        draw_line(canvas, low, high, fill_char)
        return

    if second_mid.row <= mid.row:
        upper, lower = second_mid, mid
    else:
        upper, lower = mid, second_mid

    fill_region(1, low, upper, low, lower)
    fill_region(2, upper, high, lower, high)


def fill_region_between_lines(canvas: Canvas,
                              top_start: ScreenCoordinate, top_end: ScreenCoordinate,
                              bottom_start: ScreenCoordinate, bottom_end: ScreenCoordinate,
                              fill_char: str):
    """
    Fills every cell between a top edge and a bottom edge, inclusive.

    Both edges must cover the same column span and the top edge must not be
    below the bottom edge at either end of it.
    Raises TopAndBottomDoNotAlign or TopIsBelowBottom otherwise.
    """
    if top_start.col > top_end.col:
        top_left, top_right = top_end, top_start
    else:
        top_left, top_right = top_start, top_end
    if bottom_start.col > bottom_end.col:
        bottom_left, bottom_right = bottom_end, bottom_start
    else:
        bottom_left, bottom_right = bottom_start, bottom_end

    if top_left.col != bottom_left.col or top_right.col != bottom_right.col:
        raise TopAndBottomDoNotAlign(
            f"top spans cols {top_left.col}..{top_right.col}, "
            f"bottom spans cols {bottom_left.col}..{bottom_right.col}")
    if top_left.row > bottom_left.row or top_right.row > bottom_right.row:
        raise TopIsBelowBottom(
            f"top rows ({top_left.row}, {top_right.row}) below "
            f"bottom rows ({bottom_left.row}, {bottom_right.row})")

    horiz_change = top_right.col - top_left.col
    top_change = top_right.row - top_left.row
    bottom_change = bottom_right.row - bottom_left.row

    for idx in range(horiz_change + 1):
        col = top_left.col + idx
        top_row = _edge_row(top_left.row, top_change, idx, horiz_change)
        bottom_row = _edge_row(bottom_left.row, bottom_change, idx, horiz_change)
        for row in range(top_row, bottom_row + 1):
            canvas.paint(row, col, fill_char)


def _edge_row(start_row: int, row_change: int, idx: int, col_span: int) -> int:
    """
    Row of an edge `idx` columns past its start, truncated toward zero.

    The slope is applied to the whole offset from the start instead of being
    summed column by column, so the last column always lands on the end row.
    """
    if col_span == 0:
        return start_row
    return start_row + int(row_change * idx / col_span)
