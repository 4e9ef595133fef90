#
# PROJECT: maze-cli-renderer
# MODULE: maze_cli_renderer/math_utils.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math

TWO_PI = 2.0 * math.pi


def normalize_range(angle: float, start: float, end: float) -> float:
    """
    Wrap an angle into the half-open interval [start, end).

    Already-normalized values come back unchanged and `end` itself wraps to
    `start`, so the function is safe to apply repeatedly.
    """
    width = end - start
    if width <= 0:
        raise ValueError(f"Empty angle range [{start}, {end})")
    if start <= angle < end:
        return angle

    wrapped = (angle - start) % width
    # A tiny negative offset can round up to exactly `width`
    if wrapped >= width:
        wrapped -= width
    result = wrapped + start
    # Adding `start` back can round up to `end` as well
    return start if result >= end else result


class ScreenCoordinate:
    """Immutable (row, col) cell position on the character grid."""
    __slots__ = ('row', 'col')

    def __init__(self, row: int, col: int):
        object.__setattr__(self, 'row', int(row))
        object.__setattr__(self, 'col', int(col))

    def __setattr__(self, name, value):
        raise AttributeError("ScreenCoordinate is immutable")

    def __repr__(self):
        return f"ScreenCoordinate(row={self.row}, col={self.col})"

    def __eq__(self, other):
        if isinstance(other, ScreenCoordinate):
            return self.row == other.row and self.col == other.col
        return NotImplemented

    def __hash__(self):
        return hash((self.row, self.col))

    def __iter__(self):
        yield self.row
        yield self.col

    def shift(self, d_row: int, d_col: int) -> 'ScreenCoordinate':
        """Return a copy translated by (d_row, d_col)."""
        return ScreenCoordinate(self.row + d_row, self.col + d_col)
