#
# PROJECT: maze-cli-renderer
# MODULE: maze_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses


class Canvas:
    """
    Character-cell frame buffer.

    The rasterizer only ever talks to a Canvas through paint(); clear() and
    commit() bracket a frame.  The base class keeps the frame in memory and
    commit() is a no-op, which is what the tests and headless callers use.
    """
    __slots__ = ['rows', 'cols', 'grid']

    BLANK = ' '

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Canvas needs a positive size, got {rows}x{cols}")
        self.rows, self.cols = rows, cols
        self.grid = [[self.BLANK] * cols for _ in range(rows)]

    def clear(self):
        for row in self.grid:
            for col in range(self.cols):
                row[col] = self.BLANK

    def paint(self, row: int, col: int, char: str):
        # Near pillars project past the screen edges; those cells are dropped
        if row < 0 or row >= self.rows or col < 0 or col >= self.cols: return
        self.grid[row][col] = char

    def cell(self, row: int, col: int) -> str:
        return self.grid[row][col]

    def lines(self):
        return [''.join(row) for row in self.grid]

    def commit(self):
        pass


class PaintBatch:
    """Paint calls held back until apply(); lets a multi-step fill land all or nothing."""
    __slots__ = ['cells']

    def __init__(self):
        self.cells = []

    def paint(self, row: int, col: int, char: str):
        self.cells.append((row, col, char))

    def apply(self, canvas: Canvas):
        for row, col, char in self.cells:
            canvas.paint(row, col, char)


class CursesCanvas(Canvas):
    """Canvas sized to a curses window that flushes each frame to it."""
    __slots__ = ['stdscr']

    def __init__(self, stdscr):
        th, tw = stdscr.getmaxyx()
        super().__init__(th, tw)
        self.stdscr = stdscr

    def commit(self):
        stdscr = self.stdscr
        stdscr.erase()
        for y, line in enumerate(self.lines()):
            try:
                stdscr.addstr(y, 0, line)
            except curses.error:
                # Writing the bottom-right cell moves the cursor off-screen,
                # which curses reports as an error after drawing the text
                pass
        stdscr.refresh()
