#
# PROJECT: maze-cli-renderer
# MODULE: maze_cli_renderer/maze.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

"""Maze generation and translation of a maze into pillars and walls."""

import logging
import random
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Tuple

from .world import Pillar, Wall

logger = logging.getLogger(__name__)


class MazeParameterError(ValueError):
    def __init__(self, param: str, value: int):
        self.param = param
        self.value = value
        super().__init__(f"Maze parameter '{param}' must be positive, got {value}")


class MazeTooSmallError(ValueError):
    def __init__(self, rows: int, cols: int, portal_space: int):
        self.rows = rows
        self.cols = cols
        self.portal_space = portal_space
        super().__init__(
            f"A {rows}x{cols} maze cannot place portals {portal_space} cells apart")


@dataclass(frozen=True)
class MazeCoordinate:
    """Zero-based (row, col) of a maze cell."""
    row: int
    col: int

    def manhattan_to(self, other: 'MazeCoordinate') -> int:
        return abs(other.row - self.row) + abs(other.col - self.col)


class MazeWall:
    """Undirected edge between two neighbouring cells; order does not matter."""
    __slots__ = ('coord1', 'coord2')

    def __init__(self, coord1: MazeCoordinate, coord2: MazeCoordinate):
        self.coord1 = coord1
        self.coord2 = coord2

    def _key(self):
        return frozenset((self.coord1, self.coord2))

    def __eq__(self, other):
        if isinstance(other, MazeWall):
            return self._key() == other._key()
        return NotImplemented

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return f"MazeWall({self.coord1}, {self.coord2})"


class Maze:
    """A rows x cols grid of cells with the set of walls left standing between them."""

    def __init__(self, rows: int, cols: int, start: MazeCoordinate,
                 finish: MazeCoordinate, wall_edges: FrozenSet[MazeWall]):
        self.rows = rows
        self.cols = cols
        self.start = start
        self.finish = finish
        self.wall_edges = wall_edges

    def has_wall(self, coord1: MazeCoordinate, coord2: MazeCoordinate) -> bool:
        return MazeWall(coord1, coord2) in self.wall_edges

    @classmethod
    def generate(cls, rows: int, cols: int, portal_space: int,
                 rng: Optional[random.Random] = None) -> 'Maze':
        """
        Build a perfect maze by randomized depth-first search.

        Every interior edge starts as a wall; carving removes one wall per
        newly visited cell so every cell is reachable from every other.
        The start and finish cells are at least portal_space apart.
        """
        for param, value in (('rows', rows), ('cols', cols), ('portal_space', portal_space)):
            if value <= 0:
                raise MazeParameterError(param, value)
        # The largest possible Manhattan distance is rows + cols - 2
        if rows + cols - 2 < portal_space:
            raise MazeTooSmallError(rows, cols, portal_space)

        rng = rng or random.Random()
        walls = set(_initial_walls(rows, cols))

        origin = MazeCoordinate(0, 0)
        visited = {origin}
        stack = [origin]
        while stack:
            cell = stack[-1]
            neighbours = [n for n in _neighbours(cell, rows, cols) if n not in visited]
            if neighbours:
                nxt = rng.choice(neighbours)
                walls.discard(MazeWall(cell, nxt))
                visited.add(nxt)
                stack.append(nxt)
            else:
                stack.pop()

        start, finish = _select_portals(rows, cols, portal_space, rng)
        logger.info("Generated %dx%d maze with %d interior walls, start %s finish %s",
                    rows, cols, len(walls), start, finish)
        return cls(rows, cols, start, finish, frozenset(walls))


def _initial_walls(rows: int, cols: int):
    for row in range(rows):
        for col in range(cols):
            here = MazeCoordinate(row, col)
            if col + 1 < cols:
                yield MazeWall(here, MazeCoordinate(row, col + 1))
            if row + 1 < rows:
                yield MazeWall(here, MazeCoordinate(row + 1, col))


def _neighbours(cell: MazeCoordinate, rows: int, cols: int) -> List[MazeCoordinate]:
    out = []
    for d_row, d_col in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        row, col = cell.row + d_row, cell.col + d_col
        if 0 <= row < rows and 0 <= col < cols:
            out.append(MazeCoordinate(row, col))
    return out


def _select_portals(rows: int, cols: int, portal_space: int,
                    rng: random.Random) -> Tuple[MazeCoordinate, MazeCoordinate]:
    while True:
        point1 = MazeCoordinate(rng.randrange(rows), rng.randrange(cols))
        point2 = MazeCoordinate(rng.randrange(rows), rng.randrange(cols))
        if point1.manhattan_to(point2) >= portal_space:
            return point1, point2


# ── World translation ──────────────────────────────────────────────────────

def create_pillars_for_maze(maze: Maze, spacing: float = 4.0) -> List[List[Pillar]]:
    """Pillar grid at every cell corner, indexed [row][col]."""
    return [
        [Pillar(col * spacing, row * spacing) for col in range(maze.cols + 1)]
        for row in range(maze.rows + 1)
    ]


def create_walls_for_maze(maze: Maze, pillars: List[List[Pillar]]) -> List[Wall]:
    walls = []
    rows, cols = maze.rows, maze.cols

    # Outer boundary
    for col in range(cols):
        walls.append(Wall(pillars[0][col], pillars[0][col + 1]))
        walls.append(Wall(pillars[rows][col], pillars[rows][col + 1]))
    for row in range(rows):
        walls.append(Wall(pillars[row][0], pillars[row + 1][0]))
        walls.append(Wall(pillars[row][cols], pillars[row + 1][cols]))

    # Interior walls still standing between neighbouring cells
    for row in range(rows):
        for col in range(cols):
            here = MazeCoordinate(row, col)
            if maze.has_wall(here, MazeCoordinate(row, col + 1)):
                walls.append(Wall(pillars[row][col + 1], pillars[row + 1][col + 1]))
            if maze.has_wall(here, MazeCoordinate(row + 1, col)):
                walls.append(Wall(pillars[row + 1][col], pillars[row + 1][col + 1]))

    return walls


def cell_center(coord: MazeCoordinate, spacing: float = 4.0) -> Tuple[float, float]:
    """World (x, y) of the middle of a cell."""
    return (coord.col + 0.5) * spacing, (coord.row + 0.5) * spacing
