"""Test configuration.

Pytest sometimes runs with the current working directory set to ``tests/``.
Make sure the project root (and thus the ``maze_cli_renderer`` package) is
importable, and provide a canvas that records every paint call.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from maze_cli_renderer.canvas import Canvas  # noqa: E402


class RecordingCanvas(Canvas):
    __slots__ = ['ops', 'clears', 'commits']

    def __init__(self, rows: int, cols: int):
        super().__init__(rows, cols)
        self.ops = []
        self.clears = 0
        self.commits = 0

    def paint(self, row: int, col: int, char: str):
        self.ops.append((row, col, char))
        super().paint(row, col, char)

    def clear(self):
        self.clears += 1
        super().clear()

    def commit(self):
        self.commits += 1

    def painted(self) -> set[tuple[int, int]]:
        return {(row, col) for row, col, _ in self.ops}


@pytest.fixture
def make_canvas():
    return RecordingCanvas
