#
# PROJECT: maze-cli-renderer
# MODULE: maze_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import logging
import math
import os
from dataclasses import dataclass
from typing import Optional

from .camera import Camera

PACKAGE_LOGGER = 'maze_cli_renderer'


@dataclass
class RenderConfig:
    """Configuration for the maze view, its camera and the frame loop."""
    fps: float = 30.0
    fov_degrees: float = 90.0
    fill_screen_distance: float = 1.0
    horizon_distance: float = 60.0
    fill_char: str = '.'
    outline_char: str = '#'
    maze_rows: int = 8
    maze_cols: int = 8
    portal_space: int = 6
    cell_spacing: float = 4.0
    seed: Optional[int] = None
    log_file: Optional[str] = None
    log_level: str = 'INFO'

    def __post_init__(self):
        self.validate()

    def validate(self):
        """Raise ValueError if the settings cannot drive a camera or a frame loop."""
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        if not 0 < self.fov_degrees < 360:
            raise ValueError(f"fov_degrees must be in (0, 360), got {self.fov_degrees}")
        if not 0 < self.fill_screen_distance < self.horizon_distance:
            raise ValueError(
                "Expected 0 < fill_screen_distance < horizon_distance, got "
                f"{self.fill_screen_distance} and {self.horizon_distance}")
        if len(self.fill_char) != 1 or len(self.outline_char) != 1:
            raise ValueError("fill_char and outline_char must be single characters")
        if self.fill_char == self.outline_char:
            raise ValueError("fill_char and outline_char must differ")

    @property
    def frame_period(self) -> float:
        return 1.0 / self.fps

    def make_camera(self, x: float = 0.0, y: float = 0.0,
                    facing_direction: float = 0.0) -> Camera:
        return Camera(
            x=x, y=y,
            facing_direction=facing_direction,
            fov_angle=math.radians(self.fov_degrees),
            fill_screen_distance=self.fill_screen_distance,
            horizon_distance=self.horizon_distance,
        )

    @classmethod
    def detect_terminal(cls) -> 'RenderConfig':
        """
        Autodetect terminal capabilities and return a default config.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        # Linux console fonts often lack block glyphs, so stay ASCII there
        if supports_utf8 and not is_linux_console:
            return cls(fill_char='·', outline_char='█')
        return cls()


def configure_logging(config: RenderConfig) -> logging.Logger:
    """
    Route package logging to a file.

    curses owns the terminal while the demo runs, so without a log file the
    package logger only gets a NullHandler.
    """
    log = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    if config.log_file:
        handler = logging.FileHandler(config.log_file)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s %(name)s: %(message)s'))
        log.addHandler(handler)
        log.setLevel(config.log_level.upper())
    else:
        log.addHandler(logging.NullHandler())
    return log
