#
# PROJECT: maze-cli-renderer
# MODULE: maze_cli_renderer/controls.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import curses
import enum
import math
from typing import Iterable, Set, Tuple

from .camera import Camera

# World units per second / radians per second
MOVE_SPEED = 4.0
TURN_SPEED = math.pi / 2

KEY_ESCAPE = 27

FORWARD_KEYS = {ord('w'), ord('W'), curses.KEY_UP}
BACKWARD_KEYS = {ord('s'), ord('S'), curses.KEY_DOWN}
TURN_LEFT_KEYS = {ord('a'), ord('A'), curses.KEY_LEFT}
TURN_RIGHT_KEYS = {ord('d'), ord('D'), curses.KEY_RIGHT}
QUIT_KEYS = {ord('q'), ord('Q'), KEY_ESCAPE}


class ProgramCommand(enum.Enum):
    NO_COMMAND = 'no_command'
    QUIT = 'quit'


def movement_for_keys(keys: Iterable[int],
                      fps: float) -> Tuple[float, float, ProgramCommand]:
    """
    Map the keys pressed this frame to (forward delta, angle delta, command).

    Each key counts once per frame however often the terminal repeated it.
    """
    forward = 0.0
    angle = 0.0
    command = ProgramCommand.NO_COMMAND

    for key in set(keys):
        if key in FORWARD_KEYS:
            forward += MOVE_SPEED / fps
        elif key in BACKWARD_KEYS:
            forward -= MOVE_SPEED / fps
        elif key in TURN_LEFT_KEYS:
            angle += TURN_SPEED / fps
        elif key in TURN_RIGHT_KEYS:
            angle -= TURN_SPEED / fps
        elif key in QUIT_KEYS:
            command = ProgramCommand.QUIT

    return forward, angle, command


def poll_keys(stdscr) -> Set[int]:
    """Drain every key code waiting in a non-blocking curses window."""
    keys = set()
    while True:
        key = stdscr.getch()
        if key == -1:
            return keys
        keys.add(key)


def move_camera(stdscr, camera: Camera, fps: float) -> Tuple[Camera, ProgramCommand]:
    forward, angle, command = movement_for_keys(poll_keys(stdscr), fps)
    return camera.update_cam(forward, angle), command
