#
# PROJECT: maze-cli-renderer
# MODULE: maze_cli_renderer/world.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .camera import Camera


class WorldEntity(Protocol):
    """Anything with a position on the 2D world plane."""
    x: float
    y: float


class Viewable(Protocol):
    """An entity that decides for itself whether a camera can see it."""

    def in_camera_view(self, camera: 'Camera') -> bool:
        ...


@dataclass(frozen=True)
class Pillar:
    """A fixed vertical post; walls span between pairs of these."""
    x: float
    y: float


@dataclass(frozen=True)
class Wall:
    """
    Flat vertical surface spanning two pillars.

    A wall is visible when either of its pillars is.  A wall whose middle
    crosses the view while both ends sit outside it is treated as hidden;
    this endpoint approximation is accepted rather than clipping edges.
    """
    pillar1: Pillar
    pillar2: Pillar

    @property
    def x(self) -> float:
        return (self.pillar1.x + self.pillar2.x) / 2.0

    @property
    def y(self) -> float:
        return (self.pillar1.y + self.pillar2.y) / 2.0

    def in_camera_view(self, camera: 'Camera') -> bool:
        return camera.can_see(self.pillar1) or camera.can_see(self.pillar2)
