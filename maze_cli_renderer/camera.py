#
# PROJECT: maze-cli-renderer
# MODULE: maze_cli_renderer/camera.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

import math
from dataclasses import dataclass, replace

from .math_utils import TWO_PI, normalize_range
from .world import Viewable, WorldEntity


@dataclass(frozen=True)
class Camera:
    """
    Viewer pose and lens for the first-person maze view.

    Stores the position on the world plane, the facing angle (radians),
    the horizontal field of view, the distance at which a pillar fills the
    whole screen height and the horizon distance beyond which nothing is
    visible.

    Cameras are values: update_cam() returns a new Camera and the frame
    loop threads it through explicitly.
    """
    x: float = 0.0
    y: float = 0.0
    facing_direction: float = 0.0
    fov_angle: float = math.pi / 2
    fill_screen_distance: float = 1.0
    horizon_distance: float = 60.0

    def __post_init__(self):
        if self.fov_angle <= 0:
            raise ValueError(f"fov_angle must be positive, got {self.fov_angle}")
        if not 0 < self.fill_screen_distance < self.horizon_distance:
            raise ValueError(
                "Expected 0 < fill_screen_distance < horizon_distance, got "
                f"{self.fill_screen_distance} and {self.horizon_distance}")

    def distance_to(self, other: WorldEntity) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def view_angle_from_center(self, other: WorldEntity) -> float:
        """Signed angle between the facing direction and the entity (not normalized)."""
        return self.facing_direction - math.atan2(other.y - self.y, other.x - self.x)

    def can_see(self, other: WorldEntity) -> bool:
        angle = normalize_range(self.view_angle_from_center(other), -math.pi, math.pi)
        half_fov = self.fov_angle / 2.0
        return (-half_fov <= angle < half_fov
                and self.distance_to(other) < self.horizon_distance)

    def can_see_viewable(self, viewable: Viewable) -> bool:
        return viewable.in_camera_view(self)

    def update_cam(self, forward_delta: float, angle_delta: float) -> 'Camera':
        """Turn by angle_delta, then move forward_delta along the new facing."""
        new_angle = normalize_range(self.facing_direction + angle_delta, 0.0, TWO_PI)
        return replace(
            self,
            x=self.x + forward_delta * math.cos(new_angle),
            y=self.y + forward_delta * math.sin(new_angle),
            facing_direction=new_angle,
        )
