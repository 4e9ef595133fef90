import dataclasses
import math

import pytest

from maze_cli_renderer.camera import Camera
from maze_cli_renderer.math_utils import TWO_PI
from maze_cli_renderer.world import Pillar, Wall


def test_distance_is_euclidean() -> None:
    camera = Camera()
    assert camera.distance_to(Pillar(3.0, 4.0)) == pytest.approx(5.0)
    # |dy| > |dx| must not produce NaN
    assert camera.distance_to(Pillar(1.0, 10.0)) == pytest.approx(math.sqrt(101.0))


def test_view_angle_from_center_is_not_normalized() -> None:
    camera = Camera(facing_direction=3 * math.pi)
    assert camera.view_angle_from_center(Pillar(1.0, 0.0)) == pytest.approx(3 * math.pi)


@pytest.mark.parametrize("fov", [0.01, math.pi / 4, math.pi / 2, math.pi, 5.0])
@pytest.mark.parametrize("facing", [0.0, math.pi / 3, math.pi, 4.5])
def test_entity_on_facing_ray_is_visible(fov, facing) -> None:
    camera = Camera(x=2.0, y=-1.0, facing_direction=facing, fov_angle=fov,
                    fill_screen_distance=1.0, horizon_distance=20.0)
    pillar = Pillar(2.0 + 10.0 * math.cos(facing), -1.0 + 10.0 * math.sin(facing))
    assert camera.can_see(pillar)


@pytest.mark.parametrize("distance", [20.0, 20.5, 100.0])
@pytest.mark.parametrize("facing", [0.0, math.pi / 2, math.pi])
def test_entity_at_or_past_horizon_is_hidden(distance, facing) -> None:
    camera = Camera(facing_direction=facing, fov_angle=math.pi,
                    fill_screen_distance=1.0, horizon_distance=20.0)
    pillar = Pillar(distance * math.cos(facing), distance * math.sin(facing))
    assert not camera.can_see(pillar)


def test_entity_behind_camera_is_hidden() -> None:
    camera = Camera(fov_angle=math.pi / 2)
    assert not camera.can_see(Pillar(-5.0, 0.0))


def test_field_of_view_edges() -> None:
    camera = Camera(fov_angle=math.pi / 2)
    inside = math.pi / 4 - 0.01
    outside = math.pi / 4 + 0.01
    for sign in (1, -1):
        assert camera.can_see(Pillar(5 * math.cos(sign * inside), 5 * math.sin(sign * inside)))
        assert not camera.can_see(Pillar(5 * math.cos(sign * outside), 5 * math.sin(sign * outside)))


def test_visibility_wraps_across_zero_angle() -> None:
    camera = Camera(facing_direction=TWO_PI - 0.1, fov_angle=math.pi / 2)
    assert camera.can_see(Pillar(5.0, 0.0))
    assert camera.can_see(Pillar(5 * math.cos(0.3), 5 * math.sin(0.3)))


def test_wall_visible_when_either_pillar_is() -> None:
    camera = Camera(fov_angle=math.pi / 2)
    seen = Pillar(5.0, 0.0)
    hidden = Pillar(-5.0, 0.0)

    assert camera.can_see_viewable(Wall(seen, hidden))
    assert camera.can_see_viewable(Wall(hidden, seen))
    assert not camera.can_see_viewable(Wall(hidden, Pillar(-5.0, 3.0)))


def test_wall_crossing_view_with_both_ends_outside_is_hidden() -> None:
    camera = Camera(fov_angle=math.pi / 2)
    wall = Wall(Pillar(5.0, -20.0), Pillar(5.0, 20.0))
    assert camera.can_see(Pillar(wall.x, wall.y))
    assert not camera.can_see_viewable(wall)


def test_update_cam_with_no_movement_is_identity() -> None:
    camera = Camera(x=1.5, y=-2.0, facing_direction=1.0)
    assert camera.update_cam(0.0, 0.0) == camera


def test_update_cam_turns_then_moves_along_new_facing() -> None:
    camera = Camera()
    moved = camera.update_cam(2.0, math.pi / 2)

    assert moved.facing_direction == pytest.approx(math.pi / 2)
    assert moved.x == pytest.approx(0.0, abs=1e-9)
    assert moved.y == pytest.approx(2.0)
    # Source camera is unchanged
    assert (camera.x, camera.y, camera.facing_direction) == (0.0, 0.0, 0.0)


def test_update_cam_keeps_angle_in_zero_to_two_pi() -> None:
    camera = Camera()
    turned = camera.update_cam(0.0, -0.5)
    assert turned.facing_direction == pytest.approx(TWO_PI - 0.5)

    spun = turned.update_cam(0.0, 7.0)
    assert 0.0 <= spun.facing_direction < TWO_PI
    assert spun.facing_direction == pytest.approx(6.5 - TWO_PI)


def test_camera_is_immutable() -> None:
    camera = Camera()
    with pytest.raises(dataclasses.FrozenInstanceError):
        camera.x = 3.0  # type: ignore[misc]


@pytest.mark.parametrize("fill,horizon", [(0.0, 10.0), (10.0, 10.0), (12.0, 10.0), (-1.0, 10.0)])
def test_camera_rejects_bad_distances(fill, horizon) -> None:
    with pytest.raises(ValueError):
        Camera(fill_screen_distance=fill, horizon_distance=horizon)


def test_camera_rejects_non_positive_fov() -> None:
    with pytest.raises(ValueError):
        Camera(fov_angle=0.0)
