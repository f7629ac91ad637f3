import math

import numpy as np
import pytest

from mazequest import vecmath
from mazequest.config import (
    LENGTH_OF_TILE,
    LOOKAT_DISTANCE,
    MAP1,
    NUM_OF_COLUMN,
    NUM_OF_ROW,
    PLAYER_RADIUS,
    ROTATION_AMOUNT,
    START_POSITION,
    TRANSLATION_DISTANCE,
    UP,
    MoveDirection,
)
from mazequest.player import Player


class FakeClock:
    def __init__(self, now=1000):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def player(clock):
    return Player(clock)


def step(player, clock, direction, no_clip=False):
    clock.advance(10)
    return player.move(direction, MAP1, no_clip)


def test_initial_state(player):
    np.testing.assert_allclose(player.position, START_POSITION)
    np.testing.assert_allclose(
        player.look_at, np.array(START_POSITION) + (0.0, 0.0, LOOKAT_DISTANCE)
    )
    np.testing.assert_allclose(player.flashlight.position, START_POSITION)
    np.testing.assert_allclose(player.flashlight.direction, (0.0, 0.0, 1.0))
    assert player.flashlight.phi == pytest.approx(math.radians(60.0))
    assert player.flashlight.range == 1500.0
    assert player.flashlight_on is True
    assert len(player.bullets) == 0


def test_move_too_soon_is_ignored(player, clock):
    clock.advance(5)
    assert player.move(MoveDirection.FRONT, MAP1, False) is False
    np.testing.assert_allclose(player.position, START_POSITION)


def test_move_front_advances_and_keeps_look_offset(player, clock):
    offset = player.look_at - player.position
    assert step(player, clock, MoveDirection.FRONT) is True
    assert player.position[2] == pytest.approx(START_POSITION[2] + TRANSLATION_DISTANCE)
    np.testing.assert_allclose(player.look_at - player.position, offset)
    np.testing.assert_allclose(player.flashlight.position, player.position)


def test_move_back_stops_at_outer_wall(player, clock):
    limit = -(NUM_OF_ROW // 2) * LENGTH_OF_TILE + PLAYER_RADIUS
    for _ in range(30):
        step(player, clock, MoveDirection.BACK)
        assert player.position[2] >= limit - 1e-9
    assert player.position[2] == pytest.approx(limit)


def test_move_right_stops_at_outer_wall(player, clock):
    limit = (NUM_OF_COLUMN // 2) * LENGTH_OF_TILE - PLAYER_RADIUS
    for _ in range(30):
        step(player, clock, MoveDirection.RIGHT)
        assert player.position[0] <= limit + 1e-9
    assert player.position[0] == pytest.approx(limit)


def test_move_left_stops_at_inner_wall(player, clock):
    player.position = (-15.0, 5.0, -65.0)
    for _ in range(20):
        step(player, clock, MoveDirection.LEFT)
        assert player.position[0] >= -20.0 + PLAYER_RADIUS
    assert player.position[0] == pytest.approx(-17.9)


def test_no_clip_passes_outer_wall(player, clock):
    offset = player.look_at - player.position
    for _ in range(30):
        step(player, clock, MoveDirection.BACK, no_clip=True)
    assert player.position[2] < -(NUM_OF_ROW // 2) * LENGTH_OF_TILE
    np.testing.assert_allclose(player.look_at - player.position, offset, atol=1e-9)


def test_no_clip_follows_pitch(player, clock):
    player.rotate_by(False, True, 0.3)
    offset = player.look_at - player.position
    start_y = player.position[1]
    step(player, clock, MoveDirection.FRONT, no_clip=True)
    assert player.position[1] > start_y
    np.testing.assert_allclose(player.look_at - player.position, offset, atol=1e-9)


def test_walking_forces_eye_height(player, clock):
    player.position = (START_POSITION[0], 20.0, START_POSITION[2])
    step(player, clock, MoveDirection.FRONT)
    assert player.position[1] == pytest.approx(LENGTH_OF_TILE / 2)


def test_invalid_direction_raises(player, clock):
    clock.advance(10)
    with pytest.raises(ValueError):
        player.move(7, MAP1, False)


def test_rotate_too_soon_is_ignored(player, clock):
    before = player.look_at.copy()
    clock.advance(3)
    player.rotate(True)
    np.testing.assert_allclose(player.look_at, before)


def test_rotate_turns_by_fixed_step(player, clock):
    before = player.look_at - player.position
    clock.advance(10)
    player.rotate(True)
    after = player.look_at - player.position
    assert vecmath.length(after) == pytest.approx(LOOKAT_DISTANCE)
    assert vecmath.calculate_angle(before, after) == pytest.approx(ROTATION_AMOUNT, abs=1e-6)
    assert player.look_at[0] < player.position[0]


def test_rotate_clockwise_turns_right(player, clock):
    clock.advance(10)
    player.rotate(False)
    assert player.look_at[0] > player.position[0]


def test_rotate_back_and_forth_restores(player, clock):
    before = player.look_at.copy()
    clock.advance(10)
    player.rotate(True)
    clock.advance(10)
    player.rotate(False)
    np.testing.assert_allclose(player.look_at, before, atol=1e-9)


def test_rotate_by_has_no_rate_limit(player):
    before = player.look_at - player.position
    player.rotate_by(False, False, 0.1)
    player.rotate_by(False, False, 0.1)
    after = player.look_at - player.position
    assert vecmath.calculate_angle(before, after) == pytest.approx(0.2, abs=1e-6)


def test_rotate_by_pitch_directions(player):
    player.rotate_by(True, True, 0.1)
    assert player.look_at[1] < player.position[1]
    player.rotate_by(False, True, 0.3)
    assert player.look_at[1] > player.position[1]


def test_rotate_by_pitch_limit(player):
    for _ in range(100):
        player.rotate_by(True, True, 0.05)
    world = player.world.copy()
    player.rotate_by(True, True, 0.05)
    np.testing.assert_array_equal(player.world, world)
    pitch = vecmath.calculate_angle(UP, player.look_at - player.position)
    assert math.radians(90.0) < pitch <= math.radians(175.0) + 0.05


def test_flashlight_follows_view(player, clock):
    player.rotate_by(True, False, 0.4)
    np.testing.assert_allclose(
        vecmath.normalize(player.flashlight.direction),
        vecmath.normalize(player.look_at - player.position),
        atol=1e-9,
    )


def test_attack_fires_from_position(player, clock):
    bullet = player.attack()
    assert list(player.bullets) == [bullet]
    np.testing.assert_allclose(bullet.position, player.position)
    np.testing.assert_allclose(bullet.direction, player.look_at - player.position)
    assert bullet.time == clock.now


def test_move_bullets_by_elapsed_time(player, clock):
    bullet = player.attack()
    clock.advance(100)
    player.move_bullets()
    travelled = vecmath.length(bullet.position - player.position)
    assert travelled == pytest.approx(player.bullet_velocity * 100)
    assert bullet.time == clock.now
    assert bullet.position[2] > player.position[2]


def test_far_bullets_are_removed(player, clock):
    player.attack()
    clock.advance(50)
    player.attack()
    clock.advance(1000)
    player.move_bullets()
    assert len(player.bullets) == 0


def test_near_bullets_stay(player, clock):
    player.attack()
    player.attack()
    clock.advance(10)
    player.move_bullets()
    assert len(player.bullets) == 2