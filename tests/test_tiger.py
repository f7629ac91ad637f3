import numpy as np
import pytest

from mazequest import vecmath
from mazequest.tiger import SCALE_AMOUNT_TIGER, TRANSLATION_DISTANCE_TIGER, Tiger

OPEN_GRID = tuple(" " * 12 for _ in range(14))
WALL_GRID = tuple("*" * 12 for _ in range(14))


class FakeClock:
    def __init__(self, now=1000):
        self.now = now

    def __call__(self):
        return self.now


class ScriptedRng:
    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self.values.pop(0)


def make_tiger(position=(55.0, 5.0, 65.0), rng=None):
    clock = FakeClock()
    tiger = Tiger(position, clock, rng or ScriptedRng([]))
    clock.now += 10
    return tiger, clock


def test_initial_world_scales_then_translates():
    tiger, _ = make_tiger()
    assert np.allclose(vecmath.position_of(tiger.world), (55.0, 5.0, 65.0))
    assert tiger.world[0, 0] == pytest.approx(SCALE_AMOUNT_TIGER)
    assert tiger.world[2, 2] == pytest.approx(SCALE_AMOUNT_TIGER * 2.0 / 3.0)
    assert np.allclose(tiger.heading, (0.0, 0.0, -1.0))
    assert tiger.is_live and not tiger.is_rotating and tiger.is_clockwise


def test_rotate_accumulates_and_keeps_position():
    tiger, _ = make_tiger()
    tiger.rotate(True)
    tiger.rotate(False)
    assert tiger.rotation_amount == 6
    assert np.allclose(tiger.world_position, (55.0, 5.0, 65.0))


def test_thirty_clockwise_steps_make_a_quarter_turn():
    tiger, _ = make_tiger()
    for _ in range(30):
        tiger.rotate(True)
    assert np.allclose(tiger.heading, (-1.0, 0.0, 0.0), atol=1e-9)


def test_thirty_counter_clockwise_steps_turn_the_other_way():
    tiger, _ = make_tiger()
    for _ in range(30):
        tiger.rotate(False)
    assert np.allclose(tiger.heading, (1.0, 0.0, 0.0), atol=1e-9)


def test_move_too_soon_does_nothing():
    clock = FakeClock()
    tiger = Tiger((55.0, 5.0, 65.0), clock, ScriptedRng([]))
    tiger.move(OPEN_GRID)
    assert np.allclose(tiger.world_position, (55.0, 5.0, 65.0))


def test_move_along_straight_corridor():
    from mazequest.config import MAP1

    tiger, _ = make_tiger()
    tiger.move(MAP1)
    assert np.allclose(tiger.world_position, (55.0, 5.0, 65.0 - TRANSLATION_DISTANCE_TIGER))
    assert tiger.wall_open == [False, True, False, False]
    assert not tiger.is_rotating


def test_move_waits_again_after_a_step():
    from mazequest.config import MAP1

    tiger, _ = make_tiger()
    tiger.move(MAP1)
    first = tiger.world_position
    tiger.move(MAP1)
    assert np.allclose(tiger.world_position, first)


def test_dead_end_turns_round_then_walks_back():
    tiger, _ = make_tiger()
    tiger.move(WALL_GRID)
    assert tiger.is_rotating
    assert tiger.rotation_count == 2
    assert tiger.wall_open == [False, False, False, False]
    for _ in range(60):
        tiger.move(WALL_GRID)
    assert not tiger.is_rotating
    assert tiger.rotation_count == 1
    assert tiger.rotation_amount == 0
    assert np.allclose(tiger.heading, (0.0, 0.0, 1.0), atol=1e-9)
    assert np.allclose(tiger.world_position, (55.0, 5.0, 65.0))
    tiger.move(WALL_GRID)
    assert tiger.rotation_count == 0
    assert tiger.world_position[2] == pytest.approx(65.0 + TRANSLATION_DISTANCE_TIGER)


def test_side_opening_may_be_ignored():
    rng = ScriptedRng([0])
    tiger, _ = make_tiger(rng=rng)
    tiger.move(OPEN_GRID)
    assert rng.calls == [(0, 1)]
    assert not tiger.is_rotating
    assert tiger.world_position[2] == pytest.approx(65.0 - TRANSLATION_DISTANCE_TIGER)


def test_side_opening_may_be_taken():
    rng = ScriptedRng([1])
    tiger, _ = make_tiger(rng=rng)
    tiger.move(OPEN_GRID)
    assert tiger.is_rotating and tiger.is_clockwise
    assert tiger.rotation_count == 1
    assert np.allclose(tiger.world_position, (55.0, 5.0, 65.0))


@pytest.mark.parametrize(
    "draws, rotating, clockwise",
    [([0], False, True), ([1, 1], True, True), ([1, 2], True, False)],
)
def test_crossroads_draws_among_three_choices(draws, rotating, clockwise):
    rng = ScriptedRng(draws)
    tiger, _ = make_tiger(position=(5.0, 5.0, 5.0), rng=rng)
    tiger.move(OPEN_GRID)
    assert rng.calls == [(0, 2)] * len(draws)
    assert tiger.is_rotating is rotating
    assert tiger.is_clockwise is clockwise
    assert tiger.wall_open == [True, True, True, True]


def test_off_center_tiger_walks_without_deciding():
    rng = ScriptedRng([])
    tiger, _ = make_tiger(position=(57.0, 5.0, 65.0), rng=rng)
    tiger.move(WALL_GRID)
    assert rng.calls == []
    assert tiger.world_position[2] == pytest.approx(65.0 - TRANSLATION_DISTANCE_TIGER)


def test_outside_the_map_raises():
    tiger, _ = make_tiger(position=(-195.0, 5.0, 5.0))
    with pytest.raises(IndexError):
        tiger.move(OPEN_GRID)