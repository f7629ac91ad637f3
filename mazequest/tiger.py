"""The tiger: a creature that roams the maze corridors on its own."""

from __future__ import annotations

import math
import random
from typing import Callable, Sequence

import numpy as np

from . import vecmath
from .config import EPSILON, LENGTH_OF_TILE, NUM_OF_COLUMN, NUM_OF_ROW, is_wall
from .stopwatch import milliseconds

TRANSLATION_DISTANCE_TIGER = 0.2
ROTATION_AMOUNT_TIGER = 3
SCALE_AMOUNT_TIGER = 7.0

_WRAP = 0xFFFFFFFF
_MIN_INTERVAL = 10
_QUARTER_TURN = 90
_HALF_COLUMNS = NUM_OF_COLUMN // 2
_HALF_ROWS = NUM_OF_ROW // 2

# Indices into ``wall_open``: the neighbouring cells above, below, left and right.
UP, DOWN, LEFT, RIGHT = 0, 1, 2, 3


def _at_tile_center(coordinate: float) -> bool:
    fraction = coordinate / LENGTH_OF_TILE
    fraction -= math.floor(fraction)
    return 0.5 - EPSILON <= fraction <= 0.5 + EPSILON


class Tiger:
    """Walks along corridors, turning at dead ends and now and then at junctions."""

    def __init__(self, position: Sequence[float],
                 clock: Callable[[], int] | None = None,
                 rng: random.Random | None = None) -> None:
        self._clock = clock or milliseconds
        self._rng = rng or random.Random()
        x, y, z = (float(c) for c in position[:3])
        self.world = (
            vecmath.scaling(SCALE_AMOUNT_TIGER, SCALE_AMOUNT_TIGER,
                            SCALE_AMOUNT_TIGER * 2.0 / 3.0)
            @ vecmath.translation(x, y, z)
        )
        self.position = np.array([x, y, z])
        self.look_at = np.zeros(3)
        self.is_live = True
        self.is_rotating = False
        self.is_clockwise = True
        self.wall_open = [True, True, True, True]
        self.rotation_amount = 0
        self.rotation_count = 0
        self._time = self._clock()

    @property
    def heading(self) -> np.ndarray:
        """Unit vector of the direction the tiger faces."""
        return vecmath.normalize(-self.world[2, :3])

    @property
    def world_position(self) -> np.ndarray:
        """Where the tiger currently stands."""
        return vecmath.position_of(self.world)

    def move(self, grid: Sequence[str]) -> None:
        """Advance one step, or one turning step, at most once every 10 ms."""
        now = self._clock()
        if (now - self._time) & _WRAP < _MIN_INTERVAL:
            return

        look = self.heading
        current = self.world_position
        if _at_tile_center(current[0]) and _at_tile_center(current[2]):
            if self.is_rotating:
                self.rotate(self.is_clockwise)
            elif self.rotation_count == 1:
                self.rotation_count -= 1
            else:
                self._update_openings(grid, current)
                sides = self._sides(look)
                if sides is not None:
                    self._choose_turn(*sides)

        if self.rotation_amount == _QUARTER_TURN:
            if self.rotation_count == 2:
                self.rotation_count -= 1
            else:
                self.is_rotating = False
            self.rotation_amount = 0
        elif not self.is_rotating:
            step = look * (TRANSLATION_DISTANCE_TIGER / vecmath.length(look))
            self.world = self.world @ vecmath.translation(*step)
            self._time = now

    def rotate(self, clockwise: bool) -> None:
        """Turn in place about the y axis by three degrees."""
        x, y, z = (float(c) for c in self.world_position)
        angle = math.radians(ROTATION_AMOUNT_TIGER)
        self.world = (
            self.world
            @ vecmath.translation(-x, -y, -z)
            @ vecmath.rotation_y(angle if clockwise else -angle)
            @ vecmath.translation(x, y, z)
        )
        self.rotation_amount += ROTATION_AMOUNT_TIGER

    def _update_openings(self, grid: Sequence[str], current: np.ndarray) -> None:
        column = math.floor(current[0] / LENGTH_OF_TILE) + _HALF_COLUMNS
        row = _HALF_ROWS - math.floor(current[2] / LENGTH_OF_TILE) - 1
        self.wall_open[UP] = row != 0 and not is_wall(grid, row - 1, column)
        self.wall_open[DOWN] = row != NUM_OF_ROW - 1 and not is_wall(grid, row + 1, column)
        self.wall_open[LEFT] = column != 0 and not is_wall(grid, row, column - 1)
        self.wall_open[RIGHT] = (column != NUM_OF_COLUMN - 1
                                 and not is_wall(grid, row, column + 1))

    @staticmethod
    def _sides(look: np.ndarray) -> tuple[int, int, int] | None:
        """Front, clockwise and counter-clockwise neighbours for an axis heading."""
        x, z = look[0], look[2]
        if x > 0 and abs(z) <= EPSILON:
            return RIGHT, DOWN, UP
        if x < 0 and abs(z) <= EPSILON:
            return LEFT, UP, DOWN
        if z > 0 and abs(x) <= EPSILON:
            return UP, RIGHT, LEFT
        if z < 0 and abs(x) <= EPSILON:
            return DOWN, LEFT, RIGHT
        return None

    def _start_turn(self, clockwise: bool) -> None:
        self.is_rotating = True
        self.is_clockwise = clockwise
        self.rotation_count += 1

    def _choose_turn(self, front: int, cw_side: int, ccw_side: int) -> None:
        cw_open, ccw_open = self.wall_open[cw_side], self.wall_open[ccw_side]
        if not self.wall_open[front]:
            self.is_rotating = True
            self.rotation_count += 1
            if cw_open and not ccw_open:
                self.is_clockwise = True
            elif ccw_open and not cw_open:
                self.is_clockwise = False
            elif cw_open and ccw_open:
                self.is_clockwise = self._rng.randint(0, 1) == 0
            else:
                # Dead end: turn round with two quarter turns.
                self.rotation_count += 1
            return

        if not cw_open and not ccw_open:
            self.is_rotating = False
        elif cw_open and not ccw_open:
            if self._rng.randint(0, 1) == 0:
                self.is_rotating = False
            else:
                self._start_turn(True)
        elif ccw_open and not cw_open:
            if self._rng.randint(0, 1) == 0:
                self.is_rotating = False
            else:
                self._start_turn(False)
        else:
            if self._rng.randint(0, 2) == 0:
                self.is_rotating = False
            elif self._rng.randint(0, 2) == 1:
                self._start_turn(True)
            else:
                self._start_turn(False)