"""The player: movement with wall collision, turning, flashlight and bullets."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Sequence

import numpy as np

from . import vecmath
from .config import (
    LENGTH_OF_TILE,
    LOOKAT_DISTANCE,
    NUM_OF_COLUMN,
    NUM_OF_ROW,
    PLAYER_RADIUS,
    ROTATION_AMOUNT,
    START_POSITION,
    TRANSLATION_DISTANCE,
    UP,
    WALL,
    MoveDirection,
)
from .stopwatch import milliseconds

_WRAP = 0xFFFFFFFF
_MIN_INTERVAL = 10
_BULLET_RANGE = 100.0
_WALL_GAP = 0.1
_HALF_COLUMNS = NUM_OF_COLUMN // 2
_HALF_ROWS = NUM_OF_ROW // 2
_LOWEST_PITCH = math.radians(175.0)
_HIGHEST_PITCH = math.radians(5.0)


@dataclass
class Bullet:
    """A projectile flying in a straight line from where it was fired."""

    position: np.ndarray
    direction: np.ndarray
    time: int


@dataclass
class Flashlight:
    """The spot light the player carries."""

    position: np.ndarray
    direction: np.ndarray
    diffuse: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    ambient: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 0.0)
    specular: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 0.0)
    range: float = 1500.0
    attenuation: tuple[float, float, float] = (1.0, 0.01, 0.0001)
    falloff: float = 2.0
    phi: float = field(default_factory=lambda: math.radians(60.0))
    theta: float = field(default_factory=lambda: math.radians(30.0))


def _wall_at(grid: Sequence[str], row: int, column: int) -> bool:
    if 0 <= row < len(grid) and 0 <= column < len(grid[row]):
        return grid[row][column] == WALL
    return False


def _overlaps(min_x: float, min_z: float, max_x: float, max_z: float,
              x: float, z: float) -> bool:
    return (min_x <= x + PLAYER_RADIUS and max_x >= x - PLAYER_RADIUS
            and min_z <= z + PLAYER_RADIUS and max_z >= z - PLAYER_RADIUS)


class Player:
    """A first-person walker whose world matrix holds its axes and position."""

    bullet_velocity = 0.1

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or milliseconds
        start = np.array(START_POSITION, dtype=float)
        self.look_at = start + np.array([0.0, 0.0, LOOKAT_DISTANCE])
        self.world = vecmath.translation(*start)
        self.flashlight_on = True
        self.flashlight = Flashlight(
            position=start.copy(),
            direction=vecmath.normalize(self.world[2, :3]),
        )
        self.bullets: deque[Bullet] = deque()
        now = self._clock()
        self._move_time = now
        self._rotate_time = now

    @property
    def position(self) -> np.ndarray:
        """Where the player stands."""
        return vecmath.position_of(self.world)

    @position.setter
    def position(self, value: Sequence[float]) -> None:
        self.world[3, :3] = np.asarray(value, dtype=float)[:3]

    def _elapsed(self, since: int, now: int) -> int:
        return (now - since) & _WRAP

    def move(self, direction: MoveDirection | int, grid: Sequence[str],
             no_clip: bool = False) -> bool:
        """Take one step; return False when called again too soon."""
        direction = MoveDirection(direction)
        now = self._clock()
        if self._elapsed(self._move_time, now) < _MIN_INTERVAL:
            return False
        self._move_time = now

        current = self.position
        right, forward = self.world[0, :3], self.world[2, :3]
        heading = {
            MoveDirection.LEFT: -right,
            MoveDirection.RIGHT: right,
            MoveDirection.FRONT: forward,
            MoveDirection.BACK: -forward,
        }[direction]
        target = current + heading * (TRANSLATION_DISTANCE / vecmath.length(heading))

        if not no_clip:
            target = self._resolve_collisions(current, target, heading, grid)

        self.look_at[0] += target[0] - current[0]
        self.look_at[2] += target[2] - current[2]
        if no_clip:
            self.look_at[1] += target[1] - current[1]
        else:
            target[1] = LENGTH_OF_TILE / 2

        self.world = self.world @ vecmath.translation(*(target - current))
        self.flashlight.position = self.position
        return True

    @staticmethod
    def _resolve_collisions(current: np.ndarray, target: np.ndarray,
                            heading: np.ndarray, grid: Sequence[str]) -> np.ndarray:
        tile = LENGTH_OF_TILE
        column = math.floor(current[0] / tile) + _HALF_COLUMNS
        row = _HALF_ROWS - math.floor(current[2] / tile) - 1
        x, z = float(target[0]), float(target[2])

        if heading[0] < 0:
            if column == 0:
                x = max(x, -_HALF_COLUMNS * tile + PLAYER_RADIUS)
            else:
                for r in range(row - 1, row + 2):
                    if not _wall_at(grid, r, column - 1):
                        continue
                    min_x, max_x = (column - 1 - _HALF_COLUMNS) * tile, (column - _HALF_COLUMNS) * tile
                    min_z, max_z = (_HALF_ROWS - r - 1) * tile, (_HALF_ROWS - r) * tile
                    if _overlaps(min_x, min_z, max_x, max_z, x, z):
                        if _wall_at(grid, row, column - 1):
                            x = max_x + PLAYER_RADIUS + _WALL_GAP
                        break
        elif heading[0] > 0:
            if column == NUM_OF_COLUMN - 1:
                x = min(x, _HALF_COLUMNS * tile - PLAYER_RADIUS)
            else:
                for r in range(row - 1, row + 2):
                    if not _wall_at(grid, r, column + 1):
                        continue
                    min_x, max_x = (column + 1 - _HALF_COLUMNS) * tile, (column + 2 - _HALF_COLUMNS) * tile
                    min_z, max_z = (_HALF_ROWS - r - 1) * tile, (_HALF_ROWS - r) * tile
                    if _overlaps(min_x, min_z, max_x, max_z, x, z):
                        if _wall_at(grid, row, column + 1):
                            x = min_x - PLAYER_RADIUS - _WALL_GAP
                        break

        if heading[2] < 0:
            if row == NUM_OF_ROW - 1:
                z = max(z, -_HALF_ROWS * tile + PLAYER_RADIUS)
            else:
                for c in range(column - 1, column + 2):
                    if not _wall_at(grid, row + 1, c):
                        continue
                    min_x, max_x = (c - _HALF_COLUMNS) * tile, (c + 1 - _HALF_COLUMNS) * tile
                    min_z = (_HALF_ROWS - (row + 1) - 1) * tile
                    max_z = (_HALF_ROWS - (row + 1)) * tile
                    if _overlaps(min_x, min_z, max_x, max_z, x, z):
                        z = max_z + PLAYER_RADIUS + _WALL_GAP
                        break
        elif heading[2] > 0:
            if row == 0:
                z = min(z, _HALF_ROWS * tile - PLAYER_RADIUS)
            else:
                for c in range(column - 1, column + 2):
                    if not _wall_at(grid, row - 1, c):
                        continue
                    min_x, max_x = (c - _HALF_COLUMNS) * tile, (c + 1 - _HALF_COLUMNS) * tile
                    min_z = (_HALF_ROWS - (row - 1) - 1) * tile
                    max_z = (_HALF_ROWS - (row - 1)) * tile
                    if _overlaps(min_x, min_z, max_x, max_z, x, z):
                        z = min_z - PLAYER_RADIUS - _WALL_GAP
                        break

        resolved = np.array(target, dtype=float)
        resolved[0], resolved[2] = x, z
        return resolved

    def _turn(self, rotation: np.ndarray) -> None:
        p = self.position
        self.world = (
            self.world
            @ vecmath.translation(-p[0], -p[1], -p[2])
            @ rotation
            @ vecmath.translation(p[0], p[1], p[2])
        )
        forward = np.array(self.world[2, :3], dtype=float)
        self.look_at = p + forward * (LOOKAT_DISTANCE / vecmath.length(forward))
        self.flashlight.direction = forward.copy()

    def rotate(self, counter_clockwise: bool) -> None:
        """Turn left or right by a fixed step, at most once every 10 ms."""
        now = self._clock()
        if self._elapsed(self._rotate_time, now) < _MIN_INTERVAL:
            return
        self._rotate_time = now
        angle = -ROTATION_AMOUNT if counter_clockwise else ROTATION_AMOUNT
        self._turn(vecmath.rotation_y(angle))

    def rotate_by(self, counter_clockwise: bool, up_down: bool, angle: float) -> None:
        """Turn by ``angle``; with ``up_down`` counter-clockwise means looking down."""
        if not up_down:
            rotation = vecmath.rotation_y(-angle if counter_clockwise else angle)
        else:
            pitch = vecmath.calculate_angle(UP, self.world[2, :3])
            axis = (self.world[0, 0], 0.0, self.world[0, 2])
            if counter_clockwise:
                if pitch + ROTATION_AMOUNT > _LOWEST_PITCH:
                    return
                rotation = vecmath.rotation_axis(axis, angle)
            else:
                if pitch - ROTATION_AMOUNT < _HIGHEST_PITCH:
                    return
                rotation = vecmath.rotation_axis(axis, -angle)
        self._turn(rotation)

    def attack(self) -> Bullet:
        """Fire a bullet from the player towards where it is looking."""
        position = self.position
        bullet = Bullet(position.copy(), self.look_at - position, self._clock())
        self.bullets.append(bullet)
        return bullet

    def move_bullets(self) -> None:
        """Advance bullets by elapsed time and drop them once far from the player."""
        if not self.bullets:
            return
        now = self._clock()
        for bullet in list(self.bullets):
            distance = self.bullet_velocity * self._elapsed(bullet.time, now)
            bullet.time = now
            norm = vecmath.length(bullet.direction)
            if norm > 0.0:
                bullet.position = bullet.position + bullet.direction * (distance / norm)
            if vecmath.length(bullet.position - self.position) >= _BULLET_RANGE:
                self.bullets.popleft()