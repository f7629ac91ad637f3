"""Maze layout: wall blocks, notices and the exit built from the map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .config import (
    EXIT,
    LENGTH_OF_TILE,
    MAP1,
    NOTICE,
    NUM_OF_COLUMN,
    NUM_OF_ROW,
    WALL,
    CustomVertex,
)
from .notice import ExitSign, Notice

_TEXTURE_CORNERS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
_FACE_NORMALS = (
    (0.0, 0.0, -1.0),
    (1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0),
    (-1.0, 0.0, 0.0),
    (-1.0, 0.0, 0.0),
)


@dataclass
class MazeLayout:
    """Everything placed inside the outer wall of one map."""

    blocks: tuple[tuple[CustomVertex, ...], ...]
    notices: tuple[Notice, ...]
    exit: ExitSign


def calculate_mid_point(first: Sequence[float], second: Sequence[float]) -> np.ndarray:
    """The point halfway between two 3-D points."""
    return (np.asarray(first, dtype=float)[:3] + np.asarray(second, dtype=float)[:3]) / 2


def calculate_division_points(first: Sequence[float], second: Sequence[float],
                              divisions: int) -> list[np.ndarray]:
    """Interior points for splitting a segment into ``divisions`` parts."""
    a = np.asarray(first, dtype=float)[:3]
    b = np.asarray(second, dtype=float)[:3]
    return [(a * i + b * (divisions - 1)) / divisions for i in range(1, divisions)]


def make_wall_block(position: Sequence[float]) -> tuple[CustomVertex, ...]:
    """Twenty vertices for the four sides and top of a tile-sized cube."""
    x, y, z = (float(c) for c in position[:3])
    h = LENGTH_OF_TILE / 2
    corners = (
        (x - h, y + h, z - h), (x + h, y + h, z - h), (x + h, y - h, z - h), (x - h, y - h, z - h),
        (x + h, y + h, z - h), (x + h, y + h, z + h), (x + h, y - h, z + h), (x + h, y - h, z - h),
        (x + h, y + h, z + h), (x - h, y + h, z + h), (x - h, y - h, z + h), (x + h, y - h, z + h),
        (x - h, y + h, z + h), (x - h, y + h, z - h), (x - h, y - h, z - h), (x - h, y - h, z + h),
        (x - h, y + h, z + h), (x + h, y + h, z + h), (x + h, y + h, z - h), (x - h, y + h, z - h),
    )
    return tuple(
        CustomVertex(corner, _FACE_NORMALS[index // 4], _TEXTURE_CORNERS[index % 4])
        for index, corner in enumerate(corners)
    )


def _cell_center(row: int, column: int) -> tuple[float, float, float]:
    return (
        (-(NUM_OF_COLUMN // 2) + column + 0.5) * LENGTH_OF_TILE,
        5.0,
        (NUM_OF_ROW // 2 - row - 0.5) * LENGTH_OF_TILE,
    )


def generate_maze_wall(map_number: int) -> MazeLayout:
    """Build the wall blocks, notices and exit of the numbered map."""
    if map_number != 1:
        raise ValueError(f"unknown map number {map_number}")

    blocks: list[tuple[CustomVertex, ...]] = []
    notices: list[Notice] = []
    exit_sign: ExitSign | None = None
    for row, line in enumerate(MAP1):
        for column, cell in enumerate(line):
            if cell == WALL:
                blocks.append(make_wall_block(_cell_center(row, column)))
            elif cell == NOTICE:
                notices.append(Notice(_cell_center(row, column)))
            elif cell == EXIT:
                exit_sign = ExitSign(_cell_center(row, column))

    if exit_sign is None:
        raise ValueError(f"map {map_number} has no exit")
    return MazeLayout(tuple(blocks), tuple(notices), exit_sign)