"""Billboard signs placed in the maze: hint notices and the exit."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from . import vecmath
from .config import (
    BUTTON_DEFAULT,
    BUTTON_PRESSED,
    LENGTH_OF_TILE,
    PLAYER_RADIUS,
    CustomVertex,
    UIVertex,
)

_TEXTURE_CORNERS = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))


class Notice:
    """A square billboard that turns about the y axis to face the player."""

    is_notice = True

    def __init__(self, position: Sequence[float]) -> None:
        self.position = np.array(position, dtype=float)[:3]
        self.look_at = np.array([0.0, 0.0, -1.0])
        self.world = vecmath.identity()

        x, y, z = (float(c) for c in self.position)
        quarter = LENGTH_OF_TILE / 4
        corners = (
            (x - quarter, y + quarter, z),
            (x + quarter, y + quarter, z),
            (x + quarter, y - quarter, z),
            (x - quarter, y - quarter, z),
        )
        self.vertices = tuple(
            CustomVertex(corner, (0.0, 1.0, 0.0), uv)
            for corner, uv in zip(corners, _TEXTURE_CORNERS)
        )

    def rotate(self, player_position: Sequence[float]) -> None:
        """Turn the billboard so that it faces the player in the xz plane."""
        target = np.array(player_position, dtype=float)[:3] - self.position
        target[1] = 0.0
        if np.array_equal(self.look_at, target):
            return

        target_length = math.hypot(target[0], target[2])
        current_length = math.hypot(self.look_at[0], self.look_at[2])
        if target_length == 0.0 or current_length == 0.0:
            return

        cos = float(target @ self.look_at) / (target_length * current_length)
        angle = math.acos(min(1.0, max(-1.0, cos)))
        cross = np.cross(self.look_at, target)
        self.look_at = target

        signed = angle if cross[1] > 0 else -angle
        x, y, z = (float(c) for c in self.position)
        self.world = (
            self.world
            @ vecmath.translation(-x, -y, -z)
            @ vecmath.rotation_y(signed)
            @ vecmath.translation(x, y, z)
        )

    def is_possible_interaction(self, player_position: Sequence[float],
                                no_clip: bool = False) -> bool:
        """Whether the player stands on this sign's tile (never in free-fly mode)."""
        if no_clip:
            return False
        px, _, pz = (float(c) for c in player_position[:3])
        half = LENGTH_OF_TILE / 2
        min_x, min_z = self.position[0] - half, self.position[2] - half
        max_x, max_z = self.position[0] + half, self.position[2] + half
        return bool(
            min_x <= px + PLAYER_RADIUS
            and max_x >= px - PLAYER_RADIUS
            and min_z <= pz + PLAYER_RADIUS
            and max_z >= pz - PLAYER_RADIUS
        )


def _button_vertices(color: int) -> tuple[UIVertex, ...]:
    corners = ((300.0, 450.0), (400.0, 450.0), (400.0, 500.0), (300.0, 500.0))
    return tuple(
        UIVertex((x, y, 0.0), 1.0, color, uv)
        for (x, y), uv in zip(corners, _TEXTURE_CORNERS)
    )


class ExitSign(Notice):
    """The maze exit: a billboard with an on-screen exit button."""

    is_notice = False

    def __init__(self, position: Sequence[float]) -> None:
        super().__init__(position)
        self.is_pressed = False
        self.button_vertices = _button_vertices(BUTTON_DEFAULT)

    def press_button(self) -> None:
        """Show the exit button as pressed."""
        self.is_pressed = True
        self.button_vertices = _button_vertices(BUTTON_PRESSED)

    def release_button(self) -> None:
        """Show the exit button as released."""
        self.is_pressed = False
        self.button_vertices = _button_vertices(BUTTON_DEFAULT)