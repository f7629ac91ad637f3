"""Game constants, the maze map, vertex records and colour helpers."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Sequence

Vector3 = tuple[float, float, float]
Vector2 = tuple[float, float]

WINDOW_WIDTH = 700
WINDOW_HEIGHT = 700
EPSILON = 0.001
SQRT2 = math.sqrt(2.0)

PROGRAM_NAME = "DirectX9_Maze"

TEXTURE_TILE = "tex_tile.bmp"
TEXTURE_GRASS = "tex_grass.jpg"
TEXTURE_WALL = "tex_wall.jpg"
TEXTURE_NOTICE = "tex_question.png"
TEXTURE_EXIT = "tex_exit.png"
TEXTURE_SKYBOX = "SkyBox1.dds"
TIGER_FILE_NAME = "tiger.x"

TRANSLATION_DISTANCE = 0.3
LOOKAT_DISTANCE = 5.0
ROTATION_AMOUNT = math.pi / 200
ROTATION_LEFT_RIGHT = 0.001
ROTATION_UP_DOWN = 0.001
NUM_OF_COLUMN = 12
NUM_OF_ROW = 14
LENGTH_OF_TILE = 10.0
LENGTH_OF_SKYBOX_SURFACE = 500.0

PLAYER_RADIUS = 2.0
BULLET_RADIUS = 0.4

WALL = "*"
NOTICE = "@"
EXIT = "X"


def xrgb(r: int, g: int, b: int) -> int:
    """Pack an opaque colour as a 32-bit ARGB value."""
    return rgba(r, g, b, 0xFF)


def rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack red, green, blue and alpha as a 32-bit ARGB value."""
    return ((a & 0xFF) << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


TRANSPARENCY_COLOR = rgba(0x00, 0x00, 0x00, 0xFF)
BUTTON_DEFAULT = xrgb(128, 128, 128)
BUTTON_PRESSED = xrgb(64, 64, 64)


class MoveDirection(enum.IntEnum):
    """Directions the player can step in."""

    LEFT = 1
    RIGHT = 2
    FRONT = 3
    BACK = 4


@dataclass(frozen=True)
class CustomVertex:
    """A lit, textured vertex in world space."""

    position: Vector3
    normal: Vector3
    texture: Vector2


@dataclass(frozen=True)
class UIVertex:
    """A pre-transformed screen-space vertex with a diffuse colour."""

    position: Vector3
    rhw: float
    color: int
    texture: Vector2


def _quad(left: float, top: float, right: float, bottom: float,
          colors: Sequence[int], textured: bool = True) -> tuple[UIVertex, ...]:
    corners = ((left, top), (right, top), (right, bottom), (left, bottom))
    uvs = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))
    return tuple(
        UIVertex((x, y, 0.0), 1.0, color, uv if textured else (0.0, 0.0))
        for (x, y), color, uv in zip(corners, colors, uvs)
    )


UI_VERTICES = _quad(10.0, 10.0, 210.0, 135.0,
                    (xrgb(255, 0, 0), xrgb(0, 0, 0), xrgb(0, 0, 0), xrgb(255, 0, 0)))
LOG_UI_VERTICES = _quad(10.0, 110.0, 410.0, 200.0, (xrgb(255, 255, 255),) * 4)
POPUP_VERTICES = _quad(100.0, 150.0, 600.0, 550.0, (xrgb(0, 255, 0),) * 4, textured=False)
SETTING_UI_VERTICES = _quad(100.0, 100.0, 600.0, 600.0, (rgba(200, 200, 200, 50),) * 4)

EYE_CEILING: Vector3 = (0.0, 200.0, 0.0)
UP_CEILING: Vector3 = (0.0, 0.0, 1.0)
UP: Vector3 = (0.0, 1.0, 0.0)
DEFAULT_POSITION: Vector3 = (0.0, 0.0, 0.0)
START_POSITION: Vector3 = (55.0, LENGTH_OF_TILE / 2, -65.0)

MAP1: tuple[str, ...] = (
    "X   *@ * @* ",
    "*** ** * ** ",
    " @* ** * ** ",
    " ** ** *    ",
    "    ** **** ",
    " **       * ",
    " **     * * ",
    " **  ** * * ",
    " *   ** * * ",
    " * * ** *   ",
    " * * ** * * ",
    " *   ** * * ",
    " * **** *** ",
    "@*@*        ",
)


def is_wall(grid: Sequence[str], row: int, column: int) -> bool:
    """Tell whether the map cell at (row, column) is a wall block."""
    if row < 0 or column < 0:
        raise IndexError(f"cell ({row}, {column}) lies outside the map")
    return grid[row][column] == WALL