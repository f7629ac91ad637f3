"""Game state and input handling for one session in the maze."""

from __future__ import annotations

import random
from typing import Callable

import numpy as np

from .config import (
    MAP1,
    ROTATION_LEFT_RIGHT,
    ROTATION_UP_DOWN,
    TIGER_FILE_NAME,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    MoveDirection,
)
from .frame import FrameCounter
from .geometry import (
    build_outer_walls,
    build_tile_indices,
    build_tile_vertices,
    build_wall_caps,
)
from .keyboard import KeyboardState
from .maze import generate_maze_wall
from .player import Player
from .stopwatch import Stopwatch, milliseconds
from .tiger import Tiger

VK_ESCAPE = 0x1B
VK_SPACE = 0x20
VK_LEFT = 0x25
VK_UP = 0x26
VK_RIGHT = 0x27
VK_DOWN = 0x28

EXIT_BUTTON = (300, 450, 400, 500)
TIGER_START = (55.0, 5.0, 65.0)

_WRAP = 0xFFFFFFFF
_MOUSE_INTERVAL = 10

_MOVE_KEYS = (
    (MoveDirection.LEFT, (ord("A"), VK_LEFT)),
    (MoveDirection.RIGHT, (ord("D"), VK_RIGHT)),
    (MoveDirection.FRONT, (ord("W"), VK_UP)),
    (MoveDirection.BACK, (ord("S"), VK_DOWN)),
)


def _in_rect(rect: tuple[int, int, int, int], point: tuple[int, int]) -> bool:
    left, top, right, bottom = rect
    x, y = point
    return left <= x < right and top <= y < bottom


class Game:
    """Holds the player, signs, tiger and view flags, and reacts to input."""

    def __init__(self, clock: Callable[[], int] | None = None,
                 rng: random.Random | None = None) -> None:
        self._clock = clock or milliseconds
        self._rng = rng or random.Random()
        self.grid = MAP1
        self.keyboard = KeyboardState()
        self.frames = FrameCounter(self._clock)
        self.player_watch = Stopwatch(self._clock)
        self.tiger_watch = Stopwatch(self._clock)

        self.player = Player(self._clock)
        layout = generate_maze_wall(1)
        self.wall_blocks = layout.blocks
        self.notices = layout.notices
        self.exit = layout.exit

        self.tiger = Tiger(TIGER_START, self._clock, self._rng)
        self.tiger.position = np.array(TIGER_START, dtype=float)
        self.tiger.look_at = self.player.position
        self.tiger_model = TIGER_FILE_NAME

        self.tile_vertices = build_tile_vertices()
        self.tile_indices = build_tile_indices()
        self.outer_walls = build_outer_walls()
        self.wall_caps = build_wall_caps()

        self.sky_view = False
        self.no_clip = False
        self.paused = False
        self.interactive = False
        self.moved = False
        self.playing = True
        self.clicked = False
        self.light_on = False
        self.exit_requested = False

        self.mid_point = (WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2)
        self.mouse = (0, 0)
        self._rotation_time = self._clock()
        self._saved_world = self.player.world.copy()
        self._saved_look_at = self.player.look_at.copy()

    @property
    def cursor_visible(self) -> bool:
        """The cursor shows only when the game is over or paused."""
        return not self.playing or self.paused

    @property
    def lighting_enabled(self) -> bool:
        """Scene lighting is on in night mode, off in day mode."""
        return not self.light_on

    def process_keys(self, is_down: Callable[[int], bool]) -> None:
        """Poll the keyboard once and update the world accordingly."""
        self.keyboard.update(is_down)

        if not self.paused and self.playing:
            self.player.move_bullets()
            self.tiger.move(self.grid)

        for direction, codes in _MOVE_KEYS:
            if any(is_down(code) for code in codes):
                self.moved = self.player.move(direction, self.grid, self.no_clip)

        position = self.player.position
        if self.moved:
            for notice in self.notices:
                notice.rotate(position)
            self.exit.rotate(position)

        for notice in self.notices:
            if notice.is_possible_interaction(position, self.no_clip):
                self.interactive = True
                self.sky_view = True
                break
            self.interactive = False

        self.playing = not self.exit.is_possible_interaction(position, self.no_clip)

        if is_down(ord("Q")):
            self.player.rotate(True)
        if is_down(ord("E")):
            self.player.rotate(False)

        if self.keyboard.key_down("1"):
            self.light_on = not self.light_on
        if self.keyboard.key_down("2"):
            self.sky_view = not self.sky_view
        if self.keyboard.key_down("3"):
            self.player.flashlight_on = not self.player.flashlight_on
        if self.keyboard.key_down("4"):
            self._toggle_no_clip()
        if self.keyboard.key_down(VK_ESCAPE):
            self.paused = not self.paused

    def _toggle_no_clip(self) -> None:
        if self.no_clip:
            self.no_clip = False
            self.player.world = self._saved_world.copy()
            self.player.look_at = self._saved_look_at.copy()
        else:
            self.no_clip = True
            self._saved_world = self.player.world.copy()
            self._saved_look_at = self.player.look_at.copy()

    def mouse_down(self, x: int, y: int) -> None:
        """Left button pressed at client coordinates (x, y)."""
        self.mouse = (x, y)
        self.clicked = True
        if self.cursor_visible and _in_rect(EXIT_BUTTON, self.mouse):
            self.exit.press_button()

    def mouse_move(self, x: int, y: int) -> tuple[int, int] | None:
        """Cursor moved to (x, y); return where to recentre it, if anywhere."""
        if not self.sky_view and self.playing and not self.paused:
            now = self._clock()
            if (now - self._rotation_time) & _WRAP >= _MOUSE_INTERVAL:
                mx, my = self.mid_point
                if x > mx:
                    self.player.rotate_by(False, False, (x - mx) * ROTATION_LEFT_RIGHT)
                elif x < mx:
                    self.player.rotate_by(True, False, (mx - x) * ROTATION_LEFT_RIGHT)
                if y > my:
                    self.player.rotate_by(True, True, (y - my) * ROTATION_UP_DOWN)
                elif y < my:
                    self.player.rotate_by(False, True, (my - y) * ROTATION_UP_DOWN)

        if self.cursor_visible:
            if _in_rect(EXIT_BUTTON, self.mouse) and self.clicked:
                self.exit.press_button()
        else:
            self.exit.release_button()

        if self.playing and not self.paused:
            return self.mid_point
        return None

    def mouse_up(self, x: int, y: int) -> bool:
        """Left button released; return True when the exit button was clicked."""
        self.mouse = (x, y)
        self.clicked = False
        self.exit.release_button()
        self.player.attack()
        if self.cursor_visible and _in_rect(EXIT_BUTTON, self.mouse):
            self.exit_requested = True
        return self.exit_requested