"""Edge-detecting keyboard state for polled key input."""

from __future__ import annotations

import enum
from typing import Callable

_KEY_COUNT = 255


class KeyPhase(enum.IntEnum):
    """Where a key is in its press/release cycle."""

    UP_REPEAT = 0
    DOWN = 1
    DOWN_REPEAT = 2
    UP = 3


class KeyboardState:
    """Tracks key presses and releases between successive polls."""

    def __init__(self) -> None:
        self._states = [KeyPhase.UP_REPEAT] * _KEY_COUNT

    def reset(self) -> None:
        """Mark every key as released."""
        self._states = [KeyPhase.UP_REPEAT] * _KEY_COUNT

    def update(self, is_down: Callable[[int], bool]) -> None:
        """Advance every key using ``is_down(keycode)`` for the current poll."""
        for keycode in range(1, _KEY_COUNT):
            held = bool(is_down(keycode))
            if held:
                self._states[keycode] = (
                    KeyPhase.DOWN_REPEAT
                    if self._states[keycode] in (KeyPhase.DOWN, KeyPhase.DOWN_REPEAT)
                    else KeyPhase.DOWN
                )
            else:
                self._states[keycode] = (
                    KeyPhase.UP
                    if self._states[keycode] in (KeyPhase.DOWN, KeyPhase.DOWN_REPEAT)
                    else KeyPhase.UP_REPEAT
                )

    def _phase(self, keycode: int | str) -> KeyPhase:
        if isinstance(keycode, str):
            if len(keycode) != 1:
                raise ValueError(f"key must be a single character, got {keycode!r}")
            keycode = ord(keycode)
        if not 0 <= keycode < _KEY_COUNT:
            raise ValueError(f"keycode {keycode} out of range")
        return self._states[keycode]

    def key_down(self, keycode: int | str) -> bool:
        """True only on the poll where the key went down."""
        return self._phase(keycode) is KeyPhase.DOWN

    def key_up(self, keycode: int | str) -> bool:
        """True only on the poll where the key was released."""
        return self._phase(keycode) is KeyPhase.UP

    def key(self, keycode: int | str) -> bool:
        """True while the key is held."""
        return self._phase(keycode) in (KeyPhase.DOWN, KeyPhase.DOWN_REPEAT)