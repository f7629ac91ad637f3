"""Millisecond clock and a simple stopwatch."""

from __future__ import annotations

import time
from typing import Callable

_WRAP = 0xFFFFFFFF


def milliseconds() -> int:
    """Monotonic time in milliseconds, wrapping at 32 bits."""
    return int(time.monotonic() * 1000) & _WRAP


class Stopwatch:
    """Measures elapsed milliseconds from a start point."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or milliseconds
        self._start = 0
        self.is_working = False

    def start(self) -> None:
        """Begin timing from now."""
        self._start = self._clock()
        self.is_working = True

    def check(self) -> int:
        """Milliseconds since the start point, without stopping."""
        return (self._clock() - self._start) & _WRAP

    def stop(self) -> int:
        """Stop timing and return the elapsed milliseconds."""
        now = self._clock()
        duration = (now - self._start) & _WRAP
        self._start = now
        self.is_working = False
        return duration