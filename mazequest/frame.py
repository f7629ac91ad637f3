"""Frames-per-second counter with an attached stopwatch."""

from __future__ import annotations

from typing import Callable

from .stopwatch import Stopwatch, milliseconds


class FrameCounter:
    """Counts frames and publishes the count once every second."""

    def __init__(self, clock: Callable[[], int] | None = None) -> None:
        self._clock = clock or milliseconds
        self._watch = Stopwatch(self._clock)
        self.fps = 0
        self._count = 0
        self._start = 0
        self.reset()

    def reset(self) -> None:
        """Clear the counters and restart the one-second window."""
        self.fps = 0
        self._count = 0
        self._start = self._clock()

    def frame(self) -> None:
        """Record one rendered frame."""
        self._count += 1
        now = self._clock()
        if now >= self._start + 1000:
            self.fps = self._count
            self._count = 0
            self._start = now

    def watch_start(self) -> None:
        """Start the stopwatch."""
        self._watch.start()

    def watch_check(self) -> int:
        """Milliseconds on the stopwatch so far."""
        return self._watch.check()

    def watch_stop(self) -> int:
        """Stop the stopwatch and return its reading."""
        return self._watch.stop()

    @property
    def watch_working(self) -> bool:
        """Whether the stopwatch is running."""
        return self._watch.is_working