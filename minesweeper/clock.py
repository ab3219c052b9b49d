"""Game timer with pause support and four-digit display."""

from __future__ import annotations

import time
from typing import Callable


def clock_digits(seconds: int) -> tuple[int, int, int, int]:
    """Split a duration into minute and second digits (MM:SS)."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    minutes, secs = divmod(seconds, 60)
    minute_text = str(minutes)
    if minutes > 9:
        first, second = int(minute_text[0]), int(minute_text[1])
    else:
        first, second = 0, minutes
    return first, second, secs // 10, secs % 10


class GameClock:
    """Counts whole seconds of play, excluding time spent paused."""

    def __init__(self, timer: Callable[[], float] = time.monotonic) -> None:
        self._timer = timer
        self._start = timer()
        self._banked = 0
        self._paused = False

    def restart(self) -> None:
        """Reset to zero and resume counting."""
        self._start = self._timer()
        self._banked = 0
        self._paused = False

    def _running_seconds(self) -> int:
        return int(self._timer() - self._start)

    def elapsed(self) -> int:
        """Whole seconds played so far."""
        if self._paused:
            return self._banked
        return self._banked + self._running_seconds()

    def toggle_pause(self) -> bool:
        """Pause or resume; returns True when now paused."""
        if self._paused:
            self._start = self._timer()
            self._paused = False
        else:
            self._banked += self._running_seconds()
            self._paused = True
        return self._paused

    def paused(self) -> bool:
        """Whether the clock is paused."""
        return self._paused

    def digits(self) -> tuple[int, int, int, int]:
        """Display digits for the current elapsed time."""
        return clock_digits(self.elapsed())