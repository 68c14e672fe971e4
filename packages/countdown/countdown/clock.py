"""Fixed-rate clock used to pace a ticker."""

import time
from typing import Callable


class Clock:
    """Tick ``k`` is due at ``origin + k * interval``.

    Deadlines are computed from the origin, so a late tick does not push
    the following ones back.
    """

    def __init__(self, interval: float = 1.0, now: Callable[[], float] = time.monotonic) -> None:
        if interval < 0:
            raise ValueError("interval must be non-negative")
        self._interval = interval
        self._now = now
        self._origin: float | None = None
        self._tick_number = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def started(self) -> bool:
        return self._origin is not None

    def start(self) -> None:
        self._origin = self._now()
        self._tick_number = 0

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def delay(self) -> float:
        """Seconds until the current tick is due, never negative."""
        if self._origin is None:
            return 0.0
        due = self._origin + self._tick_number * self._interval
        return max(0.0, due - self._now())
