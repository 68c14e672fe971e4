"""Ticker - a bounded, cancellable, once-per-interval countdown source."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Iterator

from countdown.clock import Clock
from countdown.types import TickerError

logger = logging.getLogger(__name__)

Consumer = Callable[[int], None]


class Ticker:
    """Emits ``n, n-1, ..., 0``: the first value at once, then one per interval.

    A ticker runs exactly one countdown. It cancels itself after emitting
    0, and ``cancel()`` may be called at any time, any number of times.

    Consumer failures are swallowed: an exception raised while handling
    one tick is logged at DEBUG level and the next tick is still delivered.
    """

    def __init__(
        self,
        interval: float = 1.0,
        now: Callable[[], float] = time.monotonic,
        log_consumer_errors: bool = True,
    ) -> None:
        self._clock = Clock(interval, now)
        self._cancelled = threading.Event()
        self._started = False
        self._log_consumer_errors = log_consumer_errors

    @property
    def interval(self) -> float:
        return self._clock.interval

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def started(self) -> bool:
        return self._started

    def cancel(self) -> None:
        self._cancelled.set()

    def start(self, initial_count: int) -> Iterator[int]:
        """Return the lazy tick sequence. Negative counts are clamped to 0."""
        if self._started:
            raise TickerError("Ticker already started; create a new one")
        self._started = True
        return self._ticks(max(initial_count, 0))

    def _ticks(self, count: int) -> Iterator[int]:
        self._clock.start()
        while not self._cancelled.is_set():
            yield count
            if count == 0:
                self.cancel()
                return
            count -= 1
            self._clock.advance()
            delay = self._clock.delay()
            if delay > 0 and self._cancelled.wait(delay):
                return

    def run(self, initial_count: int, consumer: Consumer) -> None:
        """Deliver every tick to ``consumer``, blocking until the sequence ends."""
        self._deliver(self.start(initial_count), consumer)

    def _deliver(self, ticks: Iterator[int], consumer: Consumer) -> None:
        for value in ticks:
            try:
                consumer(value)
            except Exception:
                if self._log_consumer_errors:
                    logger.debug("Tick consumer failed on %d", value, exc_info=True)

    def spawn(self, initial_count: int, consumer: Consumer) -> threading.Thread:
        """Run the ticker on a daemon thread and return the started thread."""
        ticks = self.start(initial_count)
        thread = threading.Thread(
            target=self._deliver,
            args=(ticks, consumer),
            name=f"ticker-{initial_count}",
            daemon=True,
        )
        thread.start()
        return thread
