"""CountdownMachine - turns user intent and ticks into countdown states."""
from __future__ import annotations

import logging
import threading
from typing import Callable

from countdown import (
    Counting,
    CountdownState,
    End,
    InvalidInputError,
    SetTimer,
    Ticker,
    parse_duration,
)
from countdown_signal import StateStream

from countdown_fsm.config import CountdownConfig

logger = logging.getLogger(__name__)

TickerFactory = Callable[[], Ticker]
StateHandler = Callable[[CountdownState], None]


class CountdownMachine:
    """Owns the current CountdownState and the ticker of the active run.

    Transitions::

        SetTimer --on_timer_changed(digits)--> SetTimer(n)
        SetTimer --on_count_down_start (n > 0)--> Counting(n, n) ... Counting(n, 0), End
        any      --on_start_again--> SetTimer(0)

    At most one ticker is active. Any transition that supersedes a run
    cancels its ticker, and ticks from a superseded ticker are dropped.
    """

    def __init__(
        self,
        config: CountdownConfig | None = None,
        ticker_factory: TickerFactory | None = None,
    ) -> None:
        self.config: CountdownConfig = config if config is not None else CountdownConfig()
        self._ticker_factory = ticker_factory if ticker_factory is not None else self._new_ticker
        self._lock = threading.RLock()
        self._stream: StateStream[CountdownState] = StateStream(SetTimer())
        self._ticker: Ticker | None = None
        self._thread: threading.Thread | None = None

    def _new_ticker(self) -> Ticker:
        return Ticker(
            self.config.interval,
            log_consumer_errors=self.config.log_consumer_errors,
        )

    # --- Observation ---

    @property
    def state(self) -> CountdownState:
        return self._stream.value

    @property
    def running(self) -> bool:
        """True while a ticker is active."""
        with self._lock:
            return self._ticker is not None

    def subscribe(self, handler: StateHandler) -> None:
        """Register a state handler; it receives the current state at once."""
        with self._lock:
            self._stream.subscribe(handler)

    def unsubscribe(self, handler: StateHandler) -> None:
        with self._lock:
            self._stream.unsubscribe(handler)

    # --- Operations ---

    def on_timer_changed(self, text: str) -> None:
        """Set the duration from user text. Non-digit text is ignored."""
        try:
            count = parse_duration(text)
        except InvalidInputError:
            logger.debug("Ignoring duration input %r", text)
            return
        with self._lock:
            self._cancel_active()
            self._stream.publish(SetTimer(count))

    def on_count_down_start(self) -> bool:
        """Start a run for the current count. Returns False when the count is 0."""
        with self._lock:
            duration = self.state.count
            if duration == 0:
                return False
            self._cancel_active()
            ticker = self._ticker_factory()
            self._ticker = ticker
            logger.info("Countdown started: %d", duration)
            self._thread = ticker.spawn(
                duration, lambda count: self._on_tick(ticker, duration, count)
            )
            return True

    def on_start_again(self) -> None:
        """Cancel any active run and go back to SetTimer(0)."""
        with self._lock:
            self._cancel_active()
            self._stream.publish(SetTimer())

    def shutdown(self) -> None:
        """Cancel the active run, leaving the current state as is."""
        with self._lock:
            self._cancel_active()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the active run's thread exits. Returns False on timeout."""
        with self._lock:
            thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    # --- Internals ---

    def _cancel_active(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            logger.info("Countdown cancelled at %d", self.state.count)
            self._ticker = None

    def _on_tick(self, ticker: Ticker, total_count: int, count: int) -> None:
        with self._lock:
            if ticker is not self._ticker:
                return
            self._stream.publish(Counting(total_count, count))
            if count == 0:
                self._ticker = None
                self._stream.publish(End())
                logger.info("Countdown finished: %d", total_count)
