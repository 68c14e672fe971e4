"""In-memory observable value with replay-latest subscribe semantics."""
from __future__ import annotations

import logging
from typing import Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
_Handler = Callable[[T], None]


class StateStream(Generic[T]):
    """Holds the current value and pushes every new one to subscribers.

    New subscribers receive the current value immediately. Publishing is
    synchronous: all handlers have run by the time ``publish`` returns.
    A handler that raises is logged and skipped.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: list[_Handler] = []

    @property
    def value(self) -> T:
        return self._value

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self, handler: _Handler) -> None:
        self._subscribers.append(handler)
        self._deliver(handler, self._value)

    def unsubscribe(self, handler: _Handler) -> None:
        try:
            self._subscribers.remove(handler)
        except ValueError:
            pass

    def publish(self, value: T) -> None:
        self._value = value
        for handler in list(self._subscribers):
            self._deliver(handler, value)

    def _deliver(self, handler: _Handler, value: T) -> None:
        try:
            handler(value)
        except Exception:
            logger.warning("Subscriber %r failed on %r", handler, value, exc_info=True)
