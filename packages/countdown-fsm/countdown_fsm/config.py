"""Countdown configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CountdownConfig:
    """Immutable configuration for a countdown machine.

    Attributes:
        interval: Seconds between ticks.
        log_consumer_errors: Log swallowed tick consumer failures at DEBUG.
    """

    interval: float = 1.0
    log_consumer_errors: bool = True

    def __post_init__(self) -> None:
        if self.interval < 0:
            raise ValueError("interval must be non-negative")
