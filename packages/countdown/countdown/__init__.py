"""countdown - Tick-driven countdown primitives."""

from countdown.clock import Clock
from countdown.ticker import Ticker
from countdown.types import (
    Counting,
    CountdownError,
    CountdownState,
    End,
    InvalidInputError,
    SetTimer,
    Start,
    TickerError,
    parse_duration,
)

__all__ = [
    "Clock",
    "Ticker",
    "CountdownState",
    "SetTimer",
    "Start",
    "Counting",
    "End",
    "CountdownError",
    "InvalidInputError",
    "TickerError",
    "parse_duration",
]
