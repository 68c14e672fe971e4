"""Countdown state variants, errors, and input parsing."""

from __future__ import annotations

from dataclasses import dataclass, field


class CountdownState:
    """Base for the countdown state variants.

    Every variant carries ``count``, the number of seconds left to display.
    Instances are immutable snapshots and safe to hand to any observer.
    """

    __slots__ = ()

    count: int


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")


@dataclass(frozen=True, slots=True)
class SetTimer(CountdownState):
    """The user is editing the target duration."""

    count: int = 0

    def __post_init__(self) -> None:
        _check_count(self.count)


@dataclass(frozen=True, slots=True)
class Start(CountdownState):
    """Duration committed, ticking not yet begun. Never published by the machine."""

    count: int

    def __post_init__(self) -> None:
        _check_count(self.count)


@dataclass(frozen=True, slots=True)
class Counting(CountdownState):
    """Actively ticking. ``total_count`` is the duration captured at start."""

    total_count: int
    count: int

    def __post_init__(self) -> None:
        _check_count(self.count)
        if self.count > self.total_count:
            raise ValueError(
                f"count {self.count} exceeds total_count {self.total_count}"
            )


@dataclass(frozen=True, slots=True)
class End(CountdownState):
    """The countdown reached zero."""

    count: int = field(default=0, init=False)


class CountdownError(Exception):
    """Base class for countdown errors."""


class InvalidInputError(CountdownError, ValueError):
    """Raised when duration text is not made of decimal digits only."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Not a duration: {text!r}")


class TickerError(CountdownError):
    """Raised when a ticker is started more than once."""


def parse_duration(text: str) -> int:
    """Parse a duration typed by the user.

    Only ASCII digits are accepted; the empty string is rejected, and so
    is text too long for int() to convert.
    """
    if not text or not (text.isascii() and text.isdigit()):
        raise InvalidInputError(text)
    try:
        return int(text)
    except ValueError as err:
        raise InvalidInputError(text) from err
