"""countdown-signal - Replay-latest observer stream for countdown state."""
from __future__ import annotations

from countdown_signal.stream import StateStream

__all__ = ["StateStream"]
