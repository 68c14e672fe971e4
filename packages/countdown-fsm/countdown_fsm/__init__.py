"""countdown-fsm - The countdown state machine."""
from __future__ import annotations

from countdown_fsm.config import CountdownConfig
from countdown_fsm.machine import CountdownMachine

__all__ = ["CountdownConfig", "CountdownMachine"]
