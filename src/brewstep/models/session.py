"""Mutable session state owned by the timer controller."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Session:
    """Per-run state. Only the controller mutates it.

    clock_handle is whatever the clock returned from start(); clock_token
    tags the ticks that handle delivers so stale ones can be dropped.
    """

    elapsed_seconds: int = 0
    current_step_index: int = 0
    started: bool = False
    clock_handle: Any = None
    clock_token: object | None = None

    @property
    def is_timer_running(self) -> bool:
        return self.clock_handle is not None
