"""Periodic tick sources for the timer controller.

The controller only needs start/cancel; it never reads the time itself.
ThreadingClock ticks in real time, ManualClock ticks when told to.
"""

import itertools
import logging
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]

_handle_ids = itertools.count(1)


@dataclass(eq=False)
class ClockHandle:
    """Opaque handle for one running clock."""

    id: int = field(default_factory=lambda: next(_handle_ids))
    interval: float = 1.0
    stop_event: threading.Event = field(default_factory=threading.Event, repr=False)

    @property
    def cancelled(self) -> bool:
        return self.stop_event.is_set()


class Clock(Protocol):
    """Periodic tick capability.

    Once started, a handle delivers exactly one tick per interval until
    cancelled. No tick is delivered for a handle after cancel() returns,
    except one already executing on the clock's own thread.
    """

    def start(self, interval: float, on_tick: TickCallback) -> ClockHandle:
        """Start ticking every interval seconds."""
        ...

    def cancel(self, handle: ClockHandle) -> None:
        """Stop the handle. Cancelling twice is harmless."""
        ...


class ThreadingClock:
    """Real-time clock running each handle on a daemon thread.

    Ticks are scheduled at start + n * interval on the monotonic clock,
    so a slow callback does not push later ticks back. Deadlines missed
    entirely are skipped, never delivered late in a burst.
    """

    def start(self, interval: float, on_tick: TickCallback) -> ClockHandle:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        handle = ClockHandle(interval=interval)
        thread = threading.Thread(
            target=self._run,
            args=(handle, on_tick),
            name=f"brewstep-clock-{handle.id}",
            daemon=True,
        )
        thread.start()
        logger.debug(f"Clock {handle.id}: started with {interval}s interval")
        return handle

    def cancel(self, handle: ClockHandle) -> None:
        # Never join here: the caller may hold a lock the tick callback is waiting on.
        handle.stop_event.set()
        logger.debug(f"Clock {handle.id}: cancelled")

    @staticmethod
    def _run(handle: ClockHandle, on_tick: TickCallback) -> None:
        interval = handle.interval
        deadline = time.monotonic() + interval

        while not handle.stop_event.wait(max(0.0, deadline - time.monotonic())):
            on_tick()
            deadline += interval

            lag = time.monotonic() - deadline
            if lag > 0:
                skipped = int(lag // interval) + 1
                logger.debug(f"Clock {handle.id}: skipping {skipped} missed tick(s)")
                deadline += skipped * interval


class ManualClock:
    """Clock that ticks only when advance() is called.

    Used by tests and by recipe simulation, where real waiting would only
    slow things down.
    """

    def __init__(self) -> None:
        self._callbacks: dict[int, tuple[ClockHandle, TickCallback]] = {}
        self.started = 0

    def start(self, interval: float, on_tick: TickCallback) -> ClockHandle:
        handle = ClockHandle(interval=interval)
        self._callbacks[handle.id] = (handle, on_tick)
        self.started += 1
        return handle

    def cancel(self, handle: ClockHandle) -> None:
        handle.stop_event.set()
        self._callbacks.pop(handle.id, None)

    @property
    def active_handles(self) -> list[ClockHandle]:
        return [handle for handle, _ in self._callbacks.values()]

    def advance(self, ticks: int = 1) -> int:
        """Deliver ticks to every running handle.

        Args:
            ticks: Number of intervals to elapse

        Returns:
            Number of callbacks invoked
        """
        delivered = 0
        for _ in range(ticks):
            for handle, on_tick in list(self._callbacks.values()):
                # A callback earlier in this round may have cancelled this handle
                if handle.cancelled:
                    continue
                on_tick()
                delivered += 1
        return delivered
