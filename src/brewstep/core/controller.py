"""Staged timer controller.

Owns the session state and every transition: user intents move through
the recipe, clock ticks count elapsed seconds and bring time-gated steps
in when their threshold is reached. The controller is the only thing
that starts or cancels a clock, and it holds at most one clock handle.
"""

import contextlib
import logging
import threading
from collections.abc import Callable
from enum import Enum
from functools import partial

from ..constants import DEFAULT_TICK_INTERVAL
from ..models import CompletionAction, Session, Snapshot
from .clock import Clock, ClockHandle
from .step_table import StepTable

logger = logging.getLogger(__name__)

Listener = Callable[[Snapshot], None]


class Intent(str, Enum):
    """Messages the presentation layer (or the clock) sends to the controller."""

    BEGIN = "begin"
    RESTART = "restart"
    ADVANCE_STEP = "advance_step"
    START_TIMER = "start_timer"
    CANCEL_TIMER = "cancel_timer"
    TICK = "tick"
    COMPLETE_STEP = "complete_step"


class TimerController:
    """State machine driving a recipe through its steps.

    Every intent returns the resulting Snapshot and notifies subscribers.
    Intents and clock ticks are serialized on a re-entrant lock, so a tick
    arriving from a clock thread never interleaves with a user intent.

    Example:
        >>> controller = TimerController(table, ManualClock())
        >>> controller.begin()
        >>> controller.complete_step().current_step.instruction
    """

    def __init__(
        self,
        table: StepTable,
        clock: Clock,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        self.table = table
        self.tick_interval = tick_interval
        self._clock = clock
        self._session = Session()
        self._lock = threading.RLock()
        self._listeners: list[Listener] = []
        logger.info("Ready to brew")

    @property
    def clock_handle(self) -> ClockHandle | None:
        """Handle of the running clock, or None."""
        return self._session.clock_handle

    def snapshot(self) -> Snapshot:
        """Return the current state for rendering."""
        with self._lock:
            session = self._session
            return Snapshot(
                elapsed_seconds=session.elapsed_seconds,
                current_step=self.table.steps[session.current_step_index],
                step_index=session.current_step_index,
                step_count=len(self.table),
                is_timer_running=session.is_timer_running,
                has_started=session.started,
                is_finished=session.current_step_index == self.table.last_index,
            )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with a Snapshot after every intent and tick.

        Returns:
            Function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            with contextlib.suppress(ValueError):
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # Intents
    # ------------------------------------------------------------------

    def begin(self) -> Snapshot:
        """Mark the session as started. Repeated calls do nothing."""
        with self._lock:
            if not self._session.started:
                self._session.started = True
                logger.debug("Session started")
            return self._publish()

    def restart(self) -> Snapshot:
        """Stop any clock and reset the session to its initial state."""
        with self._lock:
            self._stop_clock()
            self._session = Session()
            logger.info("Session restarted")
            return self._publish()

    def advance_step(self) -> Snapshot:
        """Move to the next step, never past the last one."""
        with self._lock:
            self._move_to(self._session.current_step_index + 1)
            return self._publish()

    def start_timer(self) -> Snapshot:
        """Start the clock unless one is already running.

        Starting the timer also begins the session. On the last step the
        clock is never started, since reaching it stops the clock anyway.
        """
        with self._lock:
            session = self._session
            if session.clock_handle is not None:
                logger.debug("Timer already running")
            elif session.current_step_index == self.table.last_index:
                logger.debug("Recipe finished, not starting timer")
            else:
                session.started = True
                token = object()
                session.clock_token = token
                session.clock_handle = self._clock.start(
                    self.tick_interval, partial(self._on_clock_tick, token)
                )
                logger.info("Timer has started")
            return self._publish()

    def cancel_timer(self) -> Snapshot:
        """Stop the clock if running and zero the elapsed count."""
        with self._lock:
            self._stop_clock()
            self._session.elapsed_seconds = 0
            return self._publish()

    def tick(self) -> Snapshot:
        """Count one elapsed second and apply any threshold it reaches."""
        with self._lock:
            self._tick()
            return self._publish()

    def complete_step(self) -> Snapshot:
        """Perform the current step's completion action."""
        with self._lock:
            action = self.table.steps[self._session.current_step_index].completion_action
            if action == CompletionAction.START_TIMER:
                return self.start_timer()
            if action == CompletionAction.FINISH:
                return self.cancel_timer()
            return self.advance_step()

    def dispatch(self, intent: Intent) -> Snapshot:
        """Route an Intent to its handler."""
        handlers: dict[Intent, Callable[[], Snapshot]] = {
            Intent.BEGIN: self.begin,
            Intent.RESTART: self.restart,
            Intent.ADVANCE_STEP: self.advance_step,
            Intent.START_TIMER: self.start_timer,
            Intent.CANCEL_TIMER: self.cancel_timer,
            Intent.TICK: self.tick,
            Intent.COMPLETE_STEP: self.complete_step,
        }
        return handlers[Intent(intent)]()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _on_clock_tick(self, token: object) -> None:
        with self._lock:
            # Ticks from a handle cancelled while this one waited on the lock
            if token is not self._session.clock_token:
                logger.debug("Dropping tick from a cancelled clock")
                return
            self._tick()
            self._publish()

    def _tick(self) -> None:
        session = self._session
        # Compared after the increment: a step shows on the tick that reaches its threshold.
        session.elapsed_seconds += 1

        # Only the immediately following step is compared; first match wins.
        upcoming = self.table.get(session.current_step_index + 1)
        if upcoming is not None and upcoming.threshold_seconds == session.elapsed_seconds:
            session.current_step_index += 1
            logger.debug(
                f"Reached {upcoming.threshold_seconds}s, "
                f"step {session.current_step_index}: {upcoming.instruction}"
            )

        if session.current_step_index == self.table.last_index:
            self._finish()

    def _move_to(self, index: int) -> None:
        session = self._session
        index = min(index, self.table.last_index)
        if index <= session.current_step_index:
            return
        session.current_step_index = index
        logger.debug(f"Step {index}: {self.table.steps[index].instruction}")
        if index == self.table.last_index:
            self._finish()

    def _finish(self) -> None:
        if self._session.clock_handle is not None:
            logger.info("Recipe finished")
        self._stop_clock()
        self._session.elapsed_seconds = 0

    def _stop_clock(self) -> None:
        session = self._session
        if session.clock_handle is None:
            return
        self._clock.cancel(session.clock_handle)
        session.clock_handle = None
        session.clock_token = None
        logger.info("Timer cancelled")

    def _publish(self) -> Snapshot:
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception(f"Listener {listener!r} failed on step {snapshot.step_index}")
        return snapshot
