"""Dry-run a recipe on a manual clock.

The simulated user completes every step as soon as it is offered while
the timer is stopped, and waits for the clock while it runs. The result
is the timeline of step changes, or the point where the recipe stalls.
"""

from dataclasses import dataclass, field
from typing import Literal

from ..constants import SIMULATION_GRACE_TICKS
from ..models import Snapshot
from .clock import ManualClock
from .controller import TimerController
from .step_table import StepTable

Trigger = Literal["begin", "user", "timer", "start_timer"]


@dataclass
class TimelineEvent:
    """A step change (or timer start) seen during simulation."""

    elapsed_seconds: int
    step_index: int
    instruction: str
    trigger: Trigger


@dataclass
class SimulationResult:
    """Outcome of simulating a recipe.

    Attributes:
        events: Step changes in the order they happened.
        finished: True if the last step was reached.
        ticks: Clock ticks delivered in total.
        stalled_at: Index of the step the recipe got stuck on, if any.
    """

    events: list[TimelineEvent] = field(default_factory=list)
    finished: bool = False
    ticks: int = 0
    stalled_at: int | None = None


def _event(snapshot: Snapshot, trigger: Trigger, elapsed: int | None = None) -> TimelineEvent:
    return TimelineEvent(
        elapsed_seconds=snapshot.elapsed_seconds if elapsed is None else elapsed,
        step_index=snapshot.step_index,
        instruction=snapshot.current_step.instruction,
        trigger=trigger,
    )


def simulate_recipe(table: StepTable, max_ticks: int | None = None) -> SimulationResult:
    """Run a recipe start to finish without waiting in real time.

    Args:
        table: Recipe to simulate
        max_ticks: Tick budget before declaring a stall. Defaults to the
            highest threshold plus a grace tick.

    Returns:
        SimulationResult with the timeline and whether the recipe finished
    """
    if max_ticks is None:
        max_ticks = max(step.threshold_seconds for step in table.steps) + SIMULATION_GRACE_TICKS

    clock = ManualClock()
    controller = TimerController(table, clock)
    result = SimulationResult()

    snapshot = controller.begin()
    result.events.append(_event(snapshot, "begin"))

    while not snapshot.is_finished:
        before = snapshot

        if before.is_timer_running:
            if result.ticks >= max_ticks:
                result.stalled_at = before.step_index
                break
            clock.advance()
            result.ticks += 1
            snapshot = controller.snapshot()
            if snapshot.step_index != before.step_index:
                result.events.append(_event(snapshot, "timer", before.elapsed_seconds + 1))
            continue

        snapshot = controller.complete_step()
        if snapshot.step_index != before.step_index:
            result.events.append(_event(snapshot, "user"))
        elif snapshot.is_timer_running:
            result.events.append(_event(snapshot, "start_timer"))
        else:
            # Completing the step changed nothing, so nothing else ever will
            result.stalled_at = before.step_index
            break

    result.finished = snapshot.is_finished
    return result
