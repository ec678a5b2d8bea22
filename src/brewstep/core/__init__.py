"""Core timer logic for brewstep.

This package contains the state machine and its collaborators, with no
terminal I/O:
- step_table: Immutable, sorted recipe steps with safe lookup
- clock: Tick sources (real-time threads or manual ticks)
- controller: Staged timer controller and its intents
- simulation: Dry-run of a recipe on a manual clock
"""

from .clock import Clock, ClockHandle, ManualClock, ThreadingClock
from .controller import Intent, Listener, TimerController
from .simulation import SimulationResult, TimelineEvent, simulate_recipe
from .step_table import StepTable

__all__ = [
    "Clock",
    "ClockHandle",
    "Intent",
    "Listener",
    "ManualClock",
    "SimulationResult",
    "StepTable",
    "ThreadingClock",
    "TimelineEvent",
    "TimerController",
    "simulate_recipe",
]
