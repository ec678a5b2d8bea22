"""Shared test fixtures for brewstep tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from brewstep.core import ManualClock, StepTable, TimerController
from brewstep.models import CompletionAction, Step
from brewstep.recipe import default_recipe


def make_step(
    threshold_seconds: int = 0,
    instruction: str = "Do the thing",
    completion_action: CompletionAction = CompletionAction.ADVANCE,
    follow_up: str = "",
) -> Step:
    """Create a test step."""
    return Step(
        threshold_seconds=threshold_seconds,
        instruction=instruction,
        follow_up=follow_up,
        completion_action=completion_action,
    )


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def manual_clock() -> ManualClock:
    """Clock that ticks only when advanced."""
    return ManualClock()


@pytest.fixture
def scenario_table() -> StepTable:
    """Three steps: advance at 0, start timer at 0, then a step at 15s."""
    return StepTable.of(
        [
            make_step(0, "A"),
            make_step(0, "B", CompletionAction.START_TIMER),
            make_step(15, "C"),
        ]
    )


@pytest.fixture
def timed_table() -> StepTable:
    """Timer starts on the first step; steps follow at 5s, 10s and finish at 20s."""
    return StepTable.of(
        [
            make_step(0, "Start", CompletionAction.START_TIMER),
            make_step(5, "Pour"),
            make_step(10, "Stir"),
            make_step(20, "Done", CompletionAction.FINISH),
        ]
    )


@pytest.fixture
def aeropress_table() -> StepTable:
    """The packaged AeroPress recipe."""
    return default_recipe()


@pytest.fixture
def controller(scenario_table: StepTable, manual_clock: ManualClock) -> TimerController:
    """Controller over the scenario table with a manual clock."""
    return TimerController(scenario_table, manual_clock)


@pytest.fixture
def timed_controller(timed_table: StepTable, manual_clock: ManualClock) -> TimerController:
    """Controller over the timed table with a manual clock."""
    return TimerController(timed_table, manual_clock)


@pytest.fixture
def recipe_file(tmp_path: Path) -> Path:
    """Write a small valid recipe file."""
    path = tmp_path / "recipe.toml"
    path.write_text(
        """[[steps]]
instruction = "Grind the beans."
completion_action = "start_timer"

[[steps]]
threshold_seconds = 3
instruction = "Pour the water."
follow_up = "Wait until 5 seconds."

[[steps]]
threshold_seconds = 5
instruction = "Serve."
completion_action = "finish"
"""
    )
    return path
