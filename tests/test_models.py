"""Tests for brewstep data models."""

import pytest
from pydantic import ValidationError

from brewstep.models import CompletionAction, Session, Snapshot, Step


def test_step_defaults():
    step = Step(instruction="Put the cap on.")
    assert step.threshold_seconds == 0
    assert step.follow_up == ""
    assert step.completion_action == CompletionAction.ADVANCE


def test_step_parses_action_value():
    step = Step.model_validate({"instruction": "Go", "completion_action": "start_timer"})
    assert step.completion_action is CompletionAction.START_TIMER


def test_step_rejects_negative_threshold():
    with pytest.raises(ValidationError):
        Step(threshold_seconds=-1, instruction="Too early")


def test_step_rejects_unknown_action():
    with pytest.raises(ValidationError):
        Step.model_validate({"instruction": "Go", "completion_action": "explode"})


def test_step_is_frozen():
    step = Step(instruction="Stir")
    with pytest.raises(ValidationError):
        step.instruction = "Shake"  # type: ignore[misc]


def test_action_labels():
    assert CompletionAction.ADVANCE.label == "Next"
    assert CompletionAction.START_TIMER.label == "Start Timer"
    assert CompletionAction.FINISH.label == "Done"


def test_session_defaults():
    session = Session()
    assert session.elapsed_seconds == 0
    assert session.current_step_index == 0
    assert session.started is False
    assert session.is_timer_running is False


def _snapshot(**overrides) -> Snapshot:
    fields = {
        "elapsed_seconds": 0,
        "current_step": Step(instruction="Done!", completion_action=CompletionAction.FINISH),
        "step_index": 2,
        "step_count": 3,
        "is_timer_running": False,
        "has_started": True,
        "is_finished": True,
    }
    fields.update(overrides)
    return Snapshot(**fields)


def test_can_restart_when_finished_and_stopped():
    assert _snapshot().can_restart is True


def test_cannot_restart_while_timer_runs():
    assert _snapshot(is_timer_running=True).can_restart is False
    assert _snapshot(is_finished=False, step_index=1).can_restart is False


def test_snapshot_json_uses_action_value():
    json_str = _snapshot().model_dump_json()
    assert '"completion_action":"finish"' in json_str
