"""Step model for recipe instructions.

A step is one instruction of a brew recipe together with the elapsed
count at which it becomes current and what completing it does.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CompletionAction(str, Enum):
    """What the controller does when the current step is completed."""

    ADVANCE = "advance"
    START_TIMER = "start_timer"
    FINISH = "finish"

    @property
    def label(self) -> str:
        """Button text shown for this action."""
        return _ACTION_LABELS[self]


_ACTION_LABELS = {
    CompletionAction.ADVANCE: "Next",
    CompletionAction.START_TIMER: "Start Timer",
    CompletionAction.FINISH: "Done",
}


class Step(BaseModel):
    """Single recipe instruction.

    Attributes:
        threshold_seconds: Elapsed count at which the step becomes current.
        instruction: What to do now.
        follow_up: Guidance shown while waiting for the next threshold.
        completion_action: Effect of completing the step.

    Example:
        >>> step = Step(
        ...     threshold_seconds=15,
        ...     instruction="Fill up with the remaining amount of water.",
        ...     follow_up="Wait until 60 seconds, then put the cap on.",
        ...     completion_action=CompletionAction.ADVANCE,
        ... )
    """

    model_config = ConfigDict(frozen=True)

    threshold_seconds: int = Field(default=0, ge=0, description="Elapsed count to show step at")
    instruction: str = Field(description="Instruction text")
    follow_up: str = Field(default="", description="Guidance until the next threshold")
    completion_action: CompletionAction = Field(
        default=CompletionAction.ADVANCE, description="Effect of completing the step"
    )
