"""Read-only view of a timer session for presentation layers."""

from pydantic import BaseModel, ConfigDict, Field

from .step import Step


class Snapshot(BaseModel):
    """Session state as seen by the UI after an intent or tick.

    Attributes:
        elapsed_seconds: Ticks counted since the timer started.
        current_step: Step the user is on.
        step_index: Zero-based index of the current step.
        step_count: Number of steps in the recipe.
        is_timer_running: True while a clock handle is held.
        has_started: True once the session has begun.
        is_finished: True when the last step is current.
    """

    model_config = ConfigDict(frozen=True)

    elapsed_seconds: int = Field(description="Ticks counted since the timer started")
    current_step: Step = Field(description="Step the user is on")
    step_index: int = Field(description="Zero-based index of the current step")
    step_count: int = Field(description="Number of steps in the recipe")
    is_timer_running: bool = Field(description="True while a clock is running")
    has_started: bool = Field(description="True once the session has begun")
    is_finished: bool = Field(description="True when the last step is current")

    @property
    def can_restart(self) -> bool:
        """Restart is offered once the recipe is done and the clock has stopped."""
        return self.is_finished and not self.is_timer_running
