"""Ordered, immutable table of recipe steps."""

import logging
from collections.abc import Sequence
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..models import CompletionAction, Step

logger = logging.getLogger(__name__)


class StepTable(BaseModel):
    """Recipe steps sorted by threshold.

    Lookups past either end return None rather than raising, so callers
    can treat them as "no such step".
    """

    model_config = ConfigDict(frozen=True)

    steps: tuple[Step, ...] = Field(min_length=1, description="Steps in recipe order")

    @model_validator(mode="after")
    def validate_thresholds_sorted(self) -> Self:
        """Ensure thresholds never decrease along the table."""
        for index, (prev, step) in enumerate(zip(self.steps, self.steps[1:], strict=False), 1):
            if step.threshold_seconds < prev.threshold_seconds:
                raise ValueError(
                    f"Step {index} threshold ({step.threshold_seconds}s) is below "
                    f"step {index - 1} threshold ({prev.threshold_seconds}s)"
                )
        if not self.ends_with_finish:
            logger.warning("Last step does not finish the recipe")
        return self

    @classmethod
    def of(cls, steps: Sequence[Step]) -> "StepTable":
        """Build a table from any sequence of steps."""
        return cls(steps=tuple(steps))

    @property
    def ends_with_finish(self) -> bool:
        return self.steps[-1].completion_action == CompletionAction.FINISH

    @property
    def last_index(self) -> int:
        return len(self.steps) - 1

    def get(self, index: int) -> Step | None:
        """Return the step at index, or None when out of range."""
        if 0 <= index < len(self.steps):
            return self.steps[index]
        return None

    def last(self) -> Step:
        return self.steps[-1]

    def __len__(self) -> int:
        return len(self.steps)
