"""Data models for brewstep.

This package defines the data structures shared by the controller
and the presentation layer:
- Recipe steps and their completion actions (Step, CompletionAction)
- Mutable per-run state (Session)
- Read-only state exposed to the UI (Snapshot)

Steps and snapshots are frozen Pydantic models, so they can be shared
across threads and serialized to JSON for --json output.

Example:
    >>> from brewstep.models import CompletionAction, Step
    >>> step = Step(instruction="Start plunging.", completion_action=CompletionAction.ADVANCE)
    >>> step.model_dump_json()
"""

from .session import Session
from .snapshot import Snapshot
from .step import CompletionAction, Step

__all__ = [
    "CompletionAction",
    "Session",
    "Snapshot",
    "Step",
]
