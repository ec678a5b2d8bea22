"""CLI command implementations for brewstep.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .brew import BrewView, brew
from .init import init
from .simulate import simulate
from .steps import steps

__all__ = [
    "BrewView",
    "brew",
    "init",
    "simulate",
    "steps",
]
