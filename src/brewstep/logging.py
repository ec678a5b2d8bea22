"""Logging setup for the brewstep CLI."""

import logging
from enum import IntEnum

from rich.console import Console
from rich.logging import RichHandler


class LogLevel(IntEnum):
    """Log levels selected by the global CLI flags."""

    QUIET = logging.WARNING
    NORMAL = logging.INFO
    VERBOSE = logging.DEBUG


def resolve_level(verbosity: int = 0, quiet: bool = False) -> LogLevel:
    """Map the -v count and -q flag to a log level. Quiet wins."""
    if quiet:
        return LogLevel.QUIET
    if verbosity >= 1:
        return LogLevel.VERBOSE
    return LogLevel.NORMAL


def configure_logging(
    verbosity: int = 0,
    quiet: bool = False,
    no_color: bool = False,
) -> Console:
    """Install a Rich log handler on the root logger.

    Args:
        verbosity: Number of -v flags (0=info, 1+=debug, 2+ also shows time and path)
        quiet: Only show warnings and errors
        no_color: Disable colored output

    Returns:
        The stderr console log records are written to
    """
    level = resolve_level(verbosity, quiet)
    detailed = verbosity >= 2 and not quiet

    console = Console(
        stderr=True,
        no_color=no_color,
    )

    handler = RichHandler(
        console=console,
        show_time=detailed,
        show_path=detailed,
    )

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[handler],
        force=True,
    )

    return console
