"""Tests for logging configuration."""

import logging

from rich.logging import RichHandler

from brewstep.logging import LogLevel, configure_logging, resolve_level


def test_default_level_is_info():
    assert resolve_level() == LogLevel.NORMAL == logging.INFO


def test_verbose_is_debug():
    assert resolve_level(verbosity=1) == logging.DEBUG
    assert resolve_level(verbosity=3) == logging.DEBUG


def test_quiet_wins_over_verbose():
    assert resolve_level(verbosity=2, quiet=True) == logging.WARNING


def test_configure_installs_rich_handler():
    console = configure_logging(verbosity=1, no_color=True)
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(h, RichHandler) for h in root.handlers)
    assert console.stderr is True
