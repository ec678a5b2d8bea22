"""Brewstep: a staged timer that walks you through a brew recipe."""

__version__ = "0.1.0"
