"""Brewstep errors."""


class BrewstepError(Exception):
    """Base exception for brewstep errors."""


class ConfigError(BrewstepError):
    """Raised when the configuration file cannot be read or validated."""


class RecipeError(BrewstepError):
    """Raised when a recipe file cannot be read or breaks step table rules."""
