"""Configuration management for brewstep."""

import tomllib
from pathlib import Path

import tomli_w
from pydantic import BaseModel, Field, ValidationError

from .constants import CONFIG_FILENAME, DEFAULT_TICK_INTERVAL
from .errors import ConfigError


class TimerConfig(BaseModel):
    """Clock settings."""

    tick_interval: float = Field(
        default=DEFAULT_TICK_INTERVAL, gt=0, description="Seconds between ticks"
    )


class RecipeConfig(BaseModel):
    """Which recipe to brew."""

    path: Path | None = Field(default=None, description="Recipe TOML file (default: AeroPress)")


class BrewConfig(BaseModel):
    """Root configuration for brewstep."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    recipe: RecipeConfig = Field(default_factory=RecipeConfig)

    def resolve_recipe_path(self, base_dir: Path) -> Path | None:
        """Return the configured recipe path, relative paths taken from base_dir."""
        path = self.recipe.path
        if path is None:
            return None
        path = path.expanduser()
        return path if path.is_absolute() else base_dir / path


def load_config(config_path: Path) -> BrewConfig:
    """Load config from a brewstep.toml file.

    Args:
        config_path: Path to the config file

    Returns:
        Loaded configuration, or defaults if the file doesn't exist

    Raises:
        ConfigError: If the file is unreadable, not valid TOML or has invalid values
    """
    if not config_path.exists():
        return BrewConfig()
    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {config_path}: {e.strerror or e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e
    try:
        return BrewConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_path}: {e}") from e


def write_config_template(directory: Path) -> Path:
    """Write default brewstep.toml template.

    Args:
        directory: Directory to write the config into

    Returns:
        Path to the written config file
    """
    config_path = directory / CONFIG_FILENAME
    template = {
        # Lower tick_interval (e.g. 0.05) to speed through a recipe while testing
        "timer": {"tick_interval": DEFAULT_TICK_INTERVAL},
        # Point recipe.path at your own [[steps]] file to brew something else
        "recipe": {},
    }
    with open(config_path, "wb") as f:
        tomli_w.dump(template, f)
    return config_path
