"""Helpers shared by CLI commands."""

from pathlib import Path

import typer

from ..config import BrewConfig
from ..constants import CONFIG_FILENAME
from ..core import StepTable
from ..errors import BrewstepError
from ..output import OutputContext
from ..recipe import load_brew_settings

CONFIG_OPTION = typer.Option(
    Path(CONFIG_FILENAME), "--config", "-c", help="Config file (defaults apply if missing)"
)
RECIPE_OPTION = typer.Option(None, "--recipe", help="Recipe TOML file overriding the config")


def load_or_exit(
    ctx: OutputContext, config_path: Path, recipe_path: Path | None
) -> tuple[BrewConfig, StepTable]:
    """Load config and recipe, exiting with code 1 on any error."""
    try:
        return load_brew_settings(config_path, recipe_path)
    except BrewstepError as e:
        ctx.error(str(e))
        raise typer.Exit(1) from None
