"""Recipe loading.

A recipe is a TOML file with one [[steps]] table per step:

    [[steps]]
    threshold_seconds = 15
    instruction = "Fill up with the remaining amount of water."
    follow_up = "Wait until 60 seconds, then put the cap on."
    completion_action = "advance"

The packaged AeroPress recipe is used when no path is configured.
"""

import logging
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .config import BrewConfig, load_config
from .constants import DEFAULT_RECIPE
from .core import StepTable
from .errors import RecipeError

logger = logging.getLogger(__name__)


def parse_recipe(data: dict[str, Any], source: str = "<recipe>") -> StepTable:
    """Build a step table from parsed recipe data.

    Args:
        data: Parsed TOML document with a "steps" array
        source: Name used in error messages

    Returns:
        Validated step table

    Raises:
        RecipeError: If steps are missing, invalid, unsorted, or the last
            step does not finish the recipe
    """
    steps = data.get("steps")
    if not isinstance(steps, list) or not steps:
        raise RecipeError(f"{source}: recipe needs at least one [[steps]] table")

    try:
        table = StepTable.model_validate({"steps": steps})
    except ValidationError as e:
        raise RecipeError(f"{source}: invalid recipe: {e}") from e

    if not table.ends_with_finish:
        raise RecipeError(f"{source}: last step must have completion_action = \"finish\"")

    logger.debug(f"Loaded {len(table)} steps from {source}")
    return table


def load_recipe(path: Path) -> StepTable:
    """Load a recipe from a TOML file.

    Raises:
        RecipeError: If the file is missing or unreadable, not valid TOML, or not a valid recipe
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        raise RecipeError(f"Recipe file not found: {path}") from None
    except OSError as e:
        raise RecipeError(f"Cannot read recipe {path}: {e.strerror or e}") from e
    except tomllib.TOMLDecodeError as e:
        raise RecipeError(f"Invalid TOML in {path}: {e}") from e
    return parse_recipe(data, source=str(path))


def default_recipe() -> StepTable:
    """Load the packaged AeroPress recipe."""
    resource = resources.files("brewstep") / "recipes" / DEFAULT_RECIPE
    data = tomllib.loads(resource.read_text(encoding="utf-8"))
    return parse_recipe(data, source=DEFAULT_RECIPE)


def load_brew_settings(
    config_path: Path, recipe_path: Path | None = None
) -> tuple[BrewConfig, StepTable]:
    """Load the config and the recipe it selects.

    Args:
        config_path: brewstep.toml to read (defaults apply if missing)
        recipe_path: Recipe file overriding the configured one

    Returns:
        Tuple of (config, step table)

    Raises:
        ConfigError: If the config file is invalid
        RecipeError: If the selected recipe is invalid
    """
    config = load_config(config_path)
    path = recipe_path or config.resolve_recipe_path(config_path.parent)
    table = load_recipe(path) if path else default_recipe()
    return config, table
