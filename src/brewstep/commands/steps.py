"""Steps command: show the recipe."""

from pathlib import Path

from rich.markup import escape
from rich.table import Table

from ..output import get_output_context
from .common import CONFIG_OPTION, RECIPE_OPTION, load_or_exit


def steps(
    config: Path = CONFIG_OPTION,
    recipe: Path | None = RECIPE_OPTION,
) -> None:
    """List the recipe steps and when each one becomes current."""
    ctx = get_output_context()
    _, table = load_or_exit(ctx, config, recipe)

    if ctx.json_mode:
        ctx.print_json(
            [{"index": i, **step.model_dump(mode="json")} for i, step in enumerate(table.steps)]
        )
        return

    view = Table(title=f"Recipe ({len(table)} steps)")
    view.add_column("#", justify="right")
    view.add_column("At", justify="right")
    view.add_column("Instruction")
    view.add_column("Follow-up", style="dim")
    view.add_column("Action")

    for i, step in enumerate(table.steps, 1):
        view.add_row(
            str(i),
            f"{step.threshold_seconds}s",
            escape(step.instruction),
            escape(step.follow_up),
            step.completion_action.label,
        )

    ctx.console.print(view)
