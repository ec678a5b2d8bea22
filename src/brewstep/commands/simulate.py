"""Simulate command: dry-run a recipe without waiting."""

from dataclasses import asdict
from pathlib import Path

import typer
from rich.markup import escape

from ..core import simulate_recipe
from ..output import get_output_context
from .common import CONFIG_OPTION, RECIPE_OPTION, load_or_exit

_TRIGGER_LABELS = {
    "begin": "start",
    "user": "user",
    "timer": "timer",
    "start_timer": "timer started",
}


def simulate(
    config: Path = CONFIG_OPTION,
    recipe: Path | None = RECIPE_OPTION,
    max_ticks: int | None = typer.Option(
        None, "--max-ticks", min=0, help="Tick budget before reporting a stall"
    ),
) -> None:
    """Run the recipe on a simulated clock and print its timeline."""
    ctx = get_output_context()
    _, table = load_or_exit(ctx, config, recipe)

    result = simulate_recipe(table, max_ticks=max_ticks)

    if ctx.json_mode:
        ctx.print_json(
            {
                "finished": result.finished,
                "ticks": result.ticks,
                "stalled_at": result.stalled_at,
                "events": [asdict(event) for event in result.events],
            }
        )
    else:
        for event in result.events:
            ctx.console.print(
                f"[cyan]{event.elapsed_seconds:>4}s[/cyan]  "
                f"{event.step_index + 1:>2}. {escape(event.instruction)} "
                f"[dim]({_TRIGGER_LABELS[event.trigger]})[/dim]"
            )

    if result.stalled_at is not None:
        if not ctx.json_mode:
            step = table.steps[result.stalled_at]
            ctx.error(
                f"Recipe stalled on step {result.stalled_at + 1} after {result.ticks} ticks: "
                f"{step.instruction}"
            )
        raise typer.Exit(1)

    ctx.print(f"[green]Recipe finished in {result.ticks} ticks[/green]")
