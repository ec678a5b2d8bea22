"""Brew command: interactive timer session."""

import threading
from pathlib import Path

import typer
from rich.markup import escape
from rich.panel import Panel

from ..core import ThreadingClock, TimerController
from ..models import CompletionAction, Snapshot
from ..output import OutputContext, get_output_context
from .common import CONFIG_OPTION, RECIPE_OPTION, load_or_exit


class BrewView:
    """Renders snapshots as the controller publishes them.

    The instruction block is printed whenever the step or timer state
    changes; plain ticks only refresh the counter line on a terminal.
    """

    def __init__(self, ctx: OutputContext) -> None:
        self.ctx = ctx
        self._last_key: tuple[int, bool, bool] | None = None
        self._print_lock = threading.Lock()

    def on_snapshot(self, snapshot: Snapshot) -> None:
        key = (snapshot.step_index, snapshot.has_started, snapshot.is_timer_running)
        with self._print_lock:
            if key != self._last_key:
                self._last_key = key
                self.show(snapshot)
            elif snapshot.is_timer_running and self.ctx.console.is_terminal:
                self.ctx.console.print(f"[cyan]{snapshot.elapsed_seconds}s[/cyan]", end="\r")

    def show(self, snapshot: Snapshot) -> None:
        if self.ctx.json_mode:
            self.ctx.print_json(
                {"snapshot": snapshot.model_dump(mode="json"), "can_restart": snapshot.can_restart}
            )
            return

        console = self.ctx.console
        if not snapshot.has_started:
            console.print("\nPress [bold]Enter[/bold] to begin, [bold]q[/bold] to quit.")
            return

        step = snapshot.current_step
        text = escape(f"{step.instruction} {step.follow_up}".strip())
        console.print(f"\n[bold]{snapshot.step_index + 1}/{snapshot.step_count}[/bold] {text}")
        if snapshot.is_timer_running:
            console.print(f"[cyan]{snapshot.elapsed_seconds}s[/cyan]")
        console.print(f"[dim]{escape(_hint(snapshot))}[/dim]")


def _hint(snapshot: Snapshot) -> str:
    if snapshot.can_restart:
        return "[r] Restart  [q] Quit"
    action = snapshot.current_step.completion_action
    if action == CompletionAction.START_TIMER and snapshot.is_timer_running:
        return "Timer running...  [r] Restart  [q] Quit"
    return f"[Enter] {action.label}  [r] Restart  [q] Quit"


def brew(
    config: Path = CONFIG_OPTION,
    recipe: Path | None = RECIPE_OPTION,
    tick_interval: float | None = typer.Option(
        None, "--tick-interval", min=0.001, help="Seconds per tick (overrides config)"
    ),
) -> None:
    """Brew interactively: Enter completes the current step."""
    ctx = get_output_context()
    brew_config, table = load_or_exit(ctx, config, recipe)

    controller = TimerController(
        table,
        ThreadingClock(),
        tick_interval=tick_interval or brew_config.timer.tick_interval,
    )
    view = BrewView(ctx)
    unsubscribe = controller.subscribe(view.on_snapshot)

    if not ctx.json_mode:
        ctx.console.print(
            Panel.fit(
                "[bold]Brew the perfect cup every time.[/bold]",
                title=f"brewstep ({len(table)} steps)",
            )
        )
    view.on_snapshot(controller.snapshot())

    try:
        while True:
            try:
                command = ctx.console.input().strip().lower()
            except EOFError:
                break

            if command == "q":
                break
            if command == "r":
                controller.restart()
            elif command == "":
                if controller.snapshot().has_started:
                    controller.complete_step()
                else:
                    controller.begin()
            else:
                ctx.print(f"[yellow]Unknown command: {command!r}[/yellow]")
    finally:
        unsubscribe()
        controller.cancel_timer()
