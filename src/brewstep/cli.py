"""Brewstep CLI: a staged timer for brew recipes."""

import typer
from rich.console import Console

from brewstep import __version__

from . import output
from .commands import brew, init, simulate, steps
from .logging import configure_logging
from .output import OutputContext


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"brewstep {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="brewstep",
    help="Step-by-step brewing timer",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error log output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
) -> None:
    """Brewstep - brew the perfect cup every time."""
    configure_logging(verbosity=verbose, quiet=quiet, no_color=no_color)
    console = Console(no_color=no_color, highlight=False)
    output.set_output_context(OutputContext(console=console, json_mode=json_output))


app.command()(brew)
app.command()(simulate)
app.command()(steps)
app.command()(init)


if __name__ == "__main__":
    app()
