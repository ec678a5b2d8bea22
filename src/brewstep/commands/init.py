"""Init command implementation."""

from pathlib import Path

from ..config import write_config_template
from ..constants import CONFIG_FILENAME
from ..output import get_output_context


def init() -> None:
    """Write a brewstep.toml template in the current directory."""
    ctx = get_output_context()
    config_path = Path.cwd() / CONFIG_FILENAME

    if config_path.exists():
        ctx.print(f"[yellow]Config already exists:[/yellow] {config_path}")
        ctx.print_json({"config": str(config_path), "created": False})
        return

    write_config_template(config_path.parent)
    ctx.success(
        f"Created config template: {config_path}", {"config": str(config_path), "created": True}
    )
