"""Config commands.

Shows the effective configuration and writes a default config file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from filemgr.cli.types import get_config
from filemgr.core.config import AppConfig, ConfigError, save_config
from filemgr.core.paths import get_config_path
from filemgr.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show or create the configuration file.",
    no_args_is_help=True,
)


def _config_path(ctx: typer.Context) -> Path:
    """Return the config path given with --config, or the default one."""
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    path = obj.get("config_path")
    return path if isinstance(path, Path) else get_config_path()


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    config = get_config(ctx)
    path = _config_path(ctx)

    table = Table(
        title="Configuration",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Key", style="bold")
    table.add_column("Value", style="info")

    table.add_row("recursive", str(config.recursive).lower())
    table.add_row("confirm", str(config.confirm).lower())
    table.add_row("log_level", config.log_level)
    for name, value in config.colors.model_dump().items():
        table.add_row(f"colors.{name}", value)

    console.print(table)
    state = "" if path.exists() else " (not present, using defaults)"
    console.print(f"\n[dim]Config file: {path}{state}[/dim]")


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default values."""
    path = _config_path(ctx)

    if path.exists() and not force:
        print_info(f"Config file already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=0)

    try:
        saved = save_config(AppConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Wrote default config to {saved}")
