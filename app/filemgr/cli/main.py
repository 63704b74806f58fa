"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from filemgr import __version__
from filemgr.cli.commands import config, delete, ls, rename
from filemgr.core.config import AppConfig, ConfigError, load_config
from filemgr.core.logs import setup_logging
from filemgr.utils.formatting import print_error, print_warning, use_theme_colors

# Create main Typer app
app = typer.Typer(
    name="filemgr",
    help="List a directory and delete or rename selected entries in bulk.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"filemgr version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to configuration file.",
        ),
    ] = None,
) -> None:
    """filemgr - bulk delete and rename for directory listings.

    Scan a directory, filter and select its entries, then delete or
    rename the selection in one batch.
    """
    try:
        config_data = load_config(config_path)
    except ConfigError as e:
        # Let "config init --force" repair a broken file
        if ctx.invoked_subcommand != "config":
            print_error(str(e))
            raise typer.Exit(code=1) from e
        print_warning(f"{e} (using defaults)")
        config_data = AppConfig()

    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "ERROR"
    else:
        level = config_data.log_level
    setup_logging(level)
    use_theme_colors(config_data.colors)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config"] = config_data
    ctx.obj["config_path"] = config_path


# Register commands
app.command(name="ls")(ls.ls)
app.command(name="delete")(delete.delete)
app.command(name="rename")(rename.rename)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
