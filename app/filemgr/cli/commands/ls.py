"""List command implementation.

Scans a directory and prints its visible entries with the indices used
by the selection options of delete and rename.
"""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from filemgr.cli.display import create_entries_table
from filemgr.cli.types import (
    FilterOption,
    FlatOption,
    OutputFormat,
    PathArgument,
    RecursiveOption,
    get_config,
    load_registry,
    resolve_recursive,
)
from filemgr.registry.models import Entry
from filemgr.utils.formatting import console, format_size, print_info


def ls(
    ctx: typer.Context,
    path: PathArgument = Path("."),
    recursive: RecursiveOption = False,
    flat: FlatOption = False,
    pattern: FilterOption = "",
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List the entries of a directory."""
    config = get_config(ctx)
    is_recursive = resolve_recursive(recursive, flat, config)
    registry = load_registry(path, is_recursive, pattern)

    visible = registry.visible_entries()

    if output_format == OutputFormat.JSON:
        _print_json(visible)
        return

    if not visible:
        print_info(f"No entries in {escape(registry.current_path)}.")
        return

    console.print(
        create_entries_table(
            visible,
            title=escape(registry.current_path),
            show_relative=is_recursive,
        )
    )

    hidden = len(registry) - len(visible)
    total_size = sum(e.size_bytes for _, e in visible)
    summary = f"\n[dim]{len(visible)} entries ({format_size(total_size)})"
    if hidden:
        summary += f", {hidden} hidden by filter '{escape(pattern)}'"
    console.print(f"{summary}[/dim]")


def _print_json(entries: list[tuple[int, Entry]]) -> None:
    """Display entries as JSON."""
    data = [
        {
            "index": index,
            "path": e.path,
            "name": e.name,
            "relative_path": e.relative_path,
            "size_bytes": e.size_bytes,
            "path_type": e.path_type.value,
        }
        for index, e in entries
    ]
    typer.echo(json.dumps(data, indent=2))
