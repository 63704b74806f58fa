"""Shared types and utilities for CLI commands.

This module provides the option types and the scan/filter/select helpers
shared by the ls, delete and rename commands.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from filemgr.core.config import AppConfig
from filemgr.registry.registry import FileRegistry
from filemgr.utils.formatting import print_error, print_warning


class OutputFormat(str, Enum):
    """Output format options for listings."""

    TABLE = "table"
    JSON = "json"


PathArgument = Annotated[
    Path,
    typer.Argument(help="Directory to scan."),
]
RecursiveOption = Annotated[
    bool,
    typer.Option("--recursive", "-r", help="Include all subdirectories."),
]
FlatOption = Annotated[
    bool,
    typer.Option("--flat", help="Only immediate children, even if config says recursive."),
]
FilterOption = Annotated[
    str,
    typer.Option("--filter", "-f", help="Only entries whose name contains this text."),
]
SelectOption = Annotated[
    list[str] | None,
    typer.Option("--select", "-s", help="Select an entry by name or relative path."),
]
IndexOption = Annotated[
    list[int] | None,
    typer.Option("--index", "-i", help="Select an entry by its index in 'ls' output."),
]
RangeOption = Annotated[
    list[str] | None,
    typer.Option("--range", help="Select visible entries between two indices, e.g. 2:7."),
]
AllOption = Annotated[
    bool,
    typer.Option("--all", "-a", help="Select every visible entry."),
]
DryRunOption = Annotated[
    bool,
    typer.Option("--dry-run", help="Show what would change without touching anything."),
]
YesOption = Annotated[
    bool,
    typer.Option("--yes", "-y", help="Skip confirmation prompt."),
]


def get_config(ctx: typer.Context) -> AppConfig:
    """Get the configuration loaded by the main callback.

    Args:
        ctx: Typer context of the running command.

    Returns:
        The loaded AppConfig, or defaults if none was stored.
    """
    obj = ctx.obj if isinstance(ctx.obj, dict) else {}
    config = obj.get("config")
    return config if isinstance(config, AppConfig) else AppConfig()


def resolve_recursive(recursive: bool, flat: bool, config: AppConfig) -> bool:
    """Combine --recursive/--flat with the configured default.

    --flat wins over --recursive; with neither flag the config decides.
    """
    if flat:
        return False
    if recursive:
        return True
    return config.recursive


def load_registry(path: Path, recursive: bool, pattern: str) -> FileRegistry:
    """Scan a directory and apply a filter, exiting if it cannot be read.

    Args:
        path: Directory to scan.
        recursive: Whether to scan subdirectories.
        pattern: Filter pattern ("" for none).

    Returns:
        Populated FileRegistry.

    Raises:
        typer.Exit: If path is not a readable directory.
    """
    registry = FileRegistry()
    registry.scan(path, recursive=recursive)

    if not os.path.isdir(registry.current_path) or not os.access(registry.current_path, os.R_OK):
        print_error(f"Not a readable directory: {escape(registry.current_path)}")
        raise typer.Exit(code=1)

    registry.apply_filter(pattern)
    return registry


def parse_range(value: str) -> tuple[int, int]:
    """Parse an "A:B" index range.

    Args:
        value: Range text, both ends inclusive.

    Returns:
        Tuple of (start, end).

    Raises:
        typer.BadParameter: If the text is not two integers separated by ':'.
    """
    start, sep, end = value.partition(":")
    try:
        if not sep:
            raise ValueError(value)
        return int(start), int(end)
    except ValueError:
        msg = f"Invalid range '{value}', expected START:END"
        raise typer.BadParameter(msg) from None


def apply_selection(
    registry: FileRegistry,
    *,
    names: list[str] | None = None,
    indices: list[int] | None = None,
    ranges: list[str] | None = None,
    select_all: bool = False,
) -> int:
    """Select entries according to the CLI selection options.

    Selections accumulate: names, indices and ranges are all added.

    Args:
        registry: Registry to select in.
        names: Entry names or relative paths.
        indices: Registry indices as printed by 'ls'.
        ranges: "A:B" index ranges.
        select_all: Select every visible entry.

    Returns:
        Number of entries eligible for the next batch operation.

    Raises:
        typer.Exit: If an index or range is out of bounds.
    """
    if select_all:
        registry.select_all()

    if names:
        registry.select_paths(names)
        visible = {
            key
            for _, entry in registry.visible_entries()
            for key in (entry.relative_path, entry.name, entry.path)
        }
        for name in names:
            if name not in visible:
                print_warning(f"No visible entry matches '{escape(name)}'.")

    try:
        for index in indices or []:
            if not registry.set_selected(index):
                print_warning(f"Entry #{index} is hidden by the filter, not selected.")
        for value in ranges or []:
            start, end = parse_range(value)
            registry.select_range(start, end, extend=True)
    except IndexError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    return registry.selected_count()
