"""Rename command implementation.

Scans a directory, selects entries and inserts a suffix between each
selected name's stem and extension.
"""

from pathlib import Path
from typing import Annotated

import typer

from filemgr.cli.display import create_plan_table, create_results_table, print_results_summary
from filemgr.cli.types import (
    AllOption,
    DryRunOption,
    FilterOption,
    FlatOption,
    IndexOption,
    PathArgument,
    RangeOption,
    RecursiveOption,
    SelectOption,
    YesOption,
    apply_selection,
    get_config,
    load_registry,
    resolve_recursive,
)
from filemgr.registry.operator import compose_suffixed_name
from filemgr.utils.formatting import console, print_error, print_info, print_warning


def rename(
    ctx: typer.Context,
    suffix: Annotated[
        str,
        typer.Argument(help="Text to insert before the extension, e.g. _v2."),
    ],
    path: PathArgument = Path("."),
    recursive: RecursiveOption = False,
    flat: FlatOption = False,
    pattern: FilterOption = "",
    select: SelectOption = None,
    index: IndexOption = None,
    index_range: RangeOption = None,
    select_all: AllOption = False,
    dry_run: DryRunOption = False,
    yes: YesOption = False,
) -> None:
    """Rename selected entries by appending a suffix to their stem."""
    if not suffix:
        print_error("Suffix cannot be empty.")
        raise typer.Exit(code=1)

    config = get_config(ctx)
    registry = load_registry(path, resolve_recursive(recursive, flat, config), pattern)

    count = apply_selection(
        registry,
        names=select,
        indices=index,
        ranges=index_range,
        select_all=select_all,
    )
    if count == 0:
        print_warning("No entries selected. Use --select, --index, --range or --all.")
        raise typer.Exit(code=1)

    selected = registry.selected_entries()
    new_names = [compose_suffixed_name(e.name, suffix) for e in selected]
    console.print(create_plan_table(selected, "Renames", new_names=new_names, dry_run=dry_run))

    if dry_run:
        print_info(f"Dry-run: {count} item(s) would be renamed.")
        return

    if config.confirm and not yes:
        confirmed = typer.confirm(
            f"\nProceed with renaming {count} item(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    results = registry.rename_selected(suffix)

    console.print(
        create_results_table(results, title="Rename Results", root=registry.current_path)
    )
    print_results_summary(results, "renamed")

    if any(not r.success for r in results):
        raise typer.Exit(code=1)
