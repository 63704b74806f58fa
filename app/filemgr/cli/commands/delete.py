"""Delete command implementation.

Scans a directory, selects entries and removes them from disk.
"""

from pathlib import Path

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
from filemgr.utils.formatting import console, print_info, print_warning


def delete(
    ctx: typer.Context,
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
    """Delete selected entries (directories with all their contents)."""
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

    console.print(create_plan_table(registry.selected_entries(), "Deletions", dry_run=dry_run))

    if dry_run:
        print_info(f"Dry-run: {count} item(s) would be deleted.")
        return

    if config.confirm and not yes:
        confirmed = typer.confirm(
            f"\nProceed with deleting {count} item(s)?",
            default=False,
        )
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    results = registry.delete_selected()

    console.print(
        create_results_table(results, title="Deletion Results", root=registry.current_path)
    )
    print_results_summary(results, "deleted")

    if any(not r.success for r in results):
        raise typer.Exit(code=1)
