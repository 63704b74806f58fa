"""Shared Rich display functions for entries and batch results.

Provides reusable table builders and summary printers used by the ls,
delete and rename commands.
"""

import os

from rich.markup import escape
from rich.table import Table

from filemgr.registry.models import ActionResult, Entry
from filemgr.utils.formatting import console, format_size, print_success


def create_entries_table(
    entries: list[tuple[int, Entry]],
    title: str = "Entries",
    show_relative: bool = False,
) -> Table:
    """Create a Rich table listing registry entries.

    Args:
        entries: (index, entry) pairs, index being the registry position.
        title: Table title.
        show_relative: Show root-relative paths instead of leaf names
            (used for recursive scans, where leaf names can repeat).

    Returns:
        Rich Table configured for entry display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],
    )
    table.add_column("#", justify="right", style="muted")
    table.add_column("", width=3, justify="center")
    table.add_column("Name", no_wrap=True)
    table.add_column("Size", justify="right", style="info")
    table.add_column("Type", width=6)

    for index, entry in entries:
        label = escape(entry.relative_path if show_relative else entry.name)
        mark = "[selected]●[/]" if entry.is_selected else ""
        if entry.is_directory:
            name = f"[directory]{label}[/]"
            size = "-"
            kind = "Folder"
        else:
            name = f"[text]{label}[/]"
            size = format_size(entry.size_bytes)
            kind = "File"
        table.add_row(str(index), mark, name, size, kind)

    return table


def create_plan_table(
    entries: list[Entry],
    action: str,
    new_names: list[str] | None = None,
    dry_run: bool = False,
) -> Table:
    """Create a Rich table of entries about to be changed.

    Args:
        entries: Entries eligible for the batch operation.
        action: Operation label, e.g. "Deletions" or "Renames".
        new_names: Target names, parallel to entries, for renames.
        dry_run: Whether this is a dry-run (changes table title).

    Returns:
        Rich Table configured for plan display.
    """
    title = f"Planned {action} (Dry Run)" if dry_run else f"Planned {action}"
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", style="bold", no_wrap=True)
    if new_names is not None:
        table.add_column("New Name", style="info")
    table.add_column("Type", width=6)

    for i, entry in enumerate(entries):
        kind = "Folder" if entry.is_directory else "File"
        if new_names is not None:
            table.add_row(escape(entry.relative_path), escape(new_names[i]), kind)
        else:
            table.add_row(escape(entry.relative_path), kind)

    return table


def create_results_table(
    results: list[ActionResult],
    title: str = "Results",
    root: str | None = None,
) -> Table:
    """Create a Rich table displaying per-entry results.

    Successful results show "OK" status; failed results show "FAIL" with
    the failure reason and error message.

    Args:
        results: Results returned by a batch operation.
        title: Table title.
        root: Scan root; when given, paths are shown relative to it.

    Returns:
        Rich Table configured for results display.
    """

    def _display(path: str) -> str:
        return escape(os.path.relpath(path, root) if root else path)

    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=6, justify="center")
    table.add_column("Path", no_wrap=True)
    table.add_column("Details")

    for result in results:
        if result.success:
            status = "[success]OK[/success]"
            detail = f"-> {_display(result.new_path)}" if result.new_path else ""
        else:
            status = "[error]FAIL[/error]"
            reason = result.reason.value if result.reason else "unknown"
            detail = escape(f"{reason}: {result.error or 'Unknown error'}")
        table.add_row(status, _display(result.path), f"[muted]{detail}[/muted]")

    return table


def print_results_summary(results: list[ActionResult], verb: str) -> None:
    """Print a summary of batch results.

    Args:
        results: Results returned by a batch operation.
        verb: Past-tense verb for the message, e.g. "deleted".
    """
    success_count = sum(1 for r in results if r.success)
    fail_count = len(results) - success_count

    if fail_count == 0:
        print_success(f"All {success_count} item(s) {verb}.")
    else:
        console.print(
            f"\n[success]{success_count} {verb}[/success], [error]{fail_count} failed[/error]"
        )
