"""In-memory registry of scanned entries.

The FileRegistry owns the result of the most recent scan and is the only
place entries change. Callers read immutable snapshots through
list_entries() and request changes through scan, filter, selection and
the two batch operations.
"""

import logging
import os
from collections.abc import Callable, Iterable
from dataclasses import replace

from filemgr.registry.models import ActionResult, Entry
from filemgr.registry.operator import EntryOperator, compose_suffixed_name
from filemgr.registry.scanner import DirectoryScanner

logger = logging.getLogger(__name__)


class FileRegistry:
    """Scan results plus selection and filter state for one directory.

    The registry is replaced wholesale by every scan and mutated in place
    by the other operations. It is memory-only and single-threaded; no
    operation raises on filesystem errors. Failures show up as entries
    that did not change and as lower counts.

    Args:
        operator: Operator used for delete and rename. Defaults to a
            fresh EntryOperator.
    """

    def __init__(self, operator: EntryOperator | None = None) -> None:
        self._operator = operator or EntryOperator()
        self._entries: list[Entry] = []
        self._current_path = ""
        self._filter_pattern = ""
        self._recursive = False

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def current_path(self) -> str:
        """Root of the last scan, "" before the first one.

        The root is stored as given to scan() but made absolute with
        os.path.abspath, so a relative root is joined to the working
        directory of that moment. Symlinks in it are not resolved.
        """
        return self._current_path

    @property
    def filter_pattern(self) -> str:
        """Pattern passed to the last apply_filter call."""
        return self._filter_pattern

    @property
    def recursive(self) -> bool:
        """Whether the last scan descended into subdirectories."""
        return self._recursive

    def list_entries(self) -> tuple[Entry, ...]:
        """Return all entries, filtered ones included, in registry order."""
        return tuple(self._entries)

    def visible_entries(self) -> list[tuple[int, Entry]]:
        """Return (index, entry) pairs for entries not hidden by the filter."""
        return [(i, e) for i, e in enumerate(self._entries) if not e.is_filtered]

    # =========================================================================
    # Scan and filter
    # =========================================================================

    def scan(self, root_path: str | os.PathLike[str], recursive: bool = False) -> None:
        """Replace the registry with the contents of a directory.

        Existing entries are dropped before scanning. An inaccessible root
        leaves the registry empty with current_path set to the attempted
        root. The active filter is not reapplied; call apply_filter again.

        Args:
            root_path: Directory to scan.
            recursive: If True, include the whole subtree.
        """
        self._entries = []
        scanner = DirectoryScanner(root_path, recursive=recursive)
        self._current_path = scanner.root
        self._recursive = recursive

        self._entries = list(scanner.scan())
        logger.info(
            "Scanned %s (%s): %d entries",
            self._current_path,
            "recursive" if recursive else "flat",
            len(self._entries),
        )

    def apply_filter(self, pattern: str) -> None:
        """Hide every entry whose name does not contain pattern.

        Matching is case-sensitive literal substring containment. An empty
        pattern makes every entry visible. Selection flags are untouched.

        Args:
            pattern: Substring to look for in entry names.
        """
        self._filter_pattern = pattern
        self._entries = [
            self._with_flags(entry, is_filtered=bool(pattern) and pattern not in entry.name)
            for entry in self._entries
        ]

    # =========================================================================
    # Selection
    # =========================================================================

    def set_selected(self, index: int, selected: bool = True) -> bool:
        """Set the selection flag of one entry.

        Filtered entries cannot be selected, only deselected.

        Args:
            index: Position in list_entries().
            selected: New selection state.

        Returns:
            True if the entry now has the requested state.

        Raises:
            IndexError: If index is out of range.
        """
        self._check_index(index)
        entry = self._entries[index]
        if selected and entry.is_filtered:
            return False
        self._entries[index] = self._with_flags(entry, is_selected=selected)
        return True

    def toggle(self, index: int) -> bool:
        """Flip the selection of a visible entry.

        Returns:
            The entry's selection state after the call.

        Raises:
            IndexError: If index is out of range.
        """
        self._check_index(index)
        entry = self._entries[index]
        if entry.is_filtered:
            return entry.is_selected
        self._entries[index] = self._with_flags(entry, is_selected=not entry.is_selected)
        return not entry.is_selected

    def select_only(self, index: int) -> bool:
        """Clear the selection and select a single entry.

        Raises:
            IndexError: If index is out of range.
        """
        self._check_index(index)
        self.deselect_all()
        return self.set_selected(index)

    def select_range(self, anchor: int, index: int, *, extend: bool = False) -> int:
        """Select every visible entry between two positions, inclusive.

        Args:
            anchor: Position of the previous selection anchor.
            index: Position of the entry just chosen.
            extend: If False, clear the current selection first.

        Returns:
            Number of entries selected inside the range.

        Raises:
            IndexError: If either position is out of range.
        """
        self._check_index(anchor)
        self._check_index(index)
        if not extend:
            self.deselect_all()

        start, end = min(anchor, index), max(anchor, index)
        return self._select_where(lambda i, _entry: start <= i <= end)

    def select_all(self) -> int:
        """Select every visible entry.

        Returns:
            Number of visible entries, all now selected.
        """
        return self._select_where(lambda _i, _entry: True)

    def select_paths(self, paths: Iterable[str]) -> int:
        """Select visible entries by relative path, name or absolute path.

        Args:
            paths: Identifiers to match against each entry.

        Returns:
            Number of entries matched and selected.
        """
        wanted = set(paths)
        return self._select_where(
            lambda _i, e: bool({e.relative_path, e.name, e.path} & wanted),
        )

    def deselect_all(self) -> None:
        """Clear the selection of every entry, filtered ones included."""
        self._entries = [self._with_flags(e, is_selected=False) for e in self._entries]

    def selected_count(self) -> int:
        """Count entries that the next batch operation would act on."""
        return sum(1 for e in self._entries if e.is_eligible)

    def selected_entries(self) -> list[Entry]:
        """Return entries that are selected and not filtered."""
        return [e for e in self._entries if e.is_eligible]

    # =========================================================================
    # Batch operations
    # =========================================================================

    def delete_selected(self) -> list[ActionResult]:
        """Delete every selected, visible entry from disk.

        Entries deleted successfully are evicted from the registry; failed
        ones stay in place and stay selected.

        Returns:
            One ActionResult per attempted entry, in registry order.
        """
        results: list[ActionResult] = []
        remaining: list[Entry] = []

        for entry in self._entries:
            if not entry.is_eligible:
                remaining.append(entry)
                continue

            result = self._operator.remove(entry.path)
            results.append(result)
            if not result.success:
                remaining.append(entry)

        self._entries = remaining
        self._log_summary("Deleted", results)
        return results

    def execute_delete(self) -> int:
        """Delete every selected, visible entry.

        Returns:
            Number of entries removed.
        """
        return sum(1 for r in self.delete_selected() if r.success)

    def rename_selected(self, suffix: str) -> list[ActionResult]:
        """Append a suffix to the stem of every selected, visible entry.

        Renamed entries keep their position and selection and take on the
        new path and name. An empty suffix does nothing.

        Args:
            suffix: Text inserted between stem and extension.

        Returns:
            One ActionResult per attempted entry, in registry order.
        """
        if not suffix:
            return []

        results: list[ActionResult] = []
        for index, entry in enumerate(self._entries):
            if not entry.is_eligible:
                continue

            new_name = compose_suffixed_name(entry.name, suffix)
            result = self._operator.rename(entry.path, new_name)
            results.append(result)
            if result.success and result.new_path is not None:
                parent = os.path.dirname(entry.relative_path)
                self._entries[index] = replace(
                    entry,
                    path=result.new_path,
                    name=new_name,
                    relative_path=os.path.join(parent, new_name) if parent else new_name,
                )

        self._log_summary("Renamed", results)
        return results

    def execute_rename(self, suffix: str) -> int:
        """Rename every selected, visible entry with a suffix.

        Returns:
            Number of entries renamed; 0 for an empty suffix.
        """
        return sum(1 for r in self.rename_selected(suffix) if r.success)

    # =========================================================================
    # Internals
    # =========================================================================

    def _select_where(self, predicate: Callable[[int, Entry], bool]) -> int:
        """Select visible entries matching predicate, returning how many matched."""
        count = 0
        for index, entry in enumerate(self._entries):
            if entry.is_filtered or not predicate(index, entry):
                continue
            self._entries[index] = self._with_flags(entry, is_selected=True)
            count += 1
        return count

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._entries):
            msg = f"Entry index out of range: {index}"
            raise IndexError(msg)

    @staticmethod
    def _with_flags(
        entry: Entry,
        *,
        is_selected: bool | None = None,
        is_filtered: bool | None = None,
    ) -> Entry:
        """Return entry with updated flags, reusing it when nothing changes."""
        selected = entry.is_selected if is_selected is None else is_selected
        filtered = entry.is_filtered if is_filtered is None else is_filtered
        if selected == entry.is_selected and filtered == entry.is_filtered:
            return entry
        return replace(entry, is_selected=selected, is_filtered=filtered)

    @staticmethod
    def _log_summary(action: str, results: list[ActionResult]) -> None:
        succeeded = sum(1 for r in results if r.success)
        if succeeded < len(results):
            logger.warning("%s %d of %d selected entries", action, succeeded, len(results))
        else:
            logger.info("%s %d selected entries", action, succeeded)
