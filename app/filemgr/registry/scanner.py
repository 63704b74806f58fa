"""Directory scanner producing registry entries.

Enumerates the immediate children of a root directory, or its whole
subtree in depth-first pre-order, and turns every survivable directory
entry into an Entry. Access problems never escape: an unreadable root
yields nothing, an unreadable subdirectory is skipped, and failed
type or size lookups fall back to "file" and 0 bytes.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from filemgr.registry.models import Entry, PathType

logger = logging.getLogger(__name__)


class DirectoryScanner:
    """Scans one directory into a flat sequence of entries.

    Entries are produced in the order os.scandir returns them; no sorting
    is applied. In recursive mode each directory is yielded before its
    own children, and symlinked directories are listed but not entered.

    Args:
        root: Directory to scan.
        recursive: If True, descend into every readable subdirectory.
    """

    def __init__(self, root: str | Path, *, recursive: bool = False) -> None:
        self._root = os.path.abspath(root)
        self._recursive = recursive

    @property
    def root(self) -> str:
        """Absolute path of the scan root."""
        return self._root

    def scan(self) -> Iterator[Entry]:
        """Scan the root directory and yield its entries.

        Yields nothing if the root does not exist, is not a directory,
        or cannot be read. Subdirectories are walked with an explicit
        stack, so tree depth is bounded neither by the recursion limit
        nor by the number of open file descriptors.

        Yields:
            Entry instances, unselected and unfiltered.
        """
        try:
            handle = os.scandir(self._root)
        except FileNotFoundError:
            logger.warning("Scan root does not exist: %s", self._root)
            return
        except NotADirectoryError:
            logger.warning("Scan root is not a directory: %s", self._root)
            return
        except OSError as e:
            logger.warning("Cannot read scan root %s: %s", self._root, e)
            return

        with handle:
            children = self._read_directory(handle, self._root)
        stack: list[tuple[Iterator[os.DirEntry[str]], str]] = [(iter(children), "")]

        while stack:
            pending, prefix = stack[-1]
            dir_entry = next(pending, None)
            if dir_entry is None:
                stack.pop()
                continue

            relative = os.path.join(prefix, dir_entry.name) if prefix else dir_entry.name
            yield self._make_entry(dir_entry, relative)

            if self._recursive and self._should_descend(dir_entry):
                # Pushed on top, so the subtree is emitted before the next sibling
                stack.append((iter(self._list_subdirectory(dir_entry.path)), relative))

    def _list_subdirectory(self, directory: str) -> list[os.DirEntry[str]]:
        """List a subdirectory, or return nothing if it cannot be entered."""
        try:
            handle = os.scandir(directory)
        except OSError as e:
            logger.warning("Skipping unreadable directory %s: %s", directory, e)
            return []
        with handle:
            return self._read_directory(handle, directory)

    def _read_directory(
        self,
        handle: Iterator[os.DirEntry[str]],
        directory: str,
    ) -> list[os.DirEntry[str]]:
        """Drain an open scandir handle.

        Args:
            handle: Open scandir iterator, closed by the caller.
            directory: Path the handle was opened on (for log messages).

        Returns:
            Children in enumeration order. If enumeration breaks off,
            the entries read so far.
        """
        children: list[os.DirEntry[str]] = []
        while True:
            try:
                children.append(next(handle))
            except StopIteration:
                break
            except OSError as e:
                logger.warning("Enumeration of %s aborted: %s", directory, e)
                break
        return children

    def _make_entry(self, dir_entry: os.DirEntry[str], relative: str) -> Entry:
        """Build an Entry from a directory entry.

        Args:
            dir_entry: Entry returned by os.scandir.
            relative: Path of the entry relative to the scan root.

        Returns:
            Entry with type and size filled in, falling back on failure.
        """
        try:
            is_dir = dir_entry.is_dir()
        except OSError:
            logger.debug("Cannot determine type of %s, treating as file", dir_entry.path)
            is_dir = False

        size = 0 if is_dir else self._get_size(dir_entry)

        return Entry(
            path=dir_entry.path,
            name=dir_entry.name,
            relative_path=relative,
            size_bytes=size,
            path_type=PathType.DIRECTORY if is_dir else PathType.FILE,
        )

    def _get_size(self, dir_entry: os.DirEntry[str]) -> int:
        """Get the byte size of a non-directory entry, 0 if unavailable."""
        try:
            return dir_entry.stat().st_size
        except OSError:
            logger.debug("Cannot stat %s, reporting size 0", dir_entry.path)
            return 0

    def _should_descend(self, dir_entry: os.DirEntry[str]) -> bool:
        """Check if recursive mode should enter this entry.

        Only real directories are entered; symlinks to directories are not
        followed, which keeps link cycles out of the traversal.
        """
        try:
            return dir_entry.is_dir(follow_symlinks=False)
        except OSError:
            return False
