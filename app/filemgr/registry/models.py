"""Data models for the directory registry.

This module defines the records produced by a directory scan and the
per-entry results returned by batch delete and rename operations.
"""

from dataclasses import dataclass
from enum import Enum


class PathType(str, Enum):
    """Type of a scanned filesystem entry.

    Attributes:
        DIRECTORY: Directory (including symlinks that resolve to one).
        FILE: Anything else: regular files, special files, dead symlinks.
    """

    DIRECTORY = "directory"
    FILE = "file"


class FailureReason(str, Enum):
    """Reason a single delete or rename did not change the filesystem.

    Attributes:
        NOT_FOUND: The path vanished after the scan.
        PERMISSION_DENIED: The OS refused the operation.
        ALREADY_EXISTS: The rename target name is taken.
        INVALID_NAME: The computed name is not a valid single path component.
        OS_ERROR: Any other OS-level failure.
    """

    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    ALREADY_EXISTS = "already_exists"
    INVALID_NAME = "invalid_name"
    OS_ERROR = "os_error"


@dataclass(frozen=True, slots=True)
class Entry:
    """One filesystem object discovered by a scan.

    Entries are immutable snapshots. The registry owns the sequence and
    replaces an entry whenever its flags or identity change, so callers
    holding an entry never observe it changing underneath them.

    Attributes:
        path: Absolute filesystem path, unique within one scan.
        name: Leaf name at discovery time.
        relative_path: Path relative to the scan root (equals name for
            non-recursive scans).
        size_bytes: Size in bytes; always 0 for directories.
        path_type: Directory or file classification at scan time.
        is_selected: Whether the user marked the entry for the next batch.
        is_filtered: Whether the entry is hidden by the active filter.
    """

    path: str
    name: str
    relative_path: str
    size_bytes: int
    path_type: PathType
    is_selected: bool = False
    is_filtered: bool = False

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.size_bytes < 0:
            msg = f"Size cannot be negative, got {self.size_bytes}"
            raise ValueError(msg)
        if self.path_type == PathType.DIRECTORY and self.size_bytes != 0:
            msg = f"Directories always report size 0, got {self.size_bytes}"
            raise ValueError(msg)

    @property
    def is_directory(self) -> bool:
        """Check if the entry was classified as a directory."""
        return self.path_type == PathType.DIRECTORY

    @property
    def is_eligible(self) -> bool:
        """Check if the entry takes part in the next batch operation."""
        return self.is_selected and not self.is_filtered


@dataclass(frozen=True, slots=True)
class ActionResult:
    """Result of a delete or rename on a single entry.

    Attributes:
        path: Path the operation was attempted on.
        success: Whether the filesystem changed as requested.
        reason: Classified failure reason, None on success.
        error: OS error message if the operation failed, None otherwise.
        new_path: Path after a successful rename, None otherwise.
    """

    path: str
    success: bool
    reason: FailureReason | None = None
    error: str | None = None
    new_path: str | None = None
