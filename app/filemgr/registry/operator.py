"""Single-entry filesystem operations.

Handles recursive removal and same-directory suffix renames of scanned
paths. Every OS failure is converted into an ActionResult; nothing
raises to the caller.
"""

import errno
import logging
import os
import shutil
from pathlib import Path

from filemgr.registry.models import ActionResult, FailureReason

logger = logging.getLogger(__name__)


def split_extension(name: str) -> tuple[str, str]:
    """Split a file name into stem and extension.

    The extension starts at the last dot, unless that dot is the first
    character (dotfiles such as ".bashrc" have no extension).

    Args:
        name: Leaf file name.

    Returns:
        Tuple of (stem, extension); extension is "" when there is none.
    """
    index = name.rfind(".")
    if index <= 0:
        return name, ""
    return name[:index], name[index:]


def compose_suffixed_name(name: str, suffix: str) -> str:
    """Insert a suffix between a name's stem and its extension.

    Examples:
        >>> compose_suffixed_name("report.txt", "_v2")
        'report_v2.txt'
        >>> compose_suffixed_name("README", "_bak")
        'README_bak'
    """
    stem, extension = split_extension(name)
    return f"{stem}{suffix}{extension}"


def _is_valid_component(name: str) -> bool:
    """Check that a name stays a single component of its parent directory."""
    if not name or name in (".", ".."):
        return False
    if "\0" in name or os.sep in name:
        return False
    return not (os.altsep and os.altsep in name)


def _classify_error(error: OSError) -> FailureReason:
    """Map an OSError onto a FailureReason."""
    if isinstance(error, FileNotFoundError):
        return FailureReason.NOT_FOUND
    if isinstance(error, PermissionError):
        return FailureReason.PERMISSION_DENIED
    if isinstance(error, FileExistsError) or error.errno in (errno.EEXIST, errno.ENOTEMPTY):
        return FailureReason.ALREADY_EXISTS
    return FailureReason.OS_ERROR


class EntryOperator:
    """Performs delete and rename on individual scanned paths."""

    def remove(self, path: str) -> ActionResult:
        """Remove a path and everything beneath it.

        Directories (but not symlinks to directories) are removed with
        shutil.rmtree; files, symlinks and dead symlinks are unlinked. A
        path that no longer exists is a failure, since nothing was removed.

        Args:
            path: Absolute filesystem path to remove.

        Returns:
            ActionResult indicating success or failure.
        """
        target = Path(path)

        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(path)
            elif target.exists() or target.is_symlink():
                target.unlink()
            else:
                logger.info("Nothing to delete, path is gone: %s", path)
                return ActionResult(
                    path=path,
                    success=False,
                    reason=FailureReason.NOT_FOUND,
                    error=f"Path does not exist: {path}",
                )
        except OSError as e:
            logger.warning("Failed to delete %s: %s", path, e)
            return ActionResult(
                path=path,
                success=False,
                reason=_classify_error(e),
                error=str(e),
            )

        logger.debug("Deleted %s", path)
        return ActionResult(path=path, success=True)

    def rename(self, path: str, new_name: str) -> ActionResult:
        """Rename a path within its parent directory.

        An existing target is never overwritten: the rename fails with
        ALREADY_EXISTS instead.

        Args:
            path: Absolute filesystem path to rename.
            new_name: New leaf name, without any directory part.

        Returns:
            ActionResult with new_path set on success.
        """
        if not _is_valid_component(new_name):
            logger.warning("Refusing to rename %s to invalid name %r", path, new_name)
            return ActionResult(
                path=path,
                success=False,
                reason=FailureReason.INVALID_NAME,
                error=f"Invalid file name: {new_name!r}",
            )

        source = Path(path)
        destination = source.with_name(new_name)

        if os.path.lexists(destination):
            logger.warning("Rename target already exists: %s", destination)
            return ActionResult(
                path=path,
                success=False,
                reason=FailureReason.ALREADY_EXISTS,
                error=f"Target already exists: {destination}",
            )

        try:
            source.rename(destination)
        except OSError as e:
            logger.warning("Failed to rename %s: %s", path, e)
            return ActionResult(
                path=path,
                success=False,
                reason=_classify_error(e),
                error=str(e),
            )

        logger.debug("Renamed %s -> %s", path, destination)
        return ActionResult(path=path, success=True, new_path=str(destination))
