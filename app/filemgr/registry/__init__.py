"""Directory registry: scanning, filtering, selection and batch operations.

This module provides the scan/filter/select/execute engine over a single
directory listing, together with the scanner and operator it is built on.
"""

from filemgr.registry.models import ActionResult, Entry, FailureReason, PathType
from filemgr.registry.operator import EntryOperator, compose_suffixed_name
from filemgr.registry.registry import FileRegistry
from filemgr.registry.scanner import DirectoryScanner

__all__ = [
    "ActionResult",
    "DirectoryScanner",
    "Entry",
    "EntryOperator",
    "FailureReason",
    "FileRegistry",
    "PathType",
    "compose_suffixed_name",
]
