"""CLI commands for filemgr.

This package contains all subcommand implementations.
"""

from filemgr.cli.commands import config, delete, ls, rename

__all__ = ["config", "delete", "ls", "rename"]
