"""CLI package for filemgr.

This package contains the Typer application and all subcommands.
"""

from filemgr.cli.main import app

__all__ = ["app"]
