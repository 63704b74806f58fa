"""Utility modules for filemgr.

This module exports commonly used utility functions.
"""

from filemgr.utils.formatting import (
    console,
    err_console,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
    use_theme_colors,
)

__all__ = [
    "console",
    "err_console",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "use_theme_colors",
]
