"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

import sys

from rich.console import Console

from filemgr.core.theme import ThemeColors, get_rich_theme, get_theme


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())

# Set once use_theme_colors() has pushed a theme on top of the import-time one
_theme_pushed = False


def use_theme_colors(colors: ThemeColors) -> None:
    """Switch the shared consoles to a theme built from colors.

    The CLI calls this after loading the config given with --config, so
    the [colors] of that file apply rather than the ones read at import.
    Calling it again replaces the previously applied theme.
    """
    global _theme_pushed
    theme = get_rich_theme(colors)
    for target in (console, err_console):
        if _theme_pushed:
            target.pop_theme()
        target.push_theme(theme)
    _theme_pushed = True


def format_size(size_bytes: int | None) -> str:
    """Format byte count as human-readable string.

    Examples:
        >>> format_size(512)
        '512 B'
        >>> format_size(2048)
        '2.0 KB'
    """
    if size_bytes is None or size_bytes == 0:
        return "0 B"
    size = float(size_bytes)
    for unit in ("B", "KB", "MB", "GB"):
        if abs(size) < 1024:
            return f"{size:.1f} {unit}" if unit != "B" else f"{int(size)} B"
        size /= 1024
    return f"{size:.1f} TB"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
