"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich, and the
human-readable size, usage and time strings shown in listings.
"""

import sys
from datetime import datetime

from rich.console import Console

from filepilot.core.theme import get_theme


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


def format_entry_size(size: int, is_dir: bool) -> str:
    """Format an entry size the way listings show it.

    Directories are shown in decimal megabytes, files in binary kilobytes.

    Args:
        size: Size in bytes.
        is_dir: Whether the entry is a directory.

    Returns:
        String such as "1.50 MB" or "12.00 KB".
    """
    if is_dir:
        return f"{size / 1_000_000:.2f} MB"
    return f"{size / 1024:.2f} KB"


def format_size(size: int) -> str:
    """Format a byte count in human readable binary units."""
    value = float(size)
    for unit in ("B", "KB", "MB", "GB", "TB"):
        if value < 1024.0:
            return f"{value:.1f} {unit}"
        value /= 1024.0
    return f"{value:.1f} PB"


def format_disk_usage(used: int, total: int) -> str:
    """Format a (used, total) pair in decimal gigabytes.

    Returns:
        String such as "Disk Usage: 12.34 GB / 500.00 GB".
    """
    return f"Disk Usage: {used / 1_000_000_000:.2f} GB / {total / 1_000_000_000:.2f} GB"


def format_modified(modified: datetime) -> str:
    """Format a modification time as local "YYYY-MM-DD HH:MM"."""
    return modified.astimezone().strftime("%Y-%m-%d %H:%M")


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
