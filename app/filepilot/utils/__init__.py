"""Utility modules for filepilot.

This module exports commonly used utility functions.
"""

from filepilot.utils.formatting import (
    console,
    err_console,
    format_disk_usage,
    format_entry_size,
    format_modified,
    format_size,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from filepilot.utils.shell import command_exists, spawn_detached

__all__ = [
    "command_exists",
    "console",
    "err_console",
    "format_disk_usage",
    "format_entry_size",
    "format_modified",
    "format_size",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "spawn_detached",
]
