"""OS launchers.

This package provides the Launcher capability interface and its
per-platform implementations for opening files and terminals.
"""

import platform

from filepilot.launchers.base import Launcher
from filepilot.launchers.macos import MacLauncher
from filepilot.launchers.windows import WindowsLauncher
from filepilot.launchers.xdg import XdgLauncher


def get_launcher(
    system: str | None = None,
    terminal_command: list[str] | None = None,
) -> Launcher:
    """Get the launcher for a platform.

    Args:
        system: Platform name as returned by platform.system(). If None,
            the running platform is used.
        terminal_command: Optional terminal command override.

    Returns:
        Launcher instance for the platform. Unknown platforms get the
        freedesktop.org launcher.
    """
    system = system or platform.system()

    if system == "Windows":
        return WindowsLauncher(terminal_command)
    if system == "Darwin":
        return MacLauncher(terminal_command)
    return XdgLauncher(terminal_command)


__all__ = [
    "Launcher",
    "MacLauncher",
    "WindowsLauncher",
    "XdgLauncher",
    "get_launcher",
]
