"""Launcher for Windows."""

from pathlib import Path

from filepilot.launchers.base import Launcher


class WindowsLauncher(Launcher):
    """Launcher using ``cmd /C start``.

    The empty string after ``start`` is the window title; without it a
    quoted path would be taken as the title.
    """

    @property
    def name(self) -> str:
        return "windows"

    def open_command(self, path: Path) -> list[str]:
        return ["cmd", "/C", "start", "", str(path)]

    def terminal_command(self, directory: Path) -> list[str]:
        return ["cmd", "/C", "start", "cmd.exe", "/K", f'cd /d "{directory}"']
