"""Launcher for macOS."""

from pathlib import Path

from filepilot.launchers.base import Launcher


class MacLauncher(Launcher):
    """Launcher using ``open`` and Terminal.app."""

    @property
    def name(self) -> str:
        return "macos"

    def open_command(self, path: Path) -> list[str]:
        return ["open", str(path)]

    def terminal_command(self, directory: Path) -> list[str]:
        return ["open", "-a", "Terminal", str(directory)]
