"""Launcher for Linux and other freedesktop.org systems."""

from pathlib import Path

from filepilot.launchers.base import Launcher
from filepilot.utils.shell import command_exists

# Terminal emulators tried in order when x-terminal-emulator is missing,
# with the flag each one takes for its starting directory
_FALLBACK_TERMINALS: tuple[tuple[str, str], ...] = (
    ("gnome-terminal", "--working-directory"),
    ("konsole", "--workdir"),
    ("xfce4-terminal", "--working-directory"),
)


class XdgLauncher(Launcher):
    """Launcher using xdg-open and the Debian terminal alternative.

    Files open through ``xdg-open``. Terminals open through
    ``x-terminal-emulator`` when it is installed, otherwise through the
    first known emulator found on PATH, and finally ``xterm`` started in
    the target directory.
    """

    @property
    def name(self) -> str:
        return "xdg"

    def open_command(self, path: Path) -> list[str]:
        return ["xdg-open", str(path)]

    def terminal_command(self, directory: Path) -> list[str]:
        if command_exists("x-terminal-emulator"):
            return ["x-terminal-emulator", "--working-directory", str(directory)]

        for terminal, flag in _FALLBACK_TERMINALS:
            if command_exists(terminal):
                return [terminal, flag, str(directory)]

        # xterm has no directory flag; spawn_detached sets the cwd
        return ["xterm"]
