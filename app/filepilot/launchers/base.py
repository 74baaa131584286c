"""Abstract base class for OS launchers.

This module defines the Launcher interface the engine uses to open a
path in its default application or start a terminal at a directory.
Concrete launchers build the platform-specific commands.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path

from filepilot.utils.shell import spawn_detached

logger = logging.getLogger(__name__)


class Launcher(ABC):
    """Abstract base class for all launchers.

    Both operations are fire-and-forget: they return as soon as the
    process is spawned and report failure by logging and returning
    False, never by raising.

    Args:
        terminal_command: Optional terminal command override. Every
            "{path}" placeholder is replaced by the target directory.

    Example:
        >>> launcher = get_launcher()
        >>> launcher.open(Path("/home/user/notes.txt"))
        True
    """

    def __init__(self, terminal_command: list[str] | None = None) -> None:
        self._terminal_command = terminal_command

    @property
    @abstractmethod
    def name(self) -> str:
        """Return a short platform name for this launcher."""

    @abstractmethod
    def open_command(self, path: Path) -> list[str]:
        """Build the command that opens a path with its default handler.

        Args:
            path: File or directory to open.

        Returns:
            Command and arguments.
        """

    @abstractmethod
    def terminal_command(self, directory: Path) -> list[str]:
        """Build the command that starts an interactive shell in a directory.

        Args:
            directory: Directory the shell should start in.

        Returns:
            Command and arguments.
        """

    def open(self, path: Path) -> bool:
        """Open a path with the OS default application.

        Args:
            path: File or directory to open.

        Returns:
            True if the handler was started.
        """
        if not path.exists():
            logger.error("Cannot open missing path: %s", path)
            return False
        return spawn_detached(self.open_command(path), cwd=str(path.parent))

    def open_terminal(self, path: Path) -> bool:
        """Start a terminal rooted at a directory.

        A file path opens the terminal at the file's parent directory.

        Args:
            path: Directory (or file) to open the terminal at.

        Returns:
            True if the terminal was started.
        """
        directory = path if path.is_dir() else path.parent
        if not directory.is_dir():
            logger.error("Cannot open terminal at missing directory: %s", directory)
            return False

        if self._terminal_command is not None:
            args = [part.replace("{path}", str(directory)) for part in self._terminal_command]
        else:
            args = self.terminal_command(directory)
        return spawn_detached(args, cwd=str(directory))
