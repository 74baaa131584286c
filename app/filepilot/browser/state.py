"""Engine state and orchestration.

EngineState is the single mutable hub of the engine: it owns the
current directory, the cached listing, the selection, the clipboard
and the active search. Every mutating operation goes through it so
the cached listing is refreshed afterwards.
"""

import logging
import os
import time
from collections.abc import Callable
from pathlib import Path

from filepilot.browser.lister import list_directory
from filepilot.browser.models import CopyReport, DirectoryEntry, NavigationOutcome, OperationResult
from filepilot.browser.operations import (
    copy_path,
    create_directory,
    delete_path,
    paste,
    rename_path,
)
from filepilot.browser.search import search
from filepilot.browser.sizing import disk_usage
from filepilot.core.config import EngineConfig
from filepilot.launchers import Launcher, get_launcher

logger = logging.getLogger(__name__)


class EngineState:
    """Current directory state and the operations that change it.

    All access is expected from a single thread; nothing here locks.

    Attributes:
        current_dir: Absolute path of the directory being browsed.
        entries: Cached listing of current_dir.
        selected_file: Selected path, if any.
        clipboard: Source path for the next paste, if any.
        search_query: Active search filter ("" means no search).
        search_results: Cached result of the last search recomputation.
        last_search_time: Clock value of the last recomputation, None if
            no search has run yet.

    Args:
        start_dir: Initial directory. Defaults to config.start_directory,
            then to the process working directory.
        launcher: Launcher for opening files and terminals. Defaults to
            the launcher for the running platform.
        config: Engine configuration. Defaults to EngineConfig().
        clock: Monotonic clock in seconds used for search debouncing.

    Raises:
        NotADirectoryError: If the start directory is not an existing directory.
    """

    def __init__(
        self,
        start_dir: Path | None = None,
        *,
        launcher: Launcher | None = None,
        config: EngineConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or EngineConfig()
        self.launcher = launcher or get_launcher(terminal_command=self.config.terminal_command)
        self._clock = clock

        start = start_dir or self.config.start_directory or Path.cwd()
        start = _normalize(start.expanduser().absolute())
        if not start.is_dir():
            msg = f"Start directory is not a directory: {start}"
            raise NotADirectoryError(msg)

        self.current_dir: Path = start
        self.entries: list[DirectoryEntry] = []
        self.selected_file: Path | None = None
        self.clipboard: Path | None = None
        self.search_query: str = ""
        self.search_results: list[DirectoryEntry] = []
        self.last_search_time: float | None = None

        self.refresh()

    # === Listing and navigation ===

    @property
    def visible_entries(self) -> list[DirectoryEntry]:
        """Entries to display: search results while a query is active."""
        if self.search_query:
            return self.search_results
        return self.entries

    def refresh(self) -> None:
        """Recompute the cached listing of the current directory.

        If the directory itself has become unreadable the listing is
        emptied instead of raising.
        """
        try:
            self.entries = list_directory(self.current_dir)
        except OSError as e:
            logger.warning("Cannot list %s: %s", self.current_dir, e)
            self.entries = []

    def navigate(self, new_dir: Path) -> NavigationOutcome:
        """Change the current directory.

        Relative targets are resolved against the current directory and
        ".." segments are collapsed. Targets that are missing or not
        directories are dropped. An active search is rerun under the
        new directory.

        Args:
            new_dir: Directory to change to.

        Returns:
            ACCEPTED if the directory changed, REJECTED otherwise.
        """
        target = new_dir.expanduser()
        if not target.is_absolute():
            target = self.current_dir / target
        target = _normalize(target)

        if not target.is_dir():
            logger.debug("Navigation to %s rejected: not a directory", target)
            return NavigationOutcome.REJECTED

        self.current_dir = target
        self.refresh()
        self.last_search_time = None
        if self.search_query:
            self.update_search(self.search_query)
        return NavigationOutcome.ACCEPTED

    def navigate_up(self) -> NavigationOutcome:
        """Change to the parent of the current directory.

        Returns:
            ACCEPTED if the directory changed, REJECTED at the filesystem root.
        """
        parent = self.current_dir.parent
        if parent == self.current_dir:
            return NavigationOutcome.REJECTED
        return self.navigate(parent)

    def disk_usage(self) -> tuple[int, int]:
        """Return (used_bytes, total_bytes) for the current volume."""
        return disk_usage(self.current_dir)

    # === Selection and clipboard ===

    def select(self, path: Path) -> bool:
        """Select an entry of the visible listing.

        Args:
            path: Path of the entry to select.

        Returns:
            True if the path is a visible entry and is now selected.
        """
        if not any(entry.path == path for entry in self.visible_entries):
            logger.debug("Selection of %s rejected: not in the listing", path)
            return False
        self.selected_file = path
        return True

    def clear_selection(self) -> None:
        self.selected_file = None

    def copy_to_clipboard(self, path: Path) -> None:
        """Remember a path as the source for the next paste."""
        self.clipboard = path

    # === Search ===

    def update_search(self, query: str) -> None:
        """Set the search query and run the debounced search.

        An empty query ends the search and clears its results without
        walking the tree.

        Args:
            query: New search filter.
        """
        self.search_query = query
        if not query:
            self.search_results = []
            return

        self.search_results, self.last_search_time = search(
            self.current_dir,
            query,
            self._clock(),
            self.last_search_time,
            self.search_results,
            self.config.search_debounce_seconds,
        )

    # === Mutations ===

    def delete(self, path: Path) -> OperationResult:
        """Delete an entry and refresh the listing.

        The listing is refreshed even on failure so partial deletions
        show up. Deleting the selected path clears the selection. A
        successful delete also drops the path and everything below it
        from the search results.
        """
        result = delete_path(path)
        if self.selected_file == path:
            self.selected_file = None
        if result.success:
            self.search_results = [
                entry for entry in self.search_results if not entry.path.is_relative_to(path)
            ]
        self.refresh()
        return result

    def copy(self, source: Path, destination: Path) -> CopyReport:
        """Copy a file or directory tree and refresh the listing."""
        report = copy_path(source, destination)
        self.refresh()
        return report

    def paste(self) -> CopyReport | None:
        """Paste the clipboard into the current directory.

        The clipboard keeps its value so the same source can be pasted
        again.

        Returns:
            CopyReport of the copy, or None if the clipboard is empty.
        """
        report = paste(self.clipboard, self.current_dir)
        if report is not None:
            self.refresh()
        return report

    def rename(self, old_path: Path, new_name: str) -> OperationResult:
        """Rename an entry within its directory.

        The listing is refreshed only on success. A selection pointing
        at the old path is left as is and must be re-selected.
        """
        result = rename_path(old_path, new_name, self.config.rename_collision)
        if result.success:
            self.refresh()
        return result

    def create_directory(self, name: str | None = None) -> OperationResult:
        """Create a folder in the current directory.

        Args:
            name: Folder name. Defaults to config.new_folder_name.
        """
        result = create_directory(self.current_dir, name or self.config.new_folder_name)
        if result.success:
            self.refresh()
        return result

    # === External launchers ===

    def open_path(self, path: Path) -> bool:
        """Open a path with its default application (fire-and-forget)."""
        return self.launcher.open(path)

    def open_terminal(self, path: Path | None = None) -> bool:
        """Open a terminal at a path, or at the current directory."""
        return self.launcher.open_terminal(path or self.current_dir)


def _normalize(path: Path) -> Path:
    """Collapse "." and ".." segments without resolving symlinks."""
    return Path(os.path.normpath(path))
