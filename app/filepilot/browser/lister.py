"""Directory listing.

Produces DirectoryEntry values for the immediate children of a
directory. Entries whose metadata cannot be read are skipped so a
single bad child never aborts the whole listing.
"""

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from filepilot.browser.models import DirectoryEntry
from filepilot.browser.sizing import size_of

logger = logging.getLogger(__name__)


def list_directory(directory: Path) -> list[DirectoryEntry]:
    """List the immediate children of a directory.

    Order is whatever the OS enumerates; callers must not rely on it.
    Subdirectory sizes are computed recursively.

    Args:
        directory: Existing directory to list. Callers are expected to
            check this beforehand.

    Returns:
        One DirectoryEntry per readable child.

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
        PermissionError: If the directory itself cannot be read.
    """
    entries: list[DirectoryEntry] = []

    with os.scandir(directory) as it:
        for child in it:
            entry = build_entry(Path(child.path))
            if entry is not None:
                entries.append(entry)

    return entries


def build_entry(path: Path) -> DirectoryEntry | None:
    """Build a DirectoryEntry from a path's metadata.

    Symlinks are followed for classification, so a link to a
    directory lists as a directory.

    Args:
        path: Absolute path of the entry.

    Returns:
        The entry, or None if its metadata could not be read.
    """
    try:
        st = path.stat()
        is_dir = path.is_dir()
    except OSError as e:
        logger.debug("Skipping unreadable entry %s: %s", path, e)
        return None

    size = size_of(path) if is_dir else st.st_size

    return DirectoryEntry(
        path=path,
        size=size,
        modified=_modified_time(st),
        is_dir=is_dir,
    )


def _modified_time(st: os.stat_result) -> datetime:
    """Convert st_mtime to an aware datetime, falling back to now."""
    try:
        return datetime.fromtimestamp(st.st_mtime, tz=UTC)
    except (OverflowError, OSError, ValueError):
        return datetime.now(tz=UTC)
