"""Recursive size aggregation and volume usage.

Both functions are best-effort: unreadable parts of a tree contribute
nothing, and a failed volume query degrades to zero instead of raising.
"""

import logging
import os
import shutil
import stat
from pathlib import Path

logger = logging.getLogger(__name__)


def size_of(path: Path) -> int:
    """Sum the lengths of every regular file under a directory.

    Walks the whole subtree without following directory symlinks.
    File symlinks are counted only when they resolve to a regular
    file; special files and broken links are ignored. Subtrees that
    cannot be read contribute 0.

    The cost is O(number of files under path), so callers should
    cache the result rather than recompute it on every refresh.

    Args:
        path: Directory (or file) to measure.

    Returns:
        Total size in bytes.
    """
    if not path.is_dir():
        return _regular_file_size(path)

    total = 0
    for dirpath, _dirnames, filenames in os.walk(path, onerror=_log_walk_error):
        for name in filenames:
            total += _regular_file_size(Path(dirpath) / name)
    return total


def disk_usage(path: Path) -> tuple[int, int]:
    """Query usage of the volume that contains a path.

    Args:
        path: Any path on the volume of interest.

    Returns:
        Tuple of (used_bytes, total_bytes) where used is total minus
        the space available to the current user. (0, 0) if the query fails.
    """
    try:
        usage = shutil.disk_usage(path)
    except OSError as e:
        logger.warning("Cannot query disk usage for %s: %s", path, e)
        return 0, 0
    return usage.total - usage.free, usage.total


def _regular_file_size(path: Path) -> int:
    """Return the length of a regular file, or 0 for anything else."""
    try:
        st = path.stat()
    except OSError:
        return 0
    if not stat.S_ISREG(st.st_mode):
        return 0
    return st.st_size


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping unreadable directory %s: %s", error.filename, error)
