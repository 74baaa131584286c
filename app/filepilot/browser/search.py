"""Debounced recursive filename search.

Matches entries at any depth below a root whose filename contains the
query as a case-insensitive substring. Recomputation is gated by a
monotonic-clock debounce interval.
"""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from filepilot.browser.lister import build_entry
from filepilot.browser.models import DirectoryEntry

logger = logging.getLogger(__name__)

# Minimum seconds between two recomputations
SEARCH_DEBOUNCE_SECONDS: float = 0.4


def matches_query(name: str, query: str) -> bool:
    """Check whether a filename contains the query, ignoring case.

    Args:
        name: Filename (final path component only).
        query: Substring to look for.

    Returns:
        True if query is a case-insensitive substring of name.
    """
    return query.casefold() in name.casefold()


def find_matches(root: Path, query: str) -> list[DirectoryEntry]:
    """Walk the whole subtree under root and collect matching entries.

    The root itself is never part of the results. Directory symlinks
    are reported when their name matches but are not descended into.
    Unreadable subtrees and entries are skipped.

    Args:
        root: Directory to search under.
        query: Case-insensitive filename substring. An empty query
            matches everything; orchestrators should not pass one.

    Returns:
        Matching entries in walk order.
    """
    results: list[DirectoryEntry] = []

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        parent = Path(dirpath)
        for name in (*dirnames, *filenames):
            if not matches_query(name, query):
                continue
            entry = build_entry(parent / name)
            if entry is not None:
                results.append(entry)

    return results


def search(
    root: Path,
    query: str,
    now: float,
    last_run: float | None,
    previous: Sequence[DirectoryEntry] = (),
    interval: float = SEARCH_DEBOUNCE_SECONDS,
) -> tuple[list[DirectoryEntry], float | None]:
    """Run a debounced recursive search.

    If less than ``interval`` seconds have passed since ``last_run``,
    nothing is recomputed and the previous results come back together
    with the unchanged ``last_run``. A ``last_run`` of None means no
    search has run yet.

    Args:
        root: Directory to search under.
        query: Case-insensitive filename substring.
        now: Current monotonic timestamp in seconds.
        last_run: Timestamp of the previous recomputation, or None.
        previous: Results of the previous recomputation.
        interval: Debounce interval in seconds.

    Returns:
        Tuple of (results, new_last_run).
    """
    if last_run is not None and now - last_run < interval:
        logger.debug("Search for %r debounced (%.3fs since last run)", query, now - last_run)
        return list(previous), last_run

    results = find_matches(root, query)
    logger.debug("Search for %r under %s matched %d entries", query, root, len(results))
    return results, now


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping unreadable directory %s: %s", error.filename, error)
