"""File-management engine.

This package models the current directory state, lists and sizes
filesystem entries, runs the debounced recursive search, and executes
clipboard-based copy/paste/delete/rename operations.
"""

from filepilot.browser.lister import build_entry, list_directory
from filepilot.browser.models import CopyReport, DirectoryEntry, NavigationOutcome, OperationResult
from filepilot.browser.operations import (
    copy_path,
    create_directory,
    delete_path,
    paste,
    rename_path,
)
from filepilot.browser.search import SEARCH_DEBOUNCE_SECONDS, matches_query, search
from filepilot.browser.sizing import disk_usage, size_of
from filepilot.browser.state import EngineState

__all__ = [
    "SEARCH_DEBOUNCE_SECONDS",
    "CopyReport",
    "DirectoryEntry",
    "EngineState",
    "NavigationOutcome",
    "OperationResult",
    "build_entry",
    "copy_path",
    "create_directory",
    "delete_path",
    "disk_usage",
    "list_directory",
    "matches_query",
    "paste",
    "rename_path",
    "search",
    "size_of",
]
