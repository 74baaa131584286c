"""Shared Rich display functions for listings and operation results.

Provides reusable table builders and JSON serializers used by the
listing commands and the interactive browser.
"""

from collections.abc import Sequence
from pathlib import Path

from rich.table import Table

from filepilot.browser.models import CopyReport, DirectoryEntry, OperationResult
from filepilot.utils.formatting import (
    console,
    format_entry_size,
    format_modified,
    print_error,
    print_success,
)


def create_entries_table(
    entries: Sequence[DirectoryEntry],
    title: str,
    *,
    root: Path | None = None,
    selected: Path | None = None,
    clipboard: Path | None = None,
) -> Table:
    """Create a Rich table displaying directory entries.

    Directories are listed first, then files, each alphabetically.

    Args:
        entries: Entries to display.
        title: Table title.
        root: If given, names are shown relative to this directory
            (used for search results at any depth).
        selected: Path to highlight as the selection.
        clipboard: Path to mark as the clipboard source.

    Returns:
        Rich Table configured for entry display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("", width=2, justify="center")
    table.add_column("Name", no_wrap=True)
    table.add_column("Type", width=9)
    table.add_column("Size", style="size", justify="right")
    table.add_column("Modified", style="muted")

    for entry in sort_entries(entries):
        name = str(entry.path.relative_to(root)) if root is not None else entry.name
        style = "directory" if entry.is_dir else "file"
        if entry.path == selected:
            style = "selected"

        marker = "[clipboard]●[/]" if entry.path == clipboard else ""

        table.add_row(
            marker,
            f"[{style}]{name}[/]",
            entry.kind,
            format_entry_size(entry.size, entry.is_dir),
            format_modified(entry.modified),
        )

    return table


def sort_entries(entries: Sequence[DirectoryEntry]) -> list[DirectoryEntry]:
    """Order entries for display: directories first, then by name."""
    return sorted(entries, key=lambda e: (not e.is_dir, str(e.path).lower()))


def entries_to_json(entries: Sequence[DirectoryEntry]) -> list[dict[str, object]]:
    """Serialize entries for JSON output."""
    return [
        {
            "path": str(e.path),
            "name": e.name,
            "is_dir": e.is_dir,
            "size": e.size,
            "modified": e.modified.isoformat(),
        }
        for e in sort_entries(entries)
    ]


def print_operation_result(result: OperationResult, success_message: str) -> None:
    """Print a one-line outcome for a single mutation."""
    if result.success:
        print_success(success_message)
    else:
        print_error(result.error or f"Operation failed: {result.path}")


def print_copy_report(report: CopyReport) -> None:
    """Print a copy summary, listing every failed child."""
    if report.success:
        print_success(f"Copied {report.source} to {report.destination} ({report.files_copied} files)")
        return

    table = Table(
        title="Copy Failures",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Path", no_wrap=True)
    table.add_column("Error", style="muted")
    for failure in report.failures:
        table.add_row(str(failure.path), failure.error or "Unknown error")

    console.print(table)
    print_error(
        f"Copied {report.files_copied} files, {len(report.failures)} failed "
        f"({report.source} -> {report.destination})"
    )
