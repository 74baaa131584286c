"""Listing, search and size commands.

Provides read-only commands that list a directory, search a tree by
filename, and report recursive sizes and volume usage.
"""

import json
import time
from pathlib import Path
from typing import Annotated

import typer

from filepilot.browser.lister import list_directory
from filepilot.browser.search import search
from filepilot.browser.sizing import disk_usage, size_of
from filepilot.cli.display import create_entries_table, entries_to_json
from filepilot.cli.types import OutputFormat, require_directory
from filepilot.utils.formatting import (
    console,
    format_disk_usage,
    format_size,
    print_error,
    print_info,
)


def ls(
    path: Annotated[
        Path,
        typer.Argument(help="Directory to list."),
    ] = Path("."),
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List the immediate children of a directory with their sizes."""
    directory = require_directory(path)

    try:
        entries = list_directory(directory)
    except OSError as e:
        print_error(f"Cannot list {directory}: {e}")
        raise typer.Exit(code=1) from None

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(entries_to_json(entries)))
        return

    if not entries:
        print_info(f"{directory} is empty.")
        return

    console.print(create_entries_table(entries, title=str(directory)))
    console.print(f"\n[dim]{len(entries)} entries[/dim]")


def find(
    query: Annotated[
        str,
        typer.Argument(help="Case-insensitive filename substring."),
    ],
    root: Annotated[
        Path,
        typer.Option("--root", "-r", help="Directory to search under."),
    ] = Path("."),
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Search a directory tree for entries whose name contains QUERY."""
    if not query:
        print_error("Search query cannot be empty.")
        raise typer.Exit(code=1)

    directory = require_directory(root)
    results, _ = search(directory, query, time.monotonic(), None)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(entries_to_json(results)))
        return

    if not results:
        print_info(f"No entries matching '{query}' under {directory}.")
        return

    console.print(create_entries_table(results, title=f"Matches for '{query}'", root=directory))
    console.print(f"\n[dim]Found {len(results)} matching entries[/dim]")


def size(
    path: Annotated[
        Path,
        typer.Argument(help="File or directory to measure."),
    ],
) -> None:
    """Show the recursive size of a file or directory."""
    target = path.expanduser().absolute()
    if not target.exists():
        print_error(f"Path does not exist: {target}")
        raise typer.Exit(code=1)

    total = size_of(target)
    console.print(f"{target}: [size]{format_size(total)}[/] ({total} bytes)")


def usage(
    path: Annotated[
        Path,
        typer.Argument(help="Any path on the volume to inspect."),
    ] = Path("."),
) -> None:
    """Show disk usage of the volume containing PATH."""
    used, total = disk_usage(path.expanduser().absolute())
    console.print(format_disk_usage(used, total))
