"""File operation commands.

Provides one-shot copy, delete, rename and folder creation commands.
Failures are reported and turn into a non-zero exit status.
"""

from pathlib import Path
from typing import Annotated

import typer

from filepilot.browser.operations import copy_path, create_directory, delete_path, rename_path
from filepilot.cli.display import print_copy_report, print_operation_result
from filepilot.cli.types import get_config, require_directory
from filepilot.utils.formatting import print_error, print_info


def copy(
    source: Annotated[Path, typer.Argument(help="File or directory to copy.")],
    destination: Annotated[Path, typer.Argument(help="Path of the copy.")],
) -> None:
    """Copy a file, or a directory recursively, to DESTINATION."""
    src = source.expanduser().absolute()
    if not src.exists():
        print_error(f"Path does not exist: {src}")
        raise typer.Exit(code=1)

    report = copy_path(src, destination.expanduser().absolute())
    print_copy_report(report)
    if not report.success:
        raise typer.Exit(code=1)


def rm(
    path: Annotated[Path, typer.Argument(help="File or directory to delete.")],
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
) -> None:
    """Delete a file, or a directory and everything below it."""
    target = path.expanduser().absolute()
    if not (target.exists() or target.is_symlink()):
        print_error(f"Path does not exist: {target}")
        raise typer.Exit(code=1)

    if not yes:
        kind = "folder and all its contents" if target.is_dir() else "file"
        confirmed = typer.confirm(f"Delete {kind} {target}?", default=False)
        if not confirmed:
            print_info("Aborted.")
            raise typer.Exit(code=0)

    result = delete_path(target)
    print_operation_result(result, f"Deleted {target}")
    if not result.success:
        raise typer.Exit(code=1)


def rename(
    path: Annotated[Path, typer.Argument(help="Entry to rename.")],
    new_name: Annotated[str, typer.Argument(help="New name (same directory).")],
) -> None:
    """Rename an entry within its directory."""
    config = get_config()
    target = path.expanduser().absolute()
    if not (target.exists() or target.is_symlink()):
        print_error(f"Path does not exist: {target}")
        raise typer.Exit(code=1)

    result = rename_path(target, new_name, config.rename_collision)
    print_operation_result(result, f"Renamed {target.name} to {result.path.name}")
    if not result.success:
        raise typer.Exit(code=1)


def mkdir(
    name: Annotated[
        str | None,
        typer.Argument(help="Folder name (defaults to the configured new folder name)."),
    ] = None,
    parent: Annotated[
        Path,
        typer.Option("--parent", "-p", help="Directory to create the folder in."),
    ] = Path("."),
) -> None:
    """Create a new folder."""
    config = get_config()
    directory = require_directory(parent)

    result = create_directory(directory, name or config.new_folder_name)
    print_operation_result(result, f"Created {result.path}")
    if not result.success:
        raise typer.Exit(code=1)
