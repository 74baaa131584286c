"""Filesystem-mutating operations.

Copy, delete, rename, paste and directory creation. None of these
raise on OS failures: each failure is logged and reported through an
OperationResult or CopyReport, and whatever the OS left behind stays
as it is.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Literal

from filepilot.browser.models import CopyReport, OperationResult

logger = logging.getLogger(__name__)

# How rename treats an existing entry at the target path
RenameCollision = Literal["fail", "overwrite"]


def delete_path(path: Path) -> OperationResult:
    """Delete a file, or a directory and everything below it.

    Directory symlinks are unlinked, never followed.

    Args:
        path: Path to delete.

    Returns:
        OperationResult indicating success or failure.
    """
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as e:
        logger.error("Error deleting %s: %s", path, e)
        return OperationResult(path=path, success=False, error=str(e))

    logger.info("Deleted %s", path)
    return OperationResult(path=path, success=True)


def copy_path(source: Path, destination: Path) -> CopyReport:
    """Copy a file or a directory tree.

    Directories are recreated (with intermediate directories) and
    their children copied one by one; a failing child is logged and
    the remaining siblings are still copied. Existing files at the
    destination are overwritten.

    Copying a directory onto itself or into its own subtree is
    refused, as is copying a file onto itself.

    Args:
        source: File or directory to copy.
        destination: Target path (the copy itself, not its parent).

    Returns:
        CopyReport with the number of files copied and any failures.
    """
    report = CopyReport(source=source, destination=destination)

    refusal = _check_copy_target(source, destination)
    if refusal is not None:
        logger.error("Refusing to copy %s to %s: %s", source, destination, refusal)
        report.failures.append(OperationResult(path=source, success=False, error=refusal))
        return report

    _copy_into(source, destination, report)
    return report


def paste(clipboard: Path | None, current_dir: Path) -> CopyReport | None:
    """Copy the clipboard source into a directory under its own name.

    The clipboard is left untouched so the same source can be pasted
    again.

    Args:
        clipboard: Remembered source path, or None if empty.
        current_dir: Directory to paste into.

    Returns:
        CopyReport of the copy, or None when the clipboard is empty.
    """
    if clipboard is None:
        return None
    return copy_path(clipboard, current_dir / clipboard.name)


def rename_path(
    old_path: Path,
    new_name: str,
    collision: RenameCollision = "fail",
) -> OperationResult:
    """Rename an entry within its parent directory.

    Args:
        old_path: Entry to rename.
        new_name: New final path component.
        collision: "fail" refuses when the target already exists;
            "overwrite" replaces it where the OS allows (a non-empty
            directory can never be replaced).

    Returns:
        OperationResult carrying the new path on success, the old
        path on failure.
    """
    error = _check_name(new_name)
    if error is not None:
        logger.error("Error renaming %s: %s", old_path, error)
        return OperationResult(path=old_path, success=False, error=error)

    new_path = old_path.with_name(new_name)
    if new_path == old_path:
        return OperationResult(path=old_path, success=True)

    if collision == "fail" and (new_path.exists() or new_path.is_symlink()):
        error = f"A file or folder named '{new_name}' already exists"
        logger.error("Error renaming %s: %s", old_path, error)
        return OperationResult(path=old_path, success=False, error=error)

    try:
        os.replace(old_path, new_path)
    except OSError as e:
        logger.error("Error renaming %s to %s: %s", old_path, new_name, e)
        return OperationResult(path=old_path, success=False, error=str(e))

    logger.info("Renamed %s to %s", old_path, new_path)
    return OperationResult(path=new_path, success=True)


def create_directory(parent: Path, name: str) -> OperationResult:
    """Create one new directory.

    Args:
        parent: Existing directory to create it in.
        name: Name of the new directory.

    Returns:
        OperationResult carrying the new path. Fails if an entry with
        that name already exists.
    """
    error = _check_name(name)
    if error is not None:
        logger.error("Error creating folder in %s: %s", parent, error)
        return OperationResult(path=parent, success=False, error=error)

    new_path = parent / name
    try:
        new_path.mkdir()
    except OSError as e:
        logger.error("Error creating folder %s: %s", new_path, e)
        return OperationResult(path=new_path, success=False, error=str(e))

    logger.info("Created folder %s", new_path)
    return OperationResult(path=new_path, success=True)


def _copy_into(source: Path, destination: Path, report: CopyReport) -> None:
    """Recursive copy worker; appends failures to the report."""
    # Directory links are recreated as links, never followed
    if source.is_symlink() and source.is_dir():
        try:
            if destination.is_symlink():
                destination.unlink()
            destination.symlink_to(os.readlink(source), target_is_directory=True)
        except OSError as e:
            logger.error("Error copying link %s: %s", source, e)
            report.failures.append(OperationResult(path=source, success=False, error=str(e)))
        return

    if source.is_dir():
        try:
            destination.mkdir(parents=True, exist_ok=True)
            children = sorted(source.iterdir())
        except OSError as e:
            logger.error("Error copying directory %s: %s", source, e)
            report.failures.append(OperationResult(path=source, success=False, error=str(e)))
            return

        for child in children:
            _copy_into(child, destination / child.name, report)
        return

    try:
        shutil.copy2(source, destination)
    except OSError as e:
        logger.error("Error copying file %s: %s", source, e)
        report.failures.append(OperationResult(path=source, success=False, error=str(e)))
        return

    report.files_copied += 1


def _check_copy_target(source: Path, destination: Path) -> str | None:
    """Return a refusal message if copying source to destination would loop."""
    if not (source.exists() or source.is_symlink()):
        return f"Source does not exist: {source}"

    src = source.resolve()
    dst = destination.resolve()
    if src == dst:
        return "Source and destination are the same"
    if source.is_dir() and dst.is_relative_to(src):
        return "Cannot copy a folder into itself"
    return None


def _check_name(name: str) -> str | None:
    """Return an error message if name is not a single path component."""
    if not name or name in (".", ".."):
        return f"Invalid name: {name!r}"
    if os.sep in name or (os.altsep is not None and os.altsep in name):
        return f"Name cannot contain a path separator: {name!r}"
    return None
