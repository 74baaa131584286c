"""Browser domain models.

This module defines the value objects produced and consumed by the
file-management engine: listing entries, navigation outcomes, and
the results of filesystem-mutating operations.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path


class NavigationOutcome(str, Enum):
    """Result of a navigation request.

    Attributes:
        ACCEPTED: The target was an existing directory and became current.
        REJECTED: The target was missing or not a directory; nothing changed.
    """

    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """One filesystem child as seen from a listing or search.

    Attributes:
        path: Absolute filesystem path (unique within a listing).
        size: Size in bytes. Raw length for files, recursive sum of
            contained file sizes for directories.
        modified: Last modification time (timezone-aware, UTC).
        is_dir: True for directories, False for everything else.
    """

    path: Path
    size: int
    modified: datetime
    is_dir: bool

    def __post_init__(self) -> None:
        """Validate entry data after initialization."""
        if self.path == Path():
            msg = "Entry path cannot be empty"
            raise ValueError(msg)
        if self.size < 0:
            msg = f"Entry size cannot be negative, got {self.size}"
            raise ValueError(msg)

    @property
    def name(self) -> str:
        """Final path component."""
        return self.path.name

    @property
    def kind(self) -> str:
        """Human-readable type label ("Directory" or "File")."""
        return "Directory" if self.is_dir else "File"


@dataclass(frozen=True, slots=True)
class OperationResult:
    """Result of a single filesystem mutation.

    Attributes:
        path: Path that was operated on (the new path for renames and
            created directories).
        success: Whether the operation completed successfully.
        error: Error message if the operation failed, None otherwise.
    """

    path: Path
    success: bool
    error: str | None = None


@dataclass(slots=True)
class CopyReport:
    """Outcome of a (possibly recursive) copy.

    A copy keeps going after individual failures, so the report
    collects every failed child instead of stopping at the first one.

    Attributes:
        source: Path that was copied.
        destination: Path the copy was written to.
        files_copied: Number of regular files successfully copied.
        failures: One failed OperationResult per child that could not be copied.
    """

    source: Path
    destination: Path
    files_copied: int = 0
    failures: list[OperationResult] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when no child failed."""
        return not self.failures
