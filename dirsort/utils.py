"""
Pure utility functions for the directory organizer.

These functions decide where a file should go. Apart from reading file
metadata and checking whether a path exists, they have no side effects,
so they are easy to unit test in isolation.
"""

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from .config import (
    DEFAULT_CATEGORY_TABLE,
    DEFAULT_MAX_CONFLICT_ATTEMPTS,
    MODE_DATE,
    MODE_EXTENSION,
    MODE_TYPE,
    CategoryTable,
)
from .errors import ConfigurationError, NamingConflictError


NO_EXTENSION_FOLDER = "no-extension"


@dataclass(frozen=True)
class FileRecord:
    """A file found during traversal, with its modification time."""
    path: Path
    mtime: datetime


def get_file_mtime(file_path: Path) -> datetime:
    """
    Get the modification time of a file as a local datetime.

    A symlink reports its own time, not its target's.

    Args:
        file_path: Path to the file

    Returns:
        Datetime of last modification, in the local time of this process
    """
    return datetime.fromtimestamp(file_path.lstat().st_mtime)


def extension_of(file_path: Path) -> str:
    """Return the extension with its leading dot, or "" when there is none."""
    suffix = file_path.suffix
    # A bare trailing dot ("notes.") is not an extension
    return suffix if len(suffix) > 1 else ""


def date_folder(mtime: datetime) -> str:
    """
    Format a modification time as a YYYY-MM folder name.

    Example:
        >>> date_folder(datetime(2024, 3, 15))
        '2024-03'
    """
    return f"{mtime.year:04d}-{mtime.month:02d}"


def extension_folder(file_path: Path) -> str:
    """
    Folder name for a file's raw extension, without the dot.

    The letter case is kept as is, so "IMG.JPG" goes to "JPG".
    Files without an extension go to "no-extension".
    """
    ext = extension_of(file_path)
    if not ext:
        return NO_EXTENSION_FOLDER
    return ext[1:]


def classify(
    record: FileRecord,
    mode: str,
    categories: CategoryTable = DEFAULT_CATEGORY_TABLE,
) -> str:
    """
    Determine the destination subfolder name for a file.

    Args:
        record: File to classify
        mode: One of "type", "date" or "extension"
        categories: Category table used in "type" mode

    Returns:
        Subfolder name (e.g., "Documents", "2024-03", "pdf")

    Raises:
        ConfigurationError: If the mode is unknown
    """
    if mode == MODE_TYPE:
        return categories.lookup(extension_of(record.path))
    if mode == MODE_DATE:
        return date_folder(record.mtime)
    if mode == MODE_EXTENSION:
        return extension_folder(record.path)
    raise ConfigurationError(f"Unknown organize method: {mode}")


def resolve_conflict(
    destination: Path,
    max_attempts: int = DEFAULT_MAX_CONFLICT_ATTEMPTS,
) -> Path:
    """
    Find a destination path that does not exist yet.

    If the destination is taken, a counter is added before the extension:
    report.pdf -> report_1.pdf -> report_2.pdf ...

    Args:
        destination: Proposed destination path
        max_attempts: How many numbered names to try before giving up

    Returns:
        Original path if it doesn't exist, or the first free numbered path

    Raises:
        NamingConflictError: If all numbered names up to max_attempts exist
    """
    # lexists: a dangling symlink still occupies its name
    if not os.path.lexists(destination):
        return destination

    name = destination.name
    suffix = extension_of(destination)
    stem = name[:len(name) - len(suffix)]
    for counter in range(1, max_attempts + 1):
        candidate = destination.with_name(f"{stem}_{counter}{suffix}")
        if not os.path.lexists(candidate):
            return candidate

    raise NamingConflictError(destination, max_attempts)


def normalize_path(path: Path) -> Path:
    """Absolute, normalized form of a path, used to compare source and destination."""
    return Path(os.path.abspath(path))


def is_same_path(first: Path, second: Path) -> bool:
    return normalize_path(first) == normalize_path(second)
