"""
Core file operations for the directory organizer.

These functions walk the source tree and move files into their destination
folders. They use a callback pattern for output to separate concerns from
the CLI.
"""

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Set

from .config import OrganizerConfig
from .errors import NamingConflictError, OrganizerError, PlacementError, TraversalError
from .utils import (
    FileRecord,
    classify,
    get_file_mtime,
    is_same_path,
    normalize_path,
    resolve_conflict,
)


class Outcome(Enum):
    """What happened to a single file."""
    SKIPPED = "skipped"
    PREVIEWED = "previewed"
    MOVED = "moved"


@dataclass(frozen=True)
class PlacementResult:
    """Where a file was (or would have been) placed."""
    source: Path
    destination: Path
    outcome: Outcome


@dataclass
class OrganizeReport:
    """Result of an organizing run with statistics."""
    moved_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    actions: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def total_processed(self) -> int:
        return self.moved_count + self.skipped_count


# Type alias for output callback
OutputCallback = Callable[[str], None]

# Receives recoverable traversal errors; raising from it aborts the walk
ErrorCallback = Callable[[TraversalError], None]


def _default_output(message: str) -> None:
    """Default output callback that prints to stdout."""
    print(message)


def _raise_error(error: TraversalError) -> None:
    raise error


def _make_record(path: Path, on_error: ErrorCallback) -> Optional[FileRecord]:
    try:
        return FileRecord(path=path, mtime=get_file_mtime(path))
    except OSError as e:
        on_error(TraversalError(path, e))
        return None


def iter_files(
    root: Path,
    recursive: bool = False,
    on_error: Optional[ErrorCallback] = None,
) -> Iterator[FileRecord]:
    """
    Yield the files to organize under root.

    Directories are never yielded. Symlinks are yielded as files whatever
    they point to, and are not followed. Entries are visited in name order.
    The generator is single-pass; call again to walk from scratch.

    Args:
        root: Directory to scan
        recursive: If True, walk the whole subtree, otherwise only
            the immediate entries of root
        on_error: Called with a TraversalError for each entry or
            subdirectory that cannot be read. Return to skip it and keep
            going, raise to abort. Defaults to raising.

    Yields:
        FileRecord for each file found

    Raises:
        TraversalError: If root itself cannot be listed
    """
    if on_error is None:
        on_error = _raise_error

    root = Path(root)

    if not recursive:
        try:
            with os.scandir(root) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise TraversalError(root, e) from e

        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    continue
            except OSError as e:
                on_error(TraversalError(Path(entry.path), e))
                continue
            record = _make_record(Path(entry.path), on_error)
            if record is not None:
                yield record
        return

    if not root.is_dir():
        raise TraversalError(root, NotADirectoryError(f"Not a directory: '{root}'"))

    def walk_error(error: OSError) -> None:
        failed = Path(error.filename) if error.filename else root
        if is_same_path(failed, root):
            raise TraversalError(root, error) from error
        on_error(TraversalError(failed, error))

    for dirpath, dirnames, filenames in os.walk(root, onerror=walk_error):
        # os.walk lists symlinks to directories with the directories
        links = [d for d in dirnames if os.path.islink(os.path.join(dirpath, d))]
        dirnames[:] = sorted(d for d in dirnames if d not in links)
        for name in sorted(filenames + links):
            record = _make_record(Path(dirpath) / name, on_error)
            if record is not None:
                yield record


def place_file(
    record: FileRecord,
    config: OrganizerConfig,
    output: OutputCallback = _default_output,
) -> PlacementResult:
    """
    Move one file into its destination folder under config.target.

    Args:
        record: File to place
        config: Run settings (mode, target root, dry run)
        output: Callback for output messages

    Returns:
        PlacementResult describing what happened

    Raises:
        PlacementError: If the destination folder cannot be created, every
            alternative name is taken, or the move fails
    """
    subfolder = classify(record, config.mode, config.categories)
    destination_dir = config.target / subfolder
    destination = destination_dir / record.path.name

    if is_same_path(destination, record.path):
        return PlacementResult(record.path, destination, Outcome.SKIPPED)

    if config.dry_run:
        output(f"  [WOULD MOVE] {record.path} -> {destination}")
        return PlacementResult(record.path, destination, Outcome.PREVIEWED)

    try:
        destination_dir.mkdir(parents=True, exist_ok=True)
        destination = resolve_conflict(destination, config.max_conflict_attempts)
        # Plain rename: no copy fallback across filesystems
        record.path.rename(destination)
    except (OSError, NamingConflictError) as e:
        raise PlacementError(record.path, e) from e

    output(f"  [MOVED] {record.path} -> {destination}")
    return PlacementResult(record.path, destination, Outcome.MOVED)


def organize(
    config: OrganizerConfig,
    output: OutputCallback = _default_output,
) -> OrganizeReport:
    """
    Organize files under config.source into subfolders of config.target.

    Recoverable errors (unreadable entries, failed moves) are reported as
    warnings and the run continues with the next file. With
    config.fail_fast the first such error is raised instead.

    Args:
        config: Run settings
        output: Callback for output messages

    Returns:
        OrganizeReport with statistics

    Raises:
        TraversalError: If the source directory cannot be listed, or on the
            first unreadable entry when fail_fast is set
        PlacementError: On the first failed move when fail_fast is set
    """
    report = OrganizeReport()

    prefix = "[DRY RUN] " if config.dry_run else ""
    output(f"\n{prefix}Starting file organization...")
    output(f"Source: {config.source}")
    output(f"Target: {config.target}")
    output(f"Organize by: {config.mode}")
    output(f"Dry run: {config.dry_run}\n")
    output("-" * 60)

    def warn(error: OrganizerError) -> None:
        if config.fail_fast:
            raise error
        message = str(error)
        output(f"  [WARNING] {message}")
        report.warnings.append(message)
        report.error_count += 1

    # Files moved by this run, so a recursive walk that reaches the target
    # does not pick them up a second time
    placed: Set[Path] = set()

    for record in iter_files(config.source, config.recursive, on_error=warn):
        if normalize_path(record.path) in placed:
            continue

        try:
            result = place_file(record, config, output=output)
        except PlacementError as e:
            warn(e)
            continue

        action = f"{result.source} -> {result.destination}"
        if result.outcome is Outcome.SKIPPED:
            report.skipped_count += 1
            continue

        report.moved_count += 1
        report.actions.append(action)
        if result.outcome is Outcome.MOVED:
            placed.add(normalize_path(result.destination))

    output("-" * 60)
    return report
