"""Exceptions raised by the directory organizer."""

from pathlib import Path


class OrganizerError(Exception):
    """Base error for the project."""


class ConfigurationError(OrganizerError):
    """Invalid settings, detected before any file is touched."""


class TraversalError(OrganizerError):
    """A directory could not be listed or an entry's metadata could not be read."""

    def __init__(self, path: Path, cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to read {self.path}: {cause}")


class PlacementError(OrganizerError):
    """A file could not be moved to its destination."""

    def __init__(self, path: Path, cause: Exception):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Failed to move {self.path}: {cause}")


class NamingConflictError(OrganizerError):
    """Every numbered alternative for a destination name is already taken."""

    def __init__(self, path: Path, attempts: int):
        self.path = Path(path)
        self.attempts = attempts
        super().__init__(f"Too many naming conflicts for {self.path} ({attempts} attempts)")
