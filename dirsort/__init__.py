"""
dirsort - Organize files into subfolders by type, date or extension.

This package classifies each file of a directory (optionally recursively),
moves it under a target folder and never overwrites an existing file.
"""

from .config import CategoryTable, OrganizerConfig
from .errors import (
    ConfigurationError,
    NamingConflictError,
    OrganizerError,
    PlacementError,
    TraversalError,
)
from .operations import OrganizeReport, Outcome, iter_files, organize, place_file
from .utils import FileRecord, classify, resolve_conflict

__version__ = "1.0.0"
__all__ = [
    "CategoryTable",
    "OrganizerConfig",
    "FileRecord",
    "OrganizeReport",
    "Outcome",
    "classify",
    "resolve_conflict",
    "iter_files",
    "place_file",
    "organize",
    "OrganizerError",
    "ConfigurationError",
    "TraversalError",
    "PlacementError",
    "NamingConflictError",
]
