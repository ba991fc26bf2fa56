"""
Configuration for the directory organizer.

Uses a frozen dataclass so one run's settings can be built once from the
command line (or directly in tests) and passed around without being changed.
"""

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Set

from .errors import ConfigurationError


# Organizing modes
MODE_TYPE = "type"
MODE_DATE = "date"
MODE_EXTENSION = "extension"
VALID_MODES = (MODE_TYPE, MODE_DATE, MODE_EXTENSION)

# Upper bound on "name_N.ext" candidates tried for a single destination
DEFAULT_MAX_CONFLICT_ATTEMPTS = 10000

# Category name to known extensions (lowercase, with the leading dot)
DEFAULT_CATEGORIES: Dict[str, Set[str]] = {
    "Documents": {".pdf", ".doc", ".docx", ".txt", ".rtf", ".odt", ".xlsx", ".xls", ".pptx", ".ppt"},
    "Images": {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".svg", ".webp", ".ico"},
    "Videos": {".mp4", ".avi", ".mkv", ".mov", ".wmv", ".flv", ".webm"},
    "Audio": {".mp3", ".wav", ".flac", ".aac", ".ogg", ".m4a"},
    "Archives": {".zip", ".rar", ".7z", ".tar", ".gz"},
    "Code": {".go", ".py", ".js", ".java", ".cpp", ".c", ".html", ".css", ".json", ".xml"},
}

DEFAULT_FALLBACK_CATEGORY = "Others"


class CategoryTable:
    """
    Read-only mapping from file extension to category name.

    Built once from a category -> extensions grouping. Lookups ignore the
    letter case of the extension.

    Example:
        >>> table = CategoryTable()
        >>> table.lookup(".PDF")
        'Documents'
        >>> table.lookup(".xyz")
        'Others'
    """

    def __init__(
        self,
        categories: Mapping[str, Set[str]] = DEFAULT_CATEGORIES,
        fallback: str = DEFAULT_FALLBACK_CATEGORY,
    ):
        by_extension: Dict[str, str] = {}
        for category, extensions in categories.items():
            for ext in extensions:
                by_extension[ext.lower()] = category
        self._by_extension = MappingProxyType(by_extension)
        self.fallback = fallback

    def lookup(self, extension: str) -> str:
        """
        Get the category for a file extension.

        Args:
            extension: File extension including dot (e.g., ".jpg")

        Returns:
            Category name, or the fallback category if not found
        """
        return self._by_extension.get(extension.lower(), self.fallback)


# Shared by every run; never written after construction
DEFAULT_CATEGORY_TABLE = CategoryTable()


@dataclass(frozen=True)
class OrganizerConfig:
    """
    Settings for one organizing run.

    Example:
        # Use defaults (current directory into ./organized, by type)
        config = OrganizerConfig()

        # Preview a recursive run by month
        config = OrganizerConfig(source=src, target=out, mode="date",
                                 dry_run=True, recursive=True)
    """

    source: Path = Path(".")
    target: Path = Path("organized")
    mode: str = MODE_TYPE
    dry_run: bool = False
    recursive: bool = False

    # Abort on the first recoverable error instead of warning and continuing
    fail_fast: bool = False

    max_conflict_attempts: int = DEFAULT_MAX_CONFLICT_ATTEMPTS
    categories: CategoryTable = field(default_factory=lambda: DEFAULT_CATEGORY_TABLE)

    def __post_init__(self):
        if self.mode not in VALID_MODES:
            raise ConfigurationError(
                f"Invalid organize method '{self.mode}'. Use: {', '.join(VALID_MODES)}"
            )
        if self.max_conflict_attempts < 1:
            raise ConfigurationError(
                f"max_conflict_attempts must be at least 1, got {self.max_conflict_attempts}"
            )
        # Accept plain strings for the two roots
        object.__setattr__(self, "source", Path(self.source))
        object.__setattr__(self, "target", Path(self.target))
