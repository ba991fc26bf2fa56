"""
Unit tests for dirsort.config module.

Tests the category table and configuration validation.
"""

import pytest
from pathlib import Path

from dirsort.config import (
    DEFAULT_CATEGORIES,
    DEFAULT_CATEGORY_TABLE,
    CategoryTable,
    OrganizerConfig,
)
from dirsort.errors import ConfigurationError


class TestCategoryTable:
    """Tests for CategoryTable lookups."""

    def test_known_extensions(self):
        table = CategoryTable()
        assert table.lookup(".pdf") == "Documents"
        assert table.lookup(".jpg") == "Images"
        assert table.lookup(".mkv") == "Videos"
        assert table.lookup(".flac") == "Audio"
        assert table.lookup(".7z") == "Archives"
        assert table.lookup(".go") == "Code"

    def test_every_listed_extension_maps_to_its_group(self):
        for category, extensions in DEFAULT_CATEGORIES.items():
            for ext in extensions:
                assert DEFAULT_CATEGORY_TABLE.lookup(ext) == category
                assert DEFAULT_CATEGORY_TABLE.lookup(ext.upper()) == category

    def test_lookup_ignores_case(self):
        assert DEFAULT_CATEGORY_TABLE.lookup(".PDF") == "Documents"
        assert DEFAULT_CATEGORY_TABLE.lookup(".JpEg") == "Images"

    def test_unknown_extension_falls_back_to_others(self):
        assert DEFAULT_CATEGORY_TABLE.lookup(".xyz") == "Others"
        assert DEFAULT_CATEGORY_TABLE.lookup("") == "Others"

    def test_custom_groups_and_fallback(self):
        table = CategoryTable({"Books": {".EPUB", ".mobi"}}, fallback="Misc")
        assert table.lookup(".epub") == "Books"
        assert table.lookup(".mobi") == "Books"
        assert table.lookup(".pdf") == "Misc"

    def test_later_changes_to_groups_are_ignored(self):
        groups = {"Books": {".epub"}}
        table = CategoryTable(groups)

        groups["Books"].add(".mobi")
        groups["Comics"] = {".cbz"}

        assert table.lookup(".mobi") == "Others"
        assert table.lookup(".cbz") == "Others"


class TestOrganizerConfig:
    """Tests for OrganizerConfig defaults and validation."""

    def test_defaults(self):
        config = OrganizerConfig()
        assert config.source == Path(".")
        assert config.target == Path("./organized")
        assert config.mode == "type"
        assert config.dry_run is False
        assert config.recursive is False
        assert config.fail_fast is False
        assert config.categories is DEFAULT_CATEGORY_TABLE

    def test_accepts_string_paths(self):
        config = OrganizerConfig(source="a", target="b")
        assert config.source == Path("a")
        assert config.target == Path("b")

    @pytest.mark.parametrize("mode", ["type", "date", "extension"])
    def test_valid_modes(self, mode: str):
        assert OrganizerConfig(mode=mode).mode == mode

    def test_invalid_mode_raises(self):
        with pytest.raises(ConfigurationError, match="size"):
            OrganizerConfig(mode="size")

    def test_invalid_conflict_cap_raises(self):
        with pytest.raises(ConfigurationError):
            OrganizerConfig(max_conflict_attempts=0)

    def test_is_immutable(self):
        config = OrganizerConfig()
        with pytest.raises(AttributeError):
            config.mode = "date"
