"""
Pytest fixtures for dirsort tests.

Provides reusable test fixtures for creating source and target directories,
test files with controlled modification times, and output capture.
"""

import pytest
from datetime import datetime
from pathlib import Path
import os

from dirsort.config import OrganizerConfig


def set_mtime(path: Path, when: datetime) -> None:
    """Set both access and modification time of a file."""
    os.utime(path, (when.timestamp(), when.timestamp()))


@pytest.fixture
def temp_dir(tmp_path: Path) -> Path:
    """Create a temporary directory for testing."""
    return tmp_path


@pytest.fixture
def source_dir(temp_dir: Path) -> Path:
    """Create an empty source directory."""
    d = temp_dir / "src"
    d.mkdir()
    return d


@pytest.fixture
def target_dir(temp_dir: Path) -> Path:
    """Path of the target directory (not created)."""
    return temp_dir / "out"


@pytest.fixture
def make_config(source_dir: Path, target_dir: Path):
    """Build an OrganizerConfig rooted at the test directories."""
    def factory(**overrides) -> OrganizerConfig:
        settings = {"source": source_dir, "target": target_dir}
        settings.update(overrides)
        return OrganizerConfig(**settings)
    return factory


@pytest.fixture
def sample_files(source_dir: Path) -> dict:
    """
    Create a report and a photo in the source directory.

    The report is dated 2024-03-15, the photo 2023-11-02.

    Returns a dict mapping file name to its path.
    """
    report = source_dir / "report.pdf"
    report.write_text("quarterly report")
    set_mtime(report, datetime(2024, 3, 15, 12, 0))

    photo = source_dir / "photo.jpg"
    photo.write_text("fake image content")
    set_mtime(photo, datetime(2023, 11, 2, 9, 30))

    return {"report.pdf": report, "photo.jpg": photo}


@pytest.fixture
def nested_files(source_dir: Path) -> dict:
    """
    Create files at several depths of the source directory.

    Returns a dict mapping relative path to file path.
    """
    files = {}
    for rel in ["top.txt", "sub/song.mp3", "sub/deeper/clip.mp4", "other/README"]:
        f = source_dir / rel
        f.parent.mkdir(parents=True, exist_ok=True)
        f.write_text(f"content of {rel}")
        files[rel] = f
    return files


@pytest.fixture
def snapshot():
    """Capture the relative paths and contents of every file under a directory."""
    def take(root: Path) -> dict:
        return {
            str(p.relative_to(root)): (p.read_bytes() if p.is_file() else None)
            for p in sorted(root.rglob("*"))
        }
    return take


@pytest.fixture
def capture_output() -> list:
    """Create a list to capture output from operations."""
    return []


@pytest.fixture
def output_callback(capture_output: list):
    """Create an output callback that captures messages."""
    def callback(message: str) -> None:
        capture_output.append(message)
    return callback
