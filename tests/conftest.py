"""Pytest configuration and shared fixtures for hierarchy-stats tests."""

from pathlib import Path

import pytest

from hierarchy_stats.models.record import FileRecord
from hierarchy_stats.sample import SAMPLE_RECORDS

FIXTURES = Path(__file__).parent / "fixtures"

SAMPLE_LEAVES = [
    "Audio.mp3",
    "Backup.zip",
    "Code.py",
    "Document.txt",
    "Image.jpg",
    "Presentation.pptx",
    "Spreadsheet.xlsx",
    "Spreadsheet2.xlsx",
    "Video.mp4",
]


@pytest.fixture(autouse=True)
def _isolate_config(tmp_path, monkeypatch):
    """Keep tests away from real config files and env overrides."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for name in (
        "HIERARCHY_STATS_TOP_K",
        "HIERARCHY_STATS_OUTPUT_FORMAT",
        "HIERARCHY_STATS_MAX_DEPTH",
        "HIERARCHY_STATS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_records() -> list[FileRecord]:
    return list(SAMPLE_RECORDS)


@pytest.fixture
def small_records() -> list[FileRecord]:
    """root-level docs -> (a.txt, sub -> b.txt); root-level c.txt."""
    return [
        FileRecord(1, "docs", ("Folder",), None, 10),
        FileRecord(2, "a.txt", ("Text",), 1, 100),
        FileRecord(3, "sub", ("Folder",), 1, 0),
        FileRecord(4, "b.txt", ("Text", "Draft"), 3, 50),
        FileRecord(5, "c.txt", ("Text",), None, 7),
    ]


@pytest.fixture
def sample_leaves() -> list[str]:
    return list(SAMPLE_LEAVES)
