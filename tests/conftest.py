"""
conftest.py - Shared fixtures for the bulk_renamer test suite
"""

import os
from pathlib import Path

import pytest


def make_files(directory: Path, *names: str) -> Path:
    """Create empty files and return the directory"""
    for name in names:
        (directory / name).touch()
    return directory


def listing(directory: Path) -> list:
    """Exact-case directory listing (works on case-insensitive filesystems)"""
    return sorted(os.listdir(directory))


@pytest.fixture
def work_dir(tmp_path):
    """Empty directory to rename in"""
    d = tmp_path / "work"
    d.mkdir()
    return d


@pytest.fixture(scope="session")
def qt_app():
    """One QApplication for every GUI test, rendered offscreen"""
    QtWidgets = pytest.importorskip("PySide6.QtWidgets")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
