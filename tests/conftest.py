# Shared fixtures for globfinder tests.

from __future__ import annotations

from pathlib import Path

import pytest

from globfinder.root import reset_project_root

TREE_FILES = [
    "test1.txt",
    "test2.go",
    "subdir/test3.md",
    "subdir/test4.go",
    "subdir/nested/test5.txt",
]


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    # A small directory tree with files at three depths.
    for rel in TREE_FILES:
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("", encoding="utf-8")
    return tmp_path


@pytest.fixture(autouse=True)
def _fresh_project_root():
    reset_project_root()
    yield
    reset_project_root()
