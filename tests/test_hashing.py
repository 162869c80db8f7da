# Unit tests for globfinder.hashing.
# These tests validate digests, determinism and partial results on failure.

from __future__ import annotations

import hashlib
from pathlib import Path

import pytest

from globfinder import HashError
from globfinder import hashing
from globfinder.hashing import directory_files_hash, directory_hash, file_hash

EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"


def test_file_hash_of_empty_file(tmp_path: Path) -> None:
    p = tmp_path / "empty"
    p.write_bytes(b"")
    assert file_hash(str(p)) == EMPTY_MD5


def test_file_hash_streams_large_content(tmp_path: Path) -> None:
    data = b"0123456789abcdef" * 20000
    p = tmp_path / "big.bin"
    p.write_bytes(data)
    assert file_hash(str(p)) == hashlib.md5(data).hexdigest()


def test_file_hash_missing_file_raises(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    with pytest.raises(HashError) as info:
        file_hash(str(missing))
    assert info.value.path == str(missing)
    assert isinstance(info.value.__cause__, FileNotFoundError)


def test_directory_files_hash_covers_files_only(tree: Path) -> None:
    (tree / "test2.go").write_text("package main\n", encoding="utf-8")
    got = directory_files_hash(str(tree))
    assert len(got) == 5
    assert str(tree / "subdir") not in got
    assert got[str(tree / "test1.txt")] == EMPTY_MD5
    assert got[str(tree / "test2.go")] == hashlib.md5(b"package main\n").hexdigest()


def test_directory_files_hash_returns_partial_on_failure(tmp_path: Path, monkeypatch) -> None:
    for name in ("a.txt", "b.txt", "c.txt"):
        (tmp_path / name).write_text(name, encoding="utf-8")

    real_file_hash = hashing.file_hash
    bad = str(tmp_path / "b.txt")

    def _failing(path: str) -> str:
        if path == bad:
            raise HashError(path, "Permission denied") from PermissionError(13, "Permission denied", path)
        return real_file_hash(path)

    monkeypatch.setattr(hashing, "file_hash", _failing)

    with pytest.raises(HashError) as info:
        directory_files_hash(str(tmp_path))

    assert info.value.path == bad
    assert info.value.partial == {str(tmp_path / "a.txt"): hashlib.md5(b"a.txt").hexdigest()}
    assert isinstance(info.value.__cause__, PermissionError)


def test_directory_hash_combines_digests_in_path_order(tmp_path: Path) -> None:
    (tmp_path / "b.txt").write_text("bee", encoding="utf-8")
    (tmp_path / "a.txt").write_text("ay", encoding="utf-8")

    expected = hashlib.md5()
    expected.update(hashlib.md5(b"ay").hexdigest().encode())
    expected.update(hashlib.md5(b"bee").hexdigest().encode())

    assert directory_hash(str(tmp_path)) == expected.hexdigest()


def test_directory_hash_is_deterministic(tree: Path) -> None:
    assert directory_hash(str(tree)) == directory_hash(str(tree))


def test_directory_hash_changes_with_content(tree: Path) -> None:
    before = directory_hash(str(tree))
    (tree / "subdir" / "test3.md").write_text("# changed\n", encoding="utf-8")
    assert directory_hash(str(tree)) != before


def test_directory_hash_changes_when_files_are_added_or_removed(tmp_path: Path) -> None:
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    base = directory_hash(str(tmp_path))

    extra = tmp_path / "b.txt"
    extra.write_text("b", encoding="utf-8")
    added = directory_hash(str(tmp_path))
    assert added != base

    extra.unlink()
    assert directory_hash(str(tmp_path)) == base

    (tmp_path / "a.txt").unlink()
    assert directory_hash(str(tmp_path)) != base


def test_directory_hash_of_missing_directory_is_empty_digest(tmp_path: Path) -> None:
    assert directory_hash(str(tmp_path / "nope")) == EMPTY_MD5


def test_directory_hash_of_empty_scenario_tree_is_stable(tree: Path) -> None:
    # Five empty files: the combined digest is fixed regardless of platform.
    assert directory_hash(str(tree)) == "48561ed4e00b7e9393acbdc4aff47155"
