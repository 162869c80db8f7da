# Content fingerprints for files and directory trees.
# MD5 is used as a checksum against accidental corruption only; it offers
# no protection against deliberate tampering.

from __future__ import annotations

import hashlib
from typing import Dict

from globfinder.errors import HashError
from globfinder.finder import find

_CHUNK_SIZE = 64 * 1024


def file_hash(path: str) -> str:
    """Return the hex MD5 digest of a file's contents."""
    md5 = hashlib.md5()
    try:
        with open(path, "rb") as fh:
            for chunk in iter(lambda: fh.read(_CHUNK_SIZE), b""):
                md5.update(chunk)
    except OSError as exc:
        raise HashError(str(path), exc.strerror or str(exc)) from exc
    return md5.hexdigest()


def directory_files_hash(path: str) -> Dict[str, str]:
    """Hash every file under ``path``.

    Returns a mapping of file path to digest. If a file cannot be read, a
    ``HashError`` is raised whose ``partial`` holds the digests computed
    before the failure.
    """
    entries = find("*").in_(path).get()
    result: Dict[str, str] = {}

    for p in sorted(entries):
        if entries[p].is_dir:
            continue
        try:
            result[p] = file_hash(p)
        except HashError as exc:
            raise HashError(exc.path, exc.reason, partial=result) from exc.__cause__

    return result


def directory_hash(path: str) -> str:
    """Return one digest for all file contents under ``path``.

    Per-file digests are combined in path order so the result does not
    depend on traversal order.
    """
    md5 = hashlib.md5()
    files = directory_files_hash(path)

    for p in sorted(files):
        md5.update(files[p].encode("utf-8"))

    return md5.hexdigest()
