# Filesystem traversal and pattern filtering for globfinder.
# This module centralizes all path discovery logic so the finder and the
# hashing helpers walk the tree the same way.
#
# Nothing here mutates the filesystem.

from __future__ import annotations

import fnmatch
import os
import re
import stat
from typing import Iterable, Iterator, List, Optional, Tuple

from globfinder.errors import TraversalError
from globfinder.models import Entry, Kind


def base_name(path: str) -> str:
    # Final path component, ignoring trailing separators.
    # "/" stays "/" and an empty path is treated as ".".
    if not path:
        return "."
    stripped = path.rstrip(os.sep)
    if not stripped:
        return os.sep
    return os.path.basename(stripped)


def split_ext(name: str) -> Tuple[str, str]:
    # Split a base name into (name without extension, extension).
    # The extension runs from the last dot, so ".bashrc" is all extension.
    dot = name.rfind(".")
    if dot == -1:
        return name, ""
    ext = name[dot:]
    return name.replace(ext, "", 1), ext


def _normalize_glob(pattern: str) -> str:
    # Rewrite POSIX-style glob syntax into fnmatch syntax:
    # a "^" opening a class negates it, and a backslash escapes the next
    # character. An escaped "]" or "-" inside a class is not supported.
    out: List[str] = []
    i, n = 0, len(pattern)
    in_class = False
    body_start = 0

    while i < n:
        c = pattern[i]

        if c == "\\" and i + 1 < n and not (in_class and pattern[i + 1] in "]-"):
            nxt = pattern[i + 1]
            # Outside a class, fnmatch metacharacters are made literal by
            # wrapping them in a one-character class.
            out.append(f"[{nxt}]" if not in_class and nxt in "*?[" else nxt)
            i += 2
            continue

        if in_class:
            out.append(c)
            # A "]" right after the opening bracket is a literal member.
            if c == "]" and i != body_start:
                in_class = False
            i += 1
            continue

        if c == "[":
            out.append("[")
            i += 1
            if i < n and pattern[i] == "^":
                out.append("!")
                i += 1
            in_class = True
            body_start = i
            continue

        out.append(c)
        i += 1

    return "".join(out)


def matches_any(name: str, patterns: Iterable[str]) -> bool:
    # Shell-glob match of a single path component against any pattern.
    # Case-sensitive on every platform.
    for pat in patterns:
        if fnmatch.fnmatchcase(name, _normalize_glob(pat)):
            return True
    return False


def path_matches(path: str, *patterns: str) -> bool:
    # Regex match of a full path; each pattern must match at the end of it.
    for pat in patterns:
        if re.search(pat + "$", path):
            return True
    return False


def iter_entries(root: str) -> Iterator[Tuple[str, os.stat_result]]:
    # Yield (path, lstat) for root and everything below it, depth-first,
    # each directory before its children, children in name order.
    # A root that does not exist yields nothing.
    try:
        st = os.lstat(root)
    except FileNotFoundError:
        return
    except OSError as exc:
        raise TraversalError(root, root, exc.strerror or str(exc)) from exc

    # Explicit stack so depth is bounded by the filesystem, not the interpreter.
    # Children are lstat'ed only when popped, in visiting order.
    stack: List[Tuple[str, Optional[os.stat_result]]] = [(root, st)]

    while stack:
        path, st = stack.pop()
        if st is None:
            try:
                st = os.lstat(path)
            except OSError as exc:
                raise TraversalError(path, root, exc.strerror or str(exc)) from exc

        yield path, st

        if not stat.S_ISDIR(st.st_mode):
            continue

        try:
            names = sorted(os.listdir(path))
        except OSError as exc:
            raise TraversalError(path, root, exc.strerror or str(exc)) from exc

        stack.extend((os.path.join(path, name), None) for name in reversed(names))


def make_entry(path: str, st: os.stat_result) -> Entry:
    name, ext = split_ext(base_name(path))
    return Entry(
        path=path,
        is_dir=stat.S_ISDIR(st.st_mode),
        ext=ext,
        name=name,
        stat=st,
    )


def iter_matches(
    root: str,
    include: Iterable[str],
    exclude: Iterable[str],
    kind: Kind,
) -> Iterator[Entry]:
    # Yield entries under root that survive exclude, include and kind filters.
    # Exclusion only hides the entry itself; its children are still visited.
    include = list(include)
    exclude = list(exclude)

    for path, st in iter_entries(root):
        name = base_name(path)

        if exclude and matches_any(name, exclude):
            continue
        if not matches_any(name, include):
            continue

        is_dir = stat.S_ISDIR(st.st_mode)
        if kind is Kind.files and is_dir:
            continue
        if kind is Kind.directories and not is_dir:
            continue

        yield make_entry(path, st)
