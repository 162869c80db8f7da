# Query builder for globfinder.
# A Finder collects roots, include and exclude globs and a result kind,
# then walks on demand. Configuration methods return the finder itself
# so calls can be chained.

from __future__ import annotations

from typing import Dict, List

from rich.console import Console
from rich.markup import escape

from globfinder.errors import TraversalError
from globfinder.models import Entry, Kind
from globfinder.traverse import iter_matches, path_matches

_err = Console(stderr=True, soft_wrap=True)


class Finder:
    """Find files and directories whose names match glob patterns.

    Patterns accumulate across ``find``, ``find_files`` and
    ``find_directories``; the kind is whatever the most recent of those
    calls set it to.
    """

    def __init__(self) -> None:
        self.dirs: List[str] = []
        self.patterns: List[str] = []
        self.excludes: List[str] = []
        self.kind: Kind = Kind.any
        self.files: Dict[str, Entry] = {}
        self.errors: List[TraversalError] = []

    def in_(self, *dirs: str) -> "Finder":
        """Add directories to search in."""
        self.dirs.extend(str(d) for d in dirs)
        return self

    def find(self, *patterns: str) -> "Finder":
        """Search for both files and directories matching the patterns."""
        self.patterns.extend(patterns)
        self.kind = Kind.any
        return self

    def find_files(self, *patterns: str) -> "Finder":
        """Search only for files matching the patterns."""
        self.patterns.extend(patterns)
        self.kind = Kind.files
        return self

    def find_directories(self, *patterns: str) -> "Finder":
        """Search only for directories matching the patterns."""
        self.patterns.extend(patterns)
        self.kind = Kind.directories
        return self

    def exclude(self, *patterns: str) -> "Finder":
        """Drop files and directories whose names match the patterns."""
        self.excludes.extend(patterns)
        return self

    def get(self, strict: bool = False) -> Dict[str, Entry]:
        """Walk every root and return the matches keyed by path.

        A root whose walk fails is abandoned at the failing entry; what was
        found before it is kept and the error is recorded in ``errors``.
        With ``strict`` the first such error is raised instead.
        """
        self._search()
        if strict and self.errors:
            raise self.errors[0]
        return self.files

    def match(self, *patterns: str) -> Dict[str, Entry]:
        """Like ``get``, keeping only paths that end with a regex match."""
        return {
            path: entry
            for path, entry in self.get().items()
            if path_matches(path, *patterns)
        }

    def _search(self) -> None:
        # Results are rebuilt from scratch on every call.
        self.files = {}
        self.errors = []

        for root in self.dirs:
            try:
                for entry in iter_matches(root, self.patterns, self.excludes, self.kind):
                    self.files[entry.path] = entry
            except TraversalError as exc:
                self.errors.append(exc)
                _err.print(f"[dim]globfinder: stopped walking {escape(root)}: {escape(str(exc))}[/dim]")

    def __repr__(self) -> str:
        return (
            f"Finder(dirs={self.dirs!r}, patterns={self.patterns!r}, "
            f"excludes={self.excludes!r}, kind={self.kind.value!r})"
        )


def find(*patterns: str) -> Finder:
    # Shortcuts that start from a fresh Finder.
    return Finder().find(*patterns)


def find_files(*patterns: str) -> Finder:
    return Finder().find_files(*patterns)


def find_directories(*patterns: str) -> Finder:
    return Finder().find_directories(*patterns)


def in_(*dirs: str) -> Finder:
    return Finder().in_(*dirs)
