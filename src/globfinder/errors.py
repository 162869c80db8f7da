# Exception types for globfinder.
# Every failure the library reports is one of these; the underlying
# OSError is always chained as __cause__.

from __future__ import annotations

from typing import Dict, Optional


class FinderError(Exception):
    # Base exception for all globfinder errors.
    pass


class TraversalError(FinderError):
    # A walk failed on an existing path (e.g. permission denied).
    # Raised for the entry that failed; the rest of that root is abandoned.
    def __init__(self, path: str, root: str, reason: str):
        super().__init__(f"cannot walk {path}: {reason}")
        self.path = path
        self.root = root


class HashError(FinderError):
    # A file could not be opened or read while hashing.
    # `partial` carries whatever per-file digests were computed before it.
    def __init__(
        self,
        path: str,
        reason: str,
        partial: Optional[Dict[str, str]] = None,
    ):
        super().__init__(f"cannot hash {path}: {reason}")
        self.reason = reason
        self.path = path
        self.partial = dict(partial) if partial else {}
