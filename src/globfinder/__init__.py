# Package initialization for globfinder.
# Re-exports the public API; all functional code lives in submodules.

from globfinder.errors import FinderError, HashError, TraversalError
from globfinder.finder import Finder, find, find_directories, find_files, in_
from globfinder.hashing import directory_files_hash, directory_hash, file_hash
from globfinder.models import Entry, Kind
from globfinder.root import project_root
from globfinder.traverse import path_matches

__all__ = [
    "__version__",
    "Entry",
    "Finder",
    "FinderError",
    "HashError",
    "Kind",
    "TraversalError",
    "directory_files_hash",
    "directory_hash",
    "file_hash",
    "find",
    "find_directories",
    "find_files",
    "in_",
    "path_matches",
    "project_root",
]

# Package version.
# This is duplicated in pyproject.toml by design; keep them in sync.
__version__ = "0.1.0"
