# Shared data models for globfinder.
# Lives in its own module to avoid circular imports between finder, core and cli.

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Kind(str, Enum):
    files = "file"
    directories = "dir"
    any = "all"


@dataclass(frozen=True)
class Entry:
    path: str
    is_dir: bool
    ext: str
    name: str
    # lstat of the entry; symlinks are never followed.
    stat: os.stat_result = field(repr=False, compare=False)


@dataclass(frozen=True)
class Options:
    roots: List[str]
    names: List[str]
    exclude: List[str]
    kind: Kind
    match: List[str]
    strict: bool
