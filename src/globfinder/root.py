# Process-wide project root.
# The working directory is read once, on first use, and kept for the
# lifetime of the process.

from __future__ import annotations

import os
import threading
from typing import Optional

_root: Optional[str] = None
_lock = threading.Lock()


def project_root() -> str:
    """Return the working directory as it was on the first call.

    Returns an empty string if it cannot be determined; nothing is cached
    in that case, so a later call tries again.
    """
    global _root
    if _root is None:
        with _lock:
            if _root is None:
                try:
                    _root = os.getcwd()
                except OSError:
                    return ""
    return _root


def reset_project_root() -> None:
    # Forget the cached value. Intended for tests.
    global _root
    with _lock:
        _root = None
