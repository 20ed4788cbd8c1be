from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides path normalization and the directory/file existence guarantees the
registry relies on. Failures are not caught here: permission or path errors
surface to the caller as OSError.
"""

import os
from typing import Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------


def normalize_path(path: Optional[str], fallback: str) -> str:
    """Absolute form of `path`, or of `fallback` when `path` is blank."""
    return os.path.abspath((path or "").strip() or fallback)

# -----------------------------------------------------------------------------
# EXISTENCE GUARANTEES
# -----------------------------------------------------------------------------


def ensure_dir(path: str) -> str:
    """
    Recursively create a directory if it does not exist yet.

    Args:
        path: Target directory path.

    Returns:
        str: The absolute directory path.

    Raises:
        OSError: If the hierarchy cannot be created.
    """
    abs_path = os.path.abspath(path)
    os.makedirs(abs_path, exist_ok=True)
    return abs_path


def ensure_file(path: str) -> str:
    """
    Create an empty file (and its parent directories) if missing.

    Existing content is never truncated.

    Raises:
        OSError: If the file or its parents cannot be created.
    """
    abs_path = os.path.abspath(path)
    ensure_dir(os.path.dirname(abs_path))
    with open(abs_path, "a", encoding="utf-8"):
        pass
    return abs_path
