from __future__ import annotations

"""
Rotating File Appender.

Derives the rotation-appropriate path of a level's log file and performs the
physical append. Each rotation period owns a directory named after its date
stamp under the logs root:

    <logs_dir>/2026-10-18/info.log   (daily)
    <logs_dir>/2026-10/info.log      (monthly)
    <logs_dir>/2026/info.log         (yearly)
"""

import os
from datetime import datetime

from levelog.domain.constants import ROTATION_PATTERNS
from levelog.domain.errors import InvalidConfiguration
from levelog.infra.fs import ensure_dir

# -----------------------------------------------------------------------------
# PATH DERIVATION
# -----------------------------------------------------------------------------


def rotation_stamp(moment: datetime, rotation: str) -> str:
    """
    Compute the period identifier of a moment for a rotation granularity.

    Args:
        moment: Point in time being logged.
        rotation: One of 'daily', 'monthly' or 'yearly'.

    Returns:
        str: Date stamp naming the rotation period.

    Raises:
        InvalidConfiguration: If the rotation granularity is unknown.
    """
    pattern = ROTATION_PATTERNS.get(rotation)
    if pattern is None:
        raise InvalidConfiguration("rotation", f"unsupported value {rotation!r}")
    return moment.strftime(pattern)


def resolve_log_path(logs_dir: str, rotation: str, file_name: str, moment: datetime) -> str:
    """Absolute path of the file receiving entries logged at `moment`."""
    return os.path.join(
        os.path.abspath(logs_dir),
        rotation_stamp(moment, rotation),
        file_name,
    )

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------


def append_line(
        logs_dir: str,
        rotation: str,
        file_name: str,
        line: str,
        moment: datetime,
) -> str:
    """
    Append one entry to the rotated log file, creating it when needed.

    Args:
        logs_dir: Root directory of the log files.
        rotation: Rotation granularity.
        file_name: Level file name (e.g. 'info.log').
        line: Entry text, without trailing newline.
        moment: Point in time used to select the rotation period.

    Returns:
        str: Path of the file that received the entry.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    path = resolve_log_path(logs_dir, rotation, file_name, moment)
    ensure_dir(os.path.dirname(path))

    with open(path, "a", encoding="utf-8") as out:
        out.write(f"{line}\n")

    return path


def read_tail(path: str, n_lines: int = 100) -> str:
    """
    Extract the last lines of a log file.

    Returns an empty string when the file does not exist yet.
    """
    if not os.path.exists(path):
        return ""

    # errors='replace' keeps partially written entries readable
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        lines = f.readlines()
    if n_lines <= 0:
        return ""
    return "".join(lines[-n_lines:])
