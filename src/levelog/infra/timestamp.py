from __future__ import annotations

"""
Timestamp Formatting.

Single display format shared by console prefixes and file entries.
"""

from datetime import datetime

from levelog.domain.constants import TIMESTAMP_FORMAT


def format_timestamp(moment: datetime) -> str:
    """Render a point in time as 'YYYY-MM-DD HH:MM:SS'."""
    return moment.strftime(TIMESTAMP_FORMAT)
