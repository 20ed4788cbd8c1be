from __future__ import annotations

"""
Domain Constants and Static Data Structures.

Centralizes the registry defaults: the logs directory name, the supported
rotation granularities and the table of built-in levels that every new
registry is seeded with.
"""

from typing import Any, Dict, Tuple

DEFAULT_LOGS_DIR_NAME = "logs"
DEFAULT_ROTATION = "daily"
DEFAULT_DEVELOPMENT = False

# Rotation granularity -> strftime pattern of the period directory
ROTATION_PATTERNS: Dict[str, str] = {
    "daily": "%Y-%m-%d",
    "monthly": "%Y-%m",
    "yearly": "%Y",
}
ROTATIONS: Tuple[str, ...] = tuple(ROTATION_PATTERNS)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_SUFFIX = ".log"
JSON_INDENT = 2

# -----------------------------------------------------------------------------
# BUILT-IN LEVELS
# -----------------------------------------------------------------------------

BUILTIN_LEVELS: Dict[str, Dict[str, Any]] = {
    "info": {
        "color": "blue",
        "include_timestamp_in_console": False,
        "default_log_to_file": True,
        "log_file_name": "info.log",
    },
    "warn": {
        "color": "yellowBright",
        "include_timestamp_in_console": False,
        "default_log_to_file": True,
        "log_file_name": "warn.log",
    },
    "error": {
        "color": "redBright",
        "include_timestamp_in_console": False,
        "default_log_to_file": True,
        "log_file_name": "error.log",
    },
    "verbose": {
        "color": "gray",
        "include_timestamp_in_console": False,
        "default_log_to_file": True,
        "log_file_name": "verbose.log",
    },
}
