from __future__ import annotations

"""
Registry Domain Data Models.

Defines the immutable structures exchanged between the registry and its
callers: the per-level definition, the process-wide configuration and the
per-call option overrides.
"""

import os
from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Optional

from levelog.domain import constants as const

TriggerCallback = Callable[[str], None]

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class LevelDefinition:
    """
    Display and destination policy of a single log level.

    Attributes:
        color: Color token used for the console level tag.
        include_timestamp_in_console: Prefix console output with a timestamp.
        default_log_to_file: Append entries to disk unless overridden.
        log_file_name: Target file name inside the rotation directory.
        on_trigger: Callback invoked with every formatted message.
    """
    color: str
    include_timestamp_in_console: bool = False
    default_log_to_file: bool = True
    log_file_name: Optional[str] = None
    on_trigger: Optional[TriggerCallback] = None


@dataclass(frozen=True)
class RegistryConfig:
    """
    Process-wide registry configuration.

    Attributes:
        logs_dir: Absolute directory receiving the log files.
        rotation: File rotation granularity (daily, monthly or yearly).
        development: Mirror every message to the console.
    """
    logs_dir: str = ""
    rotation: str = const.DEFAULT_ROTATION
    development: bool = const.DEFAULT_DEVELOPMENT

    def __post_init__(self) -> None:
        if not self.logs_dir:
            default_dir = os.path.join(os.getcwd(), const.DEFAULT_LOGS_DIR_NAME)
            object.__setattr__(self, "logs_dir", default_dir)


@dataclass(frozen=True)
class LogOverrides:
    """
    Per-call options layered on top of a level definition.

    A field left as None keeps the value of the registered level.
    """
    include_timestamp_in_console: Optional[bool] = None
    log_to_file: Optional[bool] = None
    color: Optional[str] = None
    on_trigger: Optional[TriggerCallback] = None

    def as_dict(self) -> Dict[str, Any]:
        """Return only the fields that were explicitly provided."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


@dataclass(frozen=True)
class ResolvedOptions:
    """Effective options of one log call after merging overrides."""
    color: str
    include_timestamp_in_console: bool
    log_to_file: bool
    log_file_name: Optional[str]
    on_trigger: Optional[TriggerCallback]
