from __future__ import annotations

import logging

from .core.registry import LogRegistry, get_default_registry
from .core.serializer import serialize_message
from .domain.errors import InvalidConfiguration, InvalidDefinition, LevelogError, UndefinedLevel
from .domain.models import LevelDefinition, LogOverrides, RegistryConfig
from .infra.appender import resolve_log_path
from .infra.timestamp import format_timestamp

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "LogRegistry",
    "get_default_registry",
    "RegistryConfig",
    "LevelDefinition",
    "LogOverrides",
    "LevelogError",
    "UndefinedLevel",
    "InvalidDefinition",
    "InvalidConfiguration",
    "serialize_message",
    "format_timestamp",
    "resolve_log_path",
]
