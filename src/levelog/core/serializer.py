from __future__ import annotations

"""
Message Serialization.

Turns an arbitrary log message into the text that flows through console,
trigger and file outputs. Structured values (mappings, sequences, sets,
dataclasses, plain objects) become an indented JSON tree; exceptions and
primitives keep their own string form.
"""

import dataclasses
import json
from datetime import date, datetime
from typing import Any, Mapping

from levelog.domain.constants import JSON_INDENT

_PASSTHROUGH_TYPES = (str, bytes, int, float, bool)
_JSON_KEY_TYPES = (str, int, float, bool)


def is_structured(message: Any) -> bool:
    """Check whether a message must be rendered as a JSON tree."""
    if message is None or isinstance(message, BaseException):
        return False
    return not isinstance(message, _PASSTHROUGH_TYPES)


def serialize_message(message: Any) -> str:
    """
    Produce the textual form of a log message.

    Args:
        message: Raw message given to the registry.

    Returns:
        str: Pretty-printed JSON for structured values, str() otherwise.
    """
    if not is_structured(message):
        return str(message)
    return json.dumps(_normalize_keys(message), indent=JSON_INDENT, ensure_ascii=False, default=_json_default)


def _normalize_keys(value: Any) -> Any:
    """Recursively turn mapping keys json rejects (tuples, dates, objects) into strings."""
    if isinstance(value, Mapping):
        return {_json_key(k): _normalize_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize_keys(v) for v in value]
    return value


def _json_key(key: Any) -> Any:
    if key is None or isinstance(key, _JSON_KEY_TYPES):
        return key
    if isinstance(key, (datetime, date)):
        return key.isoformat()
    return str(key)


def _json_default(value: Any) -> Any:
    """Fallback encoder for values json does not know natively."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _normalize_keys(dataclasses.asdict(value))
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    if isinstance(value, BaseException):
        return str(value)
    if hasattr(value, "__dict__"):
        return _normalize_keys({k: v for k, v in vars(value).items() if not k.startswith("_")})
    return str(value)
