from __future__ import annotations

"""
Log Level Registry.

Central dispatcher of the logging facility. Owns the level-name to
definition mapping and the registry configuration, and routes every log call
to its sinks: the development console, the level's trigger callback and the
rotating log files.
"""

import logging
import sys
import threading
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, TextIO

from levelog.core.serializer import serialize_message
from levelog.domain import constants as const
from levelog.domain.errors import InvalidConfiguration, InvalidDefinition, UndefinedLevel
from levelog.domain.models import (
    LevelDefinition,
    LogOverrides,
    RegistryConfig,
    ResolvedOptions,
    TriggerCallback,
)
from levelog.infra.appender import append_line, read_tail, resolve_log_path
from levelog.infra.colors import colorize, is_known_color
from levelog.infra.fs import ensure_dir, ensure_file, normalize_path
from levelog.infra.timestamp import format_timestamp

logger = logging.getLogger(__name__)


class LogRegistry:
    """
    Shared logging sink holding level definitions and output configuration.

    A registry is seeded with the built-in levels (info, warn, error,
    verbose). State is guarded by a re-entrant lock that is only held while
    reading or replacing it, so trigger callbacks may log themselves.
    """

    def __init__(
            self,
            config: Optional[RegistryConfig] = None,
            *,
            clock: Callable[[], datetime] = datetime.now,
            stream: Optional[TextIO] = None,
    ) -> None:
        """
        Initialize the registry and ensure its logs directory exists.

        Args:
            config: Initial configuration, defaults to '<cwd>/logs', daily.
            clock: Source of the current time for timestamps and rotation.
            stream: Console destination, defaults to sys.stdout at call time.
        """
        base = config or RegistryConfig()
        _validate_rotation(base.rotation)

        self._lock = threading.RLock()
        self._config = replace(base, logs_dir=normalize_path(base.logs_dir, base.logs_dir))
        self._levels: Dict[str, LevelDefinition] = {
            name: LevelDefinition(**fields) for name, fields in const.BUILTIN_LEVELS.items()
        }
        self._clock = clock
        self._stream = stream

        ensure_dir(self._config.logs_dir)

    # -------------------------------------------------------------------------
    # CONFIGURATION
    # -------------------------------------------------------------------------

    @property
    def config(self) -> RegistryConfig:
        """Snapshot of the current configuration."""
        with self._lock:
            return self._config

    def configure(
            self,
            logs_dir: Optional[str] = None,
            rotation: Optional[str] = None,
            development: Optional[bool] = None,
    ) -> None:
        """
        Overwrite the registry configuration.

        Unset fields keep their current value. The target directory is
        created before the new configuration takes effect.

        Args:
            logs_dir: Directory receiving the log files.
            rotation: 'daily', 'monthly' or 'yearly'.
            development: Mirror messages to the console.

        Raises:
            InvalidConfiguration: If the rotation granularity is unknown.
            OSError: If the directory cannot be created.
        """
        if rotation is not None:
            _validate_rotation(rotation)

        with self._lock:
            current = self._config
            updated = replace(
                current,
                logs_dir=normalize_path(logs_dir, current.logs_dir),
                rotation=rotation if rotation is not None else current.rotation,
                development=bool(development) if development is not None else current.development,
            )
            ensure_dir(updated.logs_dir)
            self._config = updated

        logger.debug(
            f"Registry: configured logs_dir={updated.logs_dir} "
            f"rotation={updated.rotation} development={updated.development}"
        )

    # -------------------------------------------------------------------------
    # LEVEL DEFINITIONS
    # -------------------------------------------------------------------------

    def define_level(
            self,
            name: str,
            color: Optional[str] = None,
            *,
            log_to_file: Optional[bool] = None,
            include_timestamp_in_console: bool = False,
            log_file_name: Optional[str] = None,
            on_trigger: Optional[TriggerCallback] = None,
    ) -> None:
        """
        Register a level, replacing any previous definition in full.

        Fields omitted here are never inherited from an earlier definition
        of the same name. When a file name is given, the level's file for the
        current rotation period is created.

        Args:
            name: Unique level name.
            color: Display color token of the console tag.
            log_to_file: Whether entries go to disk by default.
            include_timestamp_in_console: Prefix messages with a timestamp.
            log_file_name: File name inside the rotation directory.
            on_trigger: Callback receiving every formatted message.

        Raises:
            InvalidDefinition: If a required field is missing or malformed.
            OSError: If the level file cannot be created.
        """
        if not isinstance(name, str) or not name.strip():
            raise InvalidDefinition(str(name), "name must be a non-empty string")
        if color is None:
            raise InvalidDefinition(name, "missing required field 'color'")
        if log_to_file is None:
            raise InvalidDefinition(name, "missing required field 'log_to_file'")
        if not is_known_color(color):
            raise InvalidDefinition(name, f"unknown color {color!r}")
        if on_trigger is not None and not callable(on_trigger):
            raise InvalidDefinition(name, "on_trigger must be callable")

        definition = LevelDefinition(
            color=color,
            include_timestamp_in_console=bool(include_timestamp_in_console),
            default_log_to_file=bool(log_to_file),
            log_file_name=log_file_name,
            on_trigger=on_trigger,
        )

        with self._lock:
            replaced = name in self._levels
            self._levels[name] = definition
            config = self._config

        if log_file_name:
            ensure_file(resolve_log_path(config.logs_dir, config.rotation, log_file_name, self._clock()))

        logger.debug(f"Registry: level '{name}' {'redefined' if replaced else 'defined'}.")

    def get_level(self, name: str) -> Optional[LevelDefinition]:
        """Return the definition registered for a name, or None."""
        with self._lock:
            return self._levels.get(name)

    def levels(self) -> List[str]:
        """Names of all registered levels, in registration order."""
        with self._lock:
            return list(self._levels)

    # -------------------------------------------------------------------------
    # DISPATCH
    # -------------------------------------------------------------------------

    def log(
            self,
            level: str,
            message: Any,
            overrides: Optional[LogOverrides] = None,
            **options: Any,
    ) -> None:
        """
        Emit a message on a level.

        Overrides may be passed as a LogOverrides instance, as keyword
        arguments (include_timestamp_in_console, log_to_file, color,
        on_trigger) or both; keywords win.

        Args:
            level: Registered level name.
            message: Text, structured value or exception.
            overrides: Per-call options layered on the level definition.

        Raises:
            UndefinedLevel: If the level is unknown and no color override
                is supplied.
            OSError: If the file append fails.
        """
        provided: Dict[str, Any] = overrides.as_dict() if overrides else {}
        provided.update(LogOverrides(**options).as_dict())

        with self._lock:
            definition = self._levels.get(level)
            config = self._config

        resolved = _resolve_options(level, definition, provided)

        moment = self._clock()
        text = serialize_message(message)
        formatted = f"{format_timestamp(moment)} {text}" if resolved.include_timestamp_in_console else text

        if config.development:
            tag = colorize(level.upper(), resolved.color)
            print(f"[{tag}] - {formatted}", file=self._stream or sys.stdout)

        if resolved.on_trigger is not None:
            resolved.on_trigger(formatted)

        if resolved.log_to_file:
            file_name = resolved.log_file_name or f"{level}{const.LOG_FILE_SUFFIX}"
            append_line(
                config.logs_dir,
                config.rotation,
                file_name,
                f"{format_timestamp(moment)} {text}",
                moment,
            )

    def info(self, message: Any, **options: Any) -> None:
        self.log("info", message, **options)

    def warn(self, message: Any, **options: Any) -> None:
        self.log("warn", message, **options)

    def error(self, message: Any, **options: Any) -> None:
        self.log("error", message, **options)

    def verbose(self, message: Any, **options: Any) -> None:
        self.log("verbose", message, **options)

    # -------------------------------------------------------------------------
    # FILE INSPECTION
    # -------------------------------------------------------------------------

    def current_log_path(self, level: str, when: Optional[datetime] = None) -> str:
        """
        Path of the file receiving the level's entries at a given moment.

        Unregistered levels resolve to '<level>.log'.
        """
        definition = self.get_level(level)
        config = self.config
        file_name = (definition.log_file_name if definition else None) or f"{level}{const.LOG_FILE_SUFFIX}"
        return resolve_log_path(config.logs_dir, config.rotation, file_name, when or self._clock())

    def read_recent(self, level: str, n_lines: int = 100) -> str:
        """
        Retrieve the tail of the level's file for the current period.

        Args:
            level: Level name.
            n_lines: Maximum number of lines returned.

        Returns:
            str: The last lines, or an empty string if nothing was logged.
        """
        return read_tail(self.current_log_path(level), n_lines)


# =============================================================================
# PROCESS-WIDE HANDLE
# =============================================================================

_default_registry: Optional[LogRegistry] = None
_default_lock = threading.Lock()


def get_default_registry() -> LogRegistry:
    """
    Return the shared registry, building it on first use.

    Components that can receive a registry explicitly should do so; this
    handle serves call sites without wiring.
    """
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = LogRegistry()
            logger.debug("Registry: default instance created.")
        return _default_registry


# =============================================================================
# PRIVATE HELPERS
# =============================================================================

def _validate_rotation(rotation: str) -> None:
    if rotation not in const.ROTATIONS:
        raise InvalidConfiguration(
            "rotation",
            f"expected one of {', '.join(const.ROTATIONS)}, got {rotation!r}",
        )


def _resolve_options(
        level: str,
        definition: Optional[LevelDefinition],
        provided: Dict[str, Any],
) -> ResolvedOptions:
    """Merge per-call overrides over the level definition, field by field."""
    if definition is None:
        if "color" not in provided:
            raise UndefinedLevel(level)
        merged: Dict[str, Any] = {
            "include_timestamp_in_console": False,
            "log_to_file": False,
            "log_file_name": None,
            "on_trigger": None,
        }
    else:
        merged = {
            "color": definition.color,
            "include_timestamp_in_console": definition.include_timestamp_in_console,
            "log_to_file": definition.default_log_to_file,
            "log_file_name": definition.log_file_name,
            "on_trigger": definition.on_trigger,
        }

    merged.update(provided)
    if definition is not None:
        # override OR level default; False cannot mute the default
        merged["log_to_file"] = bool(provided.get("log_to_file")) or definition.default_log_to_file
    return ResolvedOptions(**merged)
