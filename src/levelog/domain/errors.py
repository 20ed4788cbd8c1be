from __future__ import annotations

"""
Registry Error Taxonomy.

Domain failures raised by the registry. Filesystem failures are not wrapped:
they reach the caller as the original OSError.
"""


class LevelogError(Exception):
    """Base for registry errors."""


class UndefinedLevel(LevelogError):
    def __init__(self, level: str):
        super().__init__(f'Log level: "{level}" is not defined.')
        self.level = level


class InvalidDefinition(LevelogError):
    def __init__(self, name: str, detail: str):
        super().__init__(f"Invalid definition for log level '{name}': {detail}")
        self.name = name
        self.detail = detail


class InvalidConfiguration(LevelogError):
    def __init__(self, field: str, detail: str):
        super().__init__(f"Invalid configuration for '{field}': {detail}")
        self.field = field
        self.detail = detail
