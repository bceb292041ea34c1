"""Exception types for code2md."""

from __future__ import annotations


class Code2mdError(Exception):
    """Base class for code2md errors."""


class GatherError(Code2mdError):
    """Raised when `gather()` is called with arguments of the wrong shape."""


class ConfigError(Code2mdError):
    """Raised when a config file has values of the wrong type."""


class OutputError(Code2mdError):
    """Raised when the rendered output cannot be written."""
