"""
Exception types raised by the configuration engine.
"""

from typing import Optional


class ConfigError(Exception):
    """Base class for configuration errors."""


class ConfigDecodeError(ConfigError):
    """
    Raised when configuration text cannot be decoded into a document.

    Covers malformed JSON and a JSON value that is not an object. A
    malformed individual field never raises; it falls back to its default.
    """

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        base = super().__str__()
        if self.line is not None:
            return f"{base} (line {self.line}, column {self.column})"
        return base
