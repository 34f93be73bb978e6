"""
Custom exceptions for the excel2sql converter.

This module defines a hierarchy of domain-specific exceptions to provide
consistent error handling across the conversion pipeline. Each exception
inherits from `Excel2SqlError`, which allows structured error reporting
with optional details.

None of these are recovered locally: every one aborts the whole run.
"""
from typing import Optional, Any


class Excel2SqlError(Exception):
    """Base exception for all conversion errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        """Initialize exception with message and optional details."""
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigError(Excel2SqlError):
    """Raised when configuration or options are invalid."""
    pass


class UnsupportedColumnType(Excel2SqlError):
    """Raised when a column's value type has no SQL type mapping."""
    pass


class InputUnreadable(Excel2SqlError):
    """Raised when the source workbook cannot be opened or decoded."""
    pass


class InputLocked(InputUnreadable):
    """Raised when the source workbook is held open by another process."""
    pass


class OutputWriteFailure(Excel2SqlError):
    """Raised when the generated SQL cannot be written to its destination."""
    pass
