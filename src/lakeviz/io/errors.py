"""
Custom exceptions for the lakeviz.io module.

Boundaries
- lakeviz.core.errors.EmptyDatasetError is raised when a load yields zero sessions; it is a
  core condition, not an IO failure, and load_sessions re-raises it unchanged.
- lakeviz.io raises Io* errors for configuration and filesystem concerns:
  - IoConfigError: invalid settings values.
  - IoReadError: the data directory is missing or unreadable.

Notes
- A single unreadable or malformed data file is logged and skipped, not raised.
"""

from __future__ import annotations


class IoError(Exception):
    """Base class for IO-related errors in lakeviz.io."""


class IoConfigError(IoError):
    """
    Raised when settings are invalid.

    Examples:
        - default_visible < 0
        - a depth range with min > max
    """


class IoReadError(IoError):
    """Raised when the data directory does not exist or cannot be listed."""
