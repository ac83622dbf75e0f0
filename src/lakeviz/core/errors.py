"""
Core exception types raised by the series registry and the analysis transforms.

Provides typed exceptions for core-domain failures:
- EmptyDatasetError when a load yields zero sampling sessions.
- InsufficientDataError when a regression has fewer than two usable points or a
  degenerate x-distribution.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Unknown lake, date, or year keys passed to visibility toggles are no-ops and never
      raise; malformed optional measurement fields are skipped, not rejected.
    - InsufficientDataError is always locally recoverable: callers omit the trend overlay.

Examples:
    Treat a degenerate regression as "no trend line".

    >>> from lakeviz.core.errors import InsufficientDataError
    >>> def fit_or_none(points):
    ...     if len(points) < 2:
    ...         raise InsufficientDataError("need at least 2 points")
    ...     return points
    >>> try:
    ...     fit_or_none([(1.0, 2.0)])
    ... except InsufficientDataError as e:
    ...     msg = str(e)
    >>> "2 points" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "EmptyDatasetError",
    "InsufficientDataError",
]


class EmptyDatasetError(ValueError):
    """A data load produced zero sessions; the registry and visible set stay empty."""


class InsufficientDataError(ValueError):
    """Too few usable points (n < 2) or zero x-variance for a least-squares fit."""
