from __future__ import annotations

from lakeviz.core.errors import EmptyDatasetError, InsufficientDataError


def test_core_errors_are_value_errors() -> None:
    assert issubclass(EmptyDatasetError, ValueError)
    assert issubclass(InsufficientDataError, ValueError)
    assert "2 points" in str(InsufficientDataError("need at least 2 points"))
