from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from lakeviz.core.dates import date_key, format_date, parse_timestamp, year_of


def test_parse_timestamp_accepts_date_only_and_datetime_strings() -> None:
    assert parse_timestamp("2024-06-15") == datetime(2024, 6, 15)
    assert parse_timestamp("2024-06-15T10:30:00") == datetime(2024, 6, 15, 10, 30)


def test_parse_timestamp_drops_offset_keeping_wall_clock() -> None:
    # 23:30 at -05:00 stays on the recorded day
    assert parse_timestamp("2024-06-15T23:30:00-05:00") == datetime(2024, 6, 15, 23, 30)
    aware = datetime(2024, 6, 15, 1, 0, tzinfo=timezone.utc)
    assert parse_timestamp(aware).tzinfo is None


def test_parse_timestamp_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        parse_timestamp("")
    with pytest.raises(ValueError):
        parse_timestamp("15/06/2024")
    with pytest.raises(TypeError):
        parse_timestamp(20240615)  # type: ignore[arg-type]


def test_date_key_groups_same_day_regardless_of_time() -> None:
    assert date_key("2024-06-15T08:00:00") == date_key("2024-06-15T17:45:00") == date(2024, 6, 15)
    assert date_key(date(2023, 1, 2)) == date(2023, 1, 2)
    assert year_of("2019-12-31T23:59:00") == 2019


def test_format_date_has_no_leading_zero() -> None:
    assert format_date("2024-06-05") == "Jun 5, 2024"
    assert format_date(date(2023, 10, 21)) == "Oct 21, 2023"
