"""Tests for show date/time helpers."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from quickshow.utils.dates import combine_show_datetime, to_utc, utc_date_key

UTC = timezone.utc


def test_combines_date_and_time_in_utc() -> None:
    result = combine_show_datetime("2024-05-01", "10:00", ZoneInfo("UTC"))
    assert result == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)


def test_accepts_seconds() -> None:
    result = combine_show_datetime("2024-05-01", "10:00:30", ZoneInfo("UTC"))
    assert result.second == 30


def test_strips_whitespace() -> None:
    result = combine_show_datetime(" 2024-05-01 ", " 14:00 ", ZoneInfo("UTC"))
    assert result == datetime(2024, 5, 1, 14, 0, tzinfo=UTC)


def test_converts_local_time_to_utc() -> None:
    result = combine_show_datetime("2024-01-15", "20:00", ZoneInfo("Asia/Kolkata"))
    assert result == datetime(2024, 1, 15, 14, 30, tzinfo=UTC)
    assert result.tzinfo is UTC


@pytest.mark.parametrize(
    "show_date,show_time",
    [
        ("2024-05-01", "24:30"),
        ("2024-05-01", "ten"),
        ("01/05/2024", "10:00"),
        ("2024-02-30", "10:00"),
        ("2024-05-01", "10:00Z"),
    ],
)
def test_rejects_malformed_values(show_date: str, show_time: str) -> None:
    with pytest.raises(ValueError):
        combine_show_datetime(show_date, show_time, ZoneInfo("UTC"))


def test_to_utc_assumes_naive_is_utc() -> None:
    assert to_utc(datetime(2024, 5, 1, 10, 0)) == datetime(2024, 5, 1, 10, 0, tzinfo=UTC)


def test_to_utc_converts_aware_values() -> None:
    value = datetime(2024, 5, 1, 10, 0, tzinfo=timezone(timedelta(hours=2)))
    assert to_utc(value) == datetime(2024, 5, 1, 8, 0, tzinfo=UTC)


def test_utc_date_key_crosses_midnight() -> None:
    value = datetime(2024, 5, 2, 0, 30, tzinfo=timezone(timedelta(hours=1)))
    assert utc_date_key(value) == "2024-05-01"
