"""Testes da validação de startDate/endDate."""

from __future__ import annotations

from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import pytest

from api.validators.calendar import (
    INVALID_FORMAT_MESSAGE,
    INVERTED_RANGE_MESSAGE,
    MISSING_DATES_MESSAGE,
    parse_date_range,
)
from utils.errors import InvalidDateRangeError

NEW_YORK = ZoneInfo("America/New_York")


def test_parses_utc_values() -> None:
    date_range = parse_date_range("2024-01-01T00:00:00Z", "2024-01-31T23:59:59Z", UTC)

    assert date_range.start == datetime(2024, 1, 1, tzinfo=UTC)
    assert date_range.end == datetime(2024, 1, 31, 23, 59, 59, tzinfo=UTC)
    assert date_range.raw_start == "2024-01-01T00:00:00Z"
    assert date_range.raw_end == "2024-01-31T23:59:59Z"


def test_naive_values_use_calendar_timezone() -> None:
    date_range = parse_date_range("2024-01-01", "2024-01-02T08:00:00", NEW_YORK)

    assert date_range.start == datetime(2024, 1, 1, tzinfo=NEW_YORK)
    assert date_range.end.utcoffset() is not None


def test_offsets_are_preserved() -> None:
    date_range = parse_date_range("2024-01-01T00:00:00-03:00", "2024-01-02T00:00:00-03:00", UTC)
    assert date_range.start == datetime(2024, 1, 1, 3, tzinfo=UTC)


@pytest.mark.parametrize(
    ("start", "end"),
    [(None, "2024-01-01"), ("2024-01-01", None), ("", ""), (None, None)],
)
def test_missing_values(start: str | None, end: str | None) -> None:
    with pytest.raises(InvalidDateRangeError, match=MISSING_DATES_MESSAGE):
        parse_date_range(start, end, UTC)


@pytest.mark.parametrize(
    ("start", "end"),
    [("ontem", "2024-01-01"), ("2024-01-01", "2024-02-30"), ("2024-01-01", "   ")],
)
def test_invalid_format(start: str, end: str) -> None:
    with pytest.raises(InvalidDateRangeError) as exc_info:
        parse_date_range(start, end, UTC)
    assert str(exc_info.value) == INVALID_FORMAT_MESSAGE


def test_start_after_end() -> None:
    with pytest.raises(InvalidDateRangeError) as exc_info:
        parse_date_range("2024-02-01T00:00:00Z", "2024-01-01T00:00:00Z", UTC)
    assert str(exc_info.value) == INVERTED_RANGE_MESSAGE


def test_equal_bounds_are_accepted() -> None:
    date_range = parse_date_range("2024-01-01T00:00:00Z", "2024-01-01T00:00:00Z", UTC)
    assert date_range.start == date_range.end


def test_range_of_exactly_365_days_is_accepted() -> None:
    date_range = parse_date_range("2023-01-01T00:00:00Z", "2024-01-01T00:00:00Z", UTC)
    assert (date_range.end - date_range.start).days == 365


def test_range_over_365_days_is_rejected() -> None:
    with pytest.raises(InvalidDateRangeError) as exc_info:
        parse_date_range("2023-01-01T00:00:00Z", "2024-01-01T00:00:01Z", UTC)
    assert str(exc_info.value) == "Date range cannot exceed 365 days"


def test_custom_max_days() -> None:
    with pytest.raises(InvalidDateRangeError, match="cannot exceed 30 days"):
        parse_date_range("2024-01-01T00:00:00Z", "2024-03-01T00:00:00Z", UTC, max_days=30)
