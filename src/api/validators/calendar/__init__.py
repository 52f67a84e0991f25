"""Validators de consultas de agenda."""

from api.validators.calendar.date_range import (
    DEFAULT_MAX_RANGE_DAYS,
    INVALID_FORMAT_MESSAGE,
    INVERTED_RANGE_MESSAGE,
    MISSING_DATES_MESSAGE,
    parse_date_range,
)

__all__ = [
    "DEFAULT_MAX_RANGE_DAYS",
    "INVALID_FORMAT_MESSAGE",
    "INVERTED_RANGE_MESSAGE",
    "MISSING_DATES_MESSAGE",
    "parse_date_range",
]
