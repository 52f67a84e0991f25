"""Validação do intervalo de datas de `/api/calendar/stats`."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from app.domain.calendar_stats import DateRange
from utils.errors import InvalidDateRangeError

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

MISSING_DATES_MESSAGE = "startDate and endDate query parameters are required"
INVALID_FORMAT_MESSAGE = "Invalid date format. Use ISO 8601 format (e.g., 2024-01-01T00:00:00Z)"
INVERTED_RANGE_MESSAGE = "startDate must be before endDate"
DEFAULT_MAX_RANGE_DAYS = 365


def parse_date_range(
    start_raw: str | None,
    end_raw: str | None,
    zone: ZoneInfo,
    max_days: int = DEFAULT_MAX_RANGE_DAYS,
) -> DateRange:
    """Valida e converte startDate/endDate.

    Args:
        start_raw: Valor bruto de startDate
        end_raw: Valor bruto de endDate
        zone: Timezone aplicado a valores sem offset
        max_days: Tamanho máximo do intervalo

    Raises:
        InvalidDateRangeError: Parâmetro ausente, formato inválido,
            início depois do fim ou intervalo maior que max_days.
    """
    if not start_raw or not end_raw:
        raise InvalidDateRangeError(MISSING_DATES_MESSAGE)

    start = _parse_iso(start_raw, zone)
    end = _parse_iso(end_raw, zone)
    if start is None or end is None:
        raise InvalidDateRangeError(INVALID_FORMAT_MESSAGE)

    if start > end:
        raise InvalidDateRangeError(INVERTED_RANGE_MESSAGE)

    if end - start > timedelta(days=max_days):
        raise InvalidDateRangeError(f"Date range cannot exceed {max_days} days")

    return DateRange(start=start, end=end, raw_start=start_raw, raw_end=end_raw)


def _parse_iso(value: str, zone: ZoneInfo) -> datetime | None:
    text = value.strip()
    if not text:
        return None
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00").replace("z", "+00:00"))
    except ValueError:
        return None
    return parsed.replace(tzinfo=zone) if parsed.tzinfo is None else parsed
