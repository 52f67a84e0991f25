"""Helpers internos de parsing para respostas da Google Calendar API."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

    from googleapiclient.errors import HttpError


def parse_google_datetime(value: Any, zone: ZoneInfo) -> datetime | None:
    """Converte `dateTime` RFC 3339 para datetime aware no timezone informado."""
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed.replace(tzinfo=zone) if parsed.tzinfo is None else parsed.astimezone(zone)


def parse_google_date(value: Any, zone: ZoneInfo) -> datetime | None:
    """Converte `date` (YYYY-MM-DD) para meia-noite local no timezone informado."""
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        day = date.fromisoformat(value.strip())
    except ValueError:
        return None
    return datetime.combine(day, time(), tzinfo=zone)


def parse_event_boundary(value: Any, zone: ZoneInfo) -> datetime | None:
    """Le `start`/`end` de um evento: prioriza `dateTime`, cai para `date`."""
    if not isinstance(value, dict):
        return None
    if parsed := parse_google_datetime(value.get("dateTime"), zone):
        return parsed
    return parse_google_date(value.get("date"), zone)


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None
