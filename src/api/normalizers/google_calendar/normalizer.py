"""Normalizer Google Calendar: converte eventos da API v3 para NormalizedEvent.

Regras:
- Sem `id`, `start` ou `end` (ou com data ilegivel): evento descartado.
- Dia inteiro (`start.date` sem `start.dateTime`): inicio a meia-noite local,
  fim sintetizado em inicio + 24h, duracao fixa de 24h.
- Intervalos invertidos passam adiante com duracao negativa (sem clamp).
- Convidados: remove a entrada `self: true` e quem nao tem email.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from api.normalizers.google_calendar.extractor import extract_calendar_events
from app.domain.calendar_event import ALL_DAY_DURATION_MS, NormalizedEvent
from app.infra.calendar.google_calendar_parsers import parse_event_boundary

if TYPE_CHECKING:
    from zoneinfo import ZoneInfo

DEFAULT_TITLE = "No Title"
DEFAULT_STATUS = "confirmed"

_ONE_MS = timedelta(milliseconds=1)


def normalize_event(record: dict[str, Any], zone: ZoneInfo) -> NormalizedEvent | None:
    """Normaliza um evento bruto; retorna None quando o registro e invalido."""
    if not isinstance(record, dict):
        return None

    event_id = record.get("id")
    start_obj = record.get("start")
    end_obj = record.get("end")
    if not event_id or not isinstance(start_obj, dict) or not isinstance(end_obj, dict):
        return None

    is_all_day = bool(start_obj.get("date")) and not start_obj.get("dateTime")
    start = parse_event_boundary(start_obj, zone)
    if start is None:
        return None

    if is_all_day:
        duration_ms = ALL_DAY_DURATION_MS
        # soma em UTC: 24h reais mesmo em dia de troca de horario de verao
        end: datetime | None = (
            start.astimezone(UTC) + timedelta(milliseconds=ALL_DAY_DURATION_MS)
        ).astimezone(start.tzinfo)
    else:
        end = parse_event_boundary(end_obj, zone)
        if end is None:
            return None
        duration_ms = (end - start) // _ONE_MS

    return NormalizedEvent(
        event_id=str(event_id),
        title=str(record.get("summary") or DEFAULT_TITLE),
        start=start,
        end=end,
        duration_ms=duration_ms,
        attendee_emails=_attendee_emails(record.get("attendees")),
        is_all_day=is_all_day,
        status=str(record.get("status") or DEFAULT_STATUS),
    )


def normalize_events(
    payload: dict[str, Any] | list[Any],
    zone: ZoneInfo,
) -> list[NormalizedEvent]:
    """Extrai e normaliza eventos preservando a ordem do provider."""
    return [
        event
        for record in extract_calendar_events(payload)
        if (event := normalize_event(record, zone)) is not None
    ]


def _attendee_emails(attendees: Any) -> tuple[str, ...]:
    if not isinstance(attendees, list):
        return ()
    emails = (
        attendee.get("email")
        for attendee in attendees
        if isinstance(attendee, dict) and attendee.get("self") is not True
    )
    # dict.fromkeys: remove duplicados mantendo a primeira ocorrencia
    return tuple(dict.fromkeys(email for email in emails if isinstance(email, str) and email))
