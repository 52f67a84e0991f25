"""Fake in-memory de calendario para testes deterministas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from datetime import datetime


class FakeCalendarService:
    """Implementa o protocolo sem IO para testes unitarios.

    Devolve itens pre-definidos e registra cada chamada para validar o
    intervalo enviado ao provider.
    """

    def __init__(
        self,
        items: list[dict[str, Any]] | None = None,
        error: Exception | None = None,
    ) -> None:
        self._items = items or []
        self._error = error
        self.calls: list[tuple[Any, datetime, datetime]] = []

    async def list_events(
        self,
        credentials: Any,
        time_min: datetime,
        time_max: datetime,
    ) -> list[dict[str, Any]]:
        self.calls.append((credentials, time_min, time_max))
        if self._error is not None:
            raise self._error
        return [dict(item) for item in self._items]


def timed_event(
    event_id: str,
    start: str,
    end: str,
    *,
    attendees: list[dict[str, Any]] | None = None,
    status: str = "confirmed",
    summary: str | None = "Reuniao",
) -> dict[str, Any]:
    """Monta um recurso `Event` com dateTime no formato da API v3."""
    record: dict[str, Any] = {
        "id": event_id,
        "status": status,
        "start": {"dateTime": start},
        "end": {"dateTime": end},
    }
    if summary is not None:
        record["summary"] = summary
    if attendees is not None:
        record["attendees"] = attendees
    return record


def all_day_event(event_id: str, day: str, end_day: str | None = None) -> dict[str, Any]:
    """Monta um recurso `Event` de dia inteiro (apenas `date`)."""
    return {
        "id": event_id,
        "status": "confirmed",
        "summary": "Feriado",
        "start": {"date": day},
        "end": {"date": end_day or day},
    }
