"""Extrator de payloads Google Calendar API.

Recebe a resposta de `events.list` (ou a lista `items` ja extraida) e
devolve apenas os registros elegiveis para normalizacao.

Campos tipicos de evento:
- id, summary, start, end, attendees, status
"""

from __future__ import annotations

from typing import Any

CANCELLED_STATUS = "cancelled"


def extract_calendar_events(payload: dict[str, Any] | list[Any]) -> list[dict[str, Any]]:
    """Extrai eventos do payload, descartando cancelados e itens nao-dict."""
    items = payload.get("items") if isinstance(payload, dict) else payload
    if not isinstance(items, list):
        return []
    return [
        item
        for item in items
        if isinstance(item, dict) and item.get("status") != CANCELLED_STATUS
    ]
