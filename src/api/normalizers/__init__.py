"""Normalizers por provider: conversão de payloads externos para modelos internos.

Estrutura:
- google_calendar/: eventos da Google Calendar API v3

Cada provider tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .google_calendar import extract_calendar_events, normalize_event, normalize_events

__all__ = [
    "extract_calendar_events",
    "normalize_event",
    "normalize_events",
]
