"""Normalizer Google Calendar: extração e normalização de eventos.

Responsabilidades:
- Extrair eventos da resposta de `events.list` (sem cancelados)
- Normalizar para NormalizedEvent (modelo interno)
"""

from api.normalizers.google_calendar.extractor import extract_calendar_events
from api.normalizers.google_calendar.normalizer import normalize_event, normalize_events

__all__ = ["extract_calendar_events", "normalize_event", "normalize_events"]
