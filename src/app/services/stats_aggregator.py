"""Agregacao deterministica de estatisticas de agenda.

Regras de negocio:
- Total, duracao total e media (float, sem arredondar) sobre todos os eventos,
  incluindo os de dia inteiro com 24h fixas.
- Solo = nenhum convidado alem do usuario; guest = pelo menos um.
- Dia mais cheio: histograma por dia da semana local (domingo = 0). Em
  empate vence o dia que apareceu primeiro na sequencia de entrada.

Funcao pura: nao acessa rede, storage nem relogio.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.calendar_stats import BusiestDay, CalendarStats

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from app.domain.calendar_event import NormalizedEvent

DAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

NO_BUSIEST_DAY = "N/A"
ZERO_DURATION_TEXT = "0 minutes"


def aggregate_stats(events: Iterable[NormalizedEvent]) -> CalendarStats:
    """Calcula CalendarStats para uma sequencia finita de eventos normalizados."""
    total_events = 0
    total_duration = 0
    solo_meetings = 0
    # dict preserva ordem de insercao: base do desempate
    day_counts: dict[int, int] = {}

    for event in events:
        total_events += 1
        total_duration += event.duration_ms
        if event.is_solo:
            solo_meetings += 1
        weekday = sunday_first_weekday(event.start)
        day_counts[weekday] = day_counts.get(weekday, 0) + 1

    if total_events == 0:
        return _empty_stats()

    average_duration = total_duration / total_events
    return CalendarStats(
        total_events=total_events,
        average_duration=average_duration,
        average_duration_formatted=format_duration(average_duration),
        solo_meetings=solo_meetings,
        guest_meetings=total_events - solo_meetings,
        busiest_day=_busiest_day(day_counts),
        total_duration=total_duration,
        total_duration_formatted=format_duration(total_duration),
    )


def format_duration(milliseconds: float) -> str:
    """Formata ms como "2 hours 30 minutes"; segundos sao descartados."""
    total_seconds = int(milliseconds // 1000)
    if total_seconds <= 0:
        return ZERO_DURATION_TEXT

    hours, remainder = divmod(total_seconds, 3600)
    minutes = remainder // 60

    if hours > 0 and minutes > 0:
        return f"{_plural(hours, 'hour')} {_plural(minutes, 'minute')}"
    if hours > 0:
        return _plural(hours, "hour")
    if minutes > 0:
        return _plural(minutes, "minute")
    return ZERO_DURATION_TEXT


def sunday_first_weekday(moment: datetime) -> int:
    """Indice do dia da semana com domingo = 0 (datetime usa segunda = 0)."""
    return (moment.weekday() + 1) % 7


def _busiest_day(day_counts: dict[int, int]) -> BusiestDay:
    max_count = 0
    busiest_index = 0
    for day_index, count in day_counts.items():
        if count > max_count:
            max_count = count
            busiest_index = day_index
    return BusiestDay(day=DAY_NAMES[busiest_index], count=max_count)


def _plural(quantity: int, unit: str) -> str:
    return f"{quantity} {unit}" if quantity == 1 else f"{quantity} {unit}s"


def _empty_stats() -> CalendarStats:
    return CalendarStats(
        total_events=0,
        average_duration=0,
        average_duration_formatted=ZERO_DURATION_TEXT,
        solo_meetings=0,
        guest_meetings=0,
        busiest_day=BusiestDay(day=NO_BUSIEST_DAY, count=0),
        total_duration=0,
        total_duration_formatted=ZERO_DURATION_TEXT,
    )


__all__ = ["DAY_NAMES", "aggregate_stats", "format_duration", "sunday_first_weekday"]
