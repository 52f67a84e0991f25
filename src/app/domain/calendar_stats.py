"""Modelos de resultado das estatisticas de agenda.

Serializados em camelCase porque o dashboard consome o JSON diretamente.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

_CAMEL_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class BusiestDay(BaseModel):
    """Dia da semana com mais eventos no intervalo."""

    model_config = _CAMEL_CONFIG

    day: str = Field(..., description="Nome do dia (Sunday..Saturday) ou N/A.")
    count: int = Field(..., ge=0, description="Quantidade de eventos no dia.")


class CalendarStats(BaseModel):
    """Agregado de estatisticas para um intervalo consultado."""

    model_config = _CAMEL_CONFIG

    total_events: int = Field(..., ge=0)
    average_duration: float = Field(..., description="Duracao media em ms (sem arredondar).")
    average_duration_formatted: str
    solo_meetings: int = Field(..., ge=0)
    guest_meetings: int = Field(..., ge=0)
    busiest_day: BusiestDay
    total_duration: int = Field(..., description="Soma das duracoes em ms.")
    total_duration_formatted: str


class DateRange(BaseModel):
    """Intervalo [start, end) ja validado, com os textos originais da query."""

    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime
    raw_start: str
    raw_end: str


class CalendarStatsResult(BaseModel):
    """Resultado do caso de uso: estatisticas + metadados da consulta."""

    model_config = ConfigDict(frozen=True)

    stats: CalendarStats
    date_range: DateRange
    events_processed: int = Field(..., ge=0)
    events_saved: int = Field(..., ge=0)

    def meta(self) -> dict[str, object]:
        """Bloco `meta` da resposta HTTP."""
        return {
            "dateRange": {
                "start": self.date_range.raw_start,
                "end": self.date_range.raw_end,
            },
            "eventsProcessed": self.events_processed,
            "eventsSavedToDb": self.events_saved,
        }


__all__ = ["BusiestDay", "CalendarStats", "CalendarStatsResult", "DateRange"]
