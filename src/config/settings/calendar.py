"""Settings de integracao com Google Calendar.

Leitura de env da agenda: calendario, timezone e limites de consulta.
"""

from __future__ import annotations

import os
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Teto de pagina da API events.list
GOOGLE_MAX_RESULTS_CEILING = 2500


class CalendarSettings(BaseModel):
    """Configuracoes de leitura de agenda usadas pelo calculo de estatisticas."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    google_calendar_id: str = Field(
        default="primary",
        min_length=1,
        description="ID do calendario lido no Google Calendar.",
    )
    calendar_timezone: str = Field(
        default="UTC",
        description="Timezone usado para dia da semana e eventos de dia inteiro.",
    )
    calendar_max_results: int = Field(
        default=GOOGLE_MAX_RESULTS_CEILING,
        ge=1,
        le=GOOGLE_MAX_RESULTS_CEILING,
        description="maxResults enviado ao events.list.",
    )
    calendar_max_range_days: int = Field(
        default=365,
        ge=1,
        description="Tamanho maximo do intervalo consultado, em dias.",
    )

    @field_validator("calendar_timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"CALENDAR_TIMEZONE invalido: {value}"
            raise ValueError(msg) from exc
        return value

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.calendar_timezone)


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variaveis de ambiente."""
    return CalendarSettings(
        google_calendar_id=os.getenv("GOOGLE_CALENDAR_ID", "primary"),
        calendar_timezone=os.getenv("CALENDAR_TIMEZONE", "UTC"),
        calendar_max_results=int(
            os.getenv("CALENDAR_MAX_RESULTS", str(GOOGLE_MAX_RESULTS_CEILING))
        ),
        calendar_max_range_days=int(os.getenv("CALENDAR_MAX_RANGE_DAYS", "365")),
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instancia cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = ["GOOGLE_MAX_RESULTS_CEILING", "CalendarSettings", "get_calendar_settings"]
