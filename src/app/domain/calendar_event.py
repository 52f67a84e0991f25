"""Modelo de dominio para evento de calendario normalizado.

Independe do formato do provider: normalizers convertem o payload bruto
neste contrato antes de qualquer regra de negocio.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import BaseModel, ConfigDict, Field

# 24h em milissegundos: duracao fixa de eventos de dia inteiro
ALL_DAY_DURATION_MS = 24 * 60 * 60 * 1000


class NormalizedEvent(BaseModel):
    """Uma ocorrencia de evento ja normalizada (start/end sempre presentes)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    event_id: str = Field(..., min_length=1, description="ID do evento no provider.")
    title: str = Field(default="No Title", description="Titulo exibivel do evento.")
    start: datetime = Field(..., description="Inicio do evento (timezone-aware).")
    end: datetime = Field(..., description="Fim do evento (timezone-aware).")
    duration_ms: int = Field(
        ...,
        description="end - start em ms; fixo em 24h para eventos de dia inteiro.",
    )
    attendee_emails: tuple[str, ...] = Field(
        default=(),
        description="Emails dos convidados, exceto o proprio usuario.",
    )
    is_all_day: bool = Field(default=False, description="Evento so com data, sem horario.")
    status: str = Field(default="confirmed", description="Status do evento no provider.")

    @property
    def is_solo(self) -> bool:
        """Evento sem nenhum convidado alem do usuario."""
        return not self.attendee_emails


__all__ = ["ALL_DAY_DURATION_MS", "NormalizedEvent"]
