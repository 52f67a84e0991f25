"""Contrato de leitura de calendario para o calculo de estatisticas.

Mantemos apenas o protocolo aqui para permitir troca de provider sem
impactar os casos de uso que dependem da capacidade de agenda.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime


@runtime_checkable
class CalendarServiceProtocol(Protocol):
    """Contrato para listar eventos brutos de um intervalo."""

    async def list_events(
        self,
        credentials: Any,
        time_min: datetime,
        time_max: datetime,
    ) -> list[dict[str, Any]]:
        """Retorna os itens de `events.list` para [time_min, time_max).

        Raises:
            AuthenticationExpiredError: Provider recusou as credenciais.
            CalendarFetchError: Qualquer outra falha de leitura.
        """
        ...
