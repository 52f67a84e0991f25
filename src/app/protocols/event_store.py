"""Protocolo da cópia best-effort de eventos sincronizados."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.calendar_event import NormalizedEvent


class EventStoreProtocol(ABC):
    """Contrato para upsert de eventos normalizados por usuário.

    Chave lógica: (email, event_id, start). Falhas de infraestrutura devem
    ser sinalizadas com InfrastructureError para o chamador degradar.
    """

    @abstractmethod
    async def save_events(self, email: str, events: Sequence[NormalizedEvent]) -> int:
        """Faz upsert dos eventos e retorna quantos foram gravados."""
