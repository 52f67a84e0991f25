"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Sem persistência entre reinícios. Cada instância é dona do próprio
estado; o bootstrap cria uma por processo e a injeta nos serviços.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.auth import StorageInfo, StoredTokens
from app.protocols.event_store import EventStoreProtocol
from app.protocols.token_store import TokenStoreProtocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.domain.calendar_event import NormalizedEvent


class MemoryTokenStore(TokenStoreProtocol):
    """Tokens OAuth em memória: apenas para dev/test."""

    def __init__(self) -> None:
        self._tokens: dict[str, StoredTokens] = {}  # email -> tokens

    async def save(self, email: str, tokens: StoredTokens, name: str | None = None) -> None:
        _ = name  # sem tabela de usuários em memória
        previous = self._tokens.get(email)
        if not tokens.refresh_token and previous is not None:
            # Google só devolve refresh_token no primeiro consentimento
            tokens = tokens.model_copy(update={"refresh_token": previous.refresh_token})
        self._tokens[email] = tokens

    async def get(self, email: str) -> StoredTokens | None:
        return self._tokens.get(email)

    async def delete(self, email: str) -> None:
        self._tokens.pop(email, None)

    async def exists(self, email: str) -> bool:
        return email in self._tokens

    async def storage_info(self) -> StorageInfo:
        return StorageInfo(mode="in-memory", token_count=len(self._tokens))


class MemoryEventStore(EventStoreProtocol):
    """Cópia de eventos em memória: apenas para dev/test."""

    def __init__(self, max_events: int = 50_000) -> None:
        self._events: dict[tuple[str, str, str], NormalizedEvent] = {}
        self._max_events = max_events

    async def save_events(self, email: str, events: Sequence[NormalizedEvent]) -> int:
        saved = 0
        for event in events:
            key = (email, event.event_id, event.start.isoformat())
            if key not in self._events and len(self._events) >= self._max_events:
                # Limita tamanho para evitar memory leak em dev
                continue
            self._events[key] = event
            saved += 1
        return saved

    def get_events(self, email: str) -> list[NormalizedEvent]:
        """Retorna eventos gravados do usuário (apenas para testes)."""
        return [event for (owner, _, _), event in self._events.items() if owner == email]
