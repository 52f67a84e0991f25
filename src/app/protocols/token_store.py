"""Protocolo de persistência dos tokens OAuth do Google (chave: email)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.auth import StorageInfo, StoredTokens


class TokenStoreProtocol(ABC):
    """Contrato assíncrono para armazenamento de tokens por usuário.

    Implementações: memória (dev/test) e Firestore (staging/production).
    A escolha acontece uma vez no bootstrap.
    """

    @abstractmethod
    async def save(self, email: str, tokens: StoredTokens, name: str | None = None) -> None:
        """Cria ou substitui os tokens do usuário (e registra o usuário)."""

    @abstractmethod
    async def get(self, email: str) -> StoredTokens | None:
        """Retorna os tokens do usuário ou None."""

    @abstractmethod
    async def delete(self, email: str) -> None:
        """Remove os tokens do usuário (logout); idempotente."""

    @abstractmethod
    async def exists(self, email: str) -> bool: ...

    @abstractmethod
    async def storage_info(self) -> StorageInfo:
        """Modo e contagens para o endpoint de debug (sem dados sensíveis)."""
