"""Settings de backends de armazenamento (tokens OAuth e eventos).

O backend é escolhido uma única vez no startup; os casos de uso recebem
o store já construído.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from config.settings.base.core import BaseSettings

StoreBackend = Literal["memory", "firestore"]

_VALID_BACKENDS = ("memory", "firestore")


@dataclass(frozen=True)
class StoreSettings:
    """Configurações de armazenamento.

    Attributes:
        token_store_backend: Backend dos tokens OAuth do Google
        event_store_backend: Backend da cópia best-effort dos eventos
    """

    token_store_backend: StoreBackend = "memory"
    event_store_backend: StoreBackend = "memory"

    def validate(self, base: BaseSettings) -> list[str]:
        """Valida backends contra o ambiente.

        Args:
            base: BaseSettings para verificar ambiente.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.token_store_backend == "memory" and not base.is_development:
            errors.append("TOKEN_STORE_BACKEND=memory proibido em staging/production")

        return errors


def _default_backend_for_env(environment: str) -> StoreBackend:
    return "firestore" if environment in ("staging", "production") else "memory"


def _parse_backend(key: str, default: StoreBackend) -> StoreBackend:
    raw = os.getenv(key, default).strip().lower()
    if raw not in _VALID_BACKENDS:
        msg = f"{key} inválido: {raw}"
        raise ValueError(msg)
    return raw  # type: ignore[return-value]


def _load_stores_from_env() -> StoreSettings:
    """Carrega StoreSettings de variáveis de ambiente."""
    default = _default_backend_for_env(os.getenv("ENVIRONMENT", "development").lower())
    return StoreSettings(
        token_store_backend=_parse_backend("TOKEN_STORE_BACKEND", default),
        event_store_backend=_parse_backend("EVENT_STORE_BACKEND", default),
    )


@lru_cache(maxsize=1)
def get_store_settings() -> StoreSettings:
    """Retorna instância cacheada de StoreSettings."""
    return _load_stores_from_env()
