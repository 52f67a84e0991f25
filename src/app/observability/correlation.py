"""Gerenciamento de correlation_id para rastreamento de requisições.

O correlation_id chega pelo header `X-Correlation-Id` (ou é gerado) e é
injetado em todos os logs. Usa ContextVar para ser thread/async-safe.

Uso:
    from app.observability import get_correlation_id, set_correlation_id

    # Em middleware
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        # processar request
    finally:
        reset_correlation_id(token)

    # Em qualquer lugar
    correlation_id = get_correlation_id()
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "X-Correlation-Id"

# ContextVar para correlation_id (thread/async-safe)
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual.

    Returns:
        correlation_id ou string vazia se não definido.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID a definir. Se None/vazio, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = (correlation_id or "").strip() or generate_correlation_id()
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())
