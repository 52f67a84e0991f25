"""Modelos de dominio de autenticacao (tokens Google e sessao do dashboard)."""

from __future__ import annotations

import time
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class StoredTokens(BaseModel):
    """Tokens OAuth do Google persistidos por usuario (chave: email)."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    access_token: str
    refresh_token: str = ""
    expiry_date: int = Field(..., description="Expiracao do access token em epoch ms.")
    scope: str = ""
    token_type: str = "Bearer"

    def is_expired(self, now_ms: int | None = None) -> bool:
        current = now_ms if now_ms is not None else int(time.time() * 1000)
        return self.expiry_date <= current


class LoginResult(BaseModel):
    """Resultado da troca do authorization code."""

    model_config = ConfigDict(frozen=True)

    email: str
    name: str | None = None
    tokens: StoredTokens


class SessionClaims(BaseModel):
    """Claims do JWT de sessao do dashboard."""

    model_config = ConfigDict(frozen=True)

    user_id: str
    email: str


class StorageInfo(BaseModel):
    """Resumo do backend de tokens ativo (sem dados sensiveis)."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["in-memory", "firestore"]
    token_count: int = Field(..., ge=0)
    user_count: int | None = None

    def as_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"mode": self.mode, "tokenCount": self.token_count}
        if self.user_count is not None:
            payload["userCount"] = self.user_count
        return payload


__all__ = ["LoginResult", "SessionClaims", "StorageInfo", "StoredTokens"]
