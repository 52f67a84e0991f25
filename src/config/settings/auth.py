"""Settings da sessão do dashboard (JWT em cookie HttpOnly)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEV_JWT_SECRET = "dev-only-jwt-secret-change-in-production"


@dataclass(frozen=True)
class AuthSettings:
    """Configurações do token de sessão.

    Attributes:
        jwt_secret: Segredo HMAC para assinar o JWT
        jwt_algorithm: Algoritmo de assinatura
        jwt_expires_in_days: Validade do JWT e do cookie
        cookie_name: Nome do cookie HttpOnly
    """

    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expires_in_days: int = 7
    cookie_name: str = "token"

    @property
    def cookie_max_age_seconds(self) -> int:
        return self.jwt_expires_in_days * 24 * 60 * 60

    def validate(self, *, strict: bool = False) -> list[str]:
        """Valida configurações de sessão.

        Args:
            strict: True em staging/production (segredo de dev proibido).
        """
        errors: list[str] = []
        if not self.jwt_secret:
            errors.append("JWT_SECRET não configurado")
        elif strict and self.jwt_secret == DEV_JWT_SECRET:
            errors.append("JWT_SECRET de desenvolvimento proibido em staging/production")
        if self.jwt_expires_in_days < 1:
            errors.append("JWT_EXPIRES_IN_DAYS deve ser >= 1")
        return errors


def _load_auth_from_env() -> AuthSettings:
    """Carrega AuthSettings de variáveis de ambiente."""
    return AuthSettings(
        jwt_secret=os.getenv("JWT_SECRET", DEV_JWT_SECRET),
        jwt_expires_in_days=int(os.getenv("JWT_EXPIRES_IN_DAYS", "7")),
        cookie_name=os.getenv("SESSION_COOKIE_NAME", "token"),
    )


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    """Retorna instância cacheada de AuthSettings."""
    return _load_auth_from_env()
