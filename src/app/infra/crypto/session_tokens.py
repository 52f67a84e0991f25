"""Tokens de sessão do dashboard (JWT HS256 assinado com JWT_SECRET)."""

from __future__ import annotations

import logging
from datetime import UTC, datetime, timedelta

import jwt

from app.domain.auth import SessionClaims

logger = logging.getLogger(__name__)


class SessionTokenService:
    """Emite e verifica o JWT guardado no cookie de sessão.

    Args:
        secret: Segredo HMAC
        expires_in_days: Validade do token
        algorithm: Algoritmo JWT (HS256)
    """

    def __init__(self, secret: str, *, expires_in_days: int = 7, algorithm: str = "HS256") -> None:
        if not secret:
            raise ValueError("secret obrigatório para assinar sessões")
        self._secret = secret
        self._expires_in = timedelta(days=expires_in_days)
        self._algorithm = algorithm

    def issue(self, user_id: str, email: str, *, now: datetime | None = None) -> str:
        """Gera o JWT com `userId`, `email`, `iat` e `exp`."""
        issued_at = now or datetime.now(UTC)
        payload = {
            "userId": user_id,
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self._expires_in,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> SessionClaims | None:
        """Retorna as claims ou None se o token for inválido/expirado."""
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("session_token_expired")
            return None
        except jwt.InvalidTokenError as exc:
            logger.info("session_token_invalid", extra={"error_type": type(exc).__name__})
            return None

        user_id = payload.get("userId")
        email = payload.get("email")
        if not isinstance(user_id, str) or not isinstance(email, str) or not email:
            logger.info("session_token_invalid", extra={"error_type": "missing_claims"})
            return None
        return SessionClaims(user_id=user_id, email=email)
