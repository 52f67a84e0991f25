"""Serviço de autenticação com Google.

Orquestra o provider OAuth e o token store: login (troca do code),
obtenção de credenciais válidas (com refresh) e logout.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.auth import LoginResult
from app.observability import get_correlation_id, user_log_key
from utils.errors import AuthError, InfrastructureError

if TYPE_CHECKING:
    from app.protocols.oauth_provider import OAuthProviderProtocol
    from app.protocols.token_store import TokenStoreProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "google_auth_service"
MISSING_EMAIL_MESSAGE = "Unable to retrieve user email from Google"


class GoogleAuthService:
    """Login com Google e credenciais por usuário (chave: email)."""

    def __init__(self, provider: OAuthProviderProtocol, token_store: TokenStoreProtocol) -> None:
        self._provider = provider
        self._token_store = token_store

    def get_auth_url(self) -> str:
        """URL da tela de consentimento do Google."""
        return self._provider.authorization_url()

    async def complete_login(self, code: str) -> LoginResult:
        """Troca o authorization code, lê o perfil e persiste os tokens.

        Raises:
            AuthError: Google não retornou o email do usuário.
        """
        tokens, userinfo = await self._provider.exchange_code(code)
        email = str(userinfo.get("email") or "").strip()
        if not email:
            raise AuthError(MISSING_EMAIL_MESSAGE)

        name = userinfo.get("name") or None
        await self._token_store.save(email, tokens, name=name)
        logger.info(
            "google_login_completed",
            extra={
                "component": _COMPONENT,
                "user_key": user_log_key(email),
                "has_refresh_token": bool(tokens.refresh_token),
                "correlation_id": get_correlation_id(),
            },
        )
        return LoginResult(email=email, name=name, tokens=tokens)

    async def get_credentials(self, email: str) -> Any | None:
        """Credenciais Google válidas para o usuário, ou None.

        Faz refresh quando o access token expirou. Se o refresh falhar os
        tokens são removidos e o usuário precisa logar de novo.
        """
        tokens = await self._token_store.get(email)
        if tokens is None:
            return None

        if tokens.is_expired():
            try:
                tokens = await self._provider.refresh(tokens)
            except InfrastructureError:
                raise
            except Exception as exc:
                logger.warning(
                    "google_token_refresh_failed",
                    extra={
                        "component": _COMPONENT,
                        "user_key": user_log_key(email),
                        "error_type": type(exc).__name__,
                        "correlation_id": get_correlation_id(),
                    },
                )
                await self._token_store.delete(email)
                return None
            await self._token_store.save(email, tokens)

        return self._provider.build_credentials(tokens)

    async def logout(self, email: str) -> None:
        """Remove os tokens Google do usuário."""
        await self._token_store.delete(email)
        logger.info(
            "google_logout",
            extra={
                "component": _COMPONENT,
                "user_key": user_log_key(email),
                "correlation_id": get_correlation_id(),
            },
        )
