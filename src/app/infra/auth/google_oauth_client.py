"""Client OAuth 2.0 do Google (fluxo web server-side).

Consentimento, troca do authorization code, leitura do perfil (userinfo)
e refresh do access token. Chamadas bloqueantes rodam em `asyncio.to_thread`.
"""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING, Any

from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build

from app.domain.auth import StoredTokens
from app.observability import get_correlation_id, record_latency
from app.protocols.oauth_provider import OAuthProviderProtocol
from config.settings.google_oauth import GOOGLE_TOKEN_URI

if TYPE_CHECKING:
    from config.settings.google_oauth import GoogleOAuthSettings

logger = logging.getLogger(__name__)

_COMPONENT = "google_oauth_client"
# Sem expiry informado pelo Google assumimos a validade padrão do access token
_DEFAULT_TOKEN_TTL = timedelta(hours=1)


class GoogleOAuthClient(OAuthProviderProtocol):
    """Implementação do provider OAuth usando google-auth-oauthlib."""

    __slots__ = ("_settings",)

    def __init__(self, settings: GoogleOAuthSettings) -> None:
        self._settings = settings

    def authorization_url(self) -> str:
        url, _state = self._new_flow().authorization_url(
            access_type="offline",
            prompt="consent",
            include_granted_scopes="true",
        )
        return url

    async def exchange_code(self, code: str) -> tuple[StoredTokens, dict[str, Any]]:
        started = time.perf_counter()
        credentials = await asyncio.to_thread(self._fetch_token_sync, code)
        userinfo = await asyncio.to_thread(self._fetch_userinfo_sync, credentials)
        record_latency(
            _COMPONENT,
            "exchange_code",
            (time.perf_counter() - started) * 1000,
            correlation_id=get_correlation_id(),
        )
        return credentials_to_tokens(credentials), userinfo

    async def refresh(self, tokens: StoredTokens) -> StoredTokens:
        credentials = self.build_credentials(tokens)
        await asyncio.to_thread(credentials.refresh, Request())
        refreshed = credentials_to_tokens(credentials)
        if not refreshed.refresh_token:
            refreshed = refreshed.model_copy(update={"refresh_token": tokens.refresh_token})
        logger.info("google_oauth_token_refreshed", extra={"component": _COMPONENT})
        return refreshed

    def build_credentials(self, tokens: StoredTokens) -> Credentials:
        # google-auth compara expiry como datetime naive em UTC
        expiry = datetime.fromtimestamp(tokens.expiry_date / 1000, tz=UTC).replace(tzinfo=None)
        return Credentials(
            token=tokens.access_token,
            refresh_token=tokens.refresh_token or None,
            token_uri=GOOGLE_TOKEN_URI,
            client_id=self._settings.client_id,
            client_secret=self._settings.client_secret,
            scopes=list(self._settings.scopes),
            expiry=expiry,
        )

    def _new_flow(self) -> Flow:
        # Flow sem PKCE: /auth/google e /auth/callback não compartilham estado
        return Flow.from_client_config(
            self._settings.client_config,
            scopes=list(self._settings.scopes),
            redirect_uri=self._settings.redirect_uri,
            autogenerate_code_verifier=False,
        )

    def _fetch_token_sync(self, code: str) -> Credentials:
        flow = self._new_flow()
        flow.fetch_token(code=code)
        return flow.credentials

    def _fetch_userinfo_sync(self, credentials: Credentials) -> dict[str, Any]:
        service = build("oauth2", "v2", credentials=credentials, cache_discovery=False)
        return service.userinfo().get().execute()


def credentials_to_tokens(credentials: Credentials) -> StoredTokens:
    """Converte Credentials do google-auth para o formato persistido."""
    expiry = credentials.expiry
    if expiry is None:
        expiry_ms = int((datetime.now(UTC) + _DEFAULT_TOKEN_TTL).timestamp() * 1000)
    else:
        aware = expiry if expiry.tzinfo else expiry.replace(tzinfo=UTC)
        expiry_ms = int(aware.timestamp() * 1000)
    scopes = credentials.granted_scopes or credentials.scopes or []
    return StoredTokens(
        access_token=credentials.token or "",
        refresh_token=credentials.refresh_token or "",
        expiry_date=expiry_ms,
        scope=" ".join(scopes),
        token_type="Bearer",
    )
