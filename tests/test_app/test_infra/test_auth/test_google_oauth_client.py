"""Testes do client OAuth do Google (sem rede)."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any
from urllib.parse import parse_qs, urlparse

import pytest
from google.oauth2.credentials import Credentials

from app.domain.auth import StoredTokens
from app.infra.auth.google_oauth_client import GoogleOAuthClient, credentials_to_tokens
from config.settings.google_oauth import GoogleOAuthSettings

SETTINGS = GoogleOAuthSettings(
    client_id="client-id.apps.googleusercontent.com",
    client_secret="segredo",
    redirect_uri="http://localhost:5000/auth/callback",
)


def _stored(expiry: datetime, refresh_token: str = "refresh-1") -> StoredTokens:
    return StoredTokens(
        access_token="access-1",
        refresh_token=refresh_token,
        expiry_date=int(expiry.timestamp() * 1000),
    )


def test_authorization_url_requests_offline_consent() -> None:
    url = GoogleOAuthClient(SETTINGS).authorization_url()

    query = parse_qs(urlparse(url).query)
    assert url.startswith("https://accounts.google.com/o/oauth2/auth")
    assert query["access_type"] == ["offline"]
    assert query["prompt"] == ["consent"]
    assert query["client_id"] == [SETTINGS.client_id]
    assert query["redirect_uri"] == [SETTINGS.redirect_uri]
    assert "https://www.googleapis.com/auth/calendar.readonly" in query["scope"][0]
    assert "code_challenge" not in query


def test_build_credentials_carries_tokens_and_expiry() -> None:
    expiry = datetime(2030, 1, 1, 12, tzinfo=UTC)

    credentials = GoogleOAuthClient(SETTINGS).build_credentials(_stored(expiry))

    assert credentials.token == "access-1"
    assert credentials.refresh_token == "refresh-1"
    assert credentials.client_id == SETTINGS.client_id
    assert credentials.expiry == expiry.replace(tzinfo=None)


def test_credentials_to_tokens_converts_expiry_to_epoch_ms() -> None:
    expiry = datetime(2030, 1, 1, 12)
    credentials = Credentials(
        token="tok",
        refresh_token="ref",
        expiry=expiry,
        scopes=["openid", "email"],
    )

    tokens = credentials_to_tokens(credentials)

    assert tokens.access_token == "tok"
    assert tokens.refresh_token == "ref"
    assert tokens.expiry_date == int(expiry.replace(tzinfo=UTC).timestamp() * 1000)
    assert tokens.scope == "openid email"
    assert tokens.token_type == "Bearer"


def test_credentials_without_expiry_default_to_one_hour() -> None:
    before = datetime.now(UTC)

    tokens = credentials_to_tokens(Credentials(token="tok"))

    expected = before + timedelta(hours=1)
    assert tokens.expiry_date >= int(expected.timestamp() * 1000) - 1000


@pytest.mark.asyncio
async def test_refresh_keeps_previous_refresh_token(monkeypatch: pytest.MonkeyPatch) -> None:
    new_expiry = datetime(2030, 1, 1, 13)

    def _fake_refresh(self: Credentials, request: Any) -> None:
        _ = request
        self.token = "access-2"
        self.expiry = new_expiry
        self._refresh_token = None

    monkeypatch.setattr(Credentials, "refresh", _fake_refresh)
    client = GoogleOAuthClient(SETTINGS)

    refreshed = await client.refresh(_stored(datetime(2020, 1, 1, tzinfo=UTC)))

    assert refreshed.access_token == "access-2"
    assert refreshed.refresh_token == "refresh-1"
    assert refreshed.expiry_date == int(new_expiry.replace(tzinfo=UTC).timestamp() * 1000)


@pytest.mark.asyncio
async def test_exchange_code_returns_tokens_and_userinfo(monkeypatch: pytest.MonkeyPatch) -> None:
    client = GoogleOAuthClient(SETTINGS)
    credentials = Credentials(token="tok", refresh_token="ref", expiry=datetime(2030, 1, 1))

    monkeypatch.setattr(client, "_fetch_token_sync", lambda code: credentials)
    monkeypatch.setattr(
        client,
        "_fetch_userinfo_sync",
        lambda creds: {"email": "ana@example.com", "name": "Ana"},
    )

    tokens, userinfo = await client.exchange_code("code-123")

    assert tokens.access_token == "tok"
    assert userinfo["email"] == "ana@example.com"
