"""Testes do composition root: factories de stores e validação no startup."""

from __future__ import annotations

import os

import pytest

from app import bootstrap
from app.bootstrap import dependencies
from app.infra.stores import MemoryEventStore, MemoryTokenStore
from config.settings import (
    AuthSettings,
    BaseSettings,
    GoogleOAuthSettings,
    StoreSettings,
)


class TestStoreFactories:
    def test_memory_backends(self) -> None:
        assert isinstance(dependencies.create_token_store("memory"), MemoryTokenStore)
        assert isinstance(dependencies.create_event_store("MEMORY"), MemoryEventStore)

    def test_invalid_backend_raises(self) -> None:
        with pytest.raises(ValueError, match="TOKEN_STORE_BACKEND inválido"):
            dependencies.create_token_store("redis")
        with pytest.raises(ValueError, match="EVENT_STORE_BACKEND inválido"):
            dependencies.create_event_store("sqlite")

    def test_firestore_backend_uses_shared_client(self, monkeypatch: pytest.MonkeyPatch) -> None:
        sentinel = object()
        monkeypatch.setattr(dependencies, "create_firestore_client", lambda: sentinel)

        store = dependencies.create_token_store("firestore")

        assert isinstance(store, dependencies.FirestoreTokenStore)


class TestValidateRuntimeSettings:
    """Falha rápida em staging/production; apenas alerta em development."""

    @staticmethod
    def _patch_settings(monkeypatch: pytest.MonkeyPatch, environment: str) -> None:
        monkeypatch.setattr(
            bootstrap, "get_base_settings", lambda: BaseSettings(environment=environment)
        )
        monkeypatch.setattr(bootstrap, "get_google_oauth_settings", lambda: GoogleOAuthSettings())
        monkeypatch.setattr(bootstrap, "get_auth_settings", lambda: AuthSettings())
        monkeypatch.setattr(bootstrap, "get_store_settings", lambda: StoreSettings())

    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        self._patch_settings(monkeypatch, "development")
        bootstrap.validate_runtime_settings()

    def test_production_raises_with_all_errors(self, monkeypatch: pytest.MonkeyPatch) -> None:
        self._patch_settings(monkeypatch, "production")

        with pytest.raises(RuntimeError) as exc_info:
            bootstrap.validate_runtime_settings()

        message = str(exc_info.value)
        assert "Configuração inválida para production" in message
        assert "google_oauth: GOOGLE_CLIENT_ID não configurado" in message
        assert "auth: JWT_SECRET de desenvolvimento proibido" in message
        assert "stores: TOKEN_STORE_BACKEND=memory proibido" in message


class TestInitializeApp:
    """Ambiente do processo preparado no startup."""

    def test_relaxes_oauth_token_scope_check(self, monkeypatch: pytest.MonkeyPatch) -> None:
        # setenv antes do delenv garante que o monkeypatch restaure o valor original
        monkeypatch.setenv("OAUTHLIB_RELAX_TOKEN_SCOPE", "placeholder")
        monkeypatch.delenv("OAUTHLIB_RELAX_TOKEN_SCOPE")

        bootstrap.initialize_app()

        assert os.environ["OAUTHLIB_RELAX_TOKEN_SCOPE"] == "1"

    def test_keeps_explicit_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OAUTHLIB_RELAX_TOKEN_SCOPE", "0")

        bootstrap.initialize_app()

        assert os.environ["OAUTHLIB_RELAX_TOKEN_SCOPE"] == "0"
