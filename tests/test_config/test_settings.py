"""Testes de carregamento e validação das settings via variáveis de ambiente."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from config.settings import (
    AuthSettings,
    BaseSettings,
    CalendarSettings,
    FirestoreSettings,
    GoogleOAuthSettings,
    StoreSettings,
)
from config.settings.auth import DEV_JWT_SECRET, _load_auth_from_env
from config.settings.base.core import _load_base_from_env
from config.settings.base.stores import _load_stores_from_env
from config.settings.calendar import _load_calendar_from_env


class TestBaseSettings:
    def test_defaults_from_empty_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for key in ("ENVIRONMENT", "FRONTEND_URL", "PORT", "BACKEND_PORT"):
            monkeypatch.delenv(key, raising=False)

        settings = _load_base_from_env()

        assert settings.environment == "development"
        assert settings.frontend_url == "http://localhost:5173"
        assert settings.port == 5000
        assert settings.is_development is True

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("FRONTEND_URL", "https://insights.example.com/")
        monkeypatch.setenv("BACKEND_PORT", "8080")

        settings = _load_base_from_env()

        assert settings.is_production is True
        assert settings.frontend_url == "https://insights.example.com"
        assert settings.port == 8080

    def test_production_requires_https_frontend(self) -> None:
        errors = BaseSettings(environment="production", frontend_url="http://x.com").validate()
        assert errors == ["FRONTEND_URL deve usar https em production"]


class TestAuthSettings:
    def test_cookie_max_age_follows_jwt_expiry(self) -> None:
        assert AuthSettings(jwt_expires_in_days=7).cookie_max_age_seconds == 604_800

    def test_dev_secret_rejected_only_in_strict_mode(self) -> None:
        settings = AuthSettings(jwt_secret=DEV_JWT_SECRET)
        assert settings.validate() == []
        assert settings.validate(strict=True) == [
            "JWT_SECRET de desenvolvimento proibido em staging/production"
        ]

    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JWT_SECRET", "segredo")
        monkeypatch.setenv("JWT_EXPIRES_IN_DAYS", "2")

        settings = _load_auth_from_env()

        assert settings.jwt_secret == "segredo"
        assert settings.jwt_expires_in_days == 2


class TestGoogleOAuthSettings:
    def test_missing_credentials(self) -> None:
        errors = GoogleOAuthSettings().validate()
        assert "GOOGLE_CLIENT_ID não configurado" in errors
        assert "GOOGLE_CLIENT_SECRET não configurado" in errors

    def test_client_config_shape(self) -> None:
        settings = GoogleOAuthSettings(
            client_id="id",
            client_secret="secret",
            redirect_uri="https://api.example.com/auth/callback",
        )
        web = settings.client_config["web"]
        assert web["client_id"] == "id"
        assert web["redirect_uris"] == ["https://api.example.com/auth/callback"]
        assert web["token_uri"] == "https://oauth2.googleapis.com/token"


class TestCalendarSettings:
    def test_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CALENDAR_TIMEZONE", "America/Sao_Paulo")
        monkeypatch.setenv("CALENDAR_MAX_RANGE_DAYS", "90")

        settings = _load_calendar_from_env()

        assert settings.zone.key == "America/Sao_Paulo"
        assert settings.calendar_max_range_days == 90
        assert settings.calendar_max_results == 2500

    def test_invalid_timezone(self) -> None:
        with pytest.raises(ValidationError, match="CALENDAR_TIMEZONE invalido"):
            CalendarSettings(calendar_timezone="Marte/Olympus")

    def test_max_results_ceiling(self) -> None:
        with pytest.raises(ValidationError):
            CalendarSettings(calendar_max_results=5000)


class TestStoreSettings:
    def test_default_backend_depends_on_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("TOKEN_STORE_BACKEND", raising=False)
        monkeypatch.delenv("EVENT_STORE_BACKEND", raising=False)

        monkeypatch.setenv("ENVIRONMENT", "development")
        assert _load_stores_from_env().token_store_backend == "memory"

        monkeypatch.setenv("ENVIRONMENT", "production")
        assert _load_stores_from_env().event_store_backend == "firestore"

    def test_invalid_backend_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TOKEN_STORE_BACKEND", "redis")
        with pytest.raises(ValueError, match="TOKEN_STORE_BACKEND inválido"):
            _load_stores_from_env()

    def test_memory_forbidden_outside_development(self) -> None:
        errors = StoreSettings(token_store_backend="memory").validate(
            BaseSettings(environment="staging")
        )
        assert errors == ["TOKEN_STORE_BACKEND=memory proibido em staging/production"]


def test_firestore_project_falls_back_to_gcp_project() -> None:
    assert FirestoreSettings().validate("meu-projeto") == []
    assert FirestoreSettings().validate("") == [
        "FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado"
    ]
