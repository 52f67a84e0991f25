"""Fixtures das rotas HTTP: app com container de fakes (sem Google/Firestore)."""

from __future__ import annotations

import dataclasses

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.app import create_app
from app.bootstrap.dependencies import ServiceContainer, build_container
from app.infra.stores.memory_stores import MemoryEventStore, MemoryTokenStore
from config.settings import BaseSettings
from tests.fakes.fake_calendar_service import FakeCalendarService
from tests.fakes.fake_oauth_provider import FakeOAuthProvider

FRONTEND_URL = "http://localhost:5173"
EMAIL = "ana@example.com"


@pytest.fixture
def token_store() -> MemoryTokenStore:
    return MemoryTokenStore()


@pytest.fixture
def event_store() -> MemoryEventStore:
    return MemoryEventStore()


@pytest.fixture
def calendar_service() -> FakeCalendarService:
    return FakeCalendarService()


@pytest.fixture
def oauth_provider() -> FakeOAuthProvider:
    return FakeOAuthProvider()


@pytest.fixture
def base_settings() -> BaseSettings:
    return BaseSettings(environment="development", frontend_url=FRONTEND_URL)


@pytest.fixture
def container(
    token_store: MemoryTokenStore,
    event_store: MemoryEventStore,
    calendar_service: FakeCalendarService,
    oauth_provider: FakeOAuthProvider,
    base_settings: BaseSettings,
) -> ServiceContainer:
    built = build_container(
        token_store=token_store,
        event_store=event_store,
        oauth_provider=oauth_provider,
        calendar_service=calendar_service,
    )
    return dataclasses.replace(built, base_settings=base_settings)


@pytest.fixture
def app(container: ServiceContainer) -> FastAPI:
    application = create_app()
    application.state.container = container
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def session_cookie(container: ServiceContainer) -> str:
    return container.session_tokens.issue(EMAIL, EMAIL)


@pytest.fixture
def authed_client(client: TestClient, container: ServiceContainer, session_cookie: str) -> TestClient:
    client.cookies.set(container.auth_settings.cookie_name, session_cookie)
    return client
