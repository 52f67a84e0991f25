"""Factories de stores e serviços: criação de implementações concretas.

Este módulo centraliza a criação das dependências baseadas nas
configurações de ambiente. O container resultante vive em
`app.state.container` durante o ciclo de vida do processo.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.normalizers.google_calendar import normalize_events
from app.bootstrap.clients import create_firestore_client
from app.infra.auth import GoogleOAuthClient
from app.infra.calendar.google_calendar_client import GoogleCalendarClient
from app.infra.crypto import SessionTokenService
from app.infra.stores import (
    FirestoreEventStore,
    FirestoreTokenStore,
    MemoryEventStore,
    MemoryTokenStore,
)
from app.services.google_auth_service import GoogleAuthService
from app.use_cases.calendar import GetCalendarStatsUseCase
from config.settings import (
    get_auth_settings,
    get_base_settings,
    get_calendar_settings,
    get_firestore_settings,
    get_google_oauth_settings,
    get_store_settings,
)

if TYPE_CHECKING:
    from app.protocols.calendar_service import CalendarServiceProtocol
    from app.protocols.event_store import EventStoreProtocol
    from app.protocols.oauth_provider import OAuthProviderProtocol
    from app.protocols.token_store import TokenStoreProtocol
    from config.settings import AuthSettings, BaseSettings, CalendarSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Store Factories
# ──────────────────────────────────────────────────────────────────────────────


def create_token_store(backend: str | None = None) -> TokenStoreProtocol:
    """Cria store de tokens OAuth baseado na configuração.

    Lê TOKEN_STORE_BACKEND (via StoreSettings):
    - "memory": MemoryTokenStore (dev only)
    - "firestore": FirestoreTokenStore (staging/production)
    """
    backend = (backend or get_store_settings().token_store_backend).lower()

    if backend == "firestore":
        settings = get_firestore_settings()
        store: TokenStoreProtocol = FirestoreTokenStore(
            create_firestore_client(),
            users_collection=settings.collection_users,
            tokens_collection=settings.collection_tokens,
        )
        logger.info("token_store_created", extra={"backend": "firestore"})
        return store

    if backend == "memory":
        environment = get_base_settings().environment
        if environment not in ("development", "test"):
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("token_store_created", extra={"backend": "memory"})
        return MemoryTokenStore()

    msg = f"TOKEN_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


def create_event_store(backend: str | None = None) -> EventStoreProtocol:
    """Cria store da cópia de eventos (EVENT_STORE_BACKEND)."""
    backend = (backend or get_store_settings().event_store_backend).lower()

    if backend == "firestore":
        store: EventStoreProtocol = FirestoreEventStore(
            create_firestore_client(),
            collection_name=get_firestore_settings().collection_events,
        )
        logger.info("event_store_created", extra={"backend": "firestore"})
        return store

    if backend == "memory":
        logger.info("event_store_created", extra={"backend": "memory"})
        return MemoryEventStore()

    msg = f"EVENT_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


# ──────────────────────────────────────────────────────────────────────────────
# Container
# ──────────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ServiceContainer:
    """Dependências compartilhadas pelas rotas durante a vida do processo."""

    base_settings: BaseSettings
    auth_settings: AuthSettings
    calendar_settings: CalendarSettings
    token_store: TokenStoreProtocol
    event_store: EventStoreProtocol
    session_tokens: SessionTokenService
    auth_service: GoogleAuthService
    calendar_stats: GetCalendarStatsUseCase


def build_container(
    *,
    token_store: TokenStoreProtocol | None = None,
    event_store: EventStoreProtocol | None = None,
    oauth_provider: OAuthProviderProtocol | None = None,
    calendar_service: CalendarServiceProtocol | None = None,
) -> ServiceContainer:
    """Monta o container; parâmetros explícitos substituem os defaults (testes)."""
    base_settings = get_base_settings()
    auth_settings = get_auth_settings()
    calendar_settings = get_calendar_settings()

    token_store = token_store or create_token_store()
    event_store = event_store or create_event_store()
    oauth_provider = oauth_provider or GoogleOAuthClient(get_google_oauth_settings())
    calendar_service = calendar_service or GoogleCalendarClient(
        calendar_id=calendar_settings.google_calendar_id,
        max_results=calendar_settings.calendar_max_results,
    )

    auth_service = GoogleAuthService(oauth_provider, token_store)
    calendar_stats = GetCalendarStatsUseCase(
        auth_service=auth_service,
        calendar_service=calendar_service,
        event_store=event_store,
        normalize=functools.partial(normalize_events, zone=calendar_settings.zone),
    )
    return ServiceContainer(
        base_settings=base_settings,
        auth_settings=auth_settings,
        calendar_settings=calendar_settings,
        token_store=token_store,
        event_store=event_store,
        session_tokens=SessionTokenService(
            auth_settings.jwt_secret,
            expires_in_days=auth_settings.jwt_expires_in_days,
            algorithm=auth_settings.jwt_algorithm,
        ),
        auth_service=auth_service,
        calendar_stats=calendar_stats,
    )
