"""Protocolos (contratos) entre casos de uso e implementações de infra."""

from app.protocols.calendar_service import CalendarServiceProtocol
from app.protocols.event_store import EventStoreProtocol
from app.protocols.oauth_provider import OAuthProviderProtocol
from app.protocols.token_store import TokenStoreProtocol

__all__ = [
    "CalendarServiceProtocol",
    "EventStoreProtocol",
    "OAuthProviderProtocol",
    "TokenStoreProtocol",
]
