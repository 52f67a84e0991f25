"""Agregador de settings do Calendar Insights.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Session auth settings
from config.settings.auth import AuthSettings, get_auth_settings

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    StoreBackend,
    StoreSettings,
    get_base_settings,
    get_store_settings,
)

# Calendar settings
from config.settings.calendar import (
    GOOGLE_MAX_RESULTS_CEILING,
    CalendarSettings,
    get_calendar_settings,
)

# Google OAuth settings
from config.settings.google_oauth import (
    OAUTH_SCOPES,
    GoogleOAuthSettings,
    get_google_oauth_settings,
)

# Infrastructure settings
from config.settings.infra import FirestoreSettings, get_firestore_settings

__all__ = [
    # Constants
    "GOOGLE_MAX_RESULTS_CEILING",
    "OAUTH_SCOPES",
    # Auth
    "AuthSettings",
    # Base
    "BaseSettings",
    "CalendarSettings",
    "Environment",
    # Infrastructure
    "FirestoreSettings",
    "GoogleOAuthSettings",
    "StoreBackend",
    "StoreSettings",
    "get_auth_settings",
    "get_base_settings",
    "get_calendar_settings",
    "get_firestore_settings",
    "get_google_oauth_settings",
    "get_store_settings",
]
