"""Settings do login com Google (OAuth 2.0, fluxo web server-side).

Referência: https://developers.google.com/identity/protocols/oauth2/web-server
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

GOOGLE_AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"
DEFAULT_REDIRECT_URI = "http://localhost:5000/auth/callback"

OAUTH_SCOPES: tuple[str, ...] = (
    "openid",
    "https://www.googleapis.com/auth/calendar.readonly",
    "https://www.googleapis.com/auth/userinfo.email",
    "https://www.googleapis.com/auth/userinfo.profile",
)


@dataclass(frozen=True)
class GoogleOAuthSettings:
    """Configurações do client OAuth do Google.

    Attributes:
        client_id: Client ID do app no Google Cloud Console
        client_secret: Client Secret do app
        redirect_uri: URI registrada para o callback (/auth/callback)
        scopes: Escopos solicitados no consentimento
    """

    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = DEFAULT_REDIRECT_URI
    scopes: tuple[str, ...] = field(default=OAUTH_SCOPES)

    @property
    def client_config(self) -> dict[str, dict[str, object]]:
        """Client config no formato `client_secrets.json` (tipo web)."""
        return {
            "web": {
                "client_id": self.client_id,
                "client_secret": self.client_secret,
                "auth_uri": GOOGLE_AUTH_URI,
                "token_uri": GOOGLE_TOKEN_URI,
                "redirect_uris": [self.redirect_uri],
            }
        }

    def validate(self) -> list[str]:
        """Valida configurações mínimas do OAuth."""
        errors: list[str] = []
        if not self.client_id:
            errors.append("GOOGLE_CLIENT_ID não configurado")
        if not self.client_secret:
            errors.append("GOOGLE_CLIENT_SECRET não configurado")
        if not self.redirect_uri.startswith(("http://", "https://")):
            errors.append(f"GOOGLE_REDIRECT_URI inválida: {self.redirect_uri}")
        return errors


def _load_google_oauth_from_env() -> GoogleOAuthSettings:
    """Carrega GoogleOAuthSettings de variáveis de ambiente."""
    return GoogleOAuthSettings(
        client_id=os.getenv("GOOGLE_CLIENT_ID", ""),
        client_secret=os.getenv("GOOGLE_CLIENT_SECRET", ""),
        redirect_uri=os.getenv("GOOGLE_REDIRECT_URI", DEFAULT_REDIRECT_URI),
    )


@lru_cache(maxsize=1)
def get_google_oauth_settings() -> GoogleOAuthSettings:
    """Retorna instância cacheada de GoogleOAuthSettings."""
    return _load_google_oauth_from_env()
