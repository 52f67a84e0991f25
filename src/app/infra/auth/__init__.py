"""Integração OAuth com o Google."""

from app.infra.auth.google_oauth_client import GoogleOAuthClient, credentials_to_tokens

__all__ = ["GoogleOAuthClient", "credentials_to_tokens"]
