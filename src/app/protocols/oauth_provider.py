"""Contrato do provider OAuth (Google) usado pelo serviço de autenticação."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.auth import StoredTokens


@runtime_checkable
class OAuthProviderProtocol(Protocol):
    """Operações de consentimento, troca de code e refresh."""

    def authorization_url(self) -> str:
        """URL da tela de consentimento (acesso offline)."""
        ...

    async def exchange_code(self, code: str) -> tuple[StoredTokens, dict[str, Any]]:
        """Troca o authorization code por tokens + perfil (userinfo)."""
        ...

    async def refresh(self, tokens: StoredTokens) -> StoredTokens:
        """Renova o access token; preserva refresh_token se o Google omitir."""
        ...

    def build_credentials(self, tokens: StoredTokens) -> Any:
        """Credencial pronta para chamar APIs Google em nome do usuário."""
        ...
