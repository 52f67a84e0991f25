"""Cookie HttpOnly da sessão do dashboard."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from starlette.responses import Response

    from app.bootstrap.dependencies import ServiceContainer


def set_session_cookie(response: Response, container: ServiceContainer, token: str) -> None:
    """Grava o JWT: Secure + SameSite=strict em produção, lax fora dela."""
    production = container.base_settings.is_production
    response.set_cookie(
        key=container.auth_settings.cookie_name,
        value=token,
        max_age=container.auth_settings.cookie_max_age_seconds,
        path="/",
        secure=production,
        httponly=True,
        samesite="strict" if production else "lax",
    )


def clear_session_cookie(response: Response, container: ServiceContainer) -> None:
    production = container.base_settings.is_production
    response.delete_cookie(
        key=container.auth_settings.cookie_name,
        path="/",
        secure=production,
        httponly=True,
        samesite="strict" if production else "lax",
    )
