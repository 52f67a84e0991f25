"""Dependências FastAPI compartilhadas pelas rotas (container e sessão)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

from api.routes.errors import ApiError

if TYPE_CHECKING:
    from app.bootstrap.dependencies import ServiceContainer
    from app.domain.auth import SessionClaims

AUTH_REQUIRED_MESSAGE = "Authentication required. Please login."
INVALID_SESSION_MESSAGE = "Invalid or expired token. Please login again."


def get_container(request: Request) -> ServiceContainer:
    """Container criado no lifespan (ou injetado pelos testes)."""
    container = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("ServiceContainer não inicializado")
    return container


def require_session(request: Request) -> SessionClaims:
    """Exige cookie de sessão válido; 401 caso contrário."""
    container = get_container(request)
    token = request.cookies.get(container.auth_settings.cookie_name)
    if not token:
        raise ApiError(401, AUTH_REQUIRED_MESSAGE)

    claims = container.session_tokens.verify(token)
    if claims is None:
        raise ApiError(401, INVALID_SESSION_MESSAGE, clear_session=True)
    return claims


def optional_session(request: Request) -> SessionClaims | None:
    """Sessão quando presente e válida; None caso contrário."""
    container = get_container(request)
    token = request.cookies.get(container.auth_settings.cookie_name)
    if not token:
        return None
    return container.session_tokens.verify(token)
