"""Endpoints de autenticação com Google.

Endpoints:
- GET /auth/google: redireciona para a tela de consentimento
- GET /auth/callback: troca o code, grava o cookie de sessão e volta ao dashboard
- POST /auth/logout: remove tokens Google e limpa o cookie
- GET /auth/me: dados do usuário da sessão

Falhas no callback nunca expõem detalhes: o frontend recebe só um código
em `/login?error=...`.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, RedirectResponse

from api.routes.auth.cookies import clear_session_cookie, set_session_cookie
from api.routes.dependencies import get_container, optional_session, require_session
from api.routes.errors import error_response
from app.domain.auth import SessionClaims
from app.observability import get_correlation_id, user_log_key

logger = logging.getLogger(__name__)

router = APIRouter()

AUTH_INIT_FAILED_MESSAGE = "Failed to initialize authentication"
LOGOUT_MESSAGE = "Logged out successfully"


@router.get("/google", response_model=None)
async def google_login(request: Request) -> RedirectResponse | JSONResponse:
    """Redireciona para o consentimento do Google (acesso offline)."""
    container = get_container(request)
    try:
        auth_url = container.auth_service.get_auth_url()
    except Exception as exc:
        logger.error(
            "google_auth_url_failed",
            extra={"error_type": type(exc).__name__, "correlation_id": get_correlation_id()},
        )
        return error_response(500, AUTH_INIT_FAILED_MESSAGE)
    return RedirectResponse(auth_url)


@router.get("/callback")
async def google_callback(
    request: Request,
    code: str | None = None,
    error: str | None = None,
) -> RedirectResponse:
    """Callback do OAuth: code -> tokens -> JWT em cookie HttpOnly."""
    container = get_container(request)
    frontend_url = container.base_settings.frontend_url

    if error:
        logger.info(
            "google_callback_denied",
            extra={"reason": error, "correlation_id": get_correlation_id()},
        )
        return RedirectResponse(f"{frontend_url}/login?error={quote(error, safe='')}")

    if not code:
        return RedirectResponse(f"{frontend_url}/login?error=missing_code")

    try:
        login = await container.auth_service.complete_login(code)
    except Exception as exc:
        logger.error(
            "google_callback_failed",
            extra={"error_type": type(exc).__name__, "correlation_id": get_correlation_id()},
        )
        return RedirectResponse(f"{frontend_url}/login?error=authentication_failed")

    # userId do JWT é o próprio email
    token = container.session_tokens.issue(login.email, login.email)
    response = RedirectResponse(f"{frontend_url}/dashboard")
    set_session_cookie(response, container, token)
    return response


@router.post("/logout")
async def logout(
    request: Request,
    claims: SessionClaims | None = Depends(optional_session),
) -> JSONResponse:
    """Limpa o cookie; remove tokens Google quando há sessão válida."""
    container = get_container(request)
    if claims is not None:
        try:
            await container.auth_service.logout(claims.email)
        except Exception as exc:
            # cookie é limpo mesmo sem conseguir remover os tokens
            logger.warning(
                "logout_token_removal_failed",
                extra={
                    "user_key": user_log_key(claims.email),
                    "error_type": type(exc).__name__,
                    "correlation_id": get_correlation_id(),
                },
            )

    response = JSONResponse({"success": True, "message": LOGOUT_MESSAGE})
    clear_session_cookie(response, container)
    return response


@router.get("/me")
async def me(claims: SessionClaims = Depends(require_session)) -> dict[str, Any]:
    """Usuário autenticado pela sessão."""
    return {
        "success": True,
        "user": {"email": claims.email, "userId": claims.user_id},
    }
