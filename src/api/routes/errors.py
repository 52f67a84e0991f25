"""Erros HTTP da API e handlers do envelope `{success: false, error}`."""

from __future__ import annotations

import logging
import traceback
from typing import TYPE_CHECKING

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.observability import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    get_correlation_id,
)
from utils.errors import (
    AuthError,
    CalendarFetchError,
    InfrastructureError,
    InvalidDateRangeError,
)

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)

ROUTE_NOT_FOUND_MESSAGE = "Route not found"
INTERNAL_ERROR_MESSAGE = "Internal server error"


class ApiError(Exception):
    """Erro com status HTTP definido pela rota.

    Args:
        status_code: Status HTTP da resposta
        message: Mensagem devolvida em `error`
        clear_session: Remove o cookie de sessão na resposta
    """

    def __init__(self, status_code: int, message: str, *, clear_session: bool = False) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.clear_session = clear_session


def error_response(status_code: int, message: str, **extra: object) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, **extra},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registra handlers que produzem o envelope de erro da API."""

    @app.exception_handler(ApiError)
    async def _api_error(request: Request, exc: ApiError) -> JSONResponse:
        response = error_response(exc.status_code, exc.message)
        if exc.clear_session:
            # import tardio: routes.auth depende deste módulo
            from api.routes.auth.cookies import clear_session_cookie

            clear_session_cookie(response, request.app.state.container)
        return response

    @app.exception_handler(InvalidDateRangeError)
    async def _invalid_range(request: Request, exc: InvalidDateRangeError) -> JSONResponse:
        return error_response(400, str(exc))

    @app.exception_handler(AuthError)
    async def _auth_error(request: Request, exc: AuthError) -> JSONResponse:
        return error_response(401, str(exc))

    @app.exception_handler(CalendarFetchError)
    async def _calendar_error(request: Request, exc: CalendarFetchError) -> JSONResponse:
        return error_response(500, str(exc))

    @app.exception_handler(InfrastructureError)
    async def _infra_error(request: Request, exc: InfrastructureError) -> JSONResponse:
        logger.error(
            "infrastructure_unavailable",
            extra={
                "path": request.url.path,
                "error_type": type(exc).__name__,
                "correlation_id": get_correlation_id(),
            },
        )
        return error_response(503, "Service temporarily unavailable")

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return error_response(404, ROUTE_NOT_FOUND_MESSAGE)
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def _validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        message = str(errors[0].get("msg")) if errors else "Invalid request"
        return error_response(400, message)

    @app.exception_handler(Exception)
    async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
        correlation_id = _request_correlation_id(request)
        logger.exception(
            "unhandled_exception",
            extra={
                "path": request.url.path,
                "error_type": type(exc).__name__,
                "correlation_id": correlation_id,
            },
        )
        container = getattr(request.app.state, "container", None)
        if container is not None and container.base_settings.environment == "development":
            stack = "".join(traceback.format_exception(exc))
            response = error_response(500, str(exc) or INTERNAL_ERROR_MESSAGE, stack=stack)
        else:
            response = error_response(500, INTERNAL_ERROR_MESSAGE)
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response


def _request_correlation_id(request: Request) -> str:
    """Correlation id da requisição para respostas geradas fora do middleware."""
    return (
        getattr(request.state, "correlation_id", None)
        or request.headers.get(CORRELATION_ID_HEADER, "").strip()
        or generate_correlation_id()
    )
