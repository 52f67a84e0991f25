"""Entrypoint da aplicação Calendar Insights.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 5000

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 5000
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router, register_exception_handlers
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.dependencies import build_container
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Awaitable, Callable

    from starlette.responses import Response

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria o container de stores/serviços (se ainda não injetado)

    Shutdown:
    - Apenas registra o encerramento (stores não mantêm conexões próprias)
    """
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service})
    validate_runtime_settings()

    if getattr(app.state, "container", None) is None:
        app.state.container = build_container()

    yield

    logger.info("app_shutting_down", extra={"service": service})


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga X-Correlation-Id (gera quando ausente) e devolve no header."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER, ""))
    try:
        correlation_id = get_correlation_id()
        # visível ao handler de 500, que roda fora deste middleware
        request.state.correlation_id = correlation_id
        response = await call_next(request)
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
    finally:
        reset_correlation_id(token)


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    base = get_base_settings()
    fastapi_app = FastAPI(
        title="Calendar Insights",
        description="Estatísticas de agenda a partir do Google Calendar",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if base.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if base.is_production else "/openapi.json",
    )

    # CORS restrito à origem do dashboard (cookies de sessão)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=[base.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", CORRELATION_ID_HEADER],
        expose_headers=[CORRELATION_ID_HEADER],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": base.service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    base = get_base_settings()
    logger.info("Starting Calendar Insights in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=base.port,
        reload=base.is_development,
    )


if __name__ == "__main__":
    main()
