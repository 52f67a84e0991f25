"""Agregador de rotas: registra todos os routers da API.

Este módulo é responsável por criar o router principal da API
e incluir todos os sub-routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.auth.router import router as auth_router
from api.routes.calendar.router import router as calendar_router
from api.routes.debug.router import router as debug_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
    api_router.include_router(calendar_router, prefix="/api/calendar", tags=["calendar"])
    api_router.include_router(debug_router, prefix="/api/debug", tags=["debug"])

    return api_router
