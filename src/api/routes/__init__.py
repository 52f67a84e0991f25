"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (auth, calendar, debug, health)
- Validação inicial de request (cookies, query params)
- Delegação para serviços/use cases do container
- Respostas HTTP no envelope `{success, ...}`

Estrutura:
- routes/auth/: login com Google, logout, sessão
- routes/calendar/: estatísticas de agenda
- routes/debug/: diagnóstico do armazenamento
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
- errors.py: envelope de erro e exception handlers
"""

from __future__ import annotations

from api.routes.errors import register_exception_handlers
from api.routes.router import create_api_router

__all__ = ["create_api_router", "register_exception_handlers"]
