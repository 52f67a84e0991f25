"""Diagnóstico do armazenamento de tokens (sem dados sensíveis)."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.routes.dependencies import get_container
from api.routes.errors import error_response
from app.observability import get_correlation_id

logger = logging.getLogger(__name__)

router = APIRouter()

_STORAGE_NOTES = {
    "in-memory": "Data is in RAM. Restart clears it.",
    "firestore": "Data persists in Firestore.",
}


@router.get("/storage")
async def storage_info(request: Request) -> JSONResponse:
    """Modo de armazenamento ativo e contagem de tokens/usuários."""
    container = get_container(request)
    try:
        info = await container.token_store.storage_info()
    except Exception as exc:
        logger.error(
            "storage_info_failed",
            extra={"error_type": type(exc).__name__, "correlation_id": get_correlation_id()},
        )
        return error_response(500, "Failed to get storage info")

    return JSONResponse(
        {
            "success": True,
            "storage": info.as_dict(),
            "note": _STORAGE_NOTES[info.mode],
        }
    )
