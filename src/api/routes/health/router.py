"""Endpoints de health check."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    timestamp: str
    service: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    container = getattr(request.app.state, "container", None)
    service = container.base_settings.service_name if container is not None else "calendar-insights"
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(UTC).isoformat(),
        service=service,
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe: o token store precisa responder."""
    token_store_check = await _check_token_store(getattr(request.app.state, "container", None))
    ready = token_store_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"token_store": token_store_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_token_store(container: Any | None) -> DependencyCheck:
    if container is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    try:
        await asyncio.wait_for(container.token_store.storage_info(), timeout=3.0)
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))
