"""Endpoints de estatísticas de agenda.

- GET /api/calendar/stats?startDate=...&endDate=...: exige sessão
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Query, Request

from api.routes.dependencies import get_container, require_session
from api.validators.calendar import parse_date_range
from app.domain.auth import SessionClaims

router = APIRouter()


@router.get("/stats")
async def calendar_stats(
    request: Request,
    claims: SessionClaims = Depends(require_session),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
) -> dict[str, Any]:
    """Estatísticas do intervalo; falhas viram o envelope de erro."""
    container = get_container(request)
    settings = container.calendar_settings
    date_range = parse_date_range(
        start_date,
        end_date,
        settings.zone,
        max_days=settings.calendar_max_range_days,
    )

    result = await container.calendar_stats.execute(claims.email, date_range)
    return {
        "success": True,
        "data": result.stats.model_dump(by_alias=True),
        "meta": result.meta(),
    }
