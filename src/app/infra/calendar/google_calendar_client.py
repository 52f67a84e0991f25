"""Client concreto de Google Calendar para leitura de eventos do usuario."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.infra.calendar.google_calendar_parsers import http_status
from app.observability import get_correlation_id, record_latency
from app.protocols.calendar_service import CalendarServiceProtocol
from utils.errors import AuthenticationExpiredError, CalendarFetchError

if TYPE_CHECKING:
    from datetime import datetime

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_client"
_AUTH_EXPIRED_MESSAGE = "Authentication expired. Please login again."


class GoogleCalendarClient(CalendarServiceProtocol):
    """Implementacao do protocolo de calendario usando API v3 do Google.

    As credenciais sao do usuario (OAuth), entao o service e construido a
    cada chamada em vez de uma vez no construtor.
    """

    __slots__ = ("_calendar_id", "_max_results")

    def __init__(self, *, calendar_id: str = "primary", max_results: int = 2500) -> None:
        self._calendar_id = calendar_id
        self._max_results = max_results

    async def list_events(
        self,
        credentials: Any,
        time_min: datetime,
        time_max: datetime,
    ) -> list[dict[str, Any]]:
        started = time.perf_counter()
        try:
            response = await asyncio.to_thread(
                self._list_events_sync,
                credentials,
                time_min.isoformat(),
                time_max.isoformat(),
            )
        except HttpError as exc:
            if http_status(exc) == 401:
                self._log_error(action="list_events", result="unauthorized", exc=exc)
                raise AuthenticationExpiredError(_AUTH_EXPIRED_MESSAGE) from exc
            self._log_error(action="list_events", result="error", exc=exc)
            raise CalendarFetchError(f"Failed to fetch calendar events: {exc}") from exc
        except Exception as exc:
            self._log_error(action="list_events", result="error")
            raise CalendarFetchError(f"Failed to fetch calendar events: {exc}") from exc

        items = response.get("items") or []
        record_latency(
            _COMPONENT,
            "list_events",
            (time.perf_counter() - started) * 1000,
            correlation_id=get_correlation_id(),
        )
        logger.info(
            "google_calendar_events_listed",
            extra={
                "component": _COMPONENT,
                "action": "list_events",
                "result": "ok",
                "item_count": len(items),
                "truncated": bool(response.get("nextPageToken")),
                "correlation_id": get_correlation_id(),
            },
        )
        return list(items)

    def _list_events_sync(
        self,
        credentials: Any,
        time_min: str,
        time_max: str,
    ) -> dict[str, Any]:
        service = build("calendar", "v3", credentials=credentials, cache_discovery=False)
        # Pagina unica: acima de max_results o restante e ignorado
        return (
            service.events()
            .list(
                calendarId=self._calendar_id,
                timeMin=time_min,
                timeMax=time_max,
                maxResults=self._max_results,
                singleEvents=True,
                orderBy="startTime",
            )
            .execute()
        )

    def _log_error(self, *, action: str, result: str, exc: HttpError | None = None) -> None:
        extra = {
            "component": _COMPONENT,
            "action": action,
            "result": result,
            "correlation_id": get_correlation_id(),
        }
        if exc is not None:
            extra["status_code"] = http_status(exc)
            extra["error_type"] = type(exc).__name__
            logger.error("google_calendar_http_error", extra=extra)
            return
        logger.exception("google_calendar_unexpected_error", extra=extra)
