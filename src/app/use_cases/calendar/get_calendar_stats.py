"""Use case: estatísticas de agenda do usuário para um intervalo."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from app.domain.calendar_stats import CalendarStatsResult
from app.observability import get_correlation_id, record_latency, record_normalization, user_log_key
from app.services.stats_aggregator import aggregate_stats
from config.logging import log_fallback
from utils.errors import NotAuthenticatedError

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from app.domain.calendar_event import NormalizedEvent
    from app.domain.calendar_stats import DateRange
    from app.protocols.calendar_service import CalendarServiceProtocol
    from app.protocols.event_store import EventStoreProtocol
    from app.services.google_auth_service import GoogleAuthService

logger = logging.getLogger(__name__)

_COMPONENT = "get_calendar_stats"
NOT_AUTHENTICATED_MESSAGE = "User not authenticated. Please login again."


class GetCalendarStatsUseCase:
    """Orquestra credenciais, leitura, normalização, cópia e agregação."""

    def __init__(
        self,
        auth_service: GoogleAuthService,
        calendar_service: CalendarServiceProtocol,
        event_store: EventStoreProtocol,
        normalize: Callable[[list[dict[str, Any]]], list[NormalizedEvent]],
    ) -> None:
        self._auth_service = auth_service
        self._calendar_service = calendar_service
        self._event_store = event_store
        self._normalize = normalize

    async def execute(self, email: str, date_range: DateRange) -> CalendarStatsResult:
        """Executa o cálculo para [start, end).

        Raises:
            NotAuthenticatedError: Sem tokens válidos para o usuário.
            AuthenticationExpiredError: Google recusou as credenciais.
            CalendarFetchError: Falha ao ler a agenda.
        """
        started = time.perf_counter()
        credentials = await self._auth_service.get_credentials(email)
        if credentials is None:
            raise NotAuthenticatedError(NOT_AUTHENTICATED_MESSAGE)

        raw_items = await self._calendar_service.list_events(
            credentials,
            date_range.start,
            date_range.end,
        )
        events = self._normalize(raw_items)
        record_normalization(len(raw_items), len(events), correlation_id=get_correlation_id())

        saved = await self._save_best_effort(email, events)
        stats = aggregate_stats(events)

        elapsed_ms = (time.perf_counter() - started) * 1000
        record_latency(_COMPONENT, "execute", elapsed_ms, correlation_id=get_correlation_id())
        logger.info(
            "calendar_stats_computed",
            extra={
                "component": _COMPONENT,
                "user_key": user_log_key(email),
                "events_processed": len(events),
                "events_saved": saved,
                "correlation_id": get_correlation_id(),
            },
        )
        return CalendarStatsResult(
            stats=stats,
            date_range=date_range,
            events_processed=len(events),
            events_saved=saved,
        )

    async def _save_best_effort(self, email: str, events: list[NormalizedEvent]) -> int:
        started = time.perf_counter()
        try:
            return await self._event_store.save_events(email, events)
        except Exception as exc:
            # copia dos eventos nunca derruba o calculo das estatisticas
            log_fallback(
                logger,
                _COMPONENT,
                reason=type(exc).__name__,
                elapsed_ms=(time.perf_counter() - started) * 1000,
            )
            return 0
