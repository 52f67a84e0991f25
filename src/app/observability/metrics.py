"""Registro de métricas via structured logging.

As métricas são registradas como logs estruturados e podem ser agregadas
posteriormente (BigQuery, Cloud Logging, etc.).

Métricas suportadas:
- Latência: tempo de execução por componente/operação
- Normalização: eventos recebidos do provider vs. descartados

Uso:
    from app.observability.metrics import record_latency, record_normalization

    start = time.perf_counter()
    # ... operação ...
    latency_ms = (time.perf_counter() - start) * 1000
    record_latency("google_calendar_client", "list_events", latency_ms)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "google_calendar_client")
        operation: Nome da operação (ex: "list_events", "refresh_token")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_normalization(
    received: int,
    normalized: int,
    correlation_id: str | None = None,
) -> None:
    """Registra quantos eventos do provider sobreviveram à normalização.

    Args:
        received: Itens devolvidos pelo provider (antes do filtro de cancelados)
        normalized: Eventos normalizados efetivamente agregados
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_normalization",
        extra={
            "metric_type": "normalization",
            "component": "google_calendar_normalizer",
            "received": received,
            "normalized": normalized,
            "dropped": max(received - normalized, 0),
            "correlation_id": correlation_id,
        },
    )
