"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.google_auth_service import GoogleAuthService
from app.services.stats_aggregator import aggregate_stats, format_duration

__all__ = [
    "GoogleAuthService",
    "aggregate_stats",
    "format_duration",
]
