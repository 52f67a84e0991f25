"""Settings base do Calendar Insights.

Configurações comuns a todos os módulos do serviço.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "test", "staging", "production"]

DEFAULT_FRONTEND_URL = "http://localhost:5173"


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|test|staging|production)
        service_name: Nome do serviço para logs
        debug: Modo debug ativo (inclui stack trace nas respostas 500)
        log_level: Nível de log do root logger
        frontend_url: Origem do dashboard (CORS e redirects do OAuth)
        port: Porta HTTP para execução direta
    """

    environment: Environment = "development"
    service_name: str = "calendar-insights"
    debug: bool = False
    log_level: str = "INFO"
    frontend_url: str = DEFAULT_FRONTEND_URL
    port: int = 5000

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True para development e test."""
        return self.environment in ("development", "test")

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if not self.frontend_url.startswith(("http://", "https://")):
            errors.append(f"FRONTEND_URL inválida: {self.frontend_url}")

        if self.is_production and self.frontend_url.startswith("http://"):
            errors.append("FRONTEND_URL deve usar https em production")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    if env_lower == "test":
        return "test"
    return "development"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", "calendar-insights"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        frontend_url=os.getenv("FRONTEND_URL", DEFAULT_FRONTEND_URL).rstrip("/"),
        port=int(os.getenv("BACKEND_PORT") or os.getenv("PORT") or "5000"),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
