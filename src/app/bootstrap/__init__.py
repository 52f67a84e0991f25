"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: carrega `.env`, configura logging,
valida settings e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings
    from app.bootstrap.dependencies import build_container

    # Na inicialização do serviço
    initialize_app()
    validate_runtime_settings()

    # No lifespan do FastAPI
    app.state.container = build_container()
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_auth_settings,
    get_base_settings,
    get_firestore_settings,
    get_google_oauth_settings,
    get_store_settings,
)

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.

    Configura:
    - Variáveis do `.env` (sem sobrescrever o ambiente do processo)
    - OAUTHLIB_RELAX_TOKEN_SCOPE=1 (troca do code aceita escopos reordenados)
    - Logging estruturado JSON com correlation_id
    """
    load_dotenv(override=False)
    # Google pode devolver escopos em forma diferente (ex.: "email" vs userinfo.email)
    os.environ.setdefault("OAUTHLIB_RELAX_TOKEN_SCOPE", "1")
    base = get_base_settings()

    configure_logging(
        level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (logging em DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"google_oauth: {error}" for error in get_google_oauth_settings().validate())
    errors.extend(f"auth: {error}" for error in get_auth_settings().validate(strict=strict_mode))

    stores = get_store_settings()
    errors.extend(f"stores: {error}" for error in stores.validate(base))

    if "firestore" in (stores.token_store_backend, stores.event_store_backend):
        gcp_project = (
            os.getenv("GCP_PROJECT", "")
            or os.getenv("GOOGLE_CLOUD_PROJECT", "")
            or os.getenv("GCLOUD_PROJECT", "")
        )
        firestore_errors = get_firestore_settings().validate(gcp_project)
        errors.extend(f"firestore: {error}" for error in firestore_errors)

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")
