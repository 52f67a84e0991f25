"""Factories de clientes externos: Firestore."""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from config.settings import get_firestore_settings

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def create_firestore_client() -> FirestoreClient:
    """Cria cliente Firestore (singleton).

    Usa FIRESTORE_PROJECT_ID e cai para GCP_PROJECT (ou ADC) se ausente.

    Returns:
        Cliente Firestore
    """
    from google.cloud import firestore

    project_id = get_firestore_settings().project_id or os.getenv("GCP_PROJECT") or None
    client = firestore.Client(project=project_id)
    logger.info("firestore_client_created", extra={"project": project_id})
    return client
