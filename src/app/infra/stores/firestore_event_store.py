"""Firestore Event Store: cópia dos eventos sincronizados por usuário.

Upsert em batch; o ID do documento é derivado de (email, event_id, start)
para que a mesma ocorrência nunca seja duplicada.
"""

from __future__ import annotations

import asyncio
import hashlib
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from google.api_core.exceptions import GoogleAPIError

from app.observability import user_log_key
from app.protocols.event_store import EventStoreProtocol
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from google.cloud.firestore import Client as FirestoreClient

    from app.domain.calendar_event import NormalizedEvent

logger = logging.getLogger(__name__)

EVENTS_COLLECTION = "calendar_events"

# Limite de operações por WriteBatch do Firestore
_MAX_BATCH_WRITES = 500


class FirestoreEventStore(EventStoreProtocol):
    """Store de eventos usando Firestore."""

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection_name: str = EVENTS_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection_name

    async def save_events(self, email: str, events: Sequence[NormalizedEvent]) -> int:
        if not events:
            return 0
        return await asyncio.to_thread(self._save_events_sync, email, events)

    def _save_events_sync(self, email: str, events: Sequence[NormalizedEvent]) -> int:
        collection = self._db.collection(self._collection)
        synced_at = datetime.now(UTC)
        saved = 0
        try:
            for offset in range(0, len(events), _MAX_BATCH_WRITES):
                chunk = events[offset : offset + _MAX_BATCH_WRITES]
                batch = self._db.batch()
                for event in chunk:
                    doc_ref = collection.document(event_document_id(email, event))
                    batch.set(doc_ref, _to_firestore_dict(email, event, synced_at), merge=True)
                batch.commit()
                saved += len(chunk)
        except GoogleAPIError as exc:
            logger.error(
                "event_store_save_failed",
                extra={
                    "user_key": user_log_key(email),
                    "saved_before_error": saved,
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
            )
            raise FirestoreUnavailableError("event_store_save_failed") from exc

        logger.debug(
            "event_store_saved",
            extra={"user_key": user_log_key(email), "saved": saved},
        )
        return saved


def event_document_id(email: str, event: NormalizedEvent) -> str:
    """ID determinístico do documento para (email, event_id, start)."""
    key_material = f"{email}:{event.event_id}:{event.start.isoformat()}"
    return hashlib.sha256(key_material.encode("utf-8")).hexdigest()


def _to_firestore_dict(email: str, event: NormalizedEvent, synced_at: datetime) -> dict[str, Any]:
    return {
        "email": email,
        "google_event_id": event.event_id,
        "title": event.title,
        "start": event.start,
        "end": event.end,
        "duration_ms": event.duration_ms,
        "attendees": list(event.attendee_emails),
        "is_all_day": event.is_all_day,
        "status": event.status,
        "synced_at": synced_at,
    }
