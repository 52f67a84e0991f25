"""Firestore Token Store: tokens OAuth do Google por usuário.

Estrutura:
    users/{email}        -> {email, name, updated_at}
    oauth_tokens/{email} -> {access_token, refresh_token, expiry_date, ...}
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from google.api_core.exceptions import GoogleAPIError

from app.domain.auth import StorageInfo, StoredTokens
from app.observability import user_log_key
from app.protocols.token_store import TokenStoreProtocol
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"
TOKENS_COLLECTION = "oauth_tokens"


class FirestoreTokenStore(TokenStoreProtocol):
    """Store de tokens usando Firestore.

    Args:
        firestore_client: Cliente Firestore
        users_collection: Collection de usuários
        tokens_collection: Collection de tokens
    """

    def __init__(
        self,
        firestore_client: FirestoreClient,
        users_collection: str = USERS_COLLECTION,
        tokens_collection: str = TOKENS_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._users = users_collection
        self._tokens = tokens_collection

    async def save(self, email: str, tokens: StoredTokens, name: str | None = None) -> None:
        await asyncio.to_thread(self._save_sync, email, tokens, name)

    async def get(self, email: str) -> StoredTokens | None:
        return await asyncio.to_thread(self._get_sync, email)

    async def delete(self, email: str) -> None:
        await asyncio.to_thread(self._delete_sync, email)

    async def exists(self, email: str) -> bool:
        return await asyncio.to_thread(self._exists_sync, email)

    async def storage_info(self) -> StorageInfo:
        return await asyncio.to_thread(self._storage_info_sync)

    def _save_sync(self, email: str, tokens: StoredTokens, name: str | None) -> None:
        now = datetime.now(UTC)
        user_data: dict[str, Any] = {"email": email, "updated_at": now}
        if name is not None:
            user_data["name"] = name
        token_data: dict[str, Any] = {**tokens.model_dump(), "email": email, "updated_at": now}
        if not tokens.refresh_token:
            # Google só devolve refresh_token no primeiro consentimento
            token_data.pop("refresh_token")
        try:
            self._db.collection(self._users).document(email).set(user_data, merge=True)
            self._db.collection(self._tokens).document(email).set(token_data, merge=True)
        except GoogleAPIError as exc:
            self._log_error("token_store_save_failed", email, exc)
            raise FirestoreUnavailableError("token_store_save_failed") from exc
        logger.debug("token_store_saved", extra={"user_key": user_log_key(email)})

    def _get_sync(self, email: str) -> StoredTokens | None:
        try:
            doc = self._db.collection(self._tokens).document(email).get()
        except GoogleAPIError as exc:
            self._log_error("token_store_get_failed", email, exc)
            raise FirestoreUnavailableError("token_store_get_failed") from exc
        if not doc.exists:
            return None
        return StoredTokens.model_validate(doc.to_dict() or {})

    def _delete_sync(self, email: str) -> None:
        try:
            self._db.collection(self._tokens).document(email).delete()
        except GoogleAPIError as exc:
            self._log_error("token_store_delete_failed", email, exc)
            raise FirestoreUnavailableError("token_store_delete_failed") from exc

    def _exists_sync(self, email: str) -> bool:
        try:
            doc = self._db.collection(self._tokens).document(email).get()
        except GoogleAPIError as exc:
            self._log_error("token_store_get_failed", email, exc)
            raise FirestoreUnavailableError("token_store_get_failed") from exc
        return bool(doc.exists)

    def _storage_info_sync(self) -> StorageInfo:
        try:
            token_count = _count(self._db.collection(self._tokens))
            user_count = _count(self._db.collection(self._users))
        except GoogleAPIError as exc:
            logger.error(
                "token_store_count_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise FirestoreUnavailableError("token_store_count_failed") from exc
        return StorageInfo(mode="firestore", token_count=token_count, user_count=user_count)

    @staticmethod
    def _log_error(event: str, email: str, exc: Exception) -> None:
        logger.error(
            event,
            extra={
                "user_key": user_log_key(email),
                "error": str(exc),
                "error_type": type(exc).__name__,
            },
        )


def _count(collection: Any) -> int:
    # Aggregation query: não lê os documentos
    result = collection.count(alias="total").get()
    return int(result[0][0].value) if result and result[0] else 0
