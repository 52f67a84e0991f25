"""Stores: implementações concretas de persistência.

Módulos disponíveis:
    - memory_stores: Stores em memória para desenvolvimento/testes
    - firestore_token_store: Tokens OAuth do Google usando Firestore
    - firestore_event_store: Cópia dos eventos sincronizados usando Firestore
"""

from __future__ import annotations

from app.infra.stores.firestore_event_store import FirestoreEventStore
from app.infra.stores.firestore_token_store import FirestoreTokenStore
from app.infra.stores.memory_stores import MemoryEventStore, MemoryTokenStore

__all__ = [
    # Firestore
    "FirestoreEventStore",
    "FirestoreTokenStore",
    # Memory (dev/test)
    "MemoryEventStore",
    "MemoryTokenStore",
]
