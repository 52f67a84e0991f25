"""Chaves pseudônimas para logs (sem PII)."""

from __future__ import annotations

import hashlib


def user_log_key(email: str) -> str:
    """Retorna hash curto e estável do email para correlacionar logs."""
    return hashlib.sha256(email.strip().lower().encode("utf-8")).hexdigest()[:16]
