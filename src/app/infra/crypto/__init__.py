"""Criptografia de sessão: JWT assinado para o cookie do dashboard."""

from .session_tokens import SessionTokenService

__all__ = ["SessionTokenService"]
