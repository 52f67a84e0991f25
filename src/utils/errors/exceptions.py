"""Exceções de domínio compartilhadas entre rotas, casos de uso e infra."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura transitórias."""


class FirestoreUnavailableError(InfrastructureError):
    """Falha de indisponibilidade ao acessar Firestore."""


class AuthError(Exception):
    """Base para falhas de autenticação do usuário junto ao Google."""


class NotAuthenticatedError(AuthError):
    """Usuário sem tokens Google armazenados (ou tokens revogados)."""


class AuthenticationExpiredError(AuthError):
    """Google rejeitou as credenciais do usuário (HTTP 401)."""


class CalendarFetchError(RuntimeError):
    """Falha ao buscar eventos na API do Google Calendar."""


class InvalidDateRangeError(ValueError):
    """Parâmetros de intervalo de datas ausentes ou inválidos."""
