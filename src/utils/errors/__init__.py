"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthenticationExpiredError,
    AuthError,
    CalendarFetchError,
    FirestoreUnavailableError,
    InfrastructureError,
    InvalidDateRangeError,
    NotAuthenticatedError,
)

__all__ = [
    "AuthError",
    "AuthenticationExpiredError",
    "CalendarFetchError",
    "FirestoreUnavailableError",
    "InfrastructureError",
    "InvalidDateRangeError",
    "NotAuthenticatedError",
]
