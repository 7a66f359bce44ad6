from __future__ import annotations

from fastapi import HTTPException


class BookingError(HTTPException):
    """Base for every rejected booking action.

    Subclasses carry the HTTP status the API answers with, so services can raise
    them directly. None of them leave state mutated.
    """

    default_status = 400

    def __init__(self, detail: str):
        super().__init__(status_code=self.default_status, detail=detail)


class ValidationError(BookingError):
    """Malformed or inconsistent request (bad time format, end <= start, ...)."""

    default_status = 400


class PermissionDeniedError(BookingError):
    default_status = 403


class QuotaExceededError(BookingError):
    default_status = 400

    def __init__(self, cap: float):
        self.cap = cap
        super().__init__(f"This booking would exceed the daily limit of {cap:g} hours")


class ConflictError(BookingError):
    """Write rejected by the store's slot uniqueness constraint."""

    default_status = 409


class TransportError(BookingError):
    """Query or write failed to reach or complete against the store."""

    default_status = 503
