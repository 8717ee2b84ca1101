"""
DayBoard Exceptions.

Every error raised by the service layer derives from DayBoardError and
carries the HTTP status the access layer answers with.

Hierarchy:
    DayBoardError (500)
    ├── DayBoardValidationError (400)
    │   ├── DayEndedError (400)
    │   └── DayAlreadyEndedError (400)
    ├── DayBoardAuthenticationError (401)
    ├── DayBoardNotFoundError (404)
    ├── DayBoardConflictError (409)
    └── DayBoardConfigurationError (500)
"""

from __future__ import annotations

from typing import Any


class DayBoardError(Exception):
    """Base exception for all DayBoard errors."""

    status_code: int = 500

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        return self.message


class DayBoardValidationError(DayBoardError):
    """Invalid input: missing fields, out-of-range counts, malformed dates."""

    status_code = 400


class DayEndedError(DayBoardValidationError):
    """A task write was attempted against a day that has been ended."""

    def __init__(self, message: str, *, user_id: str, day: Any) -> None:
        super().__init__(message, details={"user_id": user_id, "date": str(day)})
        self.user_id = user_id
        self.day = day


class DayAlreadyEndedError(DayBoardValidationError):
    """End-day was requested for a day that is already ended."""

    def __init__(self, user_id: str, day: Any) -> None:
        super().__init__(
            "Day has already been ended",
            details={"user_id": user_id, "date": str(day)},
        )
        self.user_id = user_id
        self.day = day


class DayBoardAuthenticationError(DayBoardError):
    """Missing, unknown or expired bearer token, or bad credentials."""

    status_code = 401


class DayBoardNotFoundError(DayBoardError):
    """Resource missing, owned by someone else, or not publicly visible."""

    status_code = 404

    def __init__(self, message: str, *, resource_type: str | None = None, resource_id: str | None = None) -> None:
        super().__init__(message, details={"resource_type": resource_type, "resource_id": resource_id})
        self.resource_type = resource_type
        self.resource_id = resource_id


class DayBoardConflictError(DayBoardError):
    """A uniqueness constraint rejected the write."""

    status_code = 409


class DayBoardConfigurationError(DayBoardError):
    """The application is misconfigured or the store is not connected."""

    status_code = 500
