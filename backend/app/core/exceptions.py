"""Business outcomes of the booking core.

Every error here is recoverable by the caller. Routers never catch them;
``app.main`` turns them into JSON responses through ``to_http_exception``.
"""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status


class DomainError(Exception):
    """Base for all booking-core errors."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_http_exception(self) -> HTTPException:
        return HTTPException(
            status_code=self.status_code,
            detail={
                "message": self.message,
                "code": self.code,
                "details": self.details,
            },
        )


class NotFound(DomainError):
    """Referenced field, venue or booking does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class ValidationFailed(DomainError):
    """Malformed or missing required input."""

    status_code = status.HTTP_422_UNPROCESSABLE_CONTENT


class InvalidInterval(DomainError):
    """start >= end, or start is not in the future."""

    status_code = status.HTTP_422_UNPROCESSABLE_CONTENT


class ScheduleConflict(DomainError):
    """Another booking on the same field overlaps the requested interval."""

    status_code = status.HTTP_409_CONFLICT


class AlreadyJoined(DomainError):
    status_code = status.HTTP_409_CONFLICT


class NotJoined(DomainError):
    status_code = status.HTTP_409_CONFLICT


class StorageUnavailable(DomainError):
    """Database or lock fault. The only kind a caller may retry as-is."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    retry_after_seconds = 1

    def to_http_exception(self) -> HTTPException:
        exc = super().to_http_exception()
        exc.headers = {"Retry-After": str(self.retry_after_seconds)}
        return exc
