"""Errors raised by the location service and translated to the JSON envelope in main."""
from fastapi import status


class LocationServiceError(Exception):
    """Base error: a human-readable message, optional underlying error text and an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, error: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error = error
        if status_code is not None:
            self.status_code = status_code


class ValidationError(LocationServiceError):
    """Missing, malformed or inconsistent input (including updating a deleted record)."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(LocationServiceError):
    """Duplicate LocationCode among non-deleted records."""

    status_code = status.HTTP_409_CONFLICT


class NotFoundError(LocationServiceError):
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(LocationServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
