"""Response envelope shared by location API operations."""
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Pagination(BaseModel):
    """Paging metadata for list responses."""

    total: int
    page: int
    limit: int
    totalPages: int


class ApiResponse(BaseModel, Generic[T]):
    """Envelope: {success, message, data?, error?, pagination?}. Unset keys are omitted on the wire."""

    success: bool
    message: str
    data: T | None = None
    error: str | None = None
    pagination: Pagination | None = None
