"""Pydantic schemas for location API."""
from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator


def _bool_as_missing(value: Any) -> Any:
    # JSON true/false would otherwise be coerced to 1/0 by the int branch.
    return None if isinstance(value, bool) else value


# Number or numeric string; booleans count as missing.
LooseInt = Annotated[int | str | None, BeforeValidator(_bool_as_missing)]


class LocationCreate(BaseModel):
    """Payload for creating a location. Presence is checked by the service so failures use the envelope."""

    LocationName: str | None = None
    LocationCode: str | None = None


class LocationSearch(BaseModel):
    """Payload for listing locations; page and limit may arrive as numbers or numeric strings."""

    page: LooseInt = 1
    limit: LooseInt = 10
    search: str | None = None
    LocationName: str | None = None
    LocationCode: str | None = None


class LocationUpdate(BaseModel):
    """Payload for updating a location (LocationID required, other fields optional)."""

    LocationID: LooseInt = None
    LocationName: str | None = None
    LocationCode: str | None = None


class UserSummary(BaseModel):
    """User association shown on a location."""

    UserID: int
    Username: str
    Email: str | None = None


class LocationResponse(BaseModel):
    """Location in API responses."""

    LocationID: int
    LocationName: str
    LocationCode: str
    IsDeleted: bool
    CreatedBy: str
    CreatedByUserID: int | None = None
    CreatedDate: datetime
    ModifiedBy: str | None = None
    ModifiedByUserID: int | None = None
    ModifiedDate: datetime | None = None
    CreatedByUser: UserSummary | None = None
    ModifiedByUser: UserSummary | None = None
