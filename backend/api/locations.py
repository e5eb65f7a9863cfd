"""Location API routes."""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from api.identity import get_current_user
from db import get_db
from models.location import Location
from models.user import User
from schemas.common import ApiResponse
from schemas.locations import LocationCreate, LocationResponse, LocationSearch, LocationUpdate, UserSummary
from services.identity import CurrentUser
import services.location_service as svc

router = APIRouter(prefix="/locations", tags=["locations"])


def _as_utc(dt: datetime | None) -> datetime | None:
    """SQLite returns naive datetimes; stored values are always UTC."""
    if dt is None or dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=timezone.utc)


def _user_to_summary(u: User | None) -> UserSummary | None:
    if u is None:
        return None
    return UserSummary(UserID=u.user_id, Username=u.username, Email=u.email)


def _location_to_response(loc: Location) -> LocationResponse:
    """Build LocationResponse from model instance, resolving both user associations."""
    return LocationResponse(
        LocationID=loc.location_id,
        LocationName=loc.location_name,
        LocationCode=loc.location_code,
        IsDeleted=loc.is_deleted,
        CreatedBy=loc.created_by,
        CreatedByUserID=loc.created_by_user_id,
        CreatedDate=_as_utc(loc.created_date),
        ModifiedBy=loc.modified_by,
        ModifiedByUserID=loc.modified_by_user_id,
        ModifiedDate=_as_utc(loc.modified_date),
        CreatedByUser=_user_to_summary(loc.created_by_user),
        ModifiedByUser=_user_to_summary(loc.modified_by_user),
    )


@router.post(
    "/create",
    response_model=ApiResponse[LocationResponse],
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
)
def create_location(
    body: LocationCreate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
) -> ApiResponse[LocationResponse]:
    """Create a location; the code is stored upper-cased and must be unique among active locations."""
    loc = svc.create_location(db, body, user)
    return ApiResponse(
        success=True,
        message="Location created successfully",
        data=_location_to_response(loc),
    )


@router.post(
    "/read",
    response_model=ApiResponse[list[LocationResponse]],
    response_model_exclude_unset=True,
)
def read_locations(
    body: LocationSearch | None = None,
    db: Session = Depends(get_db),
) -> ApiResponse[list[LocationResponse]]:
    """List active locations with optional search/filters and pagination."""
    locations, pagination = svc.read_locations(db, body or LocationSearch())
    return ApiResponse(
        success=True,
        message="Locations retrieved successfully",
        data=[_location_to_response(loc) for loc in locations],
        pagination=pagination,
    )


@router.post(
    "/update",
    response_model=ApiResponse[LocationResponse],
    response_model_exclude_unset=True,
)
def update_location(
    body: LocationUpdate,
    db: Session = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
) -> ApiResponse[LocationResponse]:
    """Update name and/or code of an active location."""
    loc = svc.update_location(db, body, user)
    return ApiResponse(
        success=True,
        message="Location updated successfully",
        data=_location_to_response(loc),
    )
