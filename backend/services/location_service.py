"""Location service: create, list/search and update with uniqueness and provenance rules."""
import logging
from datetime import datetime, timezone

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from services.identity import CurrentUser
from models.location import Location
from repositories.location_repository import (
    build_location_filters,
    count_and_list as repo_count_and_list,
    find_by_code as repo_find_by_code,
    get_location as repo_get_location,
    insert_location as repo_insert_location,
    update_location as repo_update_location,
)
from schemas.common import Pagination
from schemas.locations import LocationCreate, LocationSearch, LocationUpdate
from services.errors import ConflictError, InternalError, NotFoundError, ValidationError
from utils.location_validators import coerce_page, get_positive_int, get_str, normalize_code, total_pages

LOG = logging.getLogger(__name__)

CODE_EXISTS = "Location code already exists"
NOT_FOUND = "Location not found"


def _is_unique_violation(e: IntegrityError) -> bool:
    """True when the driver reports a unique constraint failure; the SQL statement text is ignored."""
    msg = str(e.orig) if e.orig is not None else ""
    return "unique" in msg.lower() or "ux_location_code_active" in msg


def create_location(db: Session, payload: LocationCreate, user: CurrentUser) -> Location:
    """Create a location stamped with the caller's identity.

    The code is upper-cased before the conflict check and before storage. The pre-check
    gives the friendly error; the partial unique index catches a concurrent insert.
    """
    name = get_str(payload.LocationName)
    raw_code = get_str(payload.LocationCode)
    if name is None or raw_code is None:
        raise ValidationError("LocationName and LocationCode are required")
    code = normalize_code(raw_code)

    try:
        if repo_find_by_code(db, code) is not None:
            LOG.info("Rejected create: location code %s already exists", code)
            raise ConflictError(CODE_EXISTS)
        return repo_insert_location(
            db,
            location_name=name,
            location_code=code,
            created_by=user.username,
            created_by_user_id=user.user_id,
            created_date=datetime.now(timezone.utc),
        )
    except IntegrityError as e:
        if _is_unique_violation(e):
            LOG.warning("Location code %s inserted concurrently", code)
            raise ConflictError(CODE_EXISTS) from e
        LOG.exception("Error creating location")
        raise InternalError("Failed to create location", error=str(e)) from e
    except SQLAlchemyError as e:
        LOG.exception("Error creating location")
        raise InternalError("Failed to create location", error=str(e)) from e


def read_locations(db: Session, query: LocationSearch) -> tuple[list[Location], Pagination]:
    """Return one page of non-deleted locations, newest first, plus pagination metadata.

    search matches name OR code; the LocationName/LocationCode filters are AND-ed on top of it.
    """
    page, limit, offset = coerce_page(query.page, query.limit)
    filters = build_location_filters(
        search=get_str(query.search),
        name=get_str(query.LocationName),
        code=get_str(query.LocationCode),
    )
    try:
        total, locations = repo_count_and_list(db, filters, offset, limit)
    except SQLAlchemyError as e:
        LOG.exception("Error fetching locations")
        raise InternalError("Failed to fetch locations", error=str(e)) from e
    pagination = Pagination(
        total=total,
        page=page,
        limit=limit,
        totalPages=total_pages(total, limit),
    )
    return locations, pagination


def update_location(db: Session, payload: LocationUpdate, user: CurrentUser) -> Location:
    """Partially update a location and stamp Modified* with the caller's identity.

    Deleted records can be fetched by id but not updated. A code already held by another
    non-deleted record is rejected as a bad request (400), not 409.
    """
    location_id = get_positive_int(payload.LocationID)
    if location_id is None:
        raise ValidationError("Valid LocationID is required")
    name = get_str(payload.LocationName)
    raw_code = get_str(payload.LocationCode)
    if name is None and raw_code is None:
        raise ValidationError("At least one field (LocationName or LocationCode) is required for update")
    code = normalize_code(raw_code) if raw_code is not None else None

    try:
        existing = repo_get_location(db, location_id)
        if existing is None:
            raise NotFoundError(NOT_FOUND)
        if existing.is_deleted:
            raise ValidationError("Cannot update a deleted location")
        if code is not None and repo_find_by_code(db, code, exclude_id=location_id) is not None:
            LOG.info("Rejected update of %s: location code %s already exists", location_id, code)
            raise ConflictError(CODE_EXISTS, status_code=400)

        fields = {
            "modified_by": user.username,
            "modified_by_user_id": user.user_id,
            "modified_date": datetime.now(timezone.utc),
        }
        if name is not None:
            fields["location_name"] = name
        if code is not None:
            fields["location_code"] = code

        updated = repo_update_location(db, location_id, **fields)
    except IntegrityError as e:
        if _is_unique_violation(e):
            LOG.warning("Location code %s taken concurrently during update of %s", code, location_id)
            raise ConflictError(CODE_EXISTS, status_code=400) from e
        LOG.exception("Error updating location")
        raise InternalError("Failed to update location", error=str(e)) from e
    except StaleDataError as e:
        LOG.warning("Location %s disappeared during update", location_id)
        raise NotFoundError(NOT_FOUND) from e
    except SQLAlchemyError as e:
        LOG.exception("Error updating location")
        raise InternalError("Failed to update location", error=str(e)) from e

    if updated is None:
        LOG.warning("Location %s disappeared during update", location_id)
        raise NotFoundError(NOT_FOUND)
    return updated
