"""Location repository: lookups by code and id, filtered paging, insert, update."""
from typing import Any, Optional

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, selectinload

from models.location import Location


def find_by_code(session: Session, code: str, exclude_id: int | None = None) -> Optional[Location]:
    """Return the non-deleted location holding this (already normalised) code, or None.

    exclude_id skips one record so an update can keep its own code.
    """
    stmt = select(Location).where(
        Location.location_code == code,
        Location.is_deleted.is_(False),
    )
    if exclude_id is not None:
        stmt = stmt.where(Location.location_id != exclude_id)
    return session.execute(stmt.limit(1)).scalar_one_or_none()


def get_location(session: Session, location_id: int) -> Optional[Location]:
    """Return a location by id or None. Soft-deleted rows are returned too."""
    return session.get(Location, location_id)


def build_location_filters(
    *,
    search: str | None = None,
    name: str | None = None,
    code: str | None = None,
) -> list[ColumnElement[bool]]:
    """Build the WHERE clauses for a listing; all returned clauses are meant to be AND-ed."""
    filters: list[ColumnElement[bool]] = [Location.is_deleted.is_(False)]
    if search:
        filters.append(
            or_(
                Location.location_name.icontains(search, autoescape=True),
                Location.location_code.icontains(search, autoescape=True),
            )
        )
    if name:
        filters.append(Location.location_name.icontains(name, autoescape=True))
    if code:
        filters.append(Location.location_code.icontains(code, autoescape=True))
    return filters


def count_and_list(
    session: Session,
    filters: list[ColumnElement[bool]],
    skip: int,
    take: int,
) -> tuple[int, list[Location]]:
    """Return (total matching, one page of locations newest first) with both user associations loaded."""
    total = session.execute(
        select(func.count()).select_from(Location).where(*filters)
    ).scalar() or 0
    result = session.execute(
        select(Location)
        .where(*filters)
        .order_by(Location.created_date.desc(), Location.location_id.desc())
        .offset(skip)
        .limit(take)
        .options(
            selectinload(Location.created_by_user),
            selectinload(Location.modified_by_user),
        )
    )
    return total, list(result.scalars().all())


def insert_location(session: Session, **fields: Any) -> Location:
    """Create a location, commit, and return it. Raises IntegrityError on a duplicate active code."""
    loc = Location(**fields)
    session.add(loc)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise
    session.refresh(loc)
    return loc


def update_location(session: Session, location_id: int, **fields: Any) -> Optional[Location]:
    """Apply fields to a location and commit. Returns updated location or None if not found.

    Raises IntegrityError on a duplicate active code.
    """
    loc = get_location(session, location_id)
    if loc is None:
        return None
    for field, value in fields.items():
        setattr(loc, field, value)
    try:
        session.commit()
    except IntegrityError:
        session.rollback()
        raise
    session.refresh(loc)
    return loc
