"""Location model for DB persistence."""
from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, Integer, String, false, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from models import Base
from models.user import User


class Location(Base):
    """Location table: id, name, upper-cased code, soft-delete flag and created/modified provenance."""

    __tablename__ = "location"
    __table_args__ = (
        # Codes are stored upper-cased, so a plain unique index over active rows enforces
        # case-insensitive uniqueness while soft-deleted rows keep their old codes.
        Index(
            "ux_location_code_active",
            "location_code",
            unique=True,
            sqlite_where=text("is_deleted = 0"),
            postgresql_where=text("is_deleted = false"),
        ),
        {"sqlite_autoincrement": True},
    )

    location_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    location_name: Mapped[str] = mapped_column(String(255), nullable=False)
    location_code: Mapped[str] = mapped_column(String(64), nullable=False)
    is_deleted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )
    created_by: Mapped[str] = mapped_column(String(64), nullable=False)
    created_by_user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("user.user_id"), nullable=True
    )
    created_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    # Modified* stay NULL until the first update.
    modified_by: Mapped[str | None] = mapped_column(String(64), nullable=True)
    modified_by_user_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("user.user_id"), nullable=True
    )
    modified_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    created_by_user: Mapped[User | None] = relationship(
        User, foreign_keys=[created_by_user_id], viewonly=True
    )
    modified_by_user: Mapped[User | None] = relationship(
        User, foreign_keys=[modified_by_user_id], viewonly=True
    )
