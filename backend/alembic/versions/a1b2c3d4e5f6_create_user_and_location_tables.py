"""create_user_and_location_tables

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create user and location tables plus the active-code unique index."""
    op.create_table(
        "user",
        sa.Column("user_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=64), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("user_id"),
        sa.UniqueConstraint("username"),
    )
    op.create_table(
        "location",
        sa.Column("location_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("location_name", sa.String(length=255), nullable=False),
        sa.Column("location_code", sa.String(length=64), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_by", sa.String(length=64), nullable=False),
        sa.Column("created_by_user_id", sa.Integer(), nullable=True),
        sa.Column("created_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("modified_by", sa.String(length=64), nullable=True),
        sa.Column("modified_by_user_id", sa.Integer(), nullable=True),
        sa.Column("modified_date", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["created_by_user_id"], ["user.user_id"]),
        sa.ForeignKeyConstraint(["modified_by_user_id"], ["user.user_id"]),
        sa.PrimaryKeyConstraint("location_id"),
        sqlite_autoincrement=True,
    )
    op.create_index(
        "ux_location_code_active",
        "location",
        ["location_code"],
        unique=True,
        sqlite_where=sa.text("is_deleted = 0"),
        postgresql_where=sa.text("is_deleted = false"),
    )


def downgrade() -> None:
    """Drop location and user tables."""
    op.drop_index("ux_location_code_active", table_name="location")
    op.drop_table("location", if_exists=True)
    op.drop_table("user", if_exists=True)
