"""Acting caller identity stamped into CreatedBy*/ModifiedBy*."""
from dataclasses import dataclass


@dataclass(frozen=True)
class CurrentUser:
    """Identity of the caller performing an operation."""

    user_id: int | None
    username: str


SYSTEM_USER = CurrentUser(user_id=None, username="System")
