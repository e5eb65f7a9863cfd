"""User repository: create and get (users are only read by the location service)."""
from typing import Optional

from sqlalchemy.orm import Session

from models.user import User


def create_user(session: Session, username: str, email: str | None = None) -> User:
    """Create a user, commit, and return it."""
    user = User(username=username, email=email)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def get_user(session: Session, user_id: int) -> Optional[User]:
    """Return a user by id or None."""
    return session.get(User, user_id)
