"""Caller identity dependency: request.state.user when set by upstream middleware, else the System user."""
from fastapi import Request

from services.identity import SYSTEM_USER, CurrentUser


def get_current_user(request: Request) -> CurrentUser:
    """FastAPI dependency: the caller identity, or SYSTEM_USER when none was injected."""
    user = getattr(request.state, "user", None)
    if isinstance(user, CurrentUser):
        return user
    return SYSTEM_USER
