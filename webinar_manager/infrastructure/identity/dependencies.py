"""FastAPI dependencies for caller identity."""

from typing import Annotated

from fastapi import Depends, Header

from webinar_manager.config import Settings, get_settings
from webinar_manager.domain.identity.entities.user import User


async def get_current_user(
    settings: Annotated[Settings, Depends(get_settings)],
    x_user_id: Annotated[str | None, Header()] = None,
) -> User:
    """
    Resolve the user making the request.

    Identity is trusted as provided by the upstream gateway in the
    ``X-User-Id`` header. Requests without it act as
    ``settings.DEFAULT_USER_ID`` (single-user mode).

    Returns:
        User domain entity
    """
    user_id = x_user_id.strip() if x_user_id else ""
    return User.with_id(user_id or settings.DEFAULT_USER_ID)
