"""Identity infrastructure: resolving the calling user."""

from .dependencies import get_current_user

__all__ = ["get_current_user"]
