"""Identity module domain layer."""

from .entities.user import User

__all__ = ["User"]
