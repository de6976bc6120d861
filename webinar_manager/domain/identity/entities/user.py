"""User entity for caller identity."""

from dataclasses import dataclass

from webinar_manager.domain.common.entity import Entity
from webinar_manager.domain.common.value_objects.ids import UserId


@dataclass(eq=False)
class User(Entity[UserId]):
    """
    User acting on the system.

    Identity is resolved and trusted by the transport layer; no credentials
    are held here.
    """

    id: UserId

    @classmethod
    def with_id(cls, user_id: str) -> "User":
        """Build a user from a raw identifier."""
        return cls(id=UserId(user_id))
