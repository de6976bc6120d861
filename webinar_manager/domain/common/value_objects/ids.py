from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""

    value: str


@dataclass(frozen=True)
class WebinarId(EntityId):
    """Strongly-typed webinar identifier."""

    value: str
