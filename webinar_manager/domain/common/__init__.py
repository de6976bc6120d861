"""
Domain common module.

Contains base classes for domain modeling:
- EntityId: Strongly-typed, immutable identifiers
- Entity: Objects with identity and lifecycle
"""

from .entity import Entity, EntityId
from .exceptions import (
    DomainError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "ForbiddenError",
    "NotFoundError",
    "ValidationError",
]
