"""Request-scoped wiring of use cases to the database session."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from webinar_manager.core import Container
from webinar_manager.database import DatabaseSession

T = TypeVar("T")


def inject_use_case(
    select: Callable[[Container], Provider[T]],
) -> Callable[[DatabaseSession], T]:
    """
    Create a FastAPI dependency resolving a provider of a per-request container.

    Each call builds its own ``Container`` bound to the request's session, so
    concurrent requests served by the threadpool never share a session.

    Usage:
        use_case = Depends(inject_use_case(lambda c: c.change_seats_use_case))
    """

    def dependency(db: DatabaseSession) -> T:
        container = Container()
        container.db.override(db)
        return select(container)()

    return dependency
