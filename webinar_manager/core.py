from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from webinar_manager.application.webinars.use_cases.change_seats_use_case import (
    ChangeSeatsUseCase,
)
from webinar_manager.infrastructure.webinars.repositories import WebinarRepository


class Container(containers.DeclarativeContainer):
    """
    Dependency injection container.

    One instance is built per request with ``db`` bound to that request's
    session, see ``webinar_manager.infrastructure.common.di``.
    """

    db = providers.Dependency(instance_of=Session)

    # Repositories
    webinar_repository = providers.Factory(WebinarRepository, db=db)

    # Webinars module, application use cases
    change_seats_use_case = providers.Factory(
        ChangeSeatsUseCase,
        webinar_repository=webinar_repository,
    )
