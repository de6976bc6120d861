"""Repository for Webinar domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from webinar_manager.domain.common.exceptions import NotFoundError
from webinar_manager.domain.common.value_objects.ids import WebinarId
from webinar_manager.domain.webinars.entities.webinar import Webinar
from webinar_manager.infrastructure.webinars.mappers.webinar_mapper import WebinarMapper
from webinar_manager.models import Webinar as WebinarORM


class WebinarRepository:
    """Repository for Webinar domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = WebinarMapper()

    def find_by_id(self, webinar_id: WebinarId) -> Webinar | None:
        """
        Find a webinar by ID.

        Args:
            webinar_id: The webinar ID

        Returns:
            Webinar entity if found, None otherwise
        """
        stmt = select(WebinarORM).where(WebinarORM.id == webinar_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def create(self, webinar: Webinar) -> None:
        """
        Persist a new webinar.

        Args:
            webinar: The webinar entity to insert
        """
        orm_model = self.mapper.to_orm(webinar)
        self.db.add(orm_model)
        self.db.commit()

    def update(self, webinar: Webinar) -> None:
        """
        Overwrite the stored state of an existing webinar.

        Args:
            webinar: The webinar entity to persist

        Raises:
            NotFoundError: If no webinar with this ID is stored
        """
        stmt = select(WebinarORM).where(WebinarORM.id == webinar.id.value)
        existing_orm = self.db.execute(stmt).scalar_one_or_none()
        if existing_orm is None:
            raise NotFoundError("Webinar not found")

        self.mapper.to_orm(webinar, existing_orm)
        self.db.commit()
