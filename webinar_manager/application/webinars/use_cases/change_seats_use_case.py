"""Use case for changing the number of seats of a webinar."""

from dataclasses import dataclass

import structlog

from webinar_manager.application.common.command import Command, CommandHandler
from webinar_manager.application.webinars.protocols.webinar_repository import (
    WebinarRepositoryProtocol,
)
from webinar_manager.domain.common.exceptions import (
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from webinar_manager.domain.common.value_objects.ids import WebinarId
from webinar_manager.domain.identity.entities.user import User

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ChangeSeatsCommand(Command):
    user: User
    webinar_id: str
    seats: int


class ChangeSeatsUseCase(CommandHandler[ChangeSeatsCommand, None]):
    def __init__(self, webinar_repository: WebinarRepositoryProtocol) -> None:
        self.webinar_repository = webinar_repository

    def execute(self, command: ChangeSeatsCommand) -> None:
        """
        Change the seat count of a webinar on behalf of its organizer.

        The webinar is persisted only once every check has passed.

        Args:
            command: Caller, target webinar id and requested seat count

        Raises:
            NotFoundError: If the webinar does not exist
            ForbiddenError: If the caller is not the organizer
            ValidationError: If the seat count breaks a webinar rule
        """
        webinar = self.webinar_repository.find_by_id(WebinarId(command.webinar_id))
        if webinar is None:
            logger.info(
                "change_seats_rejected",
                reason="not_found",
                webinar_id=command.webinar_id,
                user_id=command.user.id.value,
            )
            raise NotFoundError("Webinar not found")

        if not webinar.is_organized_by(command.user.id):
            logger.info(
                "change_seats_rejected",
                reason="forbidden",
                webinar_id=command.webinar_id,
                user_id=command.user.id.value,
            )
            raise ForbiddenError("User is not allowed to update this webinar")

        previous_seats = webinar.seats
        try:
            webinar.update_seats(command.seats)
        except ValidationError as e:
            logger.info(
                "change_seats_rejected",
                reason="invalid_seats",
                webinar_id=command.webinar_id,
                user_id=command.user.id.value,
                seats=command.seats,
                error=e.message,
            )
            raise

        self.webinar_repository.update(webinar)

        logger.info(
            "webinar_seats_changed",
            webinar_id=command.webinar_id,
            previous_seats=previous_seats,
            seats=webinar.seats,
        )
