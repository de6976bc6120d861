from typing import Annotated

from fastapi import APIRouter, Depends
from starlette import status

from webinar_manager.application.webinars.use_cases.change_seats_use_case import (
    ChangeSeatsCommand,
    ChangeSeatsUseCase,
)
from webinar_manager.domain.identity.entities.user import User
from webinar_manager.infrastructure.common.di import inject_use_case
from webinar_manager.infrastructure.identity import get_current_user
from webinar_manager.infrastructure.webinars.schemas import (
    ChangeSeatsRequest,
    ErrorResponse,
    MessageResponse,
)

router = APIRouter(prefix="/webinars", tags=["webinars"])


@router.post(
    "/{webinar_id}/seats",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
def change_seats(
    webinar_id: str,
    request: ChangeSeatsRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    use_case: Annotated[
        ChangeSeatsUseCase, Depends(inject_use_case(lambda c: c.change_seats_use_case))
    ],
) -> MessageResponse:
    """
    Change the number of seats of a webinar.

    Only the organizer of the webinar may change its seats, and the seat
    count can only grow, up to 1000. Domain errors and unexpected failures
    are turned into ``{"error": ...}`` responses by the app's exception
    handlers.

    Args:
        webinar_id: ID of the webinar
        request: Request containing the new seat count
        use_case: ChangeSeatsUseCase bound to the request's database session

    Returns:
        Confirmation message
    """
    use_case.execute(
        ChangeSeatsCommand(user=current_user, webinar_id=webinar_id, seats=request.seats)
    )
    return MessageResponse(message="Seats updated")
