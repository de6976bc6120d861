"""Webinar aggregate and its seat capacity rules."""

from dataclasses import dataclass
from datetime import datetime

from webinar_manager.domain.common.entity import Entity
from webinar_manager.domain.common.exceptions import ValidationError
from webinar_manager.domain.common.value_objects.ids import UserId, WebinarId

# Domain constraints
MIN_SEATS = 1
MAX_SEATS = 1000


@dataclass(frozen=True)
class WebinarProps:
    """Read-only snapshot of a webinar's state."""

    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int


def _ensure_integer(seats: object) -> None:
    # bool is an int subclass, but True seats make no sense
    if isinstance(seats, bool) or not isinstance(seats, int):
        raise ValidationError("Seats must be an integer", field="seats", value=seats)


@dataclass(eq=False)
class Webinar(Entity[WebinarId]):
    """
    Webinar scheduled by an organizer.

    Business Rules:
    - Seats are an integer between MIN_SEATS and MAX_SEATS
    - Seats can only grow: the current count is the lower bound for a change
    - Only the seat count changes after creation
    """

    id: WebinarId
    organizer_id: UserId
    title: str
    start_date: datetime
    end_date: datetime
    seats: int

    def __post_init__(self) -> None:
        """Validate invariants."""
        _ensure_integer(self.seats)
        if self.seats < MIN_SEATS:
            raise ValidationError(
                f"Webinar must have at least {MIN_SEATS} seat", field="seats", value=self.seats
            )
        if self.seats > MAX_SEATS:
            raise ValidationError(
                f"Webinar must have at most {MAX_SEATS} seats", field="seats", value=self.seats
            )

    @property
    def props(self) -> WebinarProps:
        """Return an immutable snapshot of the current state."""
        return WebinarProps(
            id=self.id.value,
            organizer_id=self.organizer_id.value,
            title=self.title,
            start_date=self.start_date,
            end_date=self.end_date,
            seats=self.seats,
        )

    def is_organized_by(self, user_id: UserId) -> bool:
        """Check if the given user organizes this webinar."""
        return self.organizer_id == user_id

    def update_seats(self, new_seats: int) -> None:
        """
        Change the number of available seats.

        Args:
            new_seats: The new seat count

        Raises:
            ValidationError: If the value is not an integer, is lower than the
                current seat count or exceeds MAX_SEATS
        """
        _ensure_integer(new_seats)
        if new_seats < self.seats:
            raise ValidationError(
                "You cannot reduce the number of seats", field="seats", value=new_seats
            )
        if new_seats > MAX_SEATS:
            raise ValidationError(
                f"Webinar must have at most {MAX_SEATS} seats", field="seats", value=new_seats
            )
        self.seats = new_seats

    @classmethod
    def create_with_id(
        cls,
        id: WebinarId,
        organizer_id: UserId,
        title: str,
        start_date: datetime,
        end_date: datetime,
        seats: int,
    ) -> "Webinar":
        """
        Reconstitute a webinar from persistence.

        Raises:
            ValidationError: If the stored seat count is out of bounds
        """
        return cls(
            id=id,
            organizer_id=organizer_id,
            title=title,
            start_date=start_date,
            end_date=end_date,
            seats=seats,
        )
