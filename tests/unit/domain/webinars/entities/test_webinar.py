from dataclasses import FrozenInstanceError
from datetime import UTC, datetime

import pytest

from webinar_manager.domain.common.exceptions import DomainError, ValidationError
from webinar_manager.domain.common.value_objects.ids import UserId, WebinarId
from webinar_manager.domain.webinars.entities.webinar import MAX_SEATS, Webinar


def _make_webinar(seats: object = 200) -> Webinar:
    return Webinar(
        id=WebinarId("webinar-id"),
        organizer_id=UserId("alice"),
        title="Webinar title",
        start_date=datetime(2024, 1, 1, 0, 0, tzinfo=UTC),
        end_date=datetime(2024, 1, 1, 1, 0, tzinfo=UTC),
        seats=seats,  # type: ignore[arg-type]
    )


def test_create_webinar() -> None:
    """Test creating a valid webinar."""
    webinar = _make_webinar()

    assert webinar.id == WebinarId("webinar-id")
    assert webinar.organizer_id == UserId("alice")
    assert webinar.seats == 200


def test_create_with_id() -> None:
    """Test reconstituting from persistence."""
    start = datetime(2024, 1, 1, 0, 0, tzinfo=UTC)
    webinar = Webinar.create_with_id(
        id=WebinarId("webinar-id"),
        organizer_id=UserId("alice"),
        title="Webinar title",
        start_date=start,
        end_date=start,
        seats=1,
    )

    assert webinar.start_date == start
    assert webinar.seats == 1


@pytest.mark.parametrize(
    ("seats", "message"),
    [
        (0, "Webinar must have at least 1 seat"),
        (1001, "Webinar must have at most 1000 seats"),
        ("10", "Seats must be an integer"),
        (True, "Seats must be an integer"),
    ],
)
def test_invalid_initial_seats_raise_error(seats: object, message: str) -> None:
    with pytest.raises(ValidationError, match=message):
        _make_webinar(seats=seats)


class TestUpdateSeats:
    def test_increases_seats(self) -> None:
        webinar = _make_webinar()

        webinar.update_seats(300)

        assert webinar.seats == 300

    def test_accepts_maximum(self) -> None:
        webinar = _make_webinar()

        webinar.update_seats(MAX_SEATS)

        assert webinar.seats == 1000

    def test_same_value_is_a_no_op(self) -> None:
        webinar = _make_webinar()

        webinar.update_seats(200)
        webinar.update_seats(200)

        assert webinar.seats == 200

    def test_reducing_seats_raises_error(self) -> None:
        webinar = _make_webinar()

        with pytest.raises(ValidationError, match="You cannot reduce the number of seats"):
            webinar.update_seats(50)
        assert webinar.seats == 200

    def test_exceeding_maximum_raises_error(self) -> None:
        webinar = _make_webinar()

        with pytest.raises(ValidationError, match="Webinar must have at most 1000 seats"):
            webinar.update_seats(1001)
        assert webinar.seats == 200

    def test_non_integer_raises_error(self) -> None:
        webinar = _make_webinar()

        with pytest.raises(ValidationError, match="Seats must be an integer"):
            webinar.update_seats(250.5)  # type: ignore[arg-type]
        assert webinar.seats == 200

    def test_error_message_is_exact(self) -> None:
        webinar = _make_webinar()

        with pytest.raises(DomainError) as exc_info:
            webinar.update_seats(50)

        assert exc_info.value.message == "You cannot reduce the number of seats"
        assert exc_info.value.details == {"field": "seats", "value": 50}


class TestProps:
    def test_snapshot_holds_primitive_values(self) -> None:
        props = _make_webinar().props

        assert props.id == "webinar-id"
        assert props.organizer_id == "alice"
        assert props.title == "Webinar title"
        assert props.seats == 200

    def test_snapshot_is_immutable(self) -> None:
        props = _make_webinar().props

        with pytest.raises(FrozenInstanceError):
            props.seats = 500  # type: ignore[misc]

    def test_snapshot_does_not_follow_later_changes(self) -> None:
        webinar = _make_webinar()
        before = webinar.props

        webinar.update_seats(300)

        assert before.seats == 200
        assert webinar.props.seats == 300


def test_is_organized_by() -> None:
    webinar = _make_webinar()

    assert webinar.is_organized_by(UserId("alice"))
    assert not webinar.is_organized_by(UserId("bob"))


def test_webinars_with_same_id_are_equal() -> None:
    webinar = _make_webinar()
    other = _make_webinar()
    other.update_seats(300)

    assert webinar == other
    assert hash(webinar) == hash(other)
