"""
Command and CommandHandler base classes.

Commands represent intentions to change the system state.
They are named in imperative form: ChangeSeats, CancelWebinar, etc.

Example:
    @dataclass(frozen=True)
    class ChangeSeatsCommand(Command):
        user: User
        webinar_id: str
        seats: int

    class ChangeSeatsUseCase(CommandHandler[ChangeSeatsCommand, None]):
        def __init__(self, webinar_repository: WebinarRepositoryProtocol) -> None:
            self.webinar_repository = webinar_repository

        def execute(self, command: ChangeSeatsCommand) -> None:
            webinar = self.webinar_repository.find_by_id(WebinarId(command.webinar_id))
            webinar.update_seats(command.seats)
            self.webinar_repository.update(webinar)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, TypeVar

# Input type (the command)
TCommand = TypeVar("TCommand", bound="Command")
# Output type (the result of handling the command)
TResult = TypeVar("TResult")


@dataclass(frozen=True)
class Command:
    """
    Base class for Commands.

    Commands are:
    - Immutable (frozen dataclass)
    - Named in imperative form (ChangeSeats, not SeatChange)
    - Carry all data needed to execute the operation
    - Represent intentions, not facts

    Request payloads are validated at the API boundary before a command
    is built from them.
    """


class CommandHandler(ABC, Generic[TCommand, TResult]):
    """
    Base class for Command Handlers.

    Command Handlers:
    - Execute a single command type
    - Orchestrate domain logic
    - Persist changes through repositories
    - Return the result of the operation

    Each command should have exactly one handler.
    """

    @abstractmethod
    def execute(self, command: TCommand) -> TResult:
        """
        Execute the command and return the result.

        Raises:
            DomainError: When business rules are violated
        """
        raise NotImplementedError
