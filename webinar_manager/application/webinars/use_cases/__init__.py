from .change_seats_use_case import ChangeSeatsCommand, ChangeSeatsUseCase

__all__ = ["ChangeSeatsCommand", "ChangeSeatsUseCase"]
