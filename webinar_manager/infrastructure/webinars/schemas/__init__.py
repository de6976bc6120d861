from .webinar_schemas import ChangeSeatsRequest, ErrorResponse, MessageResponse

__all__ = [
    "ChangeSeatsRequest",
    "ErrorResponse",
    "MessageResponse",
]
