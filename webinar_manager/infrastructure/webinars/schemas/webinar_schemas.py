"""Pydantic schemas for Webinar API request/response validation."""

from pydantic import BaseModel, Field, field_validator


class ChangeSeatsRequest(BaseModel):
    """Schema for changing the number of seats of a webinar."""

    # Bounds are domain rules, enforced by the Webinar entity
    seats: int = Field(..., description="New number of seats")

    @field_validator("seats", mode="before")
    @classmethod
    def reject_booleans(cls, value: object) -> object:
        """Refuse JSON booleans, which lax int parsing would turn into 0 or 1."""
        if isinstance(value, bool):
            msg = "seats must be a number, not a boolean"
            raise ValueError(msg)
        return value


class MessageResponse(BaseModel):
    """Schema for a plain confirmation message."""

    message: str


class ErrorResponse(BaseModel):
    """Schema for a domain error returned to the client."""

    error: str
