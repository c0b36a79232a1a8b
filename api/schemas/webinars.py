from typing import Any

from pydantic import BaseModel, Field, field_validator

from api.schemas.user import User


class ChangeSeats(BaseModel):
    seats: int = Field(description="New number of seats, must be greater than the current one")
    user: User | None = Field(None, description="Acting user (only honored when trusted request users are enabled)")

    @field_validator("seats", mode="before")
    @classmethod
    def reject_bool(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("seats must be a number")
        return value


class SeatsUpdated(BaseModel):
    message: str = Field("Seats updated", description="Confirmation message")
