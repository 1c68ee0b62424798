"""Pydantic schemas for room types, room numbers and availability updates."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from hotelbook.schemas.common import reject_explicit_nulls, validate_required_text


def _check_unique_numbers(numbers: list["RoomNumberIn"]) -> None:
    seen: set[int] = set()
    for entry in numbers:
        if entry.number in seen:
            raise ValueError(f"room number {entry.number} is listed more than once")
        seen.add(entry.number)


class RoomNumberIn(BaseModel):
    """A physical room to add under a room type."""

    number: int = Field(..., ge=0, description="Room number, e.g. 101")


class RoomNumberRead(BaseModel):
    """A physical room with the nights it is already booked."""

    number: int
    unavailable_dates: list[datetime] = Field(default_factory=list)


class RoomTypeCreate(BaseModel):
    """Payload for creating a room type under a hotel."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    price: float = Field(..., ge=0, description="Price per night")
    max_people: int = Field(..., ge=1, description="Maximum occupancy")
    room_numbers: list[RoomNumberIn] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return validate_required_text(v)

    @field_validator("room_numbers")
    @classmethod
    def unique_numbers(cls, v: list[RoomNumberIn]) -> list[RoomNumberIn]:
        _check_unique_numbers(v)
        return v


class RoomTypeUpdate(BaseModel):
    """
    Fields a room type update may change.

    Sending room_numbers replaces the set of physical rooms; rooms whose
    number survives the replacement keep their unavailable dates.
    """

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    max_people: int | None = Field(default=None, ge=1)
    room_numbers: list[RoomNumberIn] | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return None if v is None else validate_required_text(v)

    @field_validator("room_numbers")
    @classmethod
    def unique_numbers(cls, v: list[RoomNumberIn] | None) -> list[RoomNumberIn] | None:
        if v is not None:
            _check_unique_numbers(v)
        return v

    @model_validator(mode="after")
    def no_null_fields(self) -> "RoomTypeUpdate":
        reject_explicit_nulls(self)
        return self


class RoomTypeRead(BaseModel):
    """Room type as returned to clients."""

    id: int
    title: str
    description: str
    price: float
    max_people: int
    room_numbers: list[RoomNumberRead]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class AvailabilityUpdate(BaseModel):
    """Nights to mark as booked. ``dates`` may be a single timestamp or a list."""

    dates: list[datetime] = Field(..., min_length=1)
    numbers: list[int] | None = Field(
        default=None,
        min_length=1,
        description="Restrict the update to these room numbers; all rooms when omitted",
    )

    @field_validator("dates", mode="before")
    @classmethod
    def wrap_single_date(cls, v: Any) -> Any:
        if isinstance(v, (str, datetime)):
            return [v]
        return v
