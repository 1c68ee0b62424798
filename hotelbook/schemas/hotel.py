"""Pydantic schemas for catalog entries (hotels) and catalog statistics."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from hotelbook.schemas.common import reject_explicit_nulls, validate_required_text

HotelType = Literal["hotel", "apartment", "resort", "villa", "cabin"]

# Order matters: count_by_type reports types in this order.
HOTEL_TYPE_VALUES: tuple[str, ...] = ("hotel", "apartment", "resort", "villa", "cabin")

# Labels published by count_by_type, keyed by stored type.
HOTEL_TYPE_LABELS: dict[str, str] = {
    "hotel": "hotel",
    "apartment": "apartments",
    "resort": "resorts",
    "villa": "villas",
    "cabin": "cabins",
}


def _validate_hotel_type(value: Any) -> Any:
    """Accept any casing and plural forms ("Hotel", "villas"); store the singular."""
    if not isinstance(value, str):
        return value
    normalized = value.strip().lower()
    if normalized.endswith("s") and normalized[:-1] in HOTEL_TYPE_VALUES:
        normalized = normalized[:-1]
    if normalized not in HOTEL_TYPE_VALUES:
        raise ValueError(
            f"type must be one of {list(HOTEL_TYPE_VALUES)}, got {value!r}"
        )
    return normalized


def _coerce_photos(value: Any) -> Any:
    """A single URL or an empty string is accepted in place of a list."""
    if value is None:
        return value
    if isinstance(value, str):
        return [value] if value.strip() else []
    return value


def _coerce_distance(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class HotelCreate(BaseModel):
    """Payload for creating a catalog entry."""

    name: str = Field(..., min_length=1, max_length=255)
    type: HotelType = Field(..., description="hotel, apartment, resort, villa or cabin")
    city: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=1024)
    distance: str = Field(..., min_length=1, max_length=64, description="Distance to the city center")
    photos: list[str] = Field(default_factory=list, description="Photo URLs")
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    rating: float | None = Field(default=None, ge=0, le=5)
    cheapest_price: float = Field(..., ge=0)
    featured: bool = False

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        return _validate_hotel_type(v)

    @field_validator("photos", mode="before")
    @classmethod
    def normalize_photos(cls, v: Any) -> Any:
        return _coerce_photos(v)

    @field_validator("distance", mode="before")
    @classmethod
    def normalize_distance(cls, v: Any) -> Any:
        return _coerce_distance(v)

    @field_validator("name", "city", "address", "title")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return validate_required_text(v)


class HotelUpdate(BaseModel):
    """Fields a hotel update may change. ``rooms`` is managed by room type operations."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    type: HotelType | None = None
    city: str | None = Field(default=None, min_length=1, max_length=255)
    address: str | None = Field(default=None, min_length=1, max_length=1024)
    distance: str | None = Field(default=None, min_length=1, max_length=64)
    photos: list[str] | None = None
    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    rating: float | None = Field(default=None, ge=0, le=5)
    cheapest_price: float | None = Field(default=None, ge=0)
    featured: bool | None = None

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v: Any) -> Any:
        return _validate_hotel_type(v)

    @field_validator("photos", mode="before")
    @classmethod
    def normalize_photos(cls, v: Any) -> Any:
        return _coerce_photos(v)

    @field_validator("distance", mode="before")
    @classmethod
    def normalize_distance(cls, v: Any) -> Any:
        return _coerce_distance(v)

    @field_validator("name", "city", "address", "title")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return None if v is None else validate_required_text(v)

    @model_validator(mode="after")
    def no_null_required_fields(self) -> "HotelUpdate":
        reject_explicit_nulls(self, nullable=frozenset({"rating"}))
        return self


class HotelRead(BaseModel):
    """Catalog entry as returned to clients."""

    id: int
    name: str
    type: str
    city: str
    address: str
    distance: str
    photos: list[str]
    title: str
    description: str
    rating: float | None = None
    cheapest_price: float
    featured: bool
    rooms: list[int] = Field(description="RoomType ids offered by this hotel")

    class Config:
        from_attributes = True


class HotelFilters(BaseModel):
    """Query constraints for listing hotels. Price bounds are inclusive."""

    city: str | None = None
    min_price: float | None = Field(default=None, ge=0)
    max_price: float | None = Field(default=None, ge=0)
    featured: bool | None = None
    limit: int | None = Field(default=None, ge=1, le=100)

    @model_validator(mode="after")
    def check_price_range(self) -> "HotelFilters":
        if (
            self.min_price is not None
            and self.max_price is not None
            and self.min_price > self.max_price
        ):
            raise ValueError("min price must not exceed max price")
        return self


class TypeCount(BaseModel):
    """Number of hotels of one type."""

    type: str
    count: int
