"""Account response and patch schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator, model_validator

from hotelbook.schemas.common import (
    reject_explicit_nulls,
    validate_email,
    validate_required_text,
)


class AccountRead(BaseModel):
    """Account as returned to clients. Never carries the password hash."""

    id: int
    username: str
    email: str
    phone: str
    country: str
    city: str
    img: str | None = None
    is_admin: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True


class AccountUpdate(BaseModel):
    """Fields an account update may change; anything omitted is left as is."""

    username: str | None = Field(default=None, min_length=1, max_length=255)
    email: str | None = Field(default=None, max_length=255)
    password: str | None = Field(default=None, min_length=8, max_length=128)
    phone: str | None = Field(default=None, min_length=1, max_length=64)
    country: str | None = Field(default=None, min_length=1, max_length=255)
    city: str | None = Field(default=None, min_length=1, max_length=255)
    img: str | None = Field(default=None, max_length=2048)
    is_admin: bool | None = Field(default=None, description="Admins only")

    @field_validator("username", "phone", "country", "city")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return None if v is None else validate_required_text(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str | None) -> str | None:
        return None if v is None else validate_email(v)

    @model_validator(mode="after")
    def no_null_required_fields(self) -> "AccountUpdate":
        reject_explicit_nulls(self, nullable=frozenset({"img"}))
        return self
