"""Request/response schemas for registration, login and the verified identity."""

from pydantic import BaseModel, Field, field_validator

from hotelbook.schemas.account import AccountRead
from hotelbook.schemas.common import validate_email, validate_required_text


class RegisterRequest(BaseModel):
    """Profile submitted on registration."""

    username: str = Field(..., min_length=1, max_length=255, description="Unique login name")
    email: str = Field(..., max_length=255, description="Unique email address")
    password: str = Field(..., min_length=8, max_length=128, description="Password")
    phone: str = Field(..., min_length=1, max_length=64)
    country: str = Field(..., min_length=1, max_length=255)
    city: str = Field(..., min_length=1, max_length=255)
    img: str | None = Field(default=None, max_length=2048, description="Avatar URL")

    @field_validator("username", "phone", "country", "city")
    @classmethod
    def strip_required(cls, v: str) -> str:
        return validate_required_text(v)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return validate_email(v)


class LoginRequest(BaseModel):
    """Credentials for login."""

    username: str = Field(..., min_length=1, max_length=255, description="Username")
    password: str = Field(..., min_length=1, max_length=128, description="Password")


class LoginResponse(BaseModel):
    """Account (without password hash) plus the JWT to send as Bearer token."""

    account: AccountRead
    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class CurrentUser(BaseModel):
    """Identity asserted by a verified token, injected into route handlers."""

    id: int
    is_admin: bool = False
