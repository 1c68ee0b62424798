"""Schemas shared across resources: confirmations, errors, health."""

import re
from typing import Literal

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Plain confirmation body for writes that return no record."""

    message: str = Field(..., description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """Envelope returned for every handled error."""

    success: bool = Field(default=False)
    status: int = Field(..., description="HTTP status code")
    message: str = Field(..., description="Client-safe error message")


class HealthResponse(BaseModel):
    """Liveness plus store reachability, for load balancers."""

    status: Literal["ok"] = "ok"
    environment: str
    database: Literal["connected", "disconnected"]


def reject_explicit_nulls(model: BaseModel, nullable: frozenset[str] = frozenset()) -> None:
    """Raise ValueError when a patch sets a non-nullable field to null."""
    for name in model.model_fields_set:
        if name not in nullable and getattr(model, name) is None:
            raise ValueError(f"{name} cannot be null")


# Deliberately loose: one @, no whitespace, a dot in the domain.
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def validate_email(value: str) -> str:
    """Trim and lower-case an email address, rejecting obviously malformed ones."""
    normalized = value.strip().lower()
    if not EMAIL_PATTERN.match(normalized):
        raise ValueError(f"email is not a valid address: {value!r}")
    return normalized


def validate_required_text(value: str) -> str:
    """Strip surrounding whitespace and reject blank strings."""
    stripped = value.strip()
    if not stripped:
        raise ValueError("must not be blank")
    return stripped
