"""Pydantic request/response schemas."""

from hotelbook.schemas.account import AccountRead, AccountUpdate
from hotelbook.schemas.auth import (
    CurrentUser,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from hotelbook.schemas.common import ErrorResponse, HealthResponse, MessageResponse
from hotelbook.schemas.hotel import (
    HotelCreate,
    HotelFilters,
    HotelRead,
    HotelType,
    HotelUpdate,
    TypeCount,
)
from hotelbook.schemas.room import (
    AvailabilityUpdate,
    RoomNumberIn,
    RoomNumberRead,
    RoomTypeCreate,
    RoomTypeRead,
    RoomTypeUpdate,
)

__all__ = [
    "AccountRead",
    "AccountUpdate",
    "AvailabilityUpdate",
    "CurrentUser",
    "ErrorResponse",
    "HealthResponse",
    "HotelCreate",
    "HotelFilters",
    "HotelRead",
    "HotelType",
    "HotelUpdate",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RegisterRequest",
    "RoomNumberIn",
    "RoomNumberRead",
    "RoomTypeCreate",
    "RoomTypeRead",
    "RoomTypeUpdate",
    "TypeCount",
]
