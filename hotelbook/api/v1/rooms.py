"""Room type routes (admin) and the availability update used when a stay is booked."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from hotelbook.api.v1.auth import get_current_user, require_admin
from hotelbook.core.database import get_db
from hotelbook.schemas.auth import CurrentUser
from hotelbook.schemas.common import MessageResponse
from hotelbook.schemas.room import (
    AvailabilityUpdate,
    RoomTypeCreate,
    RoomTypeRead,
    RoomTypeUpdate,
)
from hotelbook.services import rooms as room_service

router = APIRouter()


@router.post("/{hotel_id}", response_model=RoomTypeRead)
def create_room(
    hotel_id: int,
    body: RoomTypeCreate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> RoomTypeRead:
    """Create a room type and attach it to the hotel (admin only)."""
    return RoomTypeRead.model_validate(room_service.create_room_type(db, hotel_id, body))


@router.get("", response_model=list[RoomTypeRead])
def list_rooms(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[RoomTypeRead]:
    return [RoomTypeRead.model_validate(r) for r in room_service.list_room_types(db)]


@router.get("/{room_id}", response_model=RoomTypeRead)
def get_room(
    room_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> RoomTypeRead:
    return RoomTypeRead.model_validate(room_service.get_room_type(db, room_id))


@router.put("/availability/{room_id}", response_model=MessageResponse)
def update_room_availability(
    room_id: int,
    body: AvailabilityUpdate,
    _user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """
    Mark nights as booked for the room type's rooms (any signed-in user).

    Body: {"dates": "2023-12-13T17:00:00.000Z"} or a list of timestamps;
    optional "numbers" limits the update to those room numbers.
    """
    room_service.update_availability(db, room_id, body)
    return MessageResponse(message="Room status has been updated.")


@router.put("/{room_id}", response_model=RoomTypeRead)
def update_room(
    room_id: int,
    body: RoomTypeUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> RoomTypeRead:
    return RoomTypeRead.model_validate(room_service.update_room_type(db, room_id, body))


@router.delete("/{room_id}/{hotel_id}", response_model=MessageResponse)
def delete_room(
    room_id: int,
    hotel_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete a room type and remove it from the hotel's room list (admin only)."""
    room_service.delete_room_type(db, room_id, hotel_id)
    return MessageResponse(message="Room has been deleted.")
