"""Room type operations and room availability (booked nights per room number)."""

import logging
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.orm import Session

from hotelbook.core.errors import NotFoundError
from hotelbook.models import RoomType
from hotelbook.schemas.room import (
    AvailabilityUpdate,
    RoomNumberIn,
    RoomTypeCreate,
    RoomTypeUpdate,
)
from hotelbook.services.hotels import get_hotel

logger = logging.getLogger(__name__)


def normalize_date(value: datetime) -> str:
    """Store timestamps as ISO-8601 in UTC; naive values are taken to be UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value.astimezone(UTC).isoformat()


def _room_numbers_doc(
    numbers: list[RoomNumberIn],
    previous: list[dict[str, Any]] | None = None,
) -> list[dict[str, Any]]:
    """Build stored room number entries, carrying over booked dates by number."""
    booked = {entry["number"]: entry.get("unavailable_dates", []) for entry in previous or []}
    return [
        {"number": n.number, "unavailable_dates": list(booked.get(n.number, []))}
        for n in numbers
    ]


def create_room_type(db: Session, hotel_id: int, body: RoomTypeCreate) -> RoomType:
    """
    Insert a room type and append its id to the hotel's room list.

    Both writes share one transaction, so a failure leaves neither behind.
    """
    hotel = get_hotel(db, hotel_id, for_update=True)
    room = RoomType(
        title=body.title,
        description=body.description,
        price=body.price,
        max_people=body.max_people,
        room_numbers=_room_numbers_doc(body.room_numbers),
    )
    db.add(room)
    db.flush()
    hotel.rooms = [*(hotel.rooms or []), room.id]
    db.commit()
    db.refresh(room)
    logger.info(
        "Room type created",
        extra={
            "room_type_id": room.id,
            "hotel_id": hotel_id,
            "room_count": len(room.room_numbers),
        },
    )
    return room


def get_room_type(db: Session, room_id: int, for_update: bool = False) -> RoomType:
    if for_update:
        room = db.get(RoomType, room_id, with_for_update=True, populate_existing=True)
    else:
        room = db.get(RoomType, room_id)
    if room is None:
        raise NotFoundError("Room not found!")
    return room


def list_room_types(db: Session) -> list[RoomType]:
    return db.query(RoomType).order_by(RoomType.id).all()


def update_room_type(db: Session, room_id: int, patch: RoomTypeUpdate) -> RoomType:
    room = get_room_type(db, room_id, for_update=True)
    changes = patch.model_dump(exclude_unset=True, exclude={"room_numbers"})
    for field, value in changes.items():
        setattr(room, field, value)
    if patch.room_numbers is not None:
        room.room_numbers = _room_numbers_doc(patch.room_numbers, room.room_numbers)
    db.commit()
    db.refresh(room)
    logger.info(
        "Room type updated",
        extra={"room_type_id": room.id, "fields": sorted(patch.model_fields_set)},
    )
    return room


def delete_room_type(db: Session, room_id: int, hotel_id: int) -> None:
    """
    Remove the room type and prune its id from the hotel, in one transaction.

    The hotel must reference the room type; otherwise nothing is deleted.
    """
    hotel = get_hotel(db, hotel_id, for_update=True)
    room = get_room_type(db, room_id, for_update=True)
    if room_id not in (hotel.rooms or []):
        raise NotFoundError("Room not found in this hotel!")
    hotel.rooms = [rid for rid in hotel.rooms if rid != room_id]
    db.delete(room)
    db.commit()
    logger.info(
        "Room type deleted",
        extra={"room_type_id": room_id, "hotel_id": hotel_id},
    )


def update_availability(db: Session, room_id: int, body: AvailabilityUpdate) -> int:
    """
    Mark the given nights as booked.

    Dates are added to every room number of the room type, or only to
    ``body.numbers`` when given. A date already present is not added twice.
    Returns the number of dates actually added across all rooms.
    """
    room = get_room_type(db, room_id, for_update=True)
    entries: list[dict[str, Any]] = [dict(entry) for entry in room.room_numbers or []]

    if body.numbers is not None:
        known = {entry["number"] for entry in entries}
        unknown = sorted(set(body.numbers) - known)
        if unknown:
            raise NotFoundError(
                f"Room number(s) not found in this room type: {unknown}"
            )
        targets = set(body.numbers)
    else:
        targets = {entry["number"] for entry in entries}

    new_dates = [normalize_date(d) for d in body.dates]
    added = 0
    for entry in entries:
        if entry["number"] not in targets:
            continue
        dates = list(entry.get("unavailable_dates", []))
        for date in new_dates:
            if date not in dates:
                dates.append(date)
                added += 1
        entry["unavailable_dates"] = dates

    room.room_numbers = entries
    db.commit()
    logger.info(
        "Room availability updated",
        extra={
            "room_type_id": room_id,
            "rooms_targeted": len(targets),
            "dates_added": added,
        },
    )
    return added
