"""Catalog operations: hotel CRUD, filtered listing, counts and room lookup."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session

from hotelbook.core.errors import NotFoundError, ValidationError
from hotelbook.models import Hotel, RoomType
from hotelbook.schemas.hotel import (
    HOTEL_TYPE_LABELS,
    HOTEL_TYPE_VALUES,
    HotelCreate,
    HotelFilters,
    HotelUpdate,
    TypeCount,
)

logger = logging.getLogger(__name__)

MAX_CITIES_PER_COUNT = 50


def create_hotel(db: Session, body: HotelCreate) -> Hotel:
    hotel = Hotel(**body.model_dump(), rooms=[])
    db.add(hotel)
    db.commit()
    db.refresh(hotel)
    logger.info("Hotel created", extra={"hotel_id": hotel.id, "city": hotel.city})
    return hotel


def get_hotel(db: Session, hotel_id: int, for_update: bool = False) -> Hotel:
    """Load a hotel; with for_update the row is locked until commit and re-read."""
    if for_update:
        hotel = db.get(Hotel, hotel_id, with_for_update=True, populate_existing=True)
    else:
        hotel = db.get(Hotel, hotel_id)
    if hotel is None:
        raise NotFoundError("Hotel not found!")
    return hotel


def update_hotel(db: Session, hotel_id: int, patch: HotelUpdate) -> Hotel:
    hotel = get_hotel(db, hotel_id)
    for field, value in patch.model_dump(exclude_unset=True).items():
        setattr(hotel, field, value)
    db.commit()
    db.refresh(hotel)
    logger.info(
        "Hotel updated",
        extra={"hotel_id": hotel.id, "fields": sorted(patch.model_fields_set)},
    )
    return hotel


def delete_hotel(db: Session, hotel_id: int) -> int:
    """
    Delete the hotel and every room type it references in one transaction.

    Returns the number of room types removed with it.
    """
    hotel = get_hotel(db, hotel_id, for_update=True)
    room_ids = list(hotel.rooms or [])
    removed = 0
    if room_ids:
        removed = (
            db.query(RoomType)
            .filter(RoomType.id.in_(room_ids))
            .delete(synchronize_session=False)
        )
    db.delete(hotel)
    db.commit()
    logger.info(
        "Hotel deleted",
        extra={"hotel_id": hotel_id, "room_types_deleted": removed},
    )
    return removed


def list_hotels(db: Session, filters: HotelFilters) -> list[Hotel]:
    query = db.query(Hotel)
    if filters.city is not None:
        query = query.filter(Hotel.city == filters.city)
    if filters.min_price is not None:
        query = query.filter(Hotel.cheapest_price >= filters.min_price)
    if filters.max_price is not None:
        query = query.filter(Hotel.cheapest_price <= filters.max_price)
    if filters.featured is not None:
        query = query.filter(Hotel.featured == filters.featured)
    query = query.order_by(Hotel.id)
    if filters.limit is not None:
        query = query.limit(filters.limit)
    return query.all()


def parse_cities(raw: str | None) -> list[str]:
    """Split a comma-separated ``cities`` value, keeping order and duplicates."""
    cities = [c.strip() for c in (raw or "").split(",") if c.strip()]
    if not cities:
        raise ValidationError("Query parameter 'cities' must list at least one city.")
    if len(cities) > MAX_CITIES_PER_COUNT:
        raise ValidationError(
            f"At most {MAX_CITIES_PER_COUNT} cities are allowed per request."
        )
    return cities


def count_by_city(db: Session, cities: list[str]) -> list[int]:
    """One count per input city, same order; unknown cities count 0."""
    counts_by_city: dict[str, int] = {}
    for city in cities:
        if city not in counts_by_city:
            counts_by_city[city] = (
                db.query(func.count(Hotel.id)).filter(Hotel.city == city).scalar() or 0
            )
    return [counts_by_city[city] for city in cities]


def count_by_type(db: Session) -> list[TypeCount]:
    """Counts for every hotel type in fixed order, zero-filled."""
    rows = (
        db.query(Hotel.type, func.count(Hotel.id))
        .filter(Hotel.type.in_(HOTEL_TYPE_VALUES))
        .group_by(Hotel.type)
        .all()
    )
    found = {hotel_type: count for hotel_type, count in rows}
    return [
        TypeCount(type=HOTEL_TYPE_LABELS[hotel_type], count=found.get(hotel_type, 0))
        for hotel_type in HOTEL_TYPE_VALUES
    ]


def get_hotel_rooms(db: Session, hotel_id: int) -> list[RoomType]:
    """
    Resolve the hotel's room type references in list order.

    Ids that no longer resolve are skipped rather than returned as nulls.
    """
    hotel = get_hotel(db, hotel_id)
    room_ids = list(hotel.rooms or [])
    if not room_ids:
        return []
    rooms = db.query(RoomType).filter(RoomType.id.in_(room_ids)).all()
    by_id = {room.id: room for room in rooms}
    missing = [room_id for room_id in room_ids if room_id not in by_id]
    if missing:
        logger.warning(
            "Hotel references missing room types",
            extra={"hotel_id": hotel_id, "missing_room_type_ids": missing},
        )
    return [by_id[room_id] for room_id in room_ids if room_id in by_id]
