"""Catalog routes: public reads and statistics, admin-only writes."""

from typing import Annotated

import pydantic
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from hotelbook.api.v1.auth import require_admin
from hotelbook.core.database import get_db
from hotelbook.core.errors import ValidationError
from hotelbook.schemas.auth import CurrentUser
from hotelbook.schemas.common import MessageResponse
from hotelbook.schemas.hotel import (
    HotelCreate,
    HotelFilters,
    HotelRead,
    HotelUpdate,
    TypeCount,
)
from hotelbook.schemas.room import RoomTypeRead
from hotelbook.services import hotels as hotel_service

router = APIRouter()


@router.post("", response_model=HotelRead)
def create_hotel(
    body: HotelCreate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> HotelRead:
    """Create a hotel with an empty room list (admin only)."""
    return HotelRead.model_validate(hotel_service.create_hotel(db, body))


@router.get("", response_model=list[HotelRead])
def list_hotels(
    db: Annotated[Session, Depends(get_db)],
    city: str | None = None,
    min_price: Annotated[float | None, Query(alias="min", ge=0)] = None,
    max_price: Annotated[float | None, Query(alias="max", ge=0)] = None,
    featured: bool | None = None,
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
) -> list[HotelRead]:
    """
    List hotels, optionally filtered by city, cheapest price range
    (?min=&max=, inclusive) and featured flag, at most ``limit`` results.
    """
    try:
        filters = HotelFilters(
            city=city,
            min_price=min_price,
            max_price=max_price,
            featured=featured,
            limit=limit,
        )
    except pydantic.ValidationError as e:
        raise ValidationError(e.errors()[0]["msg"]) from e
    return [HotelRead.model_validate(h) for h in hotel_service.list_hotels(db, filters)]


@router.get("/countByCity", response_model=list[int])
def count_by_city(
    db: Annotated[Session, Depends(get_db)],
    cities: str | None = None,
) -> list[int]:
    """
    Count hotels per city: ?cities=hanoi,danang,hochiminh returns one count
    per listed city, in the same order.
    """
    return hotel_service.count_by_city(db, hotel_service.parse_cities(cities))


@router.get("/countByType", response_model=list[TypeCount])
def count_by_type(
    db: Annotated[Session, Depends(get_db)],
) -> list[TypeCount]:
    """Count hotels of each type; types with no hotels report 0."""
    return hotel_service.count_by_type(db)


@router.get("/find/{hotel_id}", response_model=HotelRead)
def get_hotel(
    hotel_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> HotelRead:
    return HotelRead.model_validate(hotel_service.get_hotel(db, hotel_id))


@router.get("/room/{hotel_id}", response_model=list[RoomTypeRead])
def get_hotel_rooms(
    hotel_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> list[RoomTypeRead]:
    """Room types offered by the hotel, in the hotel's own order."""
    return [
        RoomTypeRead.model_validate(r) for r in hotel_service.get_hotel_rooms(db, hotel_id)
    ]


@router.put("/{hotel_id}", response_model=HotelRead)
def update_hotel(
    hotel_id: int,
    body: HotelUpdate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> HotelRead:
    return HotelRead.model_validate(hotel_service.update_hotel(db, hotel_id, body))


@router.delete("/{hotel_id}", response_model=MessageResponse)
def delete_hotel(
    hotel_id: int,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete the hotel together with its room types (admin only)."""
    hotel_service.delete_hotel(db, hotel_id)
    return MessageResponse(message="Hotel has been deleted.")
