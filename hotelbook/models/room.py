"""ORM model for room types and their embedded room numbers."""

from sqlalchemy import Column, DateTime, Float, Integer, String, Text, func

from hotelbook.models.base import Base, JSONDocument


class RoomType(Base):
    """
    Bookable room category of a hotel.

    room_numbers holds one entry per physical room:
    ``{"number": 101, "unavailable_dates": ["2023-12-13T17:00:00+00:00", ...]}``
    """

    __tablename__ = "room_types"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    price = Column(Float, nullable=False)
    max_people = Column(Integer, nullable=False)
    room_numbers = Column(JSONDocument, nullable=False, default=list)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
