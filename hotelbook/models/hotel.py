"""ORM model for catalog entries (hotels)."""

from sqlalchemy import Boolean, Column, Float, Integer, String, Text

from hotelbook.models.base import Base, JSONDocument


class Hotel(Base):
    """
    Catalog entry. ``rooms`` is the ordered list of RoomType ids offered here;
    it is only written by the room type operations.
    """

    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    type = Column(String(32), nullable=False, index=True)
    city = Column(String(255), nullable=False, index=True)
    address = Column(String(1024), nullable=False)
    distance = Column(String(64), nullable=False)
    photos = Column(JSONDocument, nullable=False, default=list)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    rating = Column(Float, nullable=True)
    cheapest_price = Column(Float, nullable=False)
    featured = Column(Boolean, nullable=False, default=False)
    rooms = Column(JSONDocument, nullable=False, default=list)
