"""SQLAlchemy ORM models."""

from hotelbook.models.account import Account
from hotelbook.models.base import Base
from hotelbook.models.hotel import Hotel
from hotelbook.models.room import RoomType

__all__ = ["Account", "Base", "Hotel", "RoomType"]
