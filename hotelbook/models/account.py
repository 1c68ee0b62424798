"""ORM model for user accounts (auth and ownership checks)."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from hotelbook.models.base import Base


class Account(Base):
    """
    Registered user. Username and email are globally unique.

    is_admin grants access to catalog management and to every account.
    """

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, unique=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    phone = Column(String(64), nullable=False)
    country = Column(String(255), nullable=False)
    city = Column(String(255), nullable=False)
    img = Column(String(2048), nullable=True)
    is_admin = Column(Boolean, nullable=False, default=False)
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
