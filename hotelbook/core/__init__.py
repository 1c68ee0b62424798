"""Core app configuration, database and errors."""

from hotelbook.core.config import get_settings, settings
from hotelbook.core.database import get_db

__all__ = ["get_settings", "settings", "get_db"]
