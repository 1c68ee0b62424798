"""Alembic environment for the hotelbook schema (accounts, hotels, room_types)."""

import os
from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine
from sqlalchemy.pool import NullPool

os.environ.setdefault("APP_ENV", "dev")
from hotelbook.core.config import settings
from hotelbook.models import Base

config = context.config
if config.config_file_name is not None:
    try:
        fileConfig(config.config_file_name)
    except KeyError:
        pass

target_metadata = Base.metadata


def database_url() -> str:
    """``alembic -x database_url=...`` wins over DATABASE_URL, e.g. to migrate a scratch database."""
    return context.get_x_argument(as_dictionary=True).get("database_url") or settings.DATABASE_URL


def _configure(**kwargs) -> None:
    url = kwargs.pop("url", None) or database_url()
    context.configure(
        target_metadata=target_metadata,
        compare_type=True,
        # SQLite cannot ALTER most columns in place.
        render_as_batch=url.startswith("sqlite"),
        url=url if "connection" not in kwargs else None,
        **kwargs,
    )


def run_migrations_offline() -> None:
    _configure(literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    url = database_url()
    connectable = create_engine(url, poolclass=NullPool)
    with connectable.connect() as connection:
        _configure(url=url, connection=connection)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
