"""The alembic environment renders the initial schema for the URL it is given."""

import io
import unittest
from argparse import Namespace
from pathlib import Path

from alembic import command
from alembic.config import Config

ROOT = Path(__file__).resolve().parents[1]


def _offline_sql(*x_args: str) -> str:
    buffer = io.StringIO()
    config = Config(
        str(ROOT / "alembic.ini"),
        output_buffer=buffer,
        cmd_opts=Namespace(x=list(x_args)),
    )
    config.set_main_option("script_location", str(ROOT / "alembic"))
    command.upgrade(config, "head", sql=True)
    return buffer.getvalue()


class TestOfflineUpgrade(unittest.TestCase):
    def test_database_url_argument_selects_dialect(self) -> None:
        sql = _offline_sql("database_url=postgresql://u:p@db:5432/hotelbook")
        for table in ("accounts", "hotels", "room_types"):
            self.assertIn(f"CREATE TABLE {table}", sql)
        self.assertIn("JSONB", sql)

    def test_defaults_to_configured_database(self) -> None:
        sql = _offline_sql()
        self.assertIn("CREATE TABLE room_types", sql)
        self.assertNotIn("JSONB", sql)


if __name__ == "__main__":
    unittest.main()
