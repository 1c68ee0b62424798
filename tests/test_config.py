"""Unit tests for hotelbook.core.config.Settings validators."""

import unittest

import pydantic

from hotelbook.core.config import Settings


def _settings(**kwargs: object) -> Settings:
    return Settings(_env_file=None, **kwargs)


class TestDatabaseUrl(unittest.TestCase):
    def test_accepts_postgres_and_sqlite(self) -> None:
        self.assertEqual(
            _settings(DATABASE_URL=" postgresql://u:p@db:5432/hotelbook ").DATABASE_URL,
            "postgresql://u:p@db:5432/hotelbook",
        )
        self.assertEqual(_settings(DATABASE_URL="sqlite://").DATABASE_URL, "sqlite://")

    def test_rejects_other_schemes(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            _settings(DATABASE_URL="mysql://u:p@db/hotelbook")

    def test_rejects_blank(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            _settings(DATABASE_URL="  ")


class TestJwtSettings(unittest.TestCase):
    def test_expire_minutes_bounds(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            _settings(JWT_EXPIRE_MINUTES=0)
        with self.assertRaises(pydantic.ValidationError):
            _settings(JWT_EXPIRE_MINUTES=10081)
        self.assertEqual(_settings(JWT_EXPIRE_MINUTES=30).JWT_EXPIRE_MINUTES, 30)

    def test_blank_secret_rejected(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            _settings(JWT_SECRET="   ")


class TestMiscSettings(unittest.TestCase):
    def test_log_level_normalized(self) -> None:
        self.assertEqual(_settings(LOG_LEVEL="debug").LOG_LEVEL, "DEBUG")
        with self.assertRaises(pydantic.ValidationError):
            _settings(LOG_LEVEL="chatty")

    def test_api_prefix_trailing_slash_stripped(self) -> None:
        self.assertEqual(_settings(API_PREFIX="/api/").API_PREFIX, "/api")
        with self.assertRaises(pydantic.ValidationError):
            _settings(API_PREFIX="api")

    def test_bcrypt_rounds_bounds(self) -> None:
        with self.assertRaises(pydantic.ValidationError):
            _settings(BCRYPT_ROUNDS=3)
        self.assertEqual(_settings(BCRYPT_ROUNDS=10).BCRYPT_ROUNDS, 10)


if __name__ == "__main__":
    unittest.main()
