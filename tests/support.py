"""Shared test harness: in-memory SQLite behind the FastAPI app, plus request helpers."""

import unittest
from typing import Any

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from hotelbook.core.database import get_db
from hotelbook.main import app
from hotelbook.models import Account, Base

DEFAULT_PASSWORD = "123456789"


def make_session_factory():
    """Fresh in-memory database with every table created; returns (engine, sessionmaker)."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine, sessionmaker(autocommit=False, autoflush=False, bind=engine)


def hotel_payload(**overrides: Any) -> dict[str, Any]:
    """Minimal valid hotel body."""
    payload: dict[str, Any] = {
        "name": "Hotel District 4",
        "type": "hotel",
        "city": "hochiminh",
        "address": "125 Vo Xuan Khoat, District 2",
        "distance": "10",
        "photos": [],
        "title": "Best hotel in district 2",
        "description": "Quiet rooms close to the river.",
        "rating": 4.5,
        "cheapest_price": 80,
        "featured": False,
    }
    payload.update(overrides)
    return payload


def room_payload(numbers: tuple[int, ...] = (101, 102), **overrides: Any) -> dict[str, Any]:
    """Minimal valid room type body."""
    payload: dict[str, Any] = {
        "title": "King Room",
        "description": "King size bed, 1 bathroom, balcony",
        "price": 100,
        "max_people": 2,
        "room_numbers": [{"number": n} for n in numbers],
    }
    payload.update(overrides)
    return payload


class ApiTestCase(unittest.TestCase):
    """Each test gets its own empty database and a TestClient bound to it."""

    def setUp(self) -> None:
        self.engine, self.SessionLocal = make_session_factory()

        def override_get_db():
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        self.client = TestClient(app)

    def tearDown(self) -> None:
        self.client.close()
        app.dependency_overrides.clear()
        Base.metadata.drop_all(bind=self.engine)
        self.engine.dispose()

    # -- accounts -----------------------------------------------------------

    def register(self, username: str, **overrides: Any):
        body = {
            "username": username,
            "email": f"{username}@example.com",
            "password": DEFAULT_PASSWORD,
            "phone": "012128900",
            "country": "vietnam",
            "city": "hcm",
        }
        body.update(overrides)
        return self.client.post("/api/auth/register", json=body)

    def login(self, username: str, password: str = DEFAULT_PASSWORD):
        return self.client.post(
            "/api/auth/login", json={"username": username, "password": password}
        )

    def account_id(self, username: str) -> int:
        db = self.SessionLocal()
        try:
            return db.query(Account).filter(Account.username == username).one().id
        finally:
            db.close()

    def user_token(self, username: str) -> str:
        """Register (if needed) and log in a regular account; return its token."""
        if self.login(username).status_code == 404:
            self.assertEqual(self.register(username).status_code, 200)
        response = self.login(username)
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()["access_token"]

    def admin_token(self, username: str = "admin") -> str:
        """Register an account, flag it admin in the store, and log in."""
        self.assertEqual(self.register(username).status_code, 200)
        db = self.SessionLocal()
        try:
            account = db.query(Account).filter(Account.username == username).one()
            account.is_admin = True
            db.commit()
        finally:
            db.close()
        return self.login(username).json()["access_token"]

    @staticmethod
    def auth(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}

    # -- catalog ------------------------------------------------------------

    def create_hotel(self, token: str, **overrides: Any) -> dict[str, Any]:
        response = self.client.post(
            "/api/hotels", json=hotel_payload(**overrides), headers=self.auth(token)
        )
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()

    def create_room(
        self, token: str, hotel_id: int, numbers: tuple[int, ...] = (101, 102), **overrides: Any
    ) -> dict[str, Any]:
        response = self.client.post(
            f"/api/rooms/{hotel_id}",
            json=room_payload(numbers, **overrides),
            headers=self.auth(token),
        )
        self.assertEqual(response.status_code, 200, response.text)
        return response.json()
