"""Shared fixtures: an in-memory database wired into the FastAPI app."""

import unittest
from collections.abc import Generator

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from acadtrack.core.database import get_db
from acadtrack.main import app
from acadtrack.models import Base

ADMIN_CODE = "TEST-ADMIN-CODE"
PASSWORD = "secret1"


class DatabaseTestCase(unittest.TestCase):
    """Fresh in-memory SQLite database per test; get_db is overridden to use it."""

    def setUp(self) -> None:
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

        def override_get_db() -> Generator[Session, None, None]:
            db = self.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = override_get_db
        # Registered as a cleanup (not tearDown) so it runs after cleanups added by subclasses,
        # e.g. closing their sessions, rather than before them.
        self.addCleanup(self._dispose_database)

    def _dispose_database(self) -> None:
        app.dependency_overrides.pop(get_db, None)
        Base.metadata.drop_all(self.engine)
        self.engine.dispose()


class ApiTestCase(DatabaseTestCase):
    """DatabaseTestCase plus a TestClient and helpers for registering and logging in."""

    def setUp(self) -> None:
        super().setUp()
        self.client = TestClient(app)

    def register(
        self,
        email: str,
        password: str = PASSWORD,
        admin: bool = False,
        firstname: str = "Ada",
        lastname: str = "Lovelace",
    ):
        body = {
            "firstname": firstname,
            "lastname": lastname,
            "email": email,
            "password": password,
        }
        if admin:
            body["adminCode"] = ADMIN_CODE
        return self.client.post("/api/auth/register", json=body)

    def login(self, email: str, password: str = PASSWORD) -> str:
        resp = self.client.post("/api/auth/login", json={"email": email, "password": password})
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()["data"]["token"]

    def register_and_login(self, email: str, admin: bool = False) -> str:
        resp = self.register(email, admin=admin)
        self.assertEqual(resp.status_code, 201, resp.text)
        return self.login(email)

    @staticmethod
    def bearer(token: str) -> dict[str, str]:
        return {"Authorization": f"Bearer {token}"}
