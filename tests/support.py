"""Shared base class for API tests: fresh schema, seeded admin and empty session store per test."""

import unittest

import httpx
from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.database import SessionLocal, engine
from app.main import app
from app.models import Base
from app.services.admin_seed import seed_admin

ADMIN_EMAIL = settings.ADMIN_EMAIL
ADMIN_PASSWORD = settings.ADMIN_PASSWORD.get_secret_value()


class ApiTestCase(unittest.TestCase):
    """Each test gets empty tables plus the seeded admin, and no live sessions."""

    def setUp(self) -> None:
        Base.metadata.drop_all(bind=engine)
        Base.metadata.create_all(bind=engine)
        db = SessionLocal()
        try:
            seed_admin(db, settings)
        finally:
            db.close()
        self.sessions = app.state.session_store
        self.sessions.clear()
        self.client = self.new_client()

    def new_client(self) -> TestClient:
        """A separate browser: its own cookie jar, same app and session store."""
        return TestClient(app)

    def register(
        self,
        client: TestClient,
        full_name: str = "Alice Doe",
        email: str = "alice@example.com",
        password: str = "alice-pass",
    ) -> httpx.Response:
        return client.post(
            "/api/register",
            json={"FIO": full_name, "email": email, "pass": password},
        )

    def login(self, client: TestClient, login: str, password: str) -> httpx.Response:
        return client.post("/api/login", json={"login": login, "pass": password})

    def admin_client(self) -> TestClient:
        client = self.new_client()
        resp = self.login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
        self.assertEqual(resp.status_code, 200, resp.text)
        return client

    def user_client(self, email: str = "alice@example.com", **kwargs: str) -> TestClient:
        client = self.new_client()
        resp = self.register(client, email=email, **kwargs)
        self.assertEqual(resp.status_code, 200, resp.text)
        return client

    def db(self):
        session = SessionLocal()
        self.addCleanup(session.close)
        return session
