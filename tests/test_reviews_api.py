"""Endpoint tests for the public reviews board, callback form and health check."""

import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from support import ADMIN_EMAIL, ADMIN_PASSWORD, ApiTestCase

from app.main import app
from app.models import Review
from app.core.errors import InvalidRatingError
from app.services.reviews import parse_rating


class TestParseRating(unittest.TestCase):
    def test_valid(self) -> None:
        self.assertEqual(parse_rating(1), 1)
        self.assertEqual(parse_rating("5"), 5)

    def test_invalid(self) -> None:
        for raw in (0, 6, "abc", None, True):
            with self.assertRaises(InvalidRatingError, msg=repr(raw)):
                parse_rating(raw)


class TestReviews(ApiTestCase):
    def test_post_and_list_newest_first(self) -> None:
        for name in ("First", "Second"):
            resp = self.client.post(
                "/api/reviews",
                json={"name": name, "position": "CTO", "company": "Acme", "message": "Nice", "rating": "4"},
            )
            self.assertEqual(resp.status_code, 200)
            self.assertEqual(resp.json(), {"ok": True})
        reviews = self.client.get("/api/reviews").json()["reviews"]
        self.assertEqual([r["name"] for r in reviews], ["Second", "First"])
        self.assertEqual(reviews[0]["rating"], 4)
        self.assertEqual(reviews[0]["company"], "Acme")

    def test_missing_fields(self) -> None:
        for body in ({"message": "m", "rating": 5}, {"name": "n", "rating": 5}, {"name": "n", "message": "m"}):
            resp = self.client.post("/api/reviews", json=body)
            self.assertEqual(resp.status_code, 400)
            self.assertEqual(resp.json(), {"error": "missing_fields"})

    def test_rating_out_of_range(self) -> None:
        for rating in (0, 9):
            resp = self.client.post("/api/reviews", json={"name": "n", "message": "m", "rating": rating})
            self.assertEqual(resp.status_code, 400, rating)
            self.assertEqual(resp.json(), {"error": "invalid_rating"})

    def test_logged_in_author_is_linked(self) -> None:
        client = self.user_client()
        client.post("/api/reviews", json={"name": "n", "message": "m", "rating": 3})
        self.client.post("/api/reviews", json={"name": "anon", "message": "m", "rating": 3})
        authors = {r.name: r.user_id for r in self.db().query(Review).all()}
        self.assertIsNotNone(authors["n"])
        self.assertIsNone(authors["anon"])


class TestCallbacks(ApiTestCase):
    def test_post_callback(self) -> None:
        resp = self.client.post("/api/callbacks", json={"name": "Bob", "phone": "+7 (900) 000-00-00"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"ok": True})

    def test_missing_phone(self) -> None:
        resp = self.client.post("/api/callbacks", json={"name": "Bob"})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.json(), {"error": "missing_fields"})

    def test_public_cannot_list_callbacks(self) -> None:
        self.assertEqual(self.client.get("/api/callbacks").status_code, 405)


class TestUnexpectedErrors(ApiTestCase):
    def test_internal_failure_is_generic_500(self) -> None:
        client = TestClient(app, raise_server_exceptions=False)
        with patch("app.api.reviews.list_reviews", side_effect=RuntimeError("disk on fire")):
            resp = client.get("/api/reviews")
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "server_error"})
        self.assertNotIn("disk on fire", resp.text)


class TestHealth(ApiTestCase):
    def test_health(self) -> None:
        self.register(self.client)
        body = self.client.get("/api/health").json()
        self.assertEqual(body["status"], "ok")
        self.assertEqual(body["database"], "connected")
        self.assertEqual(body["active_sessions"], 1)

    def test_startup_provisions_admin(self) -> None:
        with TestClient(app) as client:
            resp = self.login(client, ADMIN_EMAIL, ADMIN_PASSWORD)
            self.assertEqual(resp.status_code, 200)
            self.assertEqual(client.get("/api/admin/users").status_code, 200)


if __name__ == "__main__":
    unittest.main()
