"""Validation rules in app.core.config.Settings."""

import unittest

from pydantic import SecretStr, ValidationError

from app.core.config import Settings


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestSettings(unittest.TestCase):
    def test_admin_seed_requires_password(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(ADMIN_SEED_ENABLED=True, ADMIN_PASSWORD=None)

    def test_admin_seed_with_password(self) -> None:
        s = _settings(ADMIN_SEED_ENABLED=True, ADMIN_PASSWORD=SecretStr("x"))
        self.assertTrue(s.ADMIN_SEED_ENABLED)

    def test_admin_email_is_canonical(self) -> None:
        self.assertEqual(_settings(ADMIN_EMAIL=" Root@Example.COM ").ADMIN_EMAIL, "root@example.com")

    def test_database_url_scheme(self) -> None:
        self.assertEqual(_settings(DATABASE_URL="sqlite://").DATABASE_URL, "sqlite://")
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://localhost/db")

    def test_bcrypt_rounds_range(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=3)

    def test_session_ttl_optional(self) -> None:
        self.assertIsNone(_settings(SESSION_TTL_SECONDS=None).SESSION_TTL_SECONDS)
        self.assertEqual(_settings(SESSION_TTL_SECONDS=3600).SESSION_TTL_SECONDS, 3600)
        with self.assertRaises(ValidationError):
            _settings(SESSION_TTL_SECONDS=5)

    def test_api_prefix_trailing_slash(self) -> None:
        self.assertEqual(_settings(API_PREFIX="/api/").API_PREFIX, "/api")


if __name__ == "__main__":
    unittest.main()
