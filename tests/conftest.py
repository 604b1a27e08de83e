"""
Test environment. Must run before any app import: settings and the engine are
built at import time from these variables.

In-memory SQLite (one shared connection), minimum bcrypt cost, admin seeding on.
"""

import os

os.environ["APP_ENV"] = "dev"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DB_AUTO_CREATE"] = "true"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SESSION_COOKIE_NAME"] = "sid"
os.environ["SESSION_COOKIE_SECURE"] = "false"
os.environ.pop("SESSION_TTL_SECONDS", None)
os.environ["ADMIN_SEED_ENABLED"] = "true"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["ADMIN_PASSWORD"] = "admin-test-password"
os.environ["ADMIN_FULL_NAME"] = "Site Admin"
