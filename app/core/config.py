"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "sqlite://",
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "postgres+psycopg2://",
)


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    API_PREFIX: str = "/api"

    # SQLite for local runs; PostgreSQL URLs are accepted for deployments (see alembic/)
    DATABASE_URL: str = "sqlite:///./storefront.db"
    # Create missing tables on startup. Turn off when the schema is managed by Alembic.
    DB_AUTO_CREATE: bool = True

    # Bcrypt cost factor; 12 in production, tests drop it to the bcrypt minimum (4).
    BCRYPT_ROUNDS: int = 12

    # Session cookie
    SESSION_COOKIE_NAME: str = "sid"
    SESSION_COOKIE_SECURE: bool = False
    # Unset means sessions live until logout or process restart.
    SESSION_TTL_SECONDS: int | None = None

    # Bootstrap admin account. When enabled, startup creates the account or
    # promotes it and resets its password to ADMIN_PASSWORD.
    ADMIN_SEED_ENABLED: bool = False
    ADMIN_EMAIL: str = "admin@example.com"
    ADMIN_PASSWORD: SecretStr | None = None
    ADMIN_FULL_NAME: str = "Administrator"

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a SQLite or PostgreSQL URL (e.g. sqlite:///./app.db or postgresql://)"
            )
        return v.strip()

    @field_validator("API_PREFIX")
    @classmethod
    def validate_api_prefix(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith("/"):
            raise ValueError("API_PREFIX must start with '/' (e.g. /api)")
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("SESSION_COOKIE_NAME")
    @classmethod
    def validate_cookie_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("SESSION_COOKIE_NAME must be set and non-empty")
        return v.strip()

    @field_validator("SESSION_TTL_SECONDS")
    @classmethod
    def validate_session_ttl(cls, v: int | None) -> int | None:
        if v is None:
            return None
        if v < 60 or v > 31_536_000:
            raise ValueError(
                "SESSION_TTL_SECONDS must be between 60 and 31536000 (1 minute to 1 year)"
            )
        return v

    @field_validator("ADMIN_EMAIL")
    @classmethod
    def validate_admin_email(cls, v: str) -> str:
        v = v.strip().lower()
        if "@" not in v:
            raise ValueError("ADMIN_EMAIL must be an email address")
        return v

    @model_validator(mode="after")
    def validate_admin_seed(self) -> "Settings":
        if self.ADMIN_SEED_ENABLED:
            if self.ADMIN_PASSWORD is None or not self.ADMIN_PASSWORD.get_secret_value():
                raise ValueError("ADMIN_PASSWORD must be set when ADMIN_SEED_ENABLED is true")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
