"""Password hashing with a per-account salt, and session token generation."""

import hmac
import secrets

import bcrypt

from app.core.config import settings

# Bytes of randomness in a session token (hex-encoded to 48 characters).
SESSION_TOKEN_BYTES = 24

# bcrypt only looks at the first 72 bytes of the password, so longer ones are
# refused rather than truncated (two passwords sharing a 72-byte prefix would
# otherwise hash the same).
BCRYPT_MAX_PASSWORD_BYTES = 72

# Max length for input validation at the API boundary.
EMAIL_MAX_LEN = 255


def password_too_long(plain_password: str) -> bool:
    """True if the UTF-8 encoding exceeds what bcrypt can hash without truncation."""
    return len(plain_password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES


def generate_salt(rounds: int | None = None) -> bytes:
    """
    Return a fresh random bcrypt salt (29 bytes, e.g. b"$2b$12$...").

    The cost factor is part of the salt, so an account's stored salt also pins
    the work factor its hash was derived with.
    """
    return bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)


def hash_password(plain_password: str, salt: bytes) -> bytes:
    """
    Derive the credential hash for a password under the given salt. Deterministic.

    Raises ValueError for passwords over BCRYPT_MAX_PASSWORD_BYTES.
    """
    if password_too_long(plain_password):
        raise ValueError(f"Password exceeds {BCRYPT_MAX_PASSWORD_BYTES} bytes")
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt)


def verify_password(plain_password: str, salt: bytes, expected_hash: bytes) -> bool:
    """Re-derive the hash from the account's own salt and compare in constant time."""
    try:
        derived = hash_password(plain_password, salt)
    except (ValueError, TypeError):
        return False
    return hmac.compare_digest(derived, expected_hash)


def generate_session_token() -> str:
    """Return an unguessable opaque session token."""
    return secrets.token_hex(SESSION_TOKEN_BYTES)
