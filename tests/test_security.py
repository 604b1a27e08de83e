"""Unit tests for app.core.security: salted bcrypt derivation and session tokens."""

import unittest

from app.core.security import (
    BCRYPT_MAX_PASSWORD_BYTES,
    SESSION_TOKEN_BYTES,
    generate_salt,
    generate_session_token,
    hash_password,
    password_too_long,
    verify_password,
)


class TestHashPassword(unittest.TestCase):
    """Same password and salt give the same hash; changing either changes it."""

    def test_deterministic_for_same_inputs(self) -> None:
        salt = generate_salt()
        self.assertEqual(hash_password("p1", salt), hash_password("p1", salt))

    def test_different_password_changes_hash(self) -> None:
        salt = generate_salt()
        self.assertNotEqual(hash_password("p1", salt), hash_password("p2", salt))

    def test_different_salt_changes_hash(self) -> None:
        self.assertNotEqual(
            hash_password("p1", generate_salt()),
            hash_password("p1", generate_salt()),
        )

    def test_hash_is_not_the_password(self) -> None:
        hashed = hash_password("correct horse", generate_salt())
        self.assertNotIn(b"correct horse", hashed)

    def test_non_ascii_password(self) -> None:
        salt = generate_salt()
        self.assertTrue(verify_password("пароль-ü", salt, hash_password("пароль-ü", salt)))


class TestPasswordLengthLimit(unittest.TestCase):
    """Passwords bcrypt would truncate are refused, never silently shortened."""

    def test_limit_is_in_utf8_bytes(self) -> None:
        self.assertFalse(password_too_long("a" * BCRYPT_MAX_PASSWORD_BYTES))
        self.assertTrue(password_too_long("a" * (BCRYPT_MAX_PASSWORD_BYTES + 1)))
        # 2 bytes per character in UTF-8
        self.assertTrue(password_too_long("\u00fc" * 37))

    def test_hash_refuses_long_password(self) -> None:
        with self.assertRaises(ValueError):
            hash_password("a" * 72 + "tail", generate_salt())

    def test_shared_prefix_does_not_verify(self) -> None:
        salt = generate_salt()
        stored = hash_password("a" * 72, salt)
        self.assertFalse(verify_password("a" * 72 + "totally-different", salt, stored))


class TestGenerateSalt(unittest.TestCase):
    def test_fixed_length_and_fresh(self) -> None:
        salts = {generate_salt() for _ in range(20)}
        self.assertEqual(len(salts), 20)
        for salt in salts:
            self.assertEqual(len(salt), 29)

    def test_explicit_rounds_are_embedded(self) -> None:
        self.assertTrue(generate_salt(rounds=5).startswith(b"$2b$05$"))


class TestVerifyPassword(unittest.TestCase):
    def test_accepts_matching_password(self) -> None:
        salt = generate_salt()
        self.assertTrue(verify_password("secret", salt, hash_password("secret", salt)))

    def test_rejects_wrong_password(self) -> None:
        salt = generate_salt()
        self.assertFalse(verify_password("Secret", salt, hash_password("secret", salt)))

    def test_rejects_mismatched_salt(self) -> None:
        salt = generate_salt()
        stored = hash_password("secret", salt)
        self.assertFalse(verify_password("secret", generate_salt(), stored))

    def test_malformed_salt_returns_false(self) -> None:
        self.assertFalse(verify_password("secret", b"not-a-salt", b"whatever"))


class TestSessionToken(unittest.TestCase):
    def test_hex_of_expected_length(self) -> None:
        token = generate_session_token()
        self.assertEqual(len(token), SESSION_TOKEN_BYTES * 2)
        int(token, 16)

    def test_unique(self) -> None:
        tokens = {generate_session_token() for _ in range(1000)}
        self.assertEqual(len(tokens), 1000)


if __name__ == "__main__":
    unittest.main()
