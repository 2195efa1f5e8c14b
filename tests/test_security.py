"""Unit tests for app.core.security: bcrypt helpers and JWT issue/verify."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.config import settings
from app.core.security import (
    InvalidTokenError,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_access_token,
    verify_password,
)
from app.schemas.auth import CurrentUser

ADMIN = CurrentUser(id="1", username="admin", role="admin")


class TestPasswordHashing(unittest.TestCase):
    """hash_password / verify_password wrap bcrypt."""

    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("password123", rounds=4)
        self.assertNotEqual(hashed, "password123")
        self.assertTrue(hashed.startswith("$2"))
        self.assertTrue(verify_password("password123", hashed))

    def test_wrong_password_rejected(self) -> None:
        hashed = hash_password("password123", rounds=4)
        self.assertFalse(verify_password("wrongpassword", hashed))

    def test_malformed_hash_returns_false(self) -> None:
        self.assertFalse(verify_password("password123", "not-a-bcrypt-hash"))

    def test_salted_hashes_differ(self) -> None:
        self.assertNotEqual(hash_password("same", rounds=4), hash_password("same", rounds=4))


class TestTokenRoundTrip(unittest.TestCase):
    """A freshly issued token verifies back to the same identity."""

    def test_verify_returns_issued_claims(self) -> None:
        token = create_access_token(ADMIN)
        self.assertEqual(verify_access_token(token), ADMIN)

    def test_token_has_three_segments(self) -> None:
        token = create_access_token(ADMIN)
        self.assertEqual(len(token.split(".")), 3)

    def test_payload_carries_identity_and_24h_window(self) -> None:
        payload = decode_access_token(create_access_token(ADMIN))
        self.assertEqual(payload["id"], "1")
        self.assertEqual(payload["username"], "admin")
        self.assertEqual(payload["role"], "admin")
        self.assertEqual(payload["exp"] - payload["iat"], settings.JWT_EXPIRE_MINUTES * 60)
        self.assertEqual(settings.JWT_EXPIRE_MINUTES, 1440)

    def test_token_issued_almost_a_day_ago_still_valid(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=23)
        token = create_access_token(ADMIN, now=issued)
        self.assertEqual(verify_access_token(token).username, "admin")


class TestTokenRejection(unittest.TestCase):
    """Expired, tampered, malformed and incomplete tokens all raise InvalidTokenError."""

    def test_expired_token(self) -> None:
        issued = datetime.now(UTC) - timedelta(hours=25)
        token = create_access_token(ADMIN, now=issued)
        with self.assertRaises(InvalidTokenError) as ctx:
            verify_access_token(token)
        self.assertEqual(ctx.exception.message, "Invalid or expired token")
        self.assertIsInstance(ctx.exception.cause, jwt.ExpiredSignatureError)

    def test_wrong_signature(self) -> None:
        payload = decode_access_token(create_access_token(ADMIN))
        payload["role"] = "superuser"
        forged = jwt.encode(payload, "some-other-secret", algorithm="HS256")
        with self.assertRaises(InvalidTokenError):
            verify_access_token(forged)

    def test_malformed_token(self) -> None:
        for token in ("invalid-token", "a.b.c", ""):
            with self.subTest(token=token):
                with self.assertRaises(InvalidTokenError):
                    verify_access_token(token)

    def test_missing_identity_claims(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"sub": "1", "iat": now, "exp": now + timedelta(hours=1)},
            settings.JWT_SECRET.get_secret_value(),
            algorithm=settings.JWT_ALGORITHM,
        )
        with self.assertRaises(InvalidTokenError):
            verify_access_token(token)

    def test_failures_share_one_message(self) -> None:
        expired = create_access_token(ADMIN, now=datetime.now(UTC) - timedelta(days=2))
        messages = set()
        for token in (expired, "invalid-token"):
            try:
                verify_access_token(token)
            except InvalidTokenError as e:
                messages.add(e.message)
        self.assertEqual(messages, {"Invalid or expired token"})


if __name__ == "__main__":
    unittest.main()
