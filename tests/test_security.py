"""Unit tests for app.core.security: bcrypt hashing and the JWT token issuer."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from app.core.roles import Role
from app.core.security import (
    InvalidTokenError,
    JWTTokenIssuer,
    TokenIdentity,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret-that-is-long-enough-for-hs256"


class TestPasswordHashing(unittest.TestCase):
    """hash_password is salted and one-way; verify_password compares against it."""

    def test_hash_verifies(self) -> None:
        hashed = hash_password("correct horse", rounds=4)
        self.assertNotEqual(hashed, "correct horse")
        self.assertTrue(verify_password("correct horse", hashed))

    def test_wrong_password_rejected(self) -> None:
        hashed = hash_password("correct horse", rounds=4)
        self.assertFalse(verify_password("battery staple", hashed))

    def test_same_password_different_salt(self) -> None:
        self.assertNotEqual(hash_password("samepass1", rounds=4), hash_password("samepass1", rounds=4))

    def test_malformed_hash_is_false_not_error(self) -> None:
        self.assertFalse(verify_password("anything", "not-a-bcrypt-hash"))


class TestJWTTokenIssuer(unittest.TestCase):
    """issue/verify carry (user_id, role); anything else raises InvalidTokenError."""

    def setUp(self) -> None:
        self.issuer = JWTTokenIssuer(secret=SECRET, algorithm="HS256", expire_minutes=5)

    def test_issue_then_verify_returns_identity(self) -> None:
        token = self.issuer.issue(TokenIdentity(user_id=42, role=Role.ADMIN))
        identity = self.issuer.verify(token)
        self.assertEqual(identity, TokenIdentity(user_id=42, role=Role.ADMIN))

    def test_claims_include_sub_role_and_expiry(self) -> None:
        token = self.issuer.issue(TokenIdentity(user_id=7, role=Role.USER))
        payload = jwt.decode(token, SECRET, algorithms=["HS256"])
        self.assertEqual(payload["sub"], "7")
        self.assertEqual(payload["role"], "user")
        self.assertGreater(payload["exp"], payload["iat"])

    def test_unrecognized_string_is_invalid(self) -> None:
        with self.assertRaises(InvalidTokenError):
            self.issuer.verify("nonAdminToken")

    def test_expired_token_is_invalid(self) -> None:
        expired = JWTTokenIssuer(secret=SECRET, expire_minutes=-1)
        token = expired.issue(TokenIdentity(user_id=1, role=Role.USER))
        with self.assertRaises(InvalidTokenError):
            self.issuer.verify(token)

    def test_token_signed_with_other_secret_is_invalid(self) -> None:
        other = JWTTokenIssuer(secret="a-completely-different-secret-value-here")
        token = other.issue(TokenIdentity(user_id=1, role=Role.ADMIN))
        with self.assertRaises(InvalidTokenError):
            self.issuer.verify(token)

    def test_missing_subject_is_invalid(self) -> None:
        token = jwt.encode(
            {"role": "admin", "exp": datetime.now(UTC) + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(InvalidTokenError):
            self.issuer.verify(token)

    def test_unknown_role_is_invalid(self) -> None:
        token = jwt.encode(
            {"sub": "1", "role": "superuser", "exp": datetime.now(UTC) + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(InvalidTokenError):
            self.issuer.verify(token)

    def test_non_numeric_subject_is_invalid(self) -> None:
        token = jwt.encode(
            {"sub": "admin", "role": "admin", "exp": datetime.now(UTC) + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(InvalidTokenError):
            self.issuer.verify(token)


if __name__ == "__main__":
    unittest.main()
