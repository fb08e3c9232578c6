"""Tests for password hashing and access token helpers"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from app.auth import create_access_token, decode_access_token, hash_password, verify_password

SECRET = "unit-test-secret"


class TestPasswordHashing:

    def test_hash_is_not_plaintext_and_verifies(self):
        hashed = hash_password("s3cret", rounds=4)
        assert hashed != "s3cret"
        assert verify_password("s3cret", hashed)

    def test_wrong_password_does_not_verify(self):
        hashed = hash_password("s3cret", rounds=4)
        assert not verify_password("S3cret", hashed)

    def test_same_password_gets_different_salts(self):
        assert hash_password("s3cret", rounds=4) != hash_password("s3cret", rounds=4)

    def test_password_longer_than_72_bytes_cannot_be_hashed(self):
        with pytest.raises(ValueError):
            hash_password("x" * 100, rounds=4)

    def test_multibyte_password_is_measured_in_bytes(self):
        with pytest.raises(ValueError):
            hash_password("\u00e9" * 40, rounds=4)

    def test_long_password_sharing_first_72_bytes_does_not_verify(self):
        hashed = hash_password("x" * 72, rounds=4)
        assert not verify_password("x" * 72 + "extra", hashed)

    def test_malformed_hash_does_not_verify(self):
        assert not verify_password("s3cret", "not-a-bcrypt-hash")


class TestAccessToken:

    def test_round_trip_claims(self):
        token = create_access_token("abc123", "alice@example.com", SECRET)
        claims = decode_access_token(token, SECRET)
        assert claims.user_id == "abc123"
        assert claims.email == "alice@example.com"

    def test_expiry_is_one_hour_after_issue(self):
        token = create_access_token("abc123", "alice@example.com", SECRET)
        claims = decode_access_token(token, SECRET)
        assert claims.exp - claims.iat == 3600

    def test_expired_token_is_rejected(self):
        issued = datetime.now(timezone.utc) - timedelta(hours=1, minutes=1)
        token = create_access_token("abc123", "alice@example.com", SECRET, now=issued)
        with pytest.raises(jwt.ExpiredSignatureError):
            decode_access_token(token, SECRET)

    def test_token_signed_with_other_secret_is_rejected(self):
        token = create_access_token("abc123", "alice@example.com", "other-secret")
        with pytest.raises(jwt.InvalidSignatureError):
            decode_access_token(token, SECRET)

    def test_unsigned_token_is_rejected(self):
        token = jwt.encode(
            {"user_id": "abc123", "email": "alice@example.com", "iat": 0, "exp": 4102444800},
            "",
            algorithm="none",
        )
        with pytest.raises(jwt.PyJWTError):
            decode_access_token(token, SECRET)

    def test_garbage_token_is_rejected(self):
        with pytest.raises(jwt.DecodeError):
            decode_access_token("not.a.token", SECRET)
