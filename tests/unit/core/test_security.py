"""Tests for password hashing and JWT helpers."""

import datetime

import jwt

from app.core.config import settings
from app.core.security import (
    create_access_token,
    decode_access_token,
    decode_token,
    get_password_hash,
    hash_token,
    verify_password,
)


class TestPasswordHashing:

    def test_hash_is_bcrypt_and_salted(self):
        first = get_password_hash("secret123")
        second = get_password_hash("secret123")
        assert first.startswith("$2b$")
        assert first != second

    def test_verify_correct_and_wrong_password(self):
        hashed = get_password_hash("secret123")
        assert verify_password("secret123", hashed) is True
        assert verify_password("wrong", hashed) is False

    def test_verify_malformed_hash_returns_false(self):
        assert verify_password("secret123", "not-a-bcrypt-hash") is False


class TestAccessTokens:

    def test_round_trip_subject(self):
        token = create_access_token({"sub": "alice@mail.com"})
        assert decode_access_token(token) == "alice@mail.com"

    def test_expired_token_is_rejected(self):
        token = create_access_token({"sub": "alice@mail.com"}, expires_delta=datetime.timedelta(seconds=-1))
        assert decode_token(token) is None
        assert decode_access_token(token) is None

    def test_token_signed_with_other_key_is_rejected(self):
        forged = jwt.encode({"sub": "alice@mail.com"}, "another-secret-key-of-enough-length", algorithm=settings.ALGORITHM)
        assert decode_access_token(forged) is None

    def test_garbage_is_rejected(self):
        assert decode_access_token("not.a.jwt") is None

    def test_hash_token_is_stable_sha256(self):
        assert hash_token("abc") == hash_token("abc")
        assert len(hash_token("abc")) == 64

    def test_tokens_are_unique(self):
        assert create_access_token({"sub": "a@mail.com"}) != create_access_token({"sub": "a@mail.com"})
