"""
Tests for password hashing and JWT helpers.
"""
from datetime import timedelta
from app.core.security import (
    get_password_hash, verify_password, create_access_token, decode_access_token
)


def test_hash_differs_from_plaintext_and_verifies():
    hashed = get_password_hash("pw1")
    assert hashed != "pw1"
    assert verify_password("pw1", hashed)
    assert not verify_password("pw2", hashed)


def test_hash_is_salted():
    assert get_password_hash("same") != get_password_hash("same")


def test_hash_uses_requested_cost_factor():
    assert get_password_hash("pw1", rounds=10).startswith("$2b$10$")


def test_long_passwords_are_not_truncated():
    base = "x" * 80
    hashed = get_password_hash(base + "a")
    assert not verify_password(base + "b", hashed)


def test_access_token_round_trip():
    token = create_access_token(data={"sub": "alice", "user_id": 7})
    payload = decode_access_token(token)
    assert payload["sub"] == "alice"
    assert payload["user_id"] == 7


def test_expired_or_garbage_tokens_are_rejected():
    expired = create_access_token(data={"user_id": 1}, expires_delta=timedelta(seconds=-10))
    assert decode_access_token(expired) is None
    assert decode_access_token("not-a-token") is None
