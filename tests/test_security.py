"""Tests for password hashing and token signing: pure functions, no IO."""

import time

from catalog_api.app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)

SECRET = "unit-secret"


def test_hash_is_salted_and_verifies():
    first = hash_password("p1")
    second = hash_password("p1")
    assert first != second
    assert verify_password("p1", first)
    assert verify_password("p1", second)


def test_wrong_password_does_not_verify():
    assert not verify_password("wrong", hash_password("p1"))


def test_malformed_stored_hash_never_matches():
    assert not verify_password("p1", "not-a-hash")
    assert not verify_password("p1", "zz$zz")


def test_token_round_trips_claims():
    token = create_access_token({"id": 7, "username": "alice", "role": "user"}, SECRET)
    claims = decode_access_token(token, SECRET)
    assert claims["id"] == 7
    assert claims["username"] == "alice"
    assert claims["role"] == "user"


def test_token_expires_after_one_hour_by_default():
    before = int(time.time())
    claims = decode_access_token(create_access_token({"id": 1}, SECRET), SECRET)
    assert before + 3600 <= claims["exp"] <= int(time.time()) + 3600


def test_expired_token_is_rejected():
    token = create_access_token({"id": 1}, SECRET, expires_delta=-10)
    assert decode_access_token(token, SECRET) is None


def test_token_signed_with_other_secret_is_rejected():
    token = create_access_token({"id": 1}, "other-secret")
    assert decode_access_token(token, SECRET) is None


def test_tampered_payload_is_rejected():
    header, payload, signature = create_access_token({"id": 1, "role": "user"}, SECRET).split(".")
    forged = create_access_token({"id": 1, "role": "admin"}, "attacker").split(".")[1]
    assert decode_access_token(f"{header}.{forged}.{signature}", SECRET) is None


def test_garbage_token_is_rejected():
    assert decode_access_token("not.a.token", SECRET) is None
    assert decode_access_token("abc", SECRET) is None
    assert decode_access_token("", SECRET) is None
