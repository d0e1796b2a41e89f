# File: tests/test_security.py

from datetime import timedelta

from blemap.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


def test_password_hash_roundtrip():
    hashed = hash_password("hunter22")
    assert hashed != "hunter22"
    assert verify_password("hunter22", hashed)
    assert not verify_password("hunter23", hashed)


def test_verify_against_malformed_hash():
    assert not verify_password("hunter22", "not-a-bcrypt-hash")


def test_token_carries_subject():
    token = create_access_token("user-123")
    assert decode_access_token(token) == "user-123"


def test_expired_token_rejected():
    token = create_access_token("user-123", expires_delta=timedelta(minutes=-5))
    assert decode_access_token(token) is None


def test_tampered_token_rejected():
    token = create_access_token("user-123")
    head, payload, sig = token.split(".")
    tampered = ".".join([head, payload, sig[::-1]])
    assert decode_access_token(tampered) is None
