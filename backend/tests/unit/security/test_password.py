"""Unit tests for security/password.py"""

from notekeep.security.password import dummy_verify, hash_password, needs_update, verify_password


def test_hash_and_verify_roundtrip():
    pwd = "StrongPassw0rd!"
    h = hash_password(pwd)
    assert h != pwd
    assert verify_password(pwd, h) is True
    assert verify_password("wrong", h) is False


def test_hashes_are_salted():
    assert hash_password("same-password") != hash_password("same-password")


def test_long_passwords_are_not_truncated():
    base = "x" * 80
    h = hash_password(base + "a")
    assert verify_password(base + "b", h) is False


def test_needs_update_returns_bool():
    h = hash_password("AnotherPass123!")
    assert isinstance(needs_update(h), bool)


def test_dummy_verify_runs():
    assert dummy_verify() is None


def test_unrecognised_stored_hash_never_matches():
    assert verify_password("anything", "not-a-hash") is False
