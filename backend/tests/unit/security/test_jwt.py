"""Unit tests for security/jwt.py"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from notekeep.core.exceptions import InvalidSignatureError, MalformedTokenError
from notekeep.security import jwt as jwt_module
from notekeep.security.jwt import (
    create_access_token,
    decode_access_token,
    get_username_from_token,
    is_token_expired,
)


class DummySettings:
    secret_key = "test-secret-key-for-jwt-unit-tests-000000"
    algorithm = "HS256"
    access_token_expire_minutes = 60


@pytest.fixture(autouse=True)
def fixed_settings(monkeypatch):
    monkeypatch.setattr(jwt_module, "get_settings", lambda: DummySettings())


def test_issue_and_verify_roundtrip():
    token = create_access_token("alice")
    assert isinstance(token, str)

    claims = decode_access_token(token)
    assert claims.subject == "alice"
    assert claims.roles == ("ROLE_USER",)
    assert not is_token_expired(claims)


def test_token_lifetime_is_one_hour():
    claims = decode_access_token(create_access_token("alice"))
    assert claims.expires_at - claims.issued_at == timedelta(hours=1)


def test_token_expires_after_window(monkeypatch):
    issued = datetime(2025, 1, 1, 12, 0, tzinfo=timezone.utc)
    monkeypatch.setattr(jwt_module, "_utcnow", lambda: issued)
    claims = decode_access_token(create_access_token("alice"))

    assert not is_token_expired(claims, now=issued + timedelta(minutes=59))
    # expiry is strictly before now
    assert not is_token_expired(claims, now=issued + timedelta(hours=1))
    assert is_token_expired(claims, now=issued + timedelta(hours=1, seconds=1))

    # the default clock is the same module-level clock
    monkeypatch.setattr(jwt_module, "_utcnow", lambda: issued + timedelta(hours=2))
    assert is_token_expired(claims)
    assert get_username_from_token(create_access_token("bob", timedelta(hours=-3))) is None


def test_verify_does_not_reject_expired_tokens():
    token = create_access_token("alice", expires_delta=timedelta(seconds=-10))
    claims = decode_access_token(token)
    assert claims.subject == "alice"
    assert is_token_expired(claims)


def test_invalid_signature():
    payload = {"sub": "alice", "roles": ["ROLE_USER"], "iat": 1, "exp": 4102444800}
    token = jwt.encode(payload, "another-secret-key-that-is-long-enough-00", algorithm="HS256")

    with pytest.raises(InvalidSignatureError):
        decode_access_token(token)


def test_tampered_payload_fails_signature():
    header, _, signature = create_access_token("alice").split(".")
    forged_claims = jwt.encode(
        {"sub": "mallory", "roles": ["ROLE_USER"], "iat": 1, "exp": 4102444800},
        "whatever-key-whatever-key-whatever-key-00",
        algorithm="HS256",
    ).split(".")[1]

    with pytest.raises(InvalidSignatureError):
        decode_access_token(f"{header}.{forged_claims}.{signature}")


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "a.b"])
def test_malformed_token(token):
    with pytest.raises(MalformedTokenError):
        decode_access_token(token)


def test_token_without_subject_is_malformed():
    token = jwt.encode(
        {"roles": ["ROLE_USER"], "iat": 1, "exp": 4102444800},
        DummySettings.secret_key,
        algorithm="HS256",
    )
    with pytest.raises(MalformedTokenError):
        decode_access_token(token)


def test_get_username_from_token():
    assert get_username_from_token(create_access_token("carol")) == "carol"
    assert get_username_from_token("not-a-token") is None


@pytest.mark.parametrize(
    "iat,exp",
    [
        (1, 1e20),
        (1, 10**20),
        (1, -1e20),
        (1, float("nan")),
        (1, float("inf")),
        (float("nan"), 4102444800),
    ],
)
def test_unrepresentable_timestamps_are_malformed(iat, exp):
    token = jwt.encode(
        {"sub": "x", "roles": ["ROLE_USER"], "iat": iat, "exp": exp},
        DummySettings.secret_key,
        algorithm="HS256",
    )
    with pytest.raises(MalformedTokenError):
        decode_access_token(token)


def test_unsigned_token_with_huge_expiry_is_malformed():
    token = jwt.encode(
        {"sub": "x", "roles": ["ROLE_USER"], "iat": 1, "exp": 1e20},
        "unrelated-key-unrelated-key-unrelated-00",
        algorithm="HS256",
    )
    header, claims, _ = token.split(".")
    with pytest.raises(MalformedTokenError):
        decode_access_token(f"{header}.{claims}.AAAA")
