"""Tests for config.py"""

import pytest
from pydantic import ValidationError

from notekeep.config import MIN_SECRET_KEY_LENGTH, Settings


def test_defaults(monkeypatch):
    for var in ("SECRET_KEY", "DATABASE_URL", "LOG_TO_FILE", "DEBUG"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)

    assert settings.algorithm == "HS256"
    assert settings.access_token_expire_minutes == 60
    assert settings.default_page_size == 10
    assert settings.database_url.startswith("postgresql+asyncpg://")


def test_generated_secret_is_flagged(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)

    settings = Settings(_env_file=None)

    assert settings.secret_key_generated is True
    assert len(settings.secret_key) >= MIN_SECRET_KEY_LENGTH
    # a fresh key each time
    assert Settings(_env_file=None).secret_key != settings.secret_key


def test_supplied_secret_is_used(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "k" * MIN_SECRET_KEY_LENGTH)

    settings = Settings(_env_file=None)

    assert settings.secret_key == "k" * MIN_SECRET_KEY_LENGTH
    assert settings.secret_key_generated is False


def test_short_secret_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, secret_key="too-short")
