"""Password hashing and the JSON log formatter."""

import json
import logging

import pytest
from pydantic import ValidationError

from makesta.config import DEV_JWT_SECRET, Settings
from makesta.infrastructure.credentials import hash_password, verify_password
from makesta.infrastructure.observability import JSONFormatter


def test_hash_is_opaque_and_verifiable():
    hashed = hash_password("secret123")
    assert "secret123" not in hashed
    assert verify_password("secret123", hashed)
    assert not verify_password("salah", hashed)


def test_corrupt_hash_does_not_raise():
    assert verify_password("secret123", "not-a-hash") is False


def test_json_formatter_includes_extras():
    record = logging.LogRecord(
        "makesta.test", logging.WARNING, __file__, 1, "Login failed", None, None,
    )
    record.username = "ani"
    record.error_code = "INVALID_CREDENTIALS"
    out = json.loads(JSONFormatter().format(record))
    assert out["message"] == "Login failed"
    assert out["level"] == "WARNING"
    assert out["username"] == "ani"
    assert out["error_code"] == "INVALID_CREDENTIALS"
    assert "role" not in out


def test_postgres_url_converted_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@db:5432/makesta")
    assert settings.database_url.startswith("postgresql+asyncpg://")


def test_default_attendance_policy_allows_closed_sessions():
    assert Settings().attendance_allow_closed_sessions is True


def test_dev_secret_refused_for_postgres(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    with pytest.raises(ValidationError):
        Settings(database_url="postgresql://u:p@db:5432/makesta")


def test_dev_secret_allowed_for_sqlite(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    settings = Settings(database_url="sqlite+aiosqlite:///local.db")
    assert settings.jwt_secret == DEV_JWT_SECRET


def test_empty_secret_refused():
    with pytest.raises(ValidationError):
        Settings(database_url="sqlite+aiosqlite:///local.db", jwt_secret="")
