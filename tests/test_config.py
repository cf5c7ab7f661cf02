"""Tests for environment configuration."""

from unittest.mock import patch

import pytest

from docgate.config import Settings, build_submitter, load_settings
from docgate.submitter import BASE_URL


@pytest.fixture(autouse=True)
def _no_dotenv():
    with patch("docgate.config._load_env"):
        yield


def test_defaults(monkeypatch):
    for name in ("DOCGATE_BASE_URL", "DOCGATE_AUTH_TOKEN", "DOCGATE_REQUEST_LIMIT",
                 "DOCGATE_WINDOW_SECONDS", "DOCGATE_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings == Settings()
    assert settings.base_url == BASE_URL


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("DOCGATE_BASE_URL", "https://markirovka.sandbox.example/api/v3")
    monkeypatch.setenv("DOCGATE_AUTH_TOKEN", "tok")
    monkeypatch.setenv("DOCGATE_REQUEST_LIMIT", "5")
    monkeypatch.setenv("DOCGATE_WINDOW_SECONDS", "60")
    monkeypatch.setenv("DOCGATE_TIMEOUT", "2.5")

    settings = load_settings()

    assert settings.base_url == "https://markirovka.sandbox.example/api/v3"
    assert settings.auth_token == "tok"
    assert settings.request_limit == 5
    assert settings.window_seconds == 60.0
    assert settings.timeout == 2.5


def test_invalid_number_names_variable(monkeypatch):
    monkeypatch.setenv("DOCGATE_REQUEST_LIMIT", "many")

    with pytest.raises(ValueError) as exc_info:
        load_settings()

    assert "DOCGATE_REQUEST_LIMIT" in str(exc_info.value)


def test_build_submitter_from_settings():
    settings = Settings(base_url="http://localhost:9000/", auth_token="abc",
                        request_limit=0, window_seconds=2.0)

    submitter = build_submitter(settings)

    assert submitter.token == "abc"
    assert submitter.create_url == "http://localhost:9000/lk/documents/create"
    assert submitter.limiter.capacity == 1
    assert submitter.limiter.window_seconds == 2.0
    submitter.transport.close()
