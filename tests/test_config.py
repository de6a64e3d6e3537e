"""Settings tests — defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from leximap.config import Settings


def test_port_defaults_to_8787(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    assert Settings().port == 8787


def test_port_env_override(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    assert Settings().port == 9090


def test_cors_open_by_default(monkeypatch):
    monkeypatch.delenv("CORS_ORIGINS", raising=False)
    assert Settings().cors_origins == ["*"]


def test_relation_timeout_must_be_positive(monkeypatch):
    monkeypatch.setenv("RELATION_TIMEOUT_SECONDS", "0")
    with pytest.raises(ValidationError):
        Settings()


def test_relation_base_url_from_env(monkeypatch):
    monkeypatch.setenv("RELATION_BASE_URL", "http://relations.local/words")
    assert Settings().relation_base_url == "http://relations.local/words"
