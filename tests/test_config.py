"""Tests for settings loading and structured logging."""

import json
import logging

from vtvnews.config import DEFAULT_GLOSSARY, Settings
from vtvnews.utils.logging import JSONFormatter, request_id_var


def test_defaults_without_keys(monkeypatch):
    """Test defaults when no environment is configured."""
    monkeypatch.delenv("NEWS_API_KEY", raising=False)
    settings = Settings(_env_file=None)

    assert settings.news_api_key == ""
    assert settings.provider_timeout == 15.0
    assert settings.target_language == "vi"
    assert settings.degraded_mode_latch is False
    assert settings.libre_translate_url is None
    assert settings.translation_glossary == DEFAULT_GLOSSARY


def test_environment_overrides(monkeypatch):
    """Test that keys, lists and tables come from the environment."""
    monkeypatch.setenv("NEWS_API_KEY", "abc")
    monkeypatch.setenv("PROVIDER_TIMEOUT", "3.5")
    monkeypatch.setenv("REGION_KEYWORDS", '["vietnam", "hanoi"]')
    monkeypatch.setenv("TRANSLATION_GLOSSARY", '{"rice": "gạo"}')
    monkeypatch.setenv("DEGRADED_MODE_LATCH", "true")
    settings = Settings(_env_file=None)

    assert settings.news_api_key == "abc"
    assert settings.provider_timeout == 3.5
    assert settings.region_keywords == ["vietnam", "hanoi"]
    assert settings.translation_glossary == {"rice": "gạo"}
    assert settings.degraded_mode_latch is True


def test_json_formatter_includes_request_id():
    """Test structured log output with request context."""
    record = logging.LogRecord("vtvnews.fetcher", logging.WARNING, __file__, 10, "Provider %s failed", ("newsapi",), None)
    token = request_id_var.set("req-1")
    try:
        data = json.loads(JSONFormatter().format(record))
    finally:
        request_id_var.reset(token)

    assert data["level"] == "WARNING"
    assert data["message"] == "Provider newsapi failed"
    assert data["request_id"] == "req-1"
    assert data["timestamp"].endswith("Z")
