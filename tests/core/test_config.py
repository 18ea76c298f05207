from __future__ import annotations

import pytest

from tmdb_mcp.core.config import AppSettings, resolve_api_key
from tmdb_mcp.core.errors import ConfigurationError, TmdbError


def test_defaults(settings: AppSettings) -> None:
    assert settings.base_url == "https://api.themoviedb.org/3"
    assert settings.image_base_url == "https://image.tmdb.org/t/p/w500"
    assert settings.min_interval_seconds == 0.25
    assert settings.text_max_chars == 200
    assert settings.api_key_env == "TMDB_API_KEY"


def test_env_prefix_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_MCP_MIN_INTERVAL_SECONDS", "1.5")
    monkeypatch.setenv("TMDB_MCP_BASE_URL", "http://localhost:9999/3")

    settings = AppSettings(_env_file=None)

    assert settings.min_interval_seconds == 1.5
    assert settings.base_url == "http://localhost:9999/3"


def test_resolve_api_key_strips_whitespace(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TMDB_API_KEY", "  abc  ")

    assert resolve_api_key() == "abc"


def test_resolve_api_key_missing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TMDB_API_KEY", raising=False)

    with pytest.raises(ConfigurationError) as excinfo:
        resolve_api_key()
    assert isinstance(excinfo.value, TmdbError)
    assert "https://www.themoviedb.org/settings/api" in str(excinfo.value)


def test_resolve_api_key_custom_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MY_TMDB_KEY", "xyz")

    assert resolve_api_key("MY_TMDB_KEY") == "xyz"
