"""Shared pytest fixtures."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest

from tests.helpers import FakeClock
from tmdb_mcp.adapters.tmdb_client import TmdbClient
from tmdb_mcp.core.config import AppSettings
from tmdb_mcp.core.rate_limiter import RateLimiter

TEST_API_KEY = "test_api_key_12345678901234567890"


@pytest.fixture(autouse=True)
def api_key(monkeypatch: pytest.MonkeyPatch) -> str:
    """Every test starts with a valid key; tests needing none delete it."""
    monkeypatch.setenv("TMDB_API_KEY", TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_client(settings: AppSettings, fake_clock: FakeClock) -> Callable[..., TmdbClient]:
    """Build a `TmdbClient` whose HTTP calls go to `handler`."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> TmdbClient:
        limiter = RateLimiter(settings.min_interval_seconds, clock=fake_clock, sleep=fake_clock.sleep)
        return TmdbClient(settings, rate_limiter=limiter, transport=httpx.MockTransport(handler))

    return _make
