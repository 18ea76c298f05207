"""Rate-limited TMDB v3 client.

Every outbound request goes through `TmdbClient.get_json`, which:
- reads the API key from the environment (no caching),
- waits on the client's `RateLimiter`,
- issues the GET with `api_key` as a query parameter,
- returns the decoded JSON object or raises a `TmdbError`.

No retries: a failure surfaces to the caller as-is.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from tmdb_mcp.adapters.http_client import build_async_client
from tmdb_mcp.core.config import AppSettings, resolve_api_key
from tmdb_mcp.core.errors import UnexpectedResponseError, UpstreamError
from tmdb_mcp.core.rate_limiter import RateLimiter

logger = logging.getLogger(__name__)

_BODY_SNIPPET_CHARS = 400


class TmdbClient:
    """Implements `core.interfaces.fetcher.JsonFetcher` against the TMDB API."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        rate_limiter: RateLimiter | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._rate_limiter = rate_limiter or RateLimiter(self._settings.min_interval_seconds)
        self._transport = transport

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def rate_limiter(self) -> RateLimiter:
        return self._rate_limiter

    async def get_json(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        api_key = resolve_api_key(self._settings.api_key_env)

        query: dict[str, Any] = dict(params or {})
        query["api_key"] = api_key
        url = f"{self._settings.base_url.rstrip('/')}{path}"

        await self._rate_limiter.acquire()
        logger.debug("GET %s params=%s", url, sorted(k for k in query if k != "api_key"))

        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url, params=query)
        except httpx.HTTPError as exc:
            logger.warning("TMDB request to %s failed: %s", path, exc)
            raise UpstreamError(f"TMDB request failed: {exc}") from exc

        if not response.is_success:
            logger.warning("TMDB %s answered HTTP %s", path, response.status_code)
            raise UpstreamError(
                f"TMDB {response.status_code}",
                status_code=response.status_code,
                body_snippet=(response.text or "")[:_BODY_SNIPPET_CHARS],
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise UnexpectedResponseError(f"TMDB {path} returned non-JSON response.") from exc

        if not isinstance(payload, dict):
            raise UnexpectedResponseError(f"TMDB {path} returned unexpected JSON shape (not an object).")
        return payload
