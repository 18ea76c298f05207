"""Contract for fetching JSON from TMDB.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Lets the query tools run against `TmdbClient` in production and against a
  stub in tests, without coupling the core to httpx.
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class JsonFetcher(Protocol):
    """Minimal contract for an upstream JSON source.

    Design rules:
    - `get_json` is async because it performs I/O (HTTP) and may wait on a
      rate limiter.
    - It returns the decoded JSON object or raises; it never returns partial data.
    """

    async def get_json(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """GET `path` with `params` and return the decoded JSON object."""

        ...
