"""Test doubles shared across the suite."""

from __future__ import annotations

from typing import Any, Mapping


class FakeClock:
    """Deterministic clock: `sleep` advances time instead of blocking."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class StubFetcher:
    """`JsonFetcher` returning a canned payload and recording each call."""

    def __init__(self, payload: dict[str, Any] | None = None, error: Exception | None = None) -> None:
        self.payload = payload or {}
        self.error = error
        self.calls: list[tuple[str, dict[str, Any] | None]] = []

    async def get_json(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        self.calls.append((path, dict(params) if params is not None else None))
        if self.error is not None:
            raise self.error
        return self.payload
