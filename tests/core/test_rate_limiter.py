from __future__ import annotations

import asyncio

import pytest

from tmdb_mcp.core.rate_limiter import RateLimiter
from tests.helpers import FakeClock


@pytest.mark.asyncio
async def test_first_call_does_not_wait(fake_clock: FakeClock) -> None:
    limiter = RateLimiter(0.25, clock=fake_clock, sleep=fake_clock.sleep)

    stamp = await limiter.acquire()

    assert stamp == fake_clock.now
    assert fake_clock.sleeps == []
    assert limiter.last_call == stamp


@pytest.mark.asyncio
async def test_back_to_back_calls_are_spaced(fake_clock: FakeClock) -> None:
    limiter = RateLimiter(0.25, clock=fake_clock, sleep=fake_clock.sleep)

    first = await limiter.acquire()
    fake_clock.now += 0.1
    second = await limiter.acquire()

    assert second - first >= 0.25
    assert fake_clock.sleeps == [pytest.approx(0.15)]


@pytest.mark.asyncio
async def test_no_wait_once_interval_elapsed(fake_clock: FakeClock) -> None:
    limiter = RateLimiter(0.25, clock=fake_clock, sleep=fake_clock.sleep)

    await limiter.acquire()
    fake_clock.now += 1.0
    await limiter.acquire()

    assert fake_clock.sleeps == []


@pytest.mark.asyncio
async def test_concurrent_calls_are_serialized(fake_clock: FakeClock) -> None:
    limiter = RateLimiter(0.25, clock=fake_clock, sleep=fake_clock.sleep)

    stamps = await asyncio.gather(*(limiter.acquire() for _ in range(4)))

    ordered = sorted(stamps)
    gaps = [b - a for a, b in zip(ordered, ordered[1:])]
    assert all(gap >= 0.25 - 1e-9 for gap in gaps)


@pytest.mark.asyncio
async def test_timestamp_never_moves_backwards(fake_clock: FakeClock) -> None:
    limiter = RateLimiter(0.0, clock=fake_clock, sleep=fake_clock.sleep)

    first = await limiter.acquire()
    fake_clock.now -= 5.0
    second = await limiter.acquire()

    assert second >= first
    assert limiter.last_call == first


@pytest.mark.asyncio
async def test_real_clock_spacing() -> None:
    limiter = RateLimiter(0.05)

    first = await limiter.acquire()
    second = await limiter.acquire()

    # asyncio may wake a timer up to one clock tick early
    assert second - first >= 0.04


def test_negative_interval_rejected() -> None:
    with pytest.raises(ValueError):
        RateLimiter(-1)
