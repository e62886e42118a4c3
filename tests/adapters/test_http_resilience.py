from __future__ import annotations

import asyncio
import time

import httpx
import pytest

from cinemap.adapters.http_resilience import (
    RateLimit,
    ResilienceConfig,
    ResilientClient,
    RetryPolicy,
)
from tests.helpers.tmdb import RecordingSleep


def _config(**overrides: object) -> ResilienceConfig:
    values: dict[str, object] = {"name": "test", "base_url": "https://example.test/"}
    values.update(overrides)
    return ResilienceConfig(**values)  # type: ignore[arg-type]


def _get(client: ResilientClient, url: str = "thing") -> httpx.Response:
    async def run() -> httpx.Response:
        async with client:
            return await client.get(url)

    return asyncio.run(run())


def test_throttled_responses_do_not_consume_attempts() -> None:
    statuses = iter([429, 429, 429, 429, 200])
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(next(statuses), json={"ok": True})

    sleep = RecordingSleep()
    client = ResilientClient(_config(), transport=httpx.MockTransport(handler), sleep=sleep)

    response = _get(client)

    assert response.status_code == 200
    assert len(calls) == 5
    assert sleep.delays == [10.0, 10.0, 10.0, 10.0]


def test_server_errors_back_off_linearly_then_raise() -> None:
    calls: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(500)

    sleep = RecordingSleep()
    client = ResilientClient(_config(), transport=httpx.MockTransport(handler), sleep=sleep)

    with pytest.raises(httpx.HTTPStatusError):
        _get(client)

    assert len(calls) == 3
    assert sleep.delays == [1.0, 2.0]


def test_transport_errors_are_retried() -> None:
    attempts = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        attempts["count"] += 1
        if attempts["count"] == 1:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json={"ok": True})

    sleep = RecordingSleep()
    client = ResilientClient(_config(), transport=httpx.MockTransport(handler), sleep=sleep)

    response = _get(client)

    assert response.json() == {"ok": True}
    assert attempts["count"] == 2
    assert sleep.delays == [1.0]


def test_throttling_between_failures_keeps_failure_count() -> None:
    statuses = iter([500, 429, 500, 429, 500])

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(next(statuses))

    sleep = RecordingSleep()
    client = ResilientClient(_config(), transport=httpx.MockTransport(handler), sleep=sleep)

    with pytest.raises(httpx.HTTPStatusError):
        _get(client)

    assert sleep.delays == [1.0, 10.0, 2.0, 10.0]


def test_default_params_and_headers_are_sent() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={})

    config = _config(
        default_params={"api_key": "abc"},
        default_headers={"Accept": "application/json"},
        retry=RetryPolicy(total=1),
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
    )
    client = ResilientClient(config, transport=httpx.MockTransport(handler))

    _get(client, "movie/1")

    request = seen[0]
    assert request.url.path == "/movie/1"
    assert request.url.params["api_key"] == "abc"
    assert request.headers["Accept"] == "application/json"


def test_rate_limit_spaces_consecutive_requests() -> None:
    sent_at: list[float] = []

    def handler(_: httpx.Request) -> httpx.Response:
        sent_at.append(time.monotonic())
        return httpx.Response(200, json={})

    sleep = RecordingSleep()
    config = _config(ratelimit=RateLimit(max_calls=1, per_seconds=0.25))
    client = ResilientClient(config, transport=httpx.MockTransport(handler), sleep=sleep)

    async def run() -> None:
        async with client:
            await client.get("first")
            await client.get("second")

    asyncio.run(run())

    assert len(sent_at) == 2
    assert sent_at[1] - sent_at[0] >= 0.2
    assert sleep.delays == []


def test_retry_waits_bypass_the_rate_limiter() -> None:
    statuses = iter([429, 500, 200])

    def handler(_: httpx.Request) -> httpx.Response:
        return httpx.Response(next(statuses), json={"ok": True})

    sleep = RecordingSleep()
    config = _config(ratelimit=RateLimit(max_calls=1, per_seconds=0.25))
    client = ResilientClient(config, transport=httpx.MockTransport(handler), sleep=sleep)

    response = _get(client)

    assert response.status_code == 200
    assert sleep.delays == [10.0, 1.0]
