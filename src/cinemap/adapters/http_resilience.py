from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from logging import getLogger
from typing import TYPE_CHECKING, TypedDict, Unpack

import httpx
from aiolimiter import AsyncLimiter

from cinemap.config.http_resilience import RateLimit, ResilienceConfig, RetryPolicy

if TYPE_CHECKING:
    from types import TracebackType

    from httpx._client import UseClientDefault
    from httpx._types import (
        HeaderTypes,
        QueryParamTypes,
        RequestExtensions,
        TimeoutTypes,
        URLTypes,
    )

log = getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]

__all__ = [
    "RateLimit",
    "ResilienceConfig",
    "ResilientClient",
    "RetryPolicy",
    "Sleep",
]


class RequestOptions(TypedDict, total=False):
    params: QueryParamTypes | None
    headers: HeaderTypes | None
    follow_redirects: bool | UseClientDefault
    timeout: TimeoutTypes | UseClientDefault
    extensions: RequestExtensions | None


class AsyncClientOptions(TypedDict, total=False):
    base_url: str
    timeout: TimeoutTypes
    headers: HeaderTypes
    params: QueryParamTypes
    transport: httpx.AsyncBaseTransport


class ResilientClient:
    """Async HTTP client with a politeness rate limit and bounded retries.

    Throttled responses are retried after a fixed wait without consuming the
    retry budget. Any other HTTP or transport error is retried up to
    ``RetryPolicy.total`` attempts with a linearly growing delay, after which
    the last error is raised.
    """

    def __init__(
        self,
        config: ResilienceConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self.config = config
        self._sleep = sleep
        self._limiter: AsyncLimiter | None = (
            AsyncLimiter(config.ratelimit.max_calls, config.ratelimit.per_seconds)
            if config.ratelimit
            else None
        )

        client_kwargs: AsyncClientOptions = {"timeout": config.timeout_seconds}
        if config.base_url is not None:
            client_kwargs["base_url"] = config.base_url
        if config.default_headers:
            client_kwargs["headers"] = dict(config.default_headers)
        if config.default_params:
            client_kwargs["params"] = dict(config.default_params)
        if transport is not None:
            client_kwargs["transport"] = transport

        self._client = httpx.AsyncClient(**client_kwargs)

    async def __aenter__(self) -> ResilientClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def request(
        self,
        method: str,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        async def do_request() -> httpx.Response:
            return await self._client.request(method, url, **kwargs)

        return await self._with_retries(do_request, url=url)

    async def get(
        self,
        url: URLTypes,
        **kwargs: Unpack[RequestOptions],
    ) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def _with_retries(
        self,
        func: Callable[[], Awaitable[httpx.Response]],
        *,
        url: URLTypes,
    ) -> httpx.Response:
        policy = self.config.retry
        failures = 0
        while True:
            try:
                response = await self._send(func)
                if response.status_code == policy.throttle_status:
                    log.warning(
                        "%s: rate limited on %s, waiting %.0fs",
                        self.config.name,
                        url,
                        policy.throttle_wait_seconds,
                    )
                    await self._sleep(policy.throttle_wait_seconds)
                    continue
                response.raise_for_status()
            except httpx.HTTPError as exc:
                failures += 1
                if failures >= policy.total:
                    raise
                delay = policy.backoff_seconds * failures
                log.debug(
                    "%s: attempt %d for %s failed (%s), retrying in %.1fs",
                    self.config.name,
                    failures,
                    url,
                    exc,
                    delay,
                )
                await self._sleep(delay)
            else:
                return response

    async def _send(self, func: Callable[[], Awaitable[httpx.Response]]) -> httpx.Response:
        if self._limiter is None:
            return await func()
        async with self._limiter:
            return await func()
