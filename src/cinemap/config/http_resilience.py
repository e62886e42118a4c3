"""Configuration types for resilient HTTP clients."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(slots=True, frozen=True)
class RetryPolicy:
    """Retry behaviour for a single request.

    ``total`` bounds the number of attempts for failures other than throttling;
    the n-th failure waits ``backoff_seconds * n`` before the next attempt.
    Throttled responses (``throttle_status``) wait ``throttle_wait_seconds`` and
    are retried without consuming an attempt.
    """

    total: int = 3
    backoff_seconds: float = 1.0
    throttle_wait_seconds: float = 10.0
    throttle_status: int = 429


@dataclass(slots=True, frozen=True)
class RateLimit:
    max_calls: int
    per_seconds: float


@dataclass(slots=True, frozen=True)
class ResilienceConfig:
    name: str
    base_url: str | None = None
    timeout_seconds: float = 30.0
    retry: RetryPolicy = field(default_factory=RetryPolicy)
    ratelimit: RateLimit | None = None
    default_headers: Mapping[str, str] | None = None
    default_params: Mapping[str, str] | None = None
