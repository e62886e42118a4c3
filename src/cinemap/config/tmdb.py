"""TMDB configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import require_env_var
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

TMDB_BASE_URL = "https://api.themoviedb.org/3/"
TMDB_TIMEOUT_SECONDS = 15.0
TMDB_REQUEST_DELAY_SECONDS = 0.25


@dataclass(frozen=True, slots=True)
class TmdbConfig:
    """Holds TMDB API configuration values."""

    api_key: str
    resilience: ResilienceConfig


def default_tmdb_resilience(api_key: str) -> ResilienceConfig:
    return ResilienceConfig(
        name="tmdb",
        base_url=TMDB_BASE_URL,
        timeout_seconds=TMDB_TIMEOUT_SECONDS,
        retry=RetryPolicy(total=3, backoff_seconds=1.0, throttle_wait_seconds=10.0),
        ratelimit=RateLimit(max_calls=1, per_seconds=TMDB_REQUEST_DELAY_SECONDS),
        default_params={"api_key": api_key},
    )


def get_tmdb_config(*, resilience: ResilienceConfig | None = None) -> TmdbConfig:
    api_key = require_env_var("TMDB_API_KEY")
    return TmdbConfig(
        api_key=api_key,
        resilience=resilience or default_tmdb_resilience(api_key),
    )
