"""TMDB enrichment entry points."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

import httpx

from cinemap.adapters.http_resilience import ResilientClient
from cinemap.domain.clock import utcnow
from cinemap.domain.ports import Enriched, EnrichmentFailure, NotFound

from .client import TmdbAPIError, TmdbClient
from .translator import production_countries, translate_movie

if TYPE_CHECKING:
    from types import TracebackType

    from cinemap.adapters.http_resilience import Sleep
    from cinemap.config.tmdb import TmdbConfig
    from cinemap.domain.clock import Clock
    from cinemap.domain.model import CandidateRecord
    from cinemap.domain.ports import EnrichmentOutcome

log = getLogger(__name__)

NOT_FOUND_REASON = "not found in TMDB"
NO_REGIONS_REASON = "no production regions"


class TmdbEnricher:
    """Resolve candidates against TMDB, one at a time.

    A single event loop, HTTP client and rate limiter are kept for the lifetime
    of the enricher so that the politeness throttle holds across candidates.
    Use it as a context manager or call ``close`` when done.
    """

    def __init__(
        self,
        config: TmdbConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Sleep = asyncio.sleep,
        clock: Clock = utcnow,
    ) -> None:
        self._clock = clock
        self._runner = asyncio.Runner()
        self._http = ResilientClient(config.resilience, transport=transport, sleep=sleep)
        self._client = TmdbClient(self._http)
        self._closed = False

    def __enter__(self) -> TmdbEnricher:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._runner.run(self._http.aclose())
        finally:
            self._runner.close()

    def resolve(self, candidate: CandidateRecord) -> EnrichmentOutcome:
        if self._closed:
            raise RuntimeError("TmdbEnricher is closed")
        return self._runner.run(self._resolve_async(candidate))

    async def _resolve_async(self, candidate: CandidateRecord) -> EnrichmentOutcome:
        try:
            found = await self._client.find_by_imdb_id(candidate.imdb_id)
            if not found.movie_results:
                return NotFound(NOT_FOUND_REASON)
            tmdb_id = found.movie_results[0].id

            details = await self._client.movie_details(tmdb_id)
            credits_ = await self._client.movie_credits(tmdb_id)
        except (httpx.HTTPError, TmdbAPIError) as exc:
            log.debug("TMDB lookup failed for %s", candidate.imdb_id, exc_info=True)
            return EnrichmentFailure(f"fetch failed: {_describe(exc)}")

        countries, _ = production_countries(details)
        if not countries:
            return NotFound(NO_REGIONS_REASON)
        record = translate_movie(candidate, details, credits_, fetched_at=self._clock())
        return Enriched(record)


def _describe(exc: Exception) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}"
    return str(exc) or type(exc).__name__
