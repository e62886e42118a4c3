"""TMDB enrichment adapter."""

from __future__ import annotations

from .client import TmdbAPIError, TmdbClient
from .enricher import NO_REGIONS_REASON, NOT_FOUND_REASON, TmdbEnricher
from .schema import FindResponse, MovieCredits, MovieDetails
from .translator import translate_movie

__all__ = [
    "NOT_FOUND_REASON",
    "NO_REGIONS_REASON",
    "FindResponse",
    "MovieCredits",
    "MovieDetails",
    "TmdbAPIError",
    "TmdbClient",
    "TmdbEnricher",
    "translate_movie",
]
