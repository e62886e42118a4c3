"""Translate TMDB payloads into canonical movie records."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cinemap.domain.model import CanonicalRecord, Provenance

if TYPE_CHECKING:
    from datetime import datetime

    from cinemap.domain.model import CandidateRecord

    from .schema import MovieCredits, MovieDetails


def production_countries(details: MovieDetails) -> tuple[list[str], dict[str, str]]:
    """Return the ordered country codes and their names, dropping duplicates."""

    codes: list[str] = []
    names: dict[str, str] = {}
    for country in details.production_countries:
        code = country.iso_3166_1.strip().upper()
        if not code or code in names:
            continue
        codes.append(code)
        names[code] = (country.name or "").strip() or code
    return codes, names


def translate_movie(
    candidate: CandidateRecord,
    details: MovieDetails,
    credits_: MovieCredits,
    *,
    fetched_at: datetime,
) -> CanonicalRecord:
    """Merge source fields with TMDB details; source values win where present.

    Raises ``ValueError`` when the details carry no production countries.
    """

    countries, country_names = production_countries(details)
    if not countries:
        raise ValueError(f"TMDB movie {details.id} has no production countries")

    return CanonicalRecord(
        imdb_id=candidate.imdb_id,
        title=details.title or candidate.title,
        year=candidate.year if candidate.year is not None else details.release_year,
        poster=details.poster_path,
        rating=candidate.rating if candidate.rating is not None else details.vote_average,
        user_rating=candidate.user_rating,
        director=credits_.first_director() or candidate.first_director,
        genres=list(candidate.genres) or [genre.name for genre in details.genres],
        countries=countries,
        country_names=country_names,
        tmdb_id=details.id,
        provenance=Provenance.AUTOMATIC,
        fetched_at=fetched_at,
    )
