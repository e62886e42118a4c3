"""Rebuild a central database from a previously published by-region view."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from cinemap.domain.model import CanonicalRecord, CentralDatabase, Provenance

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from cinemap.domain.model import CountryCode
    from cinemap.domain.views import RegionView

log = getLogger(__name__)


def bootstrap_database(view: RegionView, *, now: datetime) -> CentralDatabase:
    """Deduplicate the movies of ``view`` into canonical records.

    The first projection seen for an id wins. Country names come from the
    region entries of the view; regions the view never lists keep their code.
    """

    region_names: Mapping[CountryCode, str] = {code: entry.name for code, entry in view.items()}
    database = CentralDatabase(last_updated=now)
    skipped = 0

    for entry in view.values():
        for movie in entry.movies:
            if movie.imdb_id in database:
                continue
            countries = list(movie.all_countries)
            if not countries:
                skipped += 1
                continue
            database.add(
                CanonicalRecord(
                    imdb_id=movie.imdb_id,
                    title=movie.title,
                    year=movie.year,
                    poster=movie.poster,
                    rating=movie.rating,
                    user_rating=movie.user_rating,
                    director=movie.director,
                    genres=list(movie.genres),
                    countries=countries,
                    country_names={code: region_names.get(code) or code for code in countries},
                    provenance=Provenance.AUTOMATIC,
                    fetched_at=now,
                )
            )

    if skipped:
        log.warning("Skipped %d movies without production countries", skipped)
    log.info("Bootstrapped %d unique movies from %d regions", len(database), len(view))
    return database
