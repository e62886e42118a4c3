from __future__ import annotations

from datetime import datetime  # noqa: TC003

from cinemap.domain.bootstrap import bootstrap_database
from cinemap.domain.model import CentralDatabase, Provenance
from cinemap.domain.views import MovieProjection, ViewEntry, build_region_view
from tests.helpers.catalogue import make_record


def test_bootstrap_deduplicates_co_productions(fixed_now: datetime) -> None:
    source = CentralDatabase()
    source.add(make_record("tt001", ("FR", "DE"), user_rating=8))
    source.add(make_record("tt002", ("DE",)))
    view = build_region_view(source, ["tt001", "tt002"])

    database = bootstrap_database(view, now=fixed_now)

    assert list(database.movies) == ["tt001", "tt002"]
    record = database.movies["tt001"]
    assert record.countries == ["FR", "DE"]
    assert record.country_names == {"FR": "France", "DE": "Germany"}
    assert record.user_rating == 8
    assert record.provenance is Provenance.AUTOMATIC
    assert database.last_updated == fixed_now


def test_bootstrap_uses_code_for_unlisted_regions(fixed_now: datetime) -> None:
    movie = MovieProjection(
        imdb_id="tt003",
        title="Elsewhere",
        year=None,
        poster=None,
        rating=None,
        user_rating=None,
        director=None,
        genres=(),
        is_co_production=True,
        all_countries=("FR", "XK"),
    )
    view = {"FR": ViewEntry(name="France", count=1, movies=[movie])}

    database = bootstrap_database(view, now=fixed_now)

    assert database.movies["tt003"].country_names == {"FR": "France", "XK": "XK"}


def test_bootstrap_skips_movies_without_countries(fixed_now: datetime) -> None:
    movie = MovieProjection(
        imdb_id="tt004",
        title="Nowhere",
        year=None,
        poster=None,
        rating=None,
        user_rating=None,
        director=None,
        genres=(),
        is_co_production=False,
        all_countries=(),
    )
    view = {"FR": ViewEntry(name="France", count=1, movies=[movie])}

    assert len(bootstrap_database(view, now=fixed_now)) == 0
