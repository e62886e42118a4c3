from __future__ import annotations

from cinemap.adapters.tmdb import MovieCredits, MovieDetails
from cinemap.adapters.tmdb.translator import production_countries
from tests.helpers.tmdb import credits_payload, details_payload


def test_release_year_handles_blank_and_partial_dates() -> None:
    def year(release_date: str) -> int | None:
        return MovieDetails.model_validate(details_payload(1, release_date=release_date)).release_year

    assert year("1994-09-10") == 1994
    assert year("") is None
    assert year("19") is None


def test_first_director_skips_other_jobs() -> None:
    credits_ = MovieCredits.model_validate(credits_payload(1, "First", "Second"))

    assert credits_.first_director() == "First"
    assert MovieCredits.model_validate(credits_payload(1)).first_director() is None


def test_production_countries_drop_blank_and_duplicate_codes() -> None:
    details = MovieDetails.model_validate(
        details_payload(1, countries=(("fr", "France"), ("", "Nowhere"), ("FR", "Dup"), ("XK", "")))
    )

    codes, names = production_countries(details)

    assert codes == ["FR", "XK"]
    assert names == {"FR": "France", "XK": "XK"}
