from __future__ import annotations

from datetime import datetime  # noqa: TC003

import pytest

from cinemap.domain.model import MissingEntry, Provenance
from cinemap.domain.overrides import ManualOverrideStore, is_complete
from cinemap.domain.regions import RegionLookup
from tests.helpers.catalogue import make_candidate


def _entry(**overrides: object) -> MissingEntry:
    values: dict[str, object] = {
        "imdb_id": "tt002",
        "title": "Obscure",
        "year": 1988,
        "rating": 6.1,
        "user_rating": 7,
        "genres": ["Drama"],
        "directors": "Old Director",
        "reason": "no production regions",
    }
    values.update(overrides)
    return MissingEntry(**values)  # type: ignore[arg-type]


def test_is_complete_requires_a_non_blank_country() -> None:
    assert not is_complete(_entry())
    assert not is_complete(_entry(countries=["  "]))
    assert is_complete(_entry(countries=["GB"]))


def test_record_failure_inserts_only_once(fixed_now: datetime) -> None:
    store = ManualOverrideStore()
    candidate = make_candidate("tt002", "Obscure", genres=("Drama",), directors="A, B")

    assert store.record_failure(candidate, "not found in TMDB", now=fixed_now)
    assert not store.record_failure(candidate, "fetch failed: HTTP 500", now=fixed_now)

    entry = store.entries.get("tt002")
    assert entry is not None
    assert entry.reason == "not found in TMDB"
    assert entry.genres == ["Drama"]
    assert entry.directors == "A, B"
    assert entry.countries == []
    assert entry.created_at == fixed_now


def test_complete_entry_ignores_partial_entries() -> None:
    store = ManualOverrideStore.load({"tt002": _entry()})

    assert store.complete_entry("tt002") is None
    assert store.complete_entry("tt999") is None


def test_consume_builds_manual_record(fixed_now: datetime) -> None:
    entry = _entry(
        countries=["gb", "GB", " fr "],
        country_names={"GB": "United Kingdom"},
        director="Operator Pick",
        poster="/manual.jpg",
    )
    store = ManualOverrideStore.load({"tt002": entry})
    lookup = RegionLookup.from_mapping({"FR": "France"})
    candidate = make_candidate("tt002", "Obscure", rating=6.5, user_rating=9, genres=())

    record = store.consume(entry, candidate, lookup, now=fixed_now)

    assert record.countries == ["GB", "FR"]
    assert record.country_names == {"GB": "United Kingdom", "FR": "France"}
    assert record.provenance is Provenance.MANUAL
    assert record.tmdb_id is None
    assert record.rating == 6.5
    assert record.user_rating == 9
    assert record.genres == ["Drama"]
    assert record.director == "Operator Pick"
    assert record.poster == "/manual.jpg"
    assert record.fetched_at == fixed_now
    assert "tt002" not in store


def test_consume_falls_back_to_code_and_snapshot(fixed_now: datetime) -> None:
    entry = _entry(countries=["ZZ"])
    store = ManualOverrideStore.load({"tt002": entry})

    record = store.consume(entry, None, RegionLookup(), now=fixed_now)

    assert record.country_names == {"ZZ": "ZZ"}
    assert record.director == "Old Director"
    assert record.user_rating == 7


def test_consume_rejects_incomplete_entry(fixed_now: datetime) -> None:
    entry = _entry()
    store = ManualOverrideStore.load({"tt002": entry})

    with pytest.raises(ValueError, match="no countries"):
        store.consume(entry, None, RegionLookup(), now=fixed_now)
