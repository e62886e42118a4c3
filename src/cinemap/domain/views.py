"""Build by-region views of a list for the presentation layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from collections.abc import Iterable

    from cinemap.domain.model import CanonicalRecord, CentralDatabase, CountryCode, ImdbId


@dataclass(slots=True, frozen=True)
class MovieProjection:
    """Denormalised movie as shown under each of its regions."""

    imdb_id: ImdbId
    title: str
    year: int | None
    poster: str | None
    rating: float | None
    user_rating: int | None
    director: str | None
    genres: tuple[str, ...]
    is_co_production: bool
    all_countries: tuple[CountryCode, ...]

    @classmethod
    def from_record(cls, record: CanonicalRecord) -> MovieProjection:
        return cls(
            imdb_id=record.imdb_id,
            title=record.title,
            year=record.year,
            poster=record.poster,
            rating=record.rating,
            user_rating=record.user_rating,
            director=record.director,
            genres=tuple(record.genres),
            is_co_production=record.is_co_production,
            all_countries=tuple(record.countries),
        )


@dataclass(slots=True)
class ViewEntry:
    name: str
    count: int = 0
    movies: list[MovieProjection] = field(default_factory=list[MovieProjection])

    def append(self, movie: MovieProjection) -> None:
        self.movies.append(movie)
        self.count += 1


RegionView: TypeAlias = "dict[CountryCode, ViewEntry]"


def build_region_view(database: CentralDatabase, movie_ids: Iterable[ImdbId]) -> RegionView:
    """Group the listed movies by production country.

    Ids missing from the database are skipped. A co-production appears under
    every one of its countries. Ids are taken as given, duplicates included.
    """

    view: RegionView = {}
    for imdb_id in movie_ids:
        record = database.get(imdb_id)
        if record is None or not record.countries:
            continue
        projection = MovieProjection.from_record(record)
        for code in record.countries:
            entry = view.get(code)
            if entry is None:
                entry = view[code] = ViewEntry(name=record.country_name(code))
            entry.append(projection)
    return view
