"""Catalogue containers: the central database and per-list references."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import datetime

    from cinemap.domain.model.movie import CanonicalRecord
    from cinemap.domain.model.primitives import ImdbId, ListName

DATABASE_VERSION = 1


@dataclass(slots=True)
class CentralDatabase:
    """All canonical records keyed by IMDb id, in insertion order."""

    version: int = DATABASE_VERSION
    last_updated: datetime | None = None
    movies: dict[ImdbId, CanonicalRecord] = field(default_factory=dict["ImdbId", "CanonicalRecord"])

    def __contains__(self, imdb_id: object) -> bool:
        return imdb_id in self.movies

    def __len__(self) -> int:
        return len(self.movies)

    def get(self, imdb_id: ImdbId) -> CanonicalRecord | None:
        return self.movies.get(imdb_id)

    def add(self, record: CanonicalRecord) -> None:
        if not record.countries:
            raise ValueError(f"Refusing to store {record.imdb_id} without production countries")
        self.movies[record.imdb_id] = record

    def count_present(self, imdb_ids: Iterable[ImdbId]) -> int:
        return sum(1 for imdb_id in imdb_ids if imdb_id in self.movies)


def list_display_name(list_name: ListName) -> str:
    return list_name[:1].upper() + list_name[1:]


@dataclass(slots=True)
class ListReference:
    """Membership of one source list, in source order (duplicates kept)."""

    name: str
    source: str
    last_synced: datetime | None = None
    movie_ids: list[ImdbId] = field(default_factory=list["ImdbId"])
