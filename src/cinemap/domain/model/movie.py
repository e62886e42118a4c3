"""Movie records: parsed source rows and their canonical, enriched form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cinemap.domain.model.enums import Provenance

if TYPE_CHECKING:
    from datetime import datetime

    from cinemap.domain.model.primitives import CountryCode, ImdbId, TmdbId


@dataclass(slots=True, frozen=True)
class CandidateRecord:
    """One accepted row of a source export, not yet enriched."""

    imdb_id: ImdbId
    title: str
    original_title: str | None = None
    year: int | None = None
    rating: float | None = None
    user_rating: int | None = None
    genres: tuple[str, ...] = ()
    directors: str = ""

    @property
    def first_director(self) -> str | None:
        """First name of the free-text directors field, if any."""

        for name in self.directors.split(","):
            stripped = name.strip()
            if stripped:
                return stripped
        return None


@dataclass(slots=True, kw_only=True)
class CanonicalRecord:
    """The single authoritative representation of a movie in the catalogue.

    ``countries`` is never empty and ``country_names`` covers every code in it.
    After creation only ``user_rating`` is expected to change.
    """

    imdb_id: ImdbId
    title: str
    year: int | None = None
    poster: str | None = None
    rating: float | None = None
    user_rating: int | None = None
    director: str | None = None
    genres: list[str] = field(default_factory=list[str])
    countries: list[CountryCode]
    country_names: dict[CountryCode, str]
    tmdb_id: TmdbId | None = None
    provenance: Provenance = Provenance.AUTOMATIC
    fetched_at: datetime | None = None

    def __post_init__(self) -> None:
        if not self.countries:
            raise ValueError(f"Movie {self.imdb_id} has no production countries")
        for code in self.countries:
            self.country_names.setdefault(code, code)

    @property
    def is_co_production(self) -> bool:
        return len(self.countries) > 1

    def country_name(self, code: CountryCode) -> str:
        return self.country_names.get(code) or code
