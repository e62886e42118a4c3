"""Pydantic models describing the TMDB v3 payloads used for enrichment."""

from __future__ import annotations

from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

CountryCode: TypeAlias = str  # ISO 3166-1 alpha-2


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class TmdbBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class FindMovieResult(TmdbBaseModel):
    id: int
    title: str | None = None
    release_date: str | None = None

    _normalize_release_date = field_validator("release_date", mode="before")(_blank_to_none)


class FindResponse(TmdbBaseModel):
    movie_results: list[FindMovieResult] = Field(default_factory=list[FindMovieResult])


class ProductionCountry(TmdbBaseModel):
    iso_3166_1: CountryCode
    name: str | None = None


class Genre(TmdbBaseModel):
    id: int
    name: str


class MovieDetails(TmdbBaseModel):
    id: int
    title: str | None = None
    original_title: str | None = None
    release_date: str | None = None
    poster_path: str | None = None
    vote_average: float | None = None
    genres: list[Genre] = Field(default_factory=list[Genre])
    production_countries: list[ProductionCountry] = Field(
        default_factory=list[ProductionCountry]
    )

    _normalize_release_date = field_validator("release_date", mode="before")(_blank_to_none)
    _normalize_poster = field_validator("poster_path", mode="before")(_blank_to_none)

    @property
    def release_year(self) -> int | None:
        if self.release_date is None or len(self.release_date) < 4:
            return None
        try:
            return int(self.release_date[:4])
        except ValueError:
            return None


class CrewMember(TmdbBaseModel):
    id: int | None = None
    name: str
    job: str | None = None
    department: str | None = None


class CastMember(TmdbBaseModel):
    id: int | None = None
    name: str
    character: str | None = None


class MovieCredits(TmdbBaseModel):
    id: int | None = None
    cast: list[CastMember] = Field(default_factory=list[CastMember])
    crew: list[CrewMember] = Field(default_factory=list[CrewMember])

    def first_director(self) -> str | None:
        for member in self.crew:
            if member.job == "Director":
                return member.name
        return None
