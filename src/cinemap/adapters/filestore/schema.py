"""Pydantic models describing the JSON documents kept on disk."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003

from pydantic import BaseModel, ConfigDict, Field, RootModel
from pydantic.alias_generators import to_camel

from cinemap.domain.model import DATABASE_VERSION, Provenance


class DocumentModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class MovieDocument(DocumentModel):
    imdb_id: str
    title: str
    year: int | None = None
    poster: str | None = None
    rating: float | None = None
    user_rating: int | None = None
    director: str | None = None
    genres: list[str] = Field(default_factory=list[str])
    countries: list[str] = Field(default_factory=list[str])
    country_names: dict[str, str] = Field(default_factory=dict[str, str])
    tmdb_id: int | None = None
    provenance: Provenance = Provenance.AUTOMATIC
    fetched_at: datetime | None = None


class DatabaseDocument(DocumentModel):
    version: int = DATABASE_VERSION
    last_updated: datetime | None = None
    movies: dict[str, MovieDocument] = Field(default_factory=dict[str, MovieDocument])


class ListDocument(DocumentModel):
    name: str
    source: str
    last_synced: datetime | None = None
    movie_ids: list[str] = Field(default_factory=list[str])


class MissingEntryDocument(DocumentModel):
    imdb_id: str | None = None
    title: str = ""
    original_title: str | None = None
    year: int | None = None
    rating: float | None = None
    user_rating: int | None = None
    genres: list[str] = Field(default_factory=list[str])
    directors: str = ""
    reason: str = ""
    countries: list[str] = Field(default_factory=list[str])
    country_names: dict[str, str] = Field(default_factory=dict[str, str])
    director: str | None = None
    poster: str | None = None
    created_at: datetime | None = None


class OverridesDocument(RootModel[dict[str, MissingEntryDocument]]):
    root: dict[str, MissingEntryDocument] = Field(default_factory=dict[str, MissingEntryDocument])


class ViewMovieDocument(DocumentModel):
    imdb_id: str
    title: str
    year: int | None = None
    poster: str | None = None
    rating: float | None = None
    user_rating: int | None = None
    director: str | None = None
    genres: list[str] = Field(default_factory=list[str])
    is_co_production: bool = False
    all_countries: list[str] = Field(default_factory=list[str])


class ViewEntryDocument(DocumentModel):
    name: str
    count: int = 0
    movies: list[ViewMovieDocument] = Field(default_factory=list[ViewMovieDocument])


class RegionViewDocument(RootModel[dict[str, ViewEntryDocument]]):
    root: dict[str, ViewEntryDocument] = Field(default_factory=dict[str, ViewEntryDocument])
