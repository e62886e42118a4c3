"""Translate between on-disk documents and domain objects."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cinemap.domain.errors import CatalogueFormatError
from cinemap.domain.model import CanonicalRecord, CentralDatabase, ListReference, MissingEntry
from cinemap.domain.views import MovieProjection, ViewEntry

from .schema import (
    DatabaseDocument,
    ListDocument,
    MissingEntryDocument,
    MovieDocument,
    OverridesDocument,
    RegionViewDocument,
    ViewEntryDocument,
    ViewMovieDocument,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cinemap.domain.model import ImdbId
    from cinemap.domain.views import RegionView


def record_from_document(document: MovieDocument) -> CanonicalRecord:
    try:
        return CanonicalRecord(
            imdb_id=document.imdb_id,
            title=document.title,
            year=document.year,
            poster=document.poster,
            rating=document.rating,
            user_rating=document.user_rating,
            director=document.director,
            genres=list(document.genres),
            countries=list(document.countries),
            country_names=dict(document.country_names),
            tmdb_id=document.tmdb_id,
            provenance=document.provenance,
            fetched_at=document.fetched_at,
        )
    except ValueError as exc:
        raise CatalogueFormatError(str(exc)) from exc


def record_to_document(record: CanonicalRecord) -> MovieDocument:
    return MovieDocument(
        imdb_id=record.imdb_id,
        title=record.title,
        year=record.year,
        poster=record.poster,
        rating=record.rating,
        user_rating=record.user_rating,
        director=record.director,
        genres=list(record.genres),
        countries=list(record.countries),
        country_names={code: record.country_name(code) for code in record.countries},
        tmdb_id=record.tmdb_id,
        provenance=record.provenance,
        fetched_at=record.fetched_at,
    )


def database_from_document(document: DatabaseDocument) -> CentralDatabase:
    database = CentralDatabase(version=document.version, last_updated=document.last_updated)
    for imdb_id, movie in document.movies.items():
        if movie.imdb_id != imdb_id:
            raise CatalogueFormatError(f"Database key {imdb_id} holds movie {movie.imdb_id}")
        database.add(record_from_document(movie))
    return database


def database_to_document(database: CentralDatabase) -> DatabaseDocument:
    return DatabaseDocument(
        version=database.version,
        last_updated=database.last_updated,
        movies={imdb_id: record_to_document(record) for imdb_id, record in database.movies.items()},
    )


def list_from_document(document: ListDocument) -> ListReference:
    return ListReference(
        name=document.name,
        source=document.source,
        last_synced=document.last_synced,
        movie_ids=list(document.movie_ids),
    )


def list_to_document(reference: ListReference) -> ListDocument:
    return ListDocument(
        name=reference.name,
        source=reference.source,
        last_synced=reference.last_synced,
        movie_ids=list(reference.movie_ids),
    )


def entry_from_document(imdb_id: ImdbId, document: MissingEntryDocument) -> MissingEntry:
    return MissingEntry(
        imdb_id=imdb_id,
        title=document.title,
        original_title=document.original_title,
        year=document.year,
        rating=document.rating,
        user_rating=document.user_rating,
        genres=list(document.genres),
        directors=document.directors,
        reason=document.reason,
        countries=list(document.countries),
        country_names=dict(document.country_names),
        director=document.director,
        poster=document.poster,
        created_at=document.created_at,
    )


def entry_to_document(entry: MissingEntry) -> MissingEntryDocument:
    return MissingEntryDocument(
        imdb_id=entry.imdb_id,
        title=entry.title,
        original_title=entry.original_title,
        year=entry.year,
        rating=entry.rating,
        user_rating=entry.user_rating,
        genres=list(entry.genres),
        directors=entry.directors,
        reason=entry.reason,
        countries=list(entry.countries),
        country_names=dict(entry.country_names),
        director=entry.director,
        poster=entry.poster,
        created_at=entry.created_at,
    )


def overrides_from_document(document: OverridesDocument) -> dict[ImdbId, MissingEntry]:
    return {
        imdb_id: entry_from_document(imdb_id, entry) for imdb_id, entry in document.root.items()
    }


def overrides_to_document(entries: Mapping[ImdbId, MissingEntry]) -> OverridesDocument:
    return OverridesDocument(
        {imdb_id: entry_to_document(entry) for imdb_id, entry in entries.items()}
    )


def view_to_document(view: RegionView) -> RegionViewDocument:
    return RegionViewDocument(
        {
            code: ViewEntryDocument(
                name=entry.name,
                count=entry.count,
                movies=[_projection_to_document(movie) for movie in entry.movies],
            )
            for code, entry in view.items()
        }
    )


def view_from_document(document: RegionViewDocument) -> RegionView:
    view: RegionView = {}
    for code, entry in document.root.items():
        view[code] = ViewEntry(
            name=entry.name,
            count=entry.count,
            movies=[_projection_from_document(movie) for movie in entry.movies],
        )
    return view


def _projection_to_document(movie: MovieProjection) -> ViewMovieDocument:
    return ViewMovieDocument(
        imdb_id=movie.imdb_id,
        title=movie.title,
        year=movie.year,
        poster=movie.poster,
        rating=movie.rating,
        user_rating=movie.user_rating,
        director=movie.director,
        genres=list(movie.genres),
        is_co_production=movie.is_co_production,
        all_countries=list(movie.all_countries),
    )


def _projection_from_document(movie: ViewMovieDocument) -> MovieProjection:
    return MovieProjection(
        imdb_id=movie.imdb_id,
        title=movie.title,
        year=movie.year,
        poster=movie.poster,
        rating=movie.rating,
        user_rating=movie.user_rating,
        director=movie.director,
        genres=tuple(movie.genres),
        is_co_production=movie.is_co_production,
        all_countries=tuple(movie.all_countries),
    )
