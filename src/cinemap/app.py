"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import nullcontext
from logging import getLogger
from typing import TYPE_CHECKING

from cinemap.adapters.filestore import (
    FileCatalogueUnitOfWork,
    read_region_view,
    write_region_view,
)
from cinemap.adapters.imdb_csv import discover_source_lists
from cinemap.adapters.tmdb import TmdbEnricher
from cinemap.config import ConfigurationError, MissingConfigurationError, get_storage_config
from cinemap.config.tmdb import get_tmdb_config
from cinemap.domain.bootstrap import bootstrap_database
from cinemap.domain.clock import utcnow
from cinemap.domain.model import ListReference, list_display_name
from cinemap.domain.ports import CatalogueUnitOfWork
from cinemap.domain.reconciliation import SyncResult, sync_catalogue
from cinemap.domain.regions import RegionLookup, observed_region_names
from cinemap.domain.views import build_region_view

if TYPE_CHECKING:
    from pathlib import Path

    from cinemap.adapters.imdb_csv import CsvSourceList
    from cinemap.config import StorageConfig
    from cinemap.domain.clock import Clock
    from cinemap.domain.model import CentralDatabase, ListName
    from cinemap.domain.ports import Enricher

UnitOfWorkFactory = Callable[[], CatalogueUnitOfWork]

log = getLogger(__name__)

VIEW_FILENAMES: dict[str, str] = {
    "watchlist": "movies-by-country.json",
    "festival": "festival-movies-by-country.json",
}


def view_filename(list_name: ListName) -> str:
    return VIEW_FILENAMES.get(list_name, f"{list_name}-movies-by-country.json")


def _source_lists(storage: StorageConfig) -> list[CsvSourceList]:
    input_dir = storage.input_dir
    if not input_dir.is_dir():
        raise ConfigurationError(f"Input directory not found: {input_dir}")
    sources = discover_source_lists(input_dir)
    if not sources:
        raise ConfigurationError(f"No CSV files found in {input_dir}")
    return sources


def _default_unit_of_work(storage: StorageConfig) -> UnitOfWorkFactory:
    return lambda: FileCatalogueUnitOfWork(storage)


def _build_tmdb_enricher(*, offline: bool, clock: Clock) -> TmdbEnricher | None:
    if offline:
        log.warning("Offline run: new movies go straight to the manual queue")
        return None
    try:
        config = get_tmdb_config()
    except MissingConfigurationError:
        log.warning("TMDB_API_KEY not set; new movies go to the manual queue")
        return None
    return TmdbEnricher(config, clock=clock)


def sync_movie_lists(
    *,
    storage: StorageConfig | None = None,
    enricher: Enricher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    offline: bool = False,
    build_views: bool = False,
    clock: Clock = utcnow,
) -> SyncResult:
    """Synchronise the CSV lists in the input directory into the central database."""

    effective_storage = storage or get_storage_config()
    sources = _source_lists(effective_storage)
    effective_uow = unit_of_work_factory or _default_unit_of_work(effective_storage)
    log.info(
        "Starting sync: data_dir=%s, lists=%s, offline=%s",
        effective_storage.data_dir,
        ", ".join(source.source for source in sources),
        offline,
    )

    owned = None if enricher is not None else _build_tmdb_enricher(offline=offline, clock=clock)
    with owned if owned is not None else nullcontext():
        result = sync_catalogue(
            sources=sources,
            unit_of_work_factory=effective_uow,
            enricher=enricher or owned,
            clock=clock,
        )

    _log_summary(result)
    if build_views:
        publish_views(storage=effective_storage, unit_of_work_factory=effective_uow)
    return result


def _log_summary(result: SyncResult) -> None:
    log.info(
        "Finished sync: candidates=%d, existing=%d, fetched=%d, manual=%d, "
        "ratings_updated=%d, failed=%d, queued=%d, database=%d",
        result.candidates,
        result.existing,
        result.added,
        result.manual_resolved,
        result.ratings_updated,
        len(result.failures),
        result.queued,
        result.database_size,
    )
    if not result.failures:
        return
    log.warning("%d movies could not be resolved:", len(result.failures))
    for failure in result.failures:
        log.warning("  %s - %s: %s", failure.imdb_id, failure.title, failure.reason)
    log.info("Add region data for them in the manual overrides file and run sync again")


def publish_views(
    *,
    storage: StorageConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> dict[ListName, Path]:
    """Write one by-region view per stored list; returns the written paths."""

    effective_storage = storage or get_storage_config()
    if not effective_storage.database_path.exists():
        raise ConfigurationError(
            f"Database not found: {effective_storage.database_path}. Run sync first."
        )
    effective_uow = unit_of_work_factory or _default_unit_of_work(effective_storage)
    with effective_uow() as uow:
        database = uow.repositories.database.load()
        references = uow.repositories.lists.load_all()
    if not references:
        raise ConfigurationError(f"No list files found in {effective_storage.lists_dir}")

    written: dict[ListName, Path] = {}
    views_dir = effective_storage.views_path
    for list_name, reference in references.items():
        view = build_region_view(database, reference.movie_ids)
        path = views_dir / view_filename(list_name)
        write_region_view(path, view)
        written[list_name] = path
        log.info(
            "%s: %d movies across %d regions -> %s",
            reference.name,
            database.count_present(reference.movie_ids),
            len(view),
            path,
        )
    return written


def bootstrap_catalogue(
    from_view: Path,
    *,
    storage: StorageConfig | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    force: bool = False,
    clock: Clock = utcnow,
) -> CentralDatabase:
    """Seed the central database from a published by-region view."""

    effective_storage = storage or get_storage_config()
    if effective_storage.database_path.exists() and not force:
        raise ConfigurationError(
            f"Database already exists at {effective_storage.database_path}; "
            "pass force to overwrite it"
        )
    if not from_view.is_file():
        raise ConfigurationError(f"View file not found: {from_view}")

    now = clock()
    database = bootstrap_database(read_region_view(from_view), now=now)
    sources = discover_source_lists(effective_storage.input_dir)
    effective_uow = unit_of_work_factory or _default_unit_of_work(effective_storage)
    with effective_uow() as uow:
        repositories = uow.repositories
        repositories.database.save(database)
        regions = RegionLookup.from_mapping(repositories.regions.load())
        repositories.regions.save(regions.merge(observed_region_names(database)).names)
        for source in sources:
            movie_ids = [candidate.imdb_id for candidate in source]
            repositories.lists.save(
                source.name,
                ListReference(
                    name=list_display_name(source.name),
                    source=source.source,
                    last_synced=now,
                    movie_ids=movie_ids,
                ),
            )
            log.info(
                "List %s: %d movies (%d in database)",
                source.name,
                len(movie_ids),
                database.count_present(movie_ids),
            )
        uow.commit()

    log.info("Bootstrapped database with %d movies", len(database))
    return database
