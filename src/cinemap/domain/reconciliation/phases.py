"""The ordered phases of a catalogue sync run."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, ClassVar

from cinemap.domain.model import FailureKind, ListReference, list_display_name
from cinemap.domain.ports import Enriched, EnrichmentFailure, NotFound
from cinemap.domain.regions import observed_region_names, record_region_names

from .context import RecordFailure, SyncPhase

if TYPE_CHECKING:
    from cinemap.domain.model import CandidateRecord

    from .context import SyncContext

log = getLogger(__name__)

NOT_CONFIGURED_REASON = "no API key configured"
PROGRESS_EVERY = 50


class ReadingPhase:
    """Read every source list; the first occurrence of an id wins."""

    name: ClassVar[str] = "reading"
    state: ClassVar[SyncPhase] = SyncPhase.READING

    def run(self, context: SyncContext) -> None:
        for source_list in context.sources:
            ids: list[str] = []
            for candidate in source_list:
                ids.append(candidate.imdb_id)
                context.candidates.setdefault(candidate.imdb_id, candidate)
            context.list_ids[source_list.name] = ids
            context.list_sources[source_list.name] = source_list.source
            log.info("Read %s: %d movies", source_list.source, len(ids))

        context.result.candidates = len(context.candidates)
        log.info("Total unique movies across all lists: %d", len(context.candidates))


class DiffingPhase:
    name: ClassVar[str] = "diffing"
    state: ClassVar[SyncPhase] = SyncPhase.DIFFING

    def run(self, context: SyncContext) -> None:
        stale: list[str] = []
        for imdb_id in context.candidates:
            if imdb_id in context.database:
                context.existing_ids.append(imdb_id)
                if imdb_id in context.overrides:
                    stale.append(imdb_id)
            else:
                context.new_ids.append(imdb_id)
        if stale:
            log.warning(
                "%d manual entries are already in the database and will not be used: %s",
                len(stale),
                ", ".join(stale),
            )
        context.result.existing = len(context.existing_ids)
        log.info(
            "Database has %d movies; %d listed movies already present, %d new",
            len(context.database),
            len(context.existing_ids),
            len(context.new_ids),
        )


class ResolvingPhase:
    """Resolve new ids one at a time: manual entries first, then the enricher."""

    name: ClassVar[str] = "resolving"
    state: ClassVar[SyncPhase] = SyncPhase.RESOLVING

    def run(self, context: SyncContext) -> None:
        if not context.new_ids:
            return
        if context.enricher is None:
            log.warning("No enrichment service configured; new movies go to the manual queue")

        context.regions = context.regions.merge(observed_region_names(context.database))
        total = len(context.new_ids)
        for imdb_id in context.new_ids:
            candidate = context.candidates[imdb_id]

            entry = context.overrides.complete_entry(imdb_id)
            if entry is not None:
                record = context.overrides.consume(
                    entry, candidate, context.regions, now=context.clock()
                )
                context.database.add(record)
                context.result.manual_resolved += 1
                context.regions = context.regions.merge(record_region_names(record))
                continue

            if context.enricher is None:
                _record_failure(
                    context, candidate, NOT_CONFIGURED_REASON, FailureKind.NOT_CONFIGURED
                )
                continue

            context.result.enrichment_calls += 1
            outcome = context.enricher.resolve(candidate)
            match outcome:
                case Enriched(record=record):
                    context.database.add(record)
                    context.regions = context.regions.merge(record_region_names(record))
                    context.overrides.discard(imdb_id)
                    context.result.added += 1
                    if context.result.added % PROGRESS_EVERY == 0:
                        log.info("Fetched %d/%d...", context.result.added, total)
                case NotFound(reason=reason, kind=kind):
                    log.info("[SKIP] %s - %s", candidate.title, reason)
                    _record_failure(context, candidate, reason, kind)
                case EnrichmentFailure(reason=reason, kind=kind):
                    log.warning("[ERROR] %s: %s", candidate.title, reason)
                    _record_failure(context, candidate, reason, kind)

        log.info(
            "Resolving complete: %d fetched, %d manual, %d failed",
            context.result.added,
            context.result.manual_resolved,
            len(context.result.failures),
        )


def _record_failure(
    context: SyncContext,
    candidate: CandidateRecord,
    reason: str,
    kind: FailureKind,
) -> None:
    context.result.failures.append(
        RecordFailure(imdb_id=candidate.imdb_id, title=candidate.title, reason=reason, kind=kind)
    )
    if context.overrides.record_failure(candidate, reason, now=context.clock()):
        context.result.queued += 1


class RefreshingPhase:
    """Copy changed user ratings onto records that are already enriched."""

    name: ClassVar[str] = "refreshing"
    state: ClassVar[SyncPhase] = SyncPhase.REFRESHING

    def run(self, context: SyncContext) -> None:
        for imdb_id in context.existing_ids:
            user_rating = context.candidates[imdb_id].user_rating
            record = context.database.get(imdb_id)
            if record is None or user_rating is None:
                continue
            if record.user_rating != user_rating:
                record.user_rating = user_rating
                context.result.ratings_updated += 1
        log.info("Updated %d user ratings", context.result.ratings_updated)


@dataclass(slots=True)
class PersistingPhase:
    """Stage every document in the unit of work and commit once."""

    name: ClassVar[str] = "persisting"
    state: ClassVar[SyncPhase] = SyncPhase.PERSISTING

    def run(self, context: SyncContext) -> None:
        if context.uow is None:
            raise RuntimeError("Persisting requires a unit of work")
        repositories = context.uow.repositories
        now = context.clock()

        context.database.last_updated = now
        repositories.database.save(context.database)

        context.regions = context.regions.merge(observed_region_names(context.database))
        repositories.regions.save(context.regions.names)

        for list_name, movie_ids in context.list_ids.items():
            reference = ListReference(
                name=list_display_name(list_name),
                source=context.list_sources[list_name],
                last_synced=now,
                movie_ids=list(movie_ids),
            )
            repositories.lists.save(list_name, reference)
            context.result.list_sizes[list_name] = len(movie_ids)
            log.info(
                "List %s: %d movies (%d in database)",
                list_name,
                len(movie_ids),
                context.database.count_present(movie_ids),
            )

        repositories.overrides.save(context.overrides.entries)
        context.uow.commit()
        context.result.database_size = len(context.database)
        log.info("Saved database with %d movies", len(context.database))
