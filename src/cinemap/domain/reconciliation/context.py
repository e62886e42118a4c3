"""Per-run state shared by the reconciliation phases."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from cinemap.domain.clock import utcnow

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cinemap.domain.clock import Clock
    from cinemap.domain.model import (
        CandidateRecord,
        CentralDatabase,
        FailureKind,
        ImdbId,
        ListName,
    )
    from cinemap.domain.overrides import ManualOverrideStore
    from cinemap.domain.ports import CatalogueUnitOfWork, Enricher, SourceList
    from cinemap.domain.regions import RegionLookup


class SyncPhase(StrEnum):
    PENDING = "pending"
    READING = "reading"
    DIFFING = "diffing"
    RESOLVING = "resolving"
    REFRESHING = "refreshing"
    PERSISTING = "persisting"
    DONE = "done"


@dataclass(slots=True, frozen=True)
class RecordFailure:
    imdb_id: ImdbId
    title: str
    reason: str
    kind: FailureKind


@dataclass(slots=True)
class SyncResult:
    """Outcome of a catalogue sync run."""

    candidates: int = 0
    existing: int = 0
    added: int = 0
    manual_resolved: int = 0
    ratings_updated: int = 0
    queued: int = 0
    enrichment_calls: int = 0
    failures: list[RecordFailure] = field(default_factory=list[RecordFailure])
    list_sizes: dict[ListName, int] = field(default_factory=dict["ListName", int])
    database_size: int = 0


@dataclass(slots=True)
class SyncContext:
    """Everything one run reads and mutates, loaded once and persisted once."""

    sources: Sequence[SourceList]
    database: CentralDatabase
    overrides: ManualOverrideStore
    regions: RegionLookup
    uow: CatalogueUnitOfWork | None = None
    enricher: Enricher | None = None
    clock: Clock = utcnow
    phase: SyncPhase = SyncPhase.PENDING
    candidates: dict[ImdbId, CandidateRecord] = field(
        default_factory=dict["ImdbId", "CandidateRecord"]
    )
    list_ids: dict[ListName, list[ImdbId]] = field(
        default_factory=dict["ListName", list["ImdbId"]]
    )
    list_sources: dict[ListName, str] = field(default_factory=dict["ListName", str])
    existing_ids: list[ImdbId] = field(default_factory=list["ImdbId"])
    new_ids: list[ImdbId] = field(default_factory=list["ImdbId"])
    result: SyncResult = field(default_factory=SyncResult)
