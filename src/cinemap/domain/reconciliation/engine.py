"""Phase-based orchestrator for catalogue synchronisation."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Protocol

from cinemap.domain.clock import utcnow
from cinemap.domain.overrides import ManualOverrideStore
from cinemap.domain.regions import RegionLookup

from .context import SyncContext, SyncPhase
from .phases import DiffingPhase, PersistingPhase, ReadingPhase, RefreshingPhase, ResolvingPhase

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from cinemap.domain.clock import Clock
    from cinemap.domain.ports import CatalogueUnitOfWork, Enricher, SourceList

    from .context import SyncResult

log = getLogger(__name__)


class SyncStage(Protocol):
    """Contract implemented by each sync phase."""

    name: str
    state: SyncPhase

    def run(self, context: SyncContext) -> None: ...


def default_phases() -> tuple[SyncStage, ...]:
    return (
        ReadingPhase(),
        DiffingPhase(),
        ResolvingPhase(),
        RefreshingPhase(),
        PersistingPhase(),
    )


@dataclass(slots=True)
class SyncPipeline:
    """Run the configured phases in order against one context.

    Reading, diffing, resolving and refreshing only touch in-memory state, so a
    failure in any of them leaves storage exactly as it was before the run.
    """

    phases: Sequence[SyncStage] = field(default_factory=default_phases)

    def run(self, context: SyncContext) -> SyncContext:
        for phase in self.phases:
            context.phase = phase.state
            log.debug("Entering %s phase", phase.name)
            phase.run(context)
        context.phase = SyncPhase.DONE
        return context


def sync_catalogue(
    *,
    sources: Sequence[SourceList],
    unit_of_work_factory: Callable[[], CatalogueUnitOfWork],
    enricher: Enricher | None = None,
    clock: Clock = utcnow,
    pipeline: SyncPipeline | None = None,
) -> SyncResult:
    """Reconcile ``sources`` against the stored catalogue and persist the result."""

    active_pipeline = pipeline or SyncPipeline()
    with unit_of_work_factory() as uow:
        repositories = uow.repositories
        context = SyncContext(
            sources=sources,
            database=repositories.database.load(),
            overrides=ManualOverrideStore.load(repositories.overrides.load()),
            regions=RegionLookup.from_mapping(repositories.regions.load()),
            uow=uow,
            enricher=enricher,
            clock=clock,
        )
        active_pipeline.run(context)
    return context.result
