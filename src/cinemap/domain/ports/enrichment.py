"""Port definitions for metadata enrichment."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

from cinemap.domain.model import FailureKind

if TYPE_CHECKING:
    from cinemap.domain.model import CandidateRecord, CanonicalRecord


@dataclass(slots=True, frozen=True)
class Enriched:
    record: CanonicalRecord


@dataclass(slots=True, frozen=True)
class NotFound:
    """The service has no usable data for the candidate."""

    reason: str
    kind: FailureKind = FailureKind.NOT_FOUND


@dataclass(slots=True, frozen=True)
class EnrichmentFailure:
    """The service could not be queried successfully."""

    reason: str
    kind: FailureKind = FailureKind.FETCH_FAILED


EnrichmentOutcome: TypeAlias = Enriched | NotFound | EnrichmentFailure


@runtime_checkable
class Enricher(Protocol):
    """Resolve one candidate at a time; implementations may block on I/O."""

    def resolve(self, candidate: CandidateRecord) -> EnrichmentOutcome: ...
