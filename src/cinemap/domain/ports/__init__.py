"""Domain port definitions for adapters."""

from __future__ import annotations

from .enrichment import Enricher, Enriched, EnrichmentFailure, EnrichmentOutcome, NotFound
from .persistence import (
    DatabaseRepository,
    ListReferenceRepository,
    ManualOverrideRepository,
    RegionReferenceRepository,
)
from .sources import SourceList
from .unit_of_work import (
    CatalogueRepositories,
    CatalogueUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "CatalogueRepositories",
    "CatalogueUnitOfWork",
    "DatabaseRepository",
    "Enricher",
    "Enriched",
    "EnrichmentFailure",
    "EnrichmentOutcome",
    "ListReferenceRepository",
    "ManualOverrideRepository",
    "NotFound",
    "RegionReferenceRepository",
    "RepositoryCollection",
    "SourceList",
    "UnitOfWork",
]
