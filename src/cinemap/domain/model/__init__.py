"""Public domain model surface."""

from __future__ import annotations

from cinemap.domain.model.catalogue import (
    DATABASE_VERSION,
    CentralDatabase,
    ListReference,
    list_display_name,
)
from cinemap.domain.model.enums import FailureKind, Provenance
from cinemap.domain.model.movie import CandidateRecord, CanonicalRecord
from cinemap.domain.model.overrides import MissingEntry
from cinemap.domain.model.primitives import CountryCode, ImdbId, ListName, TmdbId

__all__ = [  # noqa: RUF022
    # movies
    "CandidateRecord",
    "CanonicalRecord",
    # catalogue
    "DATABASE_VERSION",
    "CentralDatabase",
    "ListReference",
    "list_display_name",
    # overrides
    "MissingEntry",
    # enums
    "FailureKind",
    "Provenance",
    # primitives
    "CountryCode",
    "ImdbId",
    "ListName",
    "TmdbId",
]
