"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class Provenance(StrEnum):
    """Where a canonical record's metadata came from."""

    AUTOMATIC = "automatic"
    MANUAL = "manual"


class FailureKind(StrEnum):
    NOT_FOUND = "not_found"
    FETCH_FAILED = "fetch_failed"
    NOT_CONFIGURED = "not_configured"
