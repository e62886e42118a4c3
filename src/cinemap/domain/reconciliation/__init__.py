"""Incremental reconciliation of source lists against the central database."""

from __future__ import annotations

from .context import RecordFailure, SyncContext, SyncPhase, SyncResult
from .engine import SyncPipeline, SyncStage, default_phases, sync_catalogue
from .phases import (
    NOT_CONFIGURED_REASON,
    DiffingPhase,
    PersistingPhase,
    ReadingPhase,
    RefreshingPhase,
    ResolvingPhase,
)

__all__ = [
    "NOT_CONFIGURED_REASON",
    "DiffingPhase",
    "PersistingPhase",
    "ReadingPhase",
    "RecordFailure",
    "RefreshingPhase",
    "ResolvingPhase",
    "SyncContext",
    "SyncPhase",
    "SyncPipeline",
    "SyncResult",
    "SyncStage",
    "default_phases",
    "sync_catalogue",
]
