"""File-backed repositories; writes are staged and flushed by the unit of work."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import partial
from logging import getLogger
from typing import TYPE_CHECKING

from cinemap.domain.errors import CatalogueFormatError

from .atomic import dump_model, load_model, write_text_atomic
from .schema import DatabaseDocument, ListDocument, OverridesDocument
from .translator import (
    database_from_document,
    database_to_document,
    list_from_document,
    list_to_document,
    overrides_from_document,
    overrides_to_document,
)

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from cinemap.domain.model import (
        CentralDatabase,
        ImdbId,
        ListName,
        ListReference,
        MissingEntry,
    )

log = getLogger(__name__)


@dataclass(slots=True)
class StagedWrites:
    """Ordered set of pending file replacements."""

    pending: dict[Path, str] = field(default_factory=dict["Path", str])

    def stage(self, path: Path, text: str) -> None:
        self.pending.pop(path, None)
        self.pending[path] = text

    def flush(self) -> None:
        for path, text in self.pending.items():
            write_text_atomic(path, text)
            log.debug("Wrote %s", path)
        self.pending.clear()

    def discard(self) -> None:
        self.pending.clear()


class JsonDatabaseRepository:
    def __init__(self, path: Path, staged: StagedWrites) -> None:
        self._path = path
        self._staged = staged

    def load(self) -> CentralDatabase:
        document = load_model(self._path, DatabaseDocument, default=DatabaseDocument)
        database = database_from_document(document)
        if self._path.exists():
            log.info("Existing database has %d movies", len(database))
        else:
            log.info("No existing database found, starting fresh")
        return database

    def save(self, database: CentralDatabase) -> None:
        self._staged.stage(self._path, dump_model(database_to_document(database)))


class JsonListReferenceRepository:
    def __init__(self, lists_dir: Path, staged: StagedWrites) -> None:
        self._lists_dir = lists_dir
        self._staged = staged

    def load_all(self) -> dict[ListName, ListReference]:
        if not self._lists_dir.is_dir():
            return {}
        references: dict[ListName, ListReference] = {}
        for path in sorted(self._lists_dir.glob("*.json")):
            document = load_model(path, ListDocument, default=partial(_vanished, path))
            references[path.stem] = list_from_document(document)
        return references

    def save(self, list_name: ListName, reference: ListReference) -> None:
        path = self._lists_dir / f"{list_name}.json"
        self._staged.stage(path, dump_model(list_to_document(reference)))


def _vanished(path: Path) -> ListDocument:
    raise CatalogueFormatError(f"List file {path} disappeared while loading")


class JsonManualOverrideRepository:
    def __init__(self, path: Path, staged: StagedWrites) -> None:
        self._path = path
        self._staged = staged

    def load(self) -> dict[ImdbId, MissingEntry]:
        document = load_model(self._path, OverridesDocument, default=OverridesDocument)
        return overrides_from_document(document)

    def save(self, entries: Mapping[ImdbId, MissingEntry]) -> None:
        self._staged.stage(self._path, dump_model(overrides_to_document(entries)))
