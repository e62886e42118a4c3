"""Unit of work over the JSON and CSV state files."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from cinemap.domain.ports import CatalogueRepositories

from .regions import CsvRegionReferenceRepository
from .repositories import (
    JsonDatabaseRepository,
    JsonListReferenceRepository,
    JsonManualOverrideRepository,
    StagedWrites,
)

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

    from cinemap.config.storage import StorageConfig


class UnitOfWorkStateError(RuntimeError):
    """Raised when a file unit of work is used outside its ``with`` block."""


class FileCatalogueUnitOfWork:
    """Buffer every save and replace the files only on ``commit``.

    Files are flushed in a fixed order: database, regions, lists, overrides.
    """

    def __init__(self, storage: StorageConfig) -> None:
        self.storage = storage
        self._staged: StagedWrites | None = None
        self._repositories: CatalogueRepositories | None = None

    def _build_repositories(self, staged: StagedWrites) -> CatalogueRepositories:
        return CatalogueRepositories(
            database=JsonDatabaseRepository(self.storage.database_path, staged),
            lists=JsonListReferenceRepository(self.storage.lists_dir, staged),
            overrides=JsonManualOverrideRepository(self.storage.overrides_path, staged),
            regions=CsvRegionReferenceRepository(self.storage.regions_path, staged),
        )

    def __enter__(self) -> FileCatalogueUnitOfWork:
        if self._staged is not None:
            raise UnitOfWorkStateError("Unit of work already entered")
        self._staged = StagedWrites()
        self._repositories = self._build_repositories(self._staged)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> Literal[False]:
        if exc_type is not None:
            self.rollback()
        self._staged = None
        self._repositories = None
        return False

    @property
    def repositories(self) -> CatalogueRepositories:
        if self._repositories is None:
            raise UnitOfWorkStateError("Unit of work not entered")
        return self._repositories

    def commit(self) -> None:
        staged = self._require_staged()
        pending = staged.pending
        staged.pending = {path: pending[path] for path in sorted(pending, key=self._flush_rank)}
        staged.flush()

    def rollback(self) -> None:
        if self._staged is not None:
            self._staged.discard()

    def _require_staged(self) -> StagedWrites:
        if self._staged is None:
            raise UnitOfWorkStateError("Unit of work not entered")
        return self._staged

    def _flush_rank(self, path: Path) -> int:
        if path == self.storage.database_path:
            return 0
        if path == self.storage.regions_path:
            return 1
        if path.parent == self.storage.lists_dir:
            return 2
        return 3
