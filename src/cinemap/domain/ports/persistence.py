"""Ports for persisting catalogue state."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from cinemap.domain.model import (
        CentralDatabase,
        CountryCode,
        ImdbId,
        ListName,
        ListReference,
        MissingEntry,
    )


@runtime_checkable
class DatabaseRepository(Protocol):
    """Whole-document access to the central database."""

    def load(self) -> CentralDatabase: ...

    def save(self, database: CentralDatabase) -> None: ...


@runtime_checkable
class ListReferenceRepository(Protocol):
    def load_all(self) -> dict[ListName, ListReference]: ...

    def save(self, list_name: ListName, reference: ListReference) -> None: ...


@runtime_checkable
class ManualOverrideRepository(Protocol):
    def load(self) -> dict[ImdbId, MissingEntry]: ...

    def save(self, entries: Mapping[ImdbId, MissingEntry]) -> None: ...


@runtime_checkable
class RegionReferenceRepository(Protocol):
    def load(self) -> dict[CountryCode, str]: ...

    def save(self, names: Mapping[CountryCode, str]) -> None: ...
