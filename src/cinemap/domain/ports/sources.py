"""Ports for reading source lists."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from cinemap.domain.model import CandidateRecord, ListName


@runtime_checkable
class SourceList(Protocol):
    """A named, restartable stream of candidate records."""

    @property
    def name(self) -> ListName: ...

    @property
    def source(self) -> str: ...

    def __iter__(self) -> Iterator[CandidateRecord]: ...
