"""Errors raised by catalogue operations."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class CatalogueError(RuntimeError):
    """Base class for fatal catalogue errors."""


class SourceParseError(CatalogueError):
    """Raised when a source export cannot be parsed structurally."""

    def __init__(self, message: str, *, path: Path, line: int | None = None) -> None:
        location = f"{path}:{line}" if line is not None else str(path)
        super().__init__(f"{location}: {message}")
        self.path = path
        self.line = line


class CatalogueFormatError(CatalogueError):
    """Raised when a persisted state file is unreadable or invalid."""


class PersistenceError(CatalogueError):
    """Raised when a state file cannot be written."""
