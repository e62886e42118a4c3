"""IMDb CSV export adapter."""

from __future__ import annotations

from .reader import DEFAULT_TITLE_TYPES, CsvSourceList, discover_source_lists
from .schema import ImdbExportRow

__all__ = [
    "DEFAULT_TITLE_TYPES",
    "CsvSourceList",
    "ImdbExportRow",
    "discover_source_lists",
]
