"""CSV persistence for the region reference table."""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING

from cinemap.domain.errors import CatalogueFormatError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from cinemap.domain.model import CountryCode

    from .repositories import StagedWrites

REGION_COLUMNS = ("code", "name")


class CsvRegionReferenceRepository:
    """Two-column ``code,name`` table, written sorted by code."""

    def __init__(self, path: Path, staged: StagedWrites) -> None:
        self._path = path
        self._staged = staged

    def load(self) -> dict[CountryCode, str]:
        try:
            text = self._path.read_text(encoding="utf-8-sig")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise CatalogueFormatError(f"Could not read {self._path}: {exc}") from exc

        names: dict[CountryCode, str] = {}
        try:
            reader = csv.DictReader(io.StringIO(text))
            if reader.fieldnames is None:
                return {}
            if tuple(reader.fieldnames[:2]) != REGION_COLUMNS:
                raise CatalogueFormatError(
                    f"{self._path}: expected header {','.join(REGION_COLUMNS)}"
                )
            for row in reader:
                code = (row.get("code") or "").strip()
                if code:
                    names[code] = (row.get("name") or "").strip()
        except csv.Error as exc:
            raise CatalogueFormatError(f"{self._path}: {exc}") from exc
        return names

    def save(self, names: Mapping[CountryCode, str]) -> None:
        buffer = io.StringIO()
        writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
        writer.writerow(REGION_COLUMNS)
        for code in sorted(names):
            writer.writerow((code, names[code]))
        self._staged.stage(self._path, buffer.getvalue())
