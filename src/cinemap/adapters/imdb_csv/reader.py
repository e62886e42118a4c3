"""Read IMDb CSV exports into candidate records."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from cinemap.domain.errors import SourceParseError

from .schema import REQUIRED_COLUMNS, ImdbExportRow

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

    from cinemap.domain.model import CandidateRecord, ListName

log = getLogger(__name__)

DEFAULT_TITLE_TYPES = frozenset({"Movie"})
_EXTRA_FIELDS = "__extra__"


@dataclass(slots=True, frozen=True)
class CsvSourceList:
    """A source list backed by one CSV file; every iteration rereads the file."""

    path: Path
    title_types: frozenset[str] = field(default=DEFAULT_TITLE_TYPES)

    @property
    def name(self) -> ListName:
        return self.path.stem

    @property
    def source(self) -> str:
        return self.path.name

    def __iter__(self) -> Iterator[CandidateRecord]:
        skipped = 0
        for row in _read_rows(self.path):
            if not row.accepted(self.title_types):
                skipped += 1
                continue
            yield row.to_candidate()
        if skipped:
            log.debug("%s: skipped %d rows that are not movies", self.source, skipped)


def _read_rows(path: Path) -> Iterator[ImdbExportRow]:
    try:
        with path.open(newline="", encoding="utf-8-sig") as handle:
            reader = csv.DictReader(handle, restkey=_EXTRA_FIELDS)
            header = reader.fieldnames
            if header is None:
                return
            missing = [column for column in REQUIRED_COLUMNS if column not in header]
            if missing:
                raise SourceParseError(
                    f"missing required columns: {', '.join(missing)}",
                    path=path,
                    line=1,
                )
            for raw in reader:
                if _EXTRA_FIELDS in raw:
                    raise SourceParseError(
                        "row has more fields than the header", path=path, line=reader.line_num
                    )
                if any(value is None for value in raw.values()):
                    raise SourceParseError(
                        "row has fewer fields than the header", path=path, line=reader.line_num
                    )
                yield ImdbExportRow.model_validate(raw)
    except csv.Error as exc:
        raise SourceParseError(str(exc), path=path) from exc
    except UnicodeDecodeError as exc:
        raise SourceParseError(f"not valid UTF-8: {exc}", path=path) from exc


def discover_source_lists(
    input_dir: Path,
    *,
    title_types: frozenset[str] = DEFAULT_TITLE_TYPES,
) -> list[CsvSourceList]:
    """Return one source list per ``*.csv`` file, ordered by file name."""

    return [
        CsvSourceList(path=path, title_types=title_types)
        for path in sorted(input_dir.glob("*.csv"))
        if path.is_file()
    ]
