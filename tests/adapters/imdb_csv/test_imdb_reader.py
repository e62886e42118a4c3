from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cinemap.adapters.imdb_csv import CsvSourceList, ImdbExportRow, discover_source_lists
from cinemap.domain.errors import SourceParseError
from tests.helpers.catalogue import export_row, write_export

if TYPE_CHECKING:
    from pathlib import Path


def test_reader_yields_movies_and_skips_other_title_types(tmp_path: Path) -> None:
    path = write_export(
        tmp_path / "watchlist.csv",
        [
            export_row("tt001", "Amelie", genres="Comedy, Romance", directors="Jean-Pierre Jeunet"),
            export_row("tt900", "Some Episode", title_type="TV Episode"),
            export_row("tt002", "Heat", your_rating="9"),
        ],
    )

    source = CsvSourceList(path)
    candidates = list(source)

    assert source.name == "watchlist"
    assert source.source == "watchlist.csv"
    assert [candidate.imdb_id for candidate in candidates] == ["tt001", "tt002"]
    assert candidates[0].genres == ("Comedy", "Romance")
    assert candidates[0].first_director == "Jean-Pierre Jeunet"
    assert candidates[0].year == 2001
    assert candidates[0].rating == 7.5
    assert candidates[1].user_rating == 9


def test_reader_is_restartable(tmp_path: Path) -> None:
    path = write_export(tmp_path / "festival.csv", [export_row("tt001", "Amelie")])
    source = CsvSourceList(path)

    assert list(source) == list(source)


def test_custom_title_types(tmp_path: Path) -> None:
    path = write_export(
        tmp_path / "mixed.csv",
        [export_row("tt001", "Film"), export_row("tt002", "Mini", title_type="TV Movie")],
    )

    source = CsvSourceList(path, title_types=frozenset({"Movie", "TV Movie"}))

    assert [candidate.imdb_id for candidate in source] == ["tt001", "tt002"]


@pytest.mark.parametrize(
    ("field", "raw", "expected"),
    [
        ("Year", "", None),
        ("Year", "n/a", None),
        ("Year", "0", None),
        ("IMDb Rating", "abc", None),
        ("IMDb Rating", "0", None),
        ("Your Rating", "11", None),
        ("Your Rating", "0", None),
        ("Your Rating", "10", 10),
    ],
)
def test_lenient_numeric_fields(field: str, raw: str, expected: object) -> None:
    payload = export_row("tt001", "Film")
    payload[field] = raw

    row = ImdbExportRow.model_validate(payload)
    attribute = {"Year": "year", "IMDb Rating": "imdb_rating", "Your Rating": "your_rating"}[field]

    assert getattr(row, attribute) == expected


def test_blank_const_rows_are_skipped(tmp_path: Path) -> None:
    path = write_export(tmp_path / "list.csv", [export_row("", "Nameless"), export_row("tt1", "A")])

    assert [candidate.imdb_id for candidate in CsvSourceList(path)] == ["tt1"]


def test_missing_required_column_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.csv"
    path.write_text("Title,Year\nAmelie,2001\n", encoding="utf-8")

    with pytest.raises(SourceParseError, match="Const"):
        list(CsvSourceList(path))


def test_row_with_extra_fields_raises_with_line(tmp_path: Path) -> None:
    path = tmp_path / "broken.csv"
    path.write_text("Const,Title Type,Title\ntt1,Movie,A\ntt2,Movie,B,extra\n", encoding="utf-8")

    with pytest.raises(SourceParseError) as excinfo:
        list(CsvSourceList(path))

    assert excinfo.value.line == 3
    assert "broken.csv:3" in str(excinfo.value)


def test_row_with_missing_fields_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.csv"
    path.write_text("Const,Title Type,Title\ntt1,Movie\n", encoding="utf-8")

    with pytest.raises(SourceParseError, match="fewer fields"):
        list(CsvSourceList(path))


def test_discover_source_lists_sorted_by_file_name(tmp_path: Path) -> None:
    write_export(tmp_path / "watchlist.csv", [])
    write_export(tmp_path / "festival.csv", [])
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    sources = discover_source_lists(tmp_path)

    assert [source.name for source in sources] == ["festival", "watchlist"]
