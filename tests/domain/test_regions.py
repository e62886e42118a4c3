from __future__ import annotations

from cinemap.domain.model import CentralDatabase
from cinemap.domain.regions import RegionLookup, observed_region_names
from tests.helpers.catalogue import make_record


def test_unknown_code_takes_observed_name() -> None:
    lookup = RegionLookup()

    assert lookup.observe("FR", "France")
    assert lookup.name_for("FR") == "France"


def test_unknown_code_without_name_falls_back_to_code() -> None:
    lookup = RegionLookup()

    lookup.observe("XK", None)

    assert lookup.name_for("XK") == "XK"
    assert lookup.is_low_confidence("XK")


def test_code_only_entry_is_upgraded() -> None:
    lookup = RegionLookup.from_mapping({"XK": "XK"})

    assert lookup.observe("XK", "Kosovo")
    assert lookup.name_for("XK") == "Kosovo"


def test_real_name_is_never_replaced() -> None:
    lookup = RegionLookup.from_mapping({"GB": "Britain"})

    assert not lookup.observe("GB", "United Kingdom")
    assert not lookup.observe("GB", "GB")
    assert not lookup.observe("GB", None)
    assert lookup.name_for("GB") == "Britain"


def test_from_mapping_cleans_blank_values() -> None:
    lookup = RegionLookup.from_mapping({" DE ": " Germany ", "": "Nowhere", "XK": "  "})

    assert lookup.names == {"DE": "Germany", "XK": "XK"}


def test_merge_returns_widened_copy() -> None:
    original = RegionLookup.from_mapping({"FR": "France"})

    merged = original.merge([("DE", "Germany"), ("FR", "Republique francaise")])

    assert original.names == {"FR": "France"}
    assert merged.names == {"FR": "France", "DE": "Germany"}


def test_observed_names_follow_database_order() -> None:
    database = CentralDatabase()
    database.add(make_record("tt001", ("FR", "DE")))
    database.add(make_record("tt002", ("US",)))

    assert list(observed_region_names(database)) == [
        ("FR", "France"),
        ("DE", "Germany"),
        ("US", "United States"),
    ]
