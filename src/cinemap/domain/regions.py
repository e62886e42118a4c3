"""Region (country) reference table.

The table maps ISO country codes to display names. Names already on file win:
they are either operator corrections or names learned on an earlier run. A
name equal to its own code is a placeholder and is upgraded as soon as a real
name is observed; a real name is never downgraded or replaced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from cinemap.domain.model import CanonicalRecord, CentralDatabase, CountryCode


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


@dataclass(slots=True)
class RegionLookup:
    names: dict[CountryCode, str] = field(default_factory=dict["CountryCode", str])

    @classmethod
    def from_mapping(cls, names: Mapping[CountryCode, str]) -> RegionLookup:
        lookup = cls()
        for raw_code, raw_name in names.items():
            code = _clean(raw_code)
            if code is None:
                continue
            lookup.names[code] = _clean(raw_name) or code
        return lookup

    def __contains__(self, code: object) -> bool:
        return code in self.names

    def __len__(self) -> int:
        return len(self.names)

    def name_for(self, code: CountryCode) -> str:
        return self.names.get(code) or code

    def is_low_confidence(self, code: CountryCode) -> bool:
        name = self.names.get(code)
        return name is None or name == code

    def observe(self, code: CountryCode, name: str | None) -> bool:
        """Record an automatically observed name; return whether the table changed."""

        observed = _clean(name)
        if code not in self.names:
            self.names[code] = observed or code
            return True
        if not self.is_low_confidence(code):
            return False
        if observed is None or observed == code:
            return False
        self.names[code] = observed
        return True

    def merge(self, observed: Iterable[tuple[CountryCode, str | None]]) -> RegionLookup:
        """Return a copy widened by ``observed`` (code, name) pairs."""

        merged = RegionLookup(names=dict(self.names))
        for code, name in observed:
            merged.observe(code, name)
        return merged


def record_region_names(record: CanonicalRecord) -> Iterator[tuple[CountryCode, str | None]]:
    for code in record.countries:
        yield code, record.country_names.get(code)


def observed_region_names(database: CentralDatabase) -> Iterator[tuple[CountryCode, str | None]]:
    """Yield every (code, name) pair carried by the database's records."""

    for record in database.movies.values():
        yield from record_region_names(record)
