"""Manual override queue for movies that cannot be enriched automatically."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from cinemap.domain.model import CanonicalRecord, MissingEntry, Provenance

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime

    from cinemap.domain.model import CandidateRecord, ImdbId
    from cinemap.domain.regions import RegionLookup

log = getLogger(__name__)


def is_complete(entry: MissingEntry) -> bool:
    """An entry is complete once an operator has supplied at least one country."""

    return any(code.strip() for code in entry.countries)


@dataclass(slots=True)
class ManualOverrideStore:
    """In-memory view of the queue; persisted as a whole by the unit of work."""

    entries: dict[ImdbId, MissingEntry] = field(default_factory=dict["ImdbId", MissingEntry])

    @classmethod
    def load(cls, entries: Mapping[ImdbId, MissingEntry]) -> ManualOverrideStore:
        return cls(entries=dict(entries))

    def __contains__(self, imdb_id: object) -> bool:
        return imdb_id in self.entries

    def complete_entry(self, imdb_id: ImdbId) -> MissingEntry | None:
        entry = self.entries.get(imdb_id)
        if entry is None or not is_complete(entry):
            return None
        return entry

    def record_failure(self, candidate: CandidateRecord, reason: str, *, now: datetime) -> bool:
        """Queue ``candidate`` unless an entry exists; the original reason is kept."""

        if candidate.imdb_id in self.entries:
            return False
        self.entries[candidate.imdb_id] = MissingEntry(
            imdb_id=candidate.imdb_id,
            title=candidate.title,
            original_title=candidate.original_title,
            year=candidate.year,
            rating=candidate.rating,
            user_rating=candidate.user_rating,
            genres=list(candidate.genres),
            directors=candidate.directors,
            reason=reason,
            created_at=now,
        )
        return True

    def discard(self, imdb_id: ImdbId) -> MissingEntry | None:
        return self.entries.pop(imdb_id, None)

    def consume(
        self,
        entry: MissingEntry,
        candidate: CandidateRecord | None,
        lookup: RegionLookup,
        *,
        now: datetime,
    ) -> CanonicalRecord:
        """Build a canonical record from a completed entry and drop it from the queue."""

        countries = _dedupe_codes(entry.countries)
        if not countries:
            raise ValueError(f"Manual entry {entry.imdb_id} has no countries")

        country_names = {
            code: (entry.country_names.get(code) or "").strip() or lookup.name_for(code)
            for code in countries
        }

        rating = entry.rating
        user_rating = entry.user_rating
        genres = list(entry.genres)
        title = entry.title
        year = entry.year
        director = entry.director or _first_name(entry.directors)
        if candidate is not None:
            if candidate.rating is not None:
                rating = candidate.rating
            if candidate.user_rating is not None:
                user_rating = candidate.user_rating
            if candidate.genres:
                genres = list(candidate.genres)
            title = title or candidate.title
            year = year if year is not None else candidate.year
            director = director or candidate.first_director

        record = CanonicalRecord(
            imdb_id=entry.imdb_id,
            title=title,
            year=year,
            poster=entry.poster,
            rating=rating,
            user_rating=user_rating,
            director=director,
            genres=genres,
            countries=countries,
            country_names=country_names,
            tmdb_id=None,
            provenance=Provenance.MANUAL,
            fetched_at=now,
        )
        self.discard(entry.imdb_id)
        log.info("Consumed manual entry %s (%s): %s", entry.imdb_id, title, ", ".join(countries))
        return record


def _dedupe_codes(codes: list[str]) -> list[str]:
    seen: list[str] = []
    for code in codes:
        normalized = code.strip().upper()
        if normalized and normalized not in seen:
            seen.append(normalized)
    return seen


def _first_name(names: str) -> str | None:
    for name in names.split(","):
        stripped = name.strip()
        if stripped:
            return stripped
    return None
