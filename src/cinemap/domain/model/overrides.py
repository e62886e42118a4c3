"""Manual override queue entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

    from cinemap.domain.model.primitives import CountryCode, ImdbId


@dataclass(slots=True, kw_only=True)
class MissingEntry:
    """A movie that could not be enriched automatically.

    The candidate snapshot is stored as it was when the entry was created.
    Operators complete the entry by filling ``countries`` (and optionally
    ``country_names``, ``director`` and ``poster``).
    """

    imdb_id: ImdbId
    title: str
    original_title: str | None = None
    year: int | None = None
    rating: float | None = None
    user_rating: int | None = None
    genres: list[str] = field(default_factory=list[str])
    directors: str = ""
    reason: str
    countries: list[CountryCode] = field(default_factory=list["CountryCode"])
    country_names: dict[CountryCode, str] = field(default_factory=dict["CountryCode", str])
    director: str | None = None
    poster: str | None = None
    created_at: datetime | None = None
