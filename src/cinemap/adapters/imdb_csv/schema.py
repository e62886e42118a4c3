"""Pydantic model for one row of an IMDb list/ratings CSV export."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cinemap.domain.model import CandidateRecord

GENRE_DELIMITER = ", "

CONST_COLUMN = "Const"
TITLE_TYPE_COLUMN = "Title Type"
REQUIRED_COLUMNS = (CONST_COLUMN, TITLE_TYPE_COLUMN)


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


def _lenient_int(value: object) -> int | None:
    value = _blank_to_none(value)
    if value is None:
        return None
    try:
        number = int(float(str(value)))
    except (TypeError, ValueError):
        return None
    return number or None


def _lenient_float(value: object) -> float | None:
    value = _blank_to_none(value)
    if value is None:
        return None
    try:
        number = float(str(value))
    except (TypeError, ValueError):
        return None
    if number != number:  # NaN
        return None
    return number or None


class ImdbExportRow(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    const: str | None = Field(default=None, alias="Const")
    title_type: str | None = Field(default=None, alias="Title Type")
    title: str = Field(default="", alias="Title")
    original_title: str | None = Field(default=None, alias="Original Title")
    year: int | None = Field(default=None, alias="Year")
    imdb_rating: float | None = Field(default=None, alias="IMDb Rating")
    your_rating: int | None = Field(default=None, alias="Your Rating")
    genres: tuple[str, ...] = Field(default=(), alias="Genres")
    directors: str = Field(default="", alias="Directors")

    _normalize_ids = field_validator("const", "title_type", "original_title", mode="before")(
        _blank_to_none
    )

    @field_validator("title", "directors", mode="before")
    @classmethod
    def _strip_text(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("year", "your_rating", mode="before")
    @classmethod
    def _parse_int(cls, value: object) -> int | None:
        return _lenient_int(value)

    @field_validator("imdb_rating", mode="before")
    @classmethod
    def _parse_float(cls, value: object) -> float | None:
        return _lenient_float(value)

    @field_validator("your_rating", mode="after")
    @classmethod
    def _rating_in_range(cls, value: int | None) -> int | None:
        if value is None or not 1 <= value <= 10:
            return None
        return value

    @field_validator("genres", mode="before")
    @classmethod
    def _split_genres(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(GENRE_DELIMITER) if part.strip())
        return value

    def accepted(self, title_types: frozenset[str]) -> bool:
        return self.const is not None and self.title_type in title_types

    def to_candidate(self) -> CandidateRecord:
        if self.const is None:
            raise ValueError("Row has no IMDb id")
        return CandidateRecord(
            imdb_id=self.const,
            title=self.title or self.original_title or self.const,
            original_title=self.original_title,
            year=self.year,
            rating=self.imdb_rating,
            user_rating=self.your_rating,
            genres=self.genres,
            directors=self.directors,
        )
