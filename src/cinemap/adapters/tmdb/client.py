"""TMDB API client."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from pydantic import BaseModel, ValidationError

from .schema import FindResponse, MovieCredits, MovieDetails

if TYPE_CHECKING:
    from cinemap.adapters.http_resilience import ResilientClient


TModel = TypeVar("TModel", bound=BaseModel)


class TmdbAPIError(RuntimeError):
    """Raised when the TMDB API returns an unexpected response."""


class TmdbClient:
    """Low-level async client for the three read-only TMDB endpoints we use."""

    def __init__(self, client: ResilientClient) -> None:
        self._client = client

    async def find_by_imdb_id(self, imdb_id: str) -> FindResponse:
        return await self._get(
            f"find/{imdb_id}",
            FindResponse,
            params={"external_source": "imdb_id"},
        )

    async def movie_details(self, tmdb_id: int) -> MovieDetails:
        return await self._get(f"movie/{tmdb_id}", MovieDetails)

    async def movie_credits(self, tmdb_id: int) -> MovieCredits:
        return await self._get(f"movie/{tmdb_id}/credits", MovieCredits)

    async def _get(
        self,
        path: str,
        model: type[TModel],
        *,
        params: dict[str, str] | None = None,
    ) -> TModel:
        response = await self._client.get(path, params=params)
        try:
            payload = response.json()
        except ValueError as exc:
            raise TmdbAPIError(f"TMDB returned invalid JSON for {path}") from exc
        if not isinstance(payload, dict):
            raise TmdbAPIError(f"Unexpected TMDB response payload for {path}")
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise TmdbAPIError(f"Unexpected TMDB payload for {path}: {exc}") from exc
