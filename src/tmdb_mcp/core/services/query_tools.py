"""The six TMDB query tools.

Each tool is a single round-trip: build the query, fetch once through a
`JsonFetcher`, validate the body against its response schema, and map the
fields it cares about into an output model. Tools never call each other.
Errors from the fetcher propagate unchanged; schema mismatches become
`UnexpectedResponseError`.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from tmdb_mcp.core.config import AppSettings
from tmdb_mcp.core.domain.media import MediaType, TimeWindow
from tmdb_mcp.core.domain.models import (
    CastCredit,
    CrewCredit,
    MovieCredits,
    MovieDetail,
    MovieSearchResult,
    MovieSummary,
    PersonSummary,
    TrendingItem,
    TvSearchResult,
    TvShowSummary,
)
from tmdb_mcp.core.domain.upstream import (
    TmdbCreditsResponse,
    TmdbMovieDetails,
    TmdbMovieSearchResponse,
    TmdbPersonSearchResponse,
    TmdbTrendingResponse,
    TmdbTvSearchResponse,
)
from tmdb_mcp.core.errors import UnexpectedResponseError
from tmdb_mcp.core.interfaces.fetcher import JsonFetcher

logger = logging.getLogger(__name__)

MAX_CAST = 20
MAX_KNOWN_FOR = 3
CREW_JOBS = frozenset({"Director", "Producer", "Writer", "Screenplay"})

_SchemaT = TypeVar("_SchemaT", bound=BaseModel)


def truncate(text: str | None, limit: int) -> str | None:
    if text is None:
        return None
    return text[:limit]


def _parse(schema: type[_SchemaT], payload: dict[str, Any], path: str) -> _SchemaT:
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Unexpected TMDB shape for %s: %d error(s)", path, exc.error_count())
        raise UnexpectedResponseError(f"Unexpected upstream shape from TMDB {path}: {exc}") from exc


class TmdbQueryTools:
    """Stateless query tools bound to a fetcher and the display settings."""

    def __init__(self, fetcher: JsonFetcher, settings: AppSettings | None = None) -> None:
        self._fetcher = fetcher
        self._settings = settings or AppSettings()

    def _poster_url(self, poster_path: str | None) -> str | None:
        if not poster_path:
            return None
        return f"{self._settings.image_base_url.rstrip('/')}{poster_path}"

    def _short(self, text: str | None) -> str | None:
        return truncate(text, self._settings.text_max_chars)

    async def search_movies(self, query: str, year: int | None = None, page: int = 1) -> MovieSearchResult:
        """Search movies by title, optionally filtered by release year."""

        path = "/search/movie"
        params: dict[str, Any] = {"query": query, "page": page}
        if year:
            params["year"] = year
        data = _parse(TmdbMovieSearchResponse, await self._fetcher.get_json(path, params), path)

        movies = [
            MovieSummary(
                id=m.id,
                title=m.title,
                release_date=m.release_date,
                rating=m.vote_average,
                overview=self._short(m.overview),
                poster=self._poster_url(m.poster_path),
            )
            for m in data.results
        ]
        return MovieSearchResult(total=data.total_results, movies=movies)

    async def get_movie(self, movie_id: int) -> MovieDetail:
        """Full details for one movie."""

        path = f"/movie/{movie_id}"
        d = _parse(TmdbMovieDetails, await self._fetcher.get_json(path), path)
        return MovieDetail(
            id=d.id,
            title=d.title,
            tagline=d.tagline,
            overview=d.overview,
            release_date=d.release_date,
            runtime=d.runtime,
            rating=d.vote_average,
            vote_count=d.vote_count,
            budget=d.budget,
            revenue=d.revenue,
            genres=[g.name for g in d.genres],
            poster=self._poster_url(d.poster_path),
            imdb_id=d.imdb_id,
        )

    async def search_tv(self, query: str, page: int = 1) -> TvSearchResult:
        path = "/search/tv"
        data = _parse(
            TmdbTvSearchResponse,
            await self._fetcher.get_json(path, {"query": query, "page": page}),
            path,
        )
        shows = [
            TvShowSummary(
                id=s.id,
                name=s.name,
                first_air_date=s.first_air_date,
                rating=s.vote_average,
                overview=self._short(s.overview),
            )
            for s in data.results
        ]
        return TvSearchResult(total=data.total_results, shows=shows)

    async def get_trending(
        self,
        media_type: MediaType = MediaType.ALL,
        time_window: TimeWindow = TimeWindow.WEEK,
    ) -> list[TrendingItem]:
        """Trending movies, shows (or both) for the day or the week."""

        path = f"/trending/{MediaType(media_type).value}/{TimeWindow(time_window).value}"
        data = _parse(TmdbTrendingResponse, await self._fetcher.get_json(path), path)
        return [
            TrendingItem(
                id=i.id,
                title=i.title or i.name,
                media_type=i.media_type,
                rating=i.vote_average,
                release_date=i.release_date or i.first_air_date,
                overview=self._short(i.overview),
            )
            for i in data.results
        ]

    async def get_credits(self, movie_id: int) -> MovieCredits:
        """Top-billed cast and the key creative crew of a movie."""

        path = f"/movie/{movie_id}/credits"
        d = _parse(TmdbCreditsResponse, await self._fetcher.get_json(path), path)
        return MovieCredits(
            cast=[CastCredit(name=c.name, character=c.character, order=c.order) for c in d.cast[:MAX_CAST]],
            crew=[CrewCredit(name=c.name, job=c.job) for c in d.crew if c.job in CREW_JOBS],
        )

    async def search_person(self, query: str) -> list[PersonSummary]:
        path = "/search/person"
        data = _parse(TmdbPersonSearchResponse, await self._fetcher.get_json(path, {"query": query}), path)
        return [
            PersonSummary(
                id=p.id,
                name=p.name,
                known_for=p.known_for_department,
                popular_works=[w.title or w.name for w in p.known_for][:MAX_KNOWN_FOR],
            )
            for p in data.results
        ]
