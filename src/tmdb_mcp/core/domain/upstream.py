"""Response schemas for the TMDB endpoints we call.

Each schema lists only the fields a tool maps; everything else is ignored.
Fields a tool cannot work without (ids, result lists, credit lists) are
required, so a malformed body fails validation instead of producing a
half-empty answer. Optional text/number fields default to `None` because
TMDB routinely sends `null` for them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class _TmdbModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


# /search/movie


class TmdbMovieResult(_TmdbModel):
    id: int
    title: str | None = None
    release_date: str | None = None
    vote_average: float | None = None
    overview: str | None = None
    poster_path: str | None = None


class TmdbMovieSearchResponse(_TmdbModel):
    page: int | None = None
    total_results: int | None = None
    results: list[TmdbMovieResult]


# /movie/{id}


class TmdbGenre(_TmdbModel):
    id: int | None = None
    name: str


class TmdbMovieDetails(_TmdbModel):
    id: int
    title: str | None = None
    tagline: str | None = None
    overview: str | None = None
    release_date: str | None = None
    runtime: int | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    budget: int | None = None
    revenue: int | None = None
    genres: list[TmdbGenre] = Field(default_factory=list)
    poster_path: str | None = None
    imdb_id: str | None = None


# /search/tv


class TmdbTvResult(_TmdbModel):
    id: int
    name: str | None = None
    first_air_date: str | None = None
    vote_average: float | None = None
    overview: str | None = None


class TmdbTvSearchResponse(_TmdbModel):
    page: int | None = None
    total_results: int | None = None
    results: list[TmdbTvResult]


# /trending/{media_type}/{time_window}


class TmdbTrendingResult(_TmdbModel):
    """Movie, TV show or person; movies carry `title`, the others `name`."""

    id: int
    title: str | None = None
    name: str | None = None
    media_type: str | None = None
    vote_average: float | None = None
    release_date: str | None = None
    first_air_date: str | None = None
    overview: str | None = None


class TmdbTrendingResponse(_TmdbModel):
    results: list[TmdbTrendingResult]


# /movie/{id}/credits


class TmdbCastMember(_TmdbModel):
    name: str
    character: str | None = None
    order: int | None = None


class TmdbCrewMember(_TmdbModel):
    name: str
    job: str | None = None


class TmdbCreditsResponse(_TmdbModel):
    id: int | None = None
    cast: list[TmdbCastMember]
    crew: list[TmdbCrewMember]


# /search/person


class TmdbKnownForWork(_TmdbModel):
    title: str | None = None
    name: str | None = None


class TmdbPersonResult(_TmdbModel):
    id: int
    name: str | None = None
    known_for_department: str | None = None
    known_for: list[TmdbKnownForWork] = Field(default_factory=list)


class TmdbPersonSearchResponse(_TmdbModel):
    page: int | None = None
    total_results: int | None = None
    results: list[TmdbPersonResult]
