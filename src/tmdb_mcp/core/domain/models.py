"""Tool output models (Pydantic v2).

Why Pydantic here:
- Gives each tool a stable, self-documented output contract (Field).
- Serializes with camelCase keys (`releaseDate`, `voteCount`, ...) while the
  Python side keeps snake_case attributes.

Note:
- These models describe *what* a tool returns, not *how* it is fetched.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from pydantic.config import ConfigDict


class ToolOutput(BaseModel):
    """Base for everything a tool returns; dumps with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MovieSummary(ToolOutput):
    id: int = Field(..., description="TMDB movie id.")
    title: str | None = Field(default=None, description="Movie title.")
    release_date: str | None = Field(default=None, description="Release date (YYYY-MM-DD).")
    rating: float | None = Field(default=None, description="Average vote (0..10).")
    overview: str | None = Field(default=None, description="Synopsis, truncated.")
    poster: str | None = Field(default=None, description="Absolute poster URL.")


class MovieSearchResult(ToolOutput):
    total: int | None = Field(default=None, description="Total matches reported by TMDB.")
    movies: list[MovieSummary] = Field(default_factory=list)


class MovieDetail(ToolOutput):
    """Full details of a single movie.

    The overview is returned in full; only list results are truncated.
    """

    id: int = Field(..., description="TMDB movie id.")
    title: str | None = None
    tagline: str | None = None
    overview: str | None = None
    release_date: str | None = None
    runtime: int | None = Field(default=None, description="Runtime in minutes.")
    rating: float | None = None
    vote_count: int | None = None
    budget: int | None = Field(default=None, description="Budget in USD.")
    revenue: int | None = Field(default=None, description="Revenue in USD.")
    genres: list[str] = Field(default_factory=list, description="Genre names.")
    poster: str | None = None
    imdb_id: str | None = Field(default=None, description="IMDb title id (tt...).")


class TvShowSummary(ToolOutput):
    id: int = Field(..., description="TMDB TV show id.")
    name: str | None = None
    first_air_date: str | None = None
    rating: float | None = None
    overview: str | None = Field(default=None, description="Synopsis, truncated.")


class TvSearchResult(ToolOutput):
    total: int | None = Field(default=None, description="Total matches reported by TMDB.")
    shows: list[TvShowSummary] = Field(default_factory=list)


class TrendingItem(ToolOutput):
    id: int
    title: str | None = Field(default=None, description="Movie title or show/person name.")
    media_type: str | None = Field(default=None, description="'movie', 'tv' or 'person'.")
    rating: float | None = None
    release_date: str | None = Field(default=None, description="Release or first air date.")
    overview: str | None = Field(default=None, description="Synopsis, truncated.")


class CastCredit(ToolOutput):
    name: str
    character: str | None = None
    order: int | None = Field(default=None, description="Billing order (0 = top billed).")


class CrewCredit(ToolOutput):
    name: str
    job: str | None = None


class MovieCredits(ToolOutput):
    cast: list[CastCredit] = Field(default_factory=list, description="Top-billed cast.")
    crew: list[CrewCredit] = Field(default_factory=list, description="Key creative crew only.")


class PersonSummary(ToolOutput):
    id: int
    name: str | None = None
    known_for: str | None = Field(default=None, description="Department the person is known for.")
    popular_works: list[str | None] = Field(
        default_factory=list,
        description="Titles/names of up to three works the person is known for.",
    )
