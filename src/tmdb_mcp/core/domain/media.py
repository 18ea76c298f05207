"""Enumerated choices accepted by the trending tool.

Kept in the domain layer so the server signature, the query tools and the
tests share one source of truth.
"""

from __future__ import annotations

from enum import Enum


class MediaType(str, Enum):
    """Media kinds TMDB can report as trending."""

    MOVIE = "movie"
    TV = "tv"
    ALL = "all"


class TimeWindow(str, Enum):
    """Aggregation window for trending items."""

    DAY = "day"
    WEEK = "week"
