"""MCP server wiring.

`create_app` builds a FastMCP instance with the six TMDB tools registered.
Tool arguments are validated by FastMCP from the function signatures, so
parameter names are the wire names: `movieId`, `mediaType` and `timeWindow`
stay camelCase. Each tool returns its output as JSON text. Any exception
raised by a tool is reported by FastMCP as a failed tool call.
"""

from __future__ import annotations

import logging
from typing import Annotated

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from tmdb_mcp.adapters.json_exporter import render_tool_output
from tmdb_mcp.adapters.tmdb_client import TmdbClient
from tmdb_mcp.core.config import AppSettings
from tmdb_mcp.core.domain.media import MediaType, TimeWindow
from tmdb_mcp.core.interfaces.fetcher import JsonFetcher
from tmdb_mcp.core.services.query_tools import TmdbQueryTools

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-tmdb"


def register_tools(mcp: FastMCP, tools: TmdbQueryTools) -> None:
    """Register the six query tools on `mcp`."""

    @mcp.tool(description="Search for movies.")
    async def search_movies(
        query: Annotated[str, Field(description="Movie title to search for.")],
        year: Annotated[int | None, Field(description="Optional release year filter.")] = None,
        page: Annotated[int, Field(ge=1, description="Result page (1-based).")] = 1,
    ) -> str:
        return render_tool_output(await tools.search_movies(query, year=year, page=page))

    @mcp.tool(description="Get movie details.")
    async def get_movie(movieId: Annotated[int, Field(description="TMDB movie id.")]) -> str:  # noqa: N803
        return render_tool_output(await tools.get_movie(movieId))

    @mcp.tool(description="Search for TV shows.")
    async def search_tv(
        query: Annotated[str, Field(description="Show name to search for.")],
        page: Annotated[int, Field(ge=1, description="Result page (1-based).")] = 1,
    ) -> str:
        return render_tool_output(await tools.search_tv(query, page=page))

    @mcp.tool(description="Get trending movies or TV shows.")
    async def get_trending(
        mediaType: Annotated[MediaType, Field(description="movie, tv or all.")] = MediaType.ALL,  # noqa: N803
        timeWindow: Annotated[TimeWindow, Field(description="day or week.")] = TimeWindow.WEEK,  # noqa: N803
    ) -> str:
        return render_tool_output(await tools.get_trending(mediaType, timeWindow))

    @mcp.tool(description="Get cast and crew for a movie.")
    async def get_credits(movieId: Annotated[int, Field(description="TMDB movie id.")]) -> str:  # noqa: N803
        return render_tool_output(await tools.get_credits(movieId))

    @mcp.tool(description="Search for actors/directors.")
    async def search_person(query: Annotated[str, Field(description="Person name to search for.")]) -> str:
        return render_tool_output(await tools.search_person(query))


def create_app(settings: AppSettings | None = None, *, fetcher: JsonFetcher | None = None) -> FastMCP:
    settings = settings or AppSettings()
    fetcher = fetcher or TmdbClient(settings)

    mcp = FastMCP(SERVER_NAME)
    register_tools(mcp, TmdbQueryTools(fetcher, settings))
    logger.debug("Registered TMDB tools on %s", SERVER_NAME)
    return mcp
