"""Typer application.

`tmdb-mcp` with no subcommand runs the stdio server, which is what MCP
hosts launch. `tmdb-mcp doctor` checks the local setup.
"""

from __future__ import annotations

import logging

import typer

from tmdb_mcp.cli import doctor
from tmdb_mcp.core.config import AppSettings
from tmdb_mcp.core.logging_setup import configure_logging
from tmdb_mcp.server import create_app

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False, help="MCP tool server for TMDB movie/TV metadata.")


@app.callback(invoke_without_command=True)
def _default(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        serve(log_level=None)


@app.command()
def serve(
    log_level: str | None = typer.Option(None, "--log-level", help="Override TMDB_MCP_LOG_LEVEL."),
) -> None:
    """Run the MCP server on stdin/stdout."""

    settings = AppSettings()
    configure_logging(log_level or settings.log_level)
    try:
        mcp = create_app(settings)
        logger.info("Starting %s on stdio", mcp.name)
        mcp.run(transport="stdio")
    except Exception:
        logger.exception("Fatal: server stopped")
        raise typer.Exit(code=1)


app.command(name="doctor")(doctor.run)


def run() -> None:
    app()
