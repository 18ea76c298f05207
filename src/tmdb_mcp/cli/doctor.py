"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from tmdb_mcp.adapters.tmdb_client import TmdbClient
from tmdb_mcp.cli.ui_components import build_doctor_table, print_banner
from tmdb_mcp.core.config import AppSettings, resolve_api_key
from tmdb_mcp.core.errors import ConfigurationError, TmdbError

_console = Console(stderr=True)


async def _check_tmdb(settings: AppSettings) -> tuple[bool, str]:
    try:
        payload = await TmdbClient(settings).get_json("/configuration")
    except TmdbError as exc:
        return False, str(exc)
    images = payload.get("images")
    if isinstance(images, dict) and images.get("secure_base_url"):
        return True, f"OK (images: {images['secure_base_url']})"
    return True, "OK"


def run() -> None:
    """Check the API key and TMDB connectivity, then print a summary."""

    settings = AppSettings()
    print_banner(_console)
    table = build_doctor_table()

    try:
        resolve_api_key(settings.api_key_env)
        has_key = True
        table.add_row("API key", "OK", f"{settings.api_key_env} is set")
    except ConfigurationError as exc:
        has_key = False
        table.add_row("API key", "MISSING", str(exc))

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("Rate limit", "OK", f"{settings.min_interval_seconds * 1000:.0f} ms between requests")

    ok_http = False
    if has_key:
        ok_http, detail_http = asyncio.run(_check_tmdb(settings))
        table.add_row("TMDB connectivity", "OK" if ok_http else "FAIL", detail_http)
    else:
        table.add_row("TMDB connectivity", "SKIPPED", "No API key")

    _console.print(table)

    if not (has_key and ok_http):
        raise typer.Exit(code=1)
