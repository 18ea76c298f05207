"""Core configuration.

Why here:
- Centralizes environment variables (pydantic-settings) without leaking them into the CLI.
- Lets adapters (HTTP, server) read config consistently.

The TMDB credential is deliberately *not* a settings field: it is read from
the process environment on every outbound call (see `resolve_api_key`).
"""

from __future__ import annotations

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tmdb_mcp import __version__
from tmdb_mcp.core.errors import ConfigurationError

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
TMDB_IMAGE_BASE_URL = "https://image.tmdb.org/t/p/w500"
TMDB_API_KEY_ENV = "TMDB_API_KEY"


class AppSettings(BaseSettings):
    """Central application configuration.

    Why pydantic-settings:
    - Typing + validation at the edge (env vars) without cluttering the core.
    - One configuration contract for the CLI, the client and the server.
    """

    model_config = SettingsConfigDict(
        env_prefix="TMDB_MCP_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=TMDB_API_BASE_URL,
        min_length=8,
        description="Base URL of the TMDB v3 API.",
    )
    image_base_url: str = Field(
        default=TMDB_IMAGE_BASE_URL,
        min_length=8,
        description="Prefix prepended to poster paths.",
    )
    api_key_env: str = Field(
        default=TMDB_API_KEY_ENV,
        min_length=1,
        description="Name of the environment variable holding the TMDB API key.",
    )
    min_interval_seconds: float = Field(
        default=0.25,
        ge=0,
        description="Minimum spacing between outbound requests (seconds).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Per-request timeout (seconds).",
    )
    user_agent: str = Field(
        default=f"tmdb-mcp/{__version__}",
        min_length=1,
        description="User-Agent sent to TMDB.",
    )
    text_max_chars: int = Field(
        default=200,
        ge=1,
        description="Maximum length of free-text fields in list results.",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level (DEBUG, INFO, WARNING, ...).",
    )


def resolve_api_key(env_var: str = TMDB_API_KEY_ENV) -> str:
    """Read the TMDB API key from the process environment.

    Called on every request so a key exported after startup is picked up and
    nothing is cached.
    """

    resolved = (os.environ.get(env_var) or "").strip()
    if not resolved:
        raise ConfigurationError(
            f"{env_var} required. Free at https://www.themoviedb.org/settings/api"
        )
    return resolved
