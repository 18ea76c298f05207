"""MCP tool server exposing read-only TMDB queries."""

__version__ = "1.0.0"
