"""Run script.

Why it exists:
- Allows `python -m tmdb_mcp`, which some MCP hosts prefer over the console script.
- Keeps a simple entrypoint alongside the `tmdb-mcp` script.
"""

from __future__ import annotations

from tmdb_mcp.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
