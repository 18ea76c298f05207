"""Command-line entrypoints (Typer)."""
