"""Adapters: HTTP access to TMDB and output rendering."""
