"""Core: configuration, errors, rate limiting, domain and services.

Nothing in here talks to the network directly.
"""
