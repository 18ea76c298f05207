"""Error kinds raised by the TMDB layer.

Every error is raised to the caller; the tool server turns it into a failed
tool call. Nothing here is retried.
"""

from __future__ import annotations


class TmdbError(RuntimeError):
    """Base class for all errors raised while answering a tool call."""


class ConfigurationError(TmdbError):
    """The API credential is missing from the environment."""


class UpstreamError(TmdbError):
    """TMDB answered with a non-2xx status, or could not be reached."""

    def __init__(self, message: str, *, status_code: int | None = None, body_snippet: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body_snippet = body_snippet


class UnexpectedResponseError(TmdbError):
    """TMDB answered 2xx but the body does not have the expected shape."""
