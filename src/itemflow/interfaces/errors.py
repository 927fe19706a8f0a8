"""Errors reported by entity sources.

The loading layer never classifies, wraps or translates these; they travel
verbatim through adapters and combinators. They exist so the bundled
in-memory collaborators can fail in a recognisable way.
"""


class SourceError(Exception):
    """Base class for failures reported by an entity source."""


class SourceUnavailableError(SourceError):
    """Raised when a source cannot be reached."""

    def __init__(self, source: str, attempt: int) -> None:
        super().__init__(f"{source} unavailable (attempt {attempt})")
        self.source = source
        self.attempt = attempt


class CacheMissError(SourceError):
    """Raised when a cache is read before anything was persisted to it."""

    def __init__(self, cache: str) -> None:
        super().__init__(f"{cache} has no cached entries")
        self.cache = cache
