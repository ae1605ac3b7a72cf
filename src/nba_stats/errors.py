"""
Exceptions raised by the nba-stats client.

Not finding a player is not an error: resolver and facade lookups
return None for that case.
"""

from __future__ import annotations


class NBAStatsError(Exception):
    """Base exception for nba-stats errors."""
    pass


class FetchError(NBAStatsError):
    """Raised when an upstream request fails or returns an unusable body."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class MalformedResponseError(FetchError):
    """Raised when an upstream payload is missing an expected field or result set."""
    pass
