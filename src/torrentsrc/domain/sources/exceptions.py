"""Source exceptions."""

from __future__ import annotations


class SourceError(Exception):
    """Base class for all source-related errors."""


class SourceTransportError(SourceError):
    """Raised under the strict transport policy when a search request fails."""

    def __init__(self, message: str, *, url: str, status: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
