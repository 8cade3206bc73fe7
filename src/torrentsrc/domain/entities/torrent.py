"""Domain entities for torrent source searches."""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal


class MediaType(str, enum.Enum):
    """Kind of media a search targets. Drives query suffix rules."""

    MOVIE = "movie"
    TV = "tv"
    ANIME = "anime"

    @classmethod
    def parse(cls, value: MediaType | str | None) -> MediaType:
        """Map loose input onto a member; unknown values fall back to ANIME."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.ANIME
        return cls.ANIME


@dataclass(frozen=True)
class SearchRequest:
    """Immutable search request handed to a source entry point."""

    titles: tuple[str, ...] = ()
    episode: int | None = None
    season: int | None = None
    media_type: MediaType = MediaType.ANIME
    year: int | None = None

    def __post_init__(self) -> None:
        titles = self.titles or ()
        if isinstance(titles, str):
            titles = (titles,)
        object.__setattr__(self, "titles", tuple(titles))
        object.__setattr__(self, "media_type", MediaType.parse(self.media_type))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> SearchRequest:
        """Build a request from the aggregator's loosely-typed query mapping."""
        media_type = data.get("mediaType", data.get("media_type"))
        return cls(
            titles=data.get("titles") or (),
            episode=data.get("episode"),
            season=data.get("season"),
            media_type=MediaType.parse(media_type),
            year=data.get("year"),
        )

    @property
    def primary_title(self) -> str | None:
        """First candidate title; None when absent or not a string."""
        if self.titles and isinstance(self.titles[0], str):
            return self.titles[0]
        return None


@dataclass(frozen=True)
class TorrentResult:
    """Normalized torrent search result.

    Every field is always populated; parsers substitute defaults
    (0, empty string, current time) for anything they cannot read.
    """

    title: str
    link: str
    hash: str
    seeders: int
    leechers: int
    downloads: int
    size: int
    date: datetime
    accuracy: Literal["high", "medium", "low"] = "medium"
    type: Literal["batch", "best", "alt"] = "alt"

    def to_dict(self) -> dict[str, Any]:
        """Render in the aggregator's result shape (ISO-8601 date)."""
        return {
            "title": self.title,
            "link": self.link,
            "hash": self.hash,
            "seeders": self.seeders,
            "leechers": self.leechers,
            "downloads": self.downloads,
            "size": self.size,
            "date": self.date.isoformat(),
            "accuracy": self.accuracy,
            "type": self.type,
        }
