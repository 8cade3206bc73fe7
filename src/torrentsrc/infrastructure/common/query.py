"""Search query construction."""

from __future__ import annotations

import re

from torrentsrc.domain.entities import MediaType

_UNSAFE_RE = re.compile(r"[^\w\s-]")
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_title(title: str) -> str:
    """Replace characters the index cannot tokenize with spaces.

    Everything except word characters, whitespace and hyphens becomes a
    space; whitespace runs collapse to one space and the ends are trimmed.

    Examples:
        "Attack on Titan: Final Season!" -> "Attack on Titan Final Season"
        "Re:Zero - Starting Life"        -> "Re Zero - Starting Life"
    """
    cleaned = _UNSAFE_RE.sub(" ", title)
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def _movie_suffix(year: int | None) -> str:
    return f" {year}" if year else ""


def _tv_suffix(season: int | None, episode: int | None) -> str:
    if not episode:
        return ""
    return f" S{season or 1:02d}E{episode:02d}"


def _anime_suffix(episode: int | None) -> str:
    return f" {episode:02d}" if episode else ""


def build_query(
    title: str,
    *,
    episode: int | None = None,
    season: int | None = None,
    media_type: MediaType | str | None = None,
    year: int | None = None,
) -> str:
    """Build the free-text search string for a title.

    Suffix rules by media type:
        - movie: `` {year}`` when a year is given
        - tv: `` S{season:02d}E{episode:02d}``, season defaults to 1
          when only an episode is given
        - anime (default, also used for unknown types):
          `` {episode:02d}`` when an episode is given

    Args:
        title: Raw title text.
        episode: Optional episode number.
        season: Optional season number (tv only).
        media_type: Media type; unknown values are treated as anime.
        year: Optional release year (movie only).

    Returns:
        Sanitized query string with the media-specific suffix.
    """
    query = sanitize_title(title)
    kind = MediaType.parse(media_type)

    if kind is MediaType.MOVIE:
        return query + _movie_suffix(year)
    if kind is MediaType.TV:
        return query + _tv_suffix(season, episode)
    return query + _anime_suffix(episode)
