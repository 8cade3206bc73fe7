"""Parsing utilities for loosely-structured torrent fields."""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d+)?|\.\d+)\s*([A-Za-z]*)\s*$")

_SIZE_MULTIPLIERS: dict[str, int] = {
    "B": 1,
    "KIB": 1024,
    "MIB": 1024**2,
    "GIB": 1024**3,
    "TIB": 1024**4,
    "KB": 1000,
    "MB": 1000**2,
    "GB": 1000**3,
    "TB": 1000**4,
}

_MONTH_DAY_RE = re.compile(r"^\s*(\d{1,2})-(\d{1,2})\s+(.+?)\s*$")
_YEAR_RE = re.compile(r"^\d{4}$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")

_INFO_HASH_RE = re.compile(r"btih:([a-f0-9]+)", re.IGNORECASE)


def parse_size_to_bytes(size_str: Any) -> int:
    """Parse a human-readable size string to bytes.

    Supports formats:
        - "1234" (raw bytes)
        - "500 B"
        - "1.85 GiB" (binary units, ×1024ⁿ)
        - "700 MB" (decimal units, ×1000ⁿ)

    Units are case-insensitive. An unknown unit keeps the raw number
    ("5 XB" → 5). Anything else, including non-string input and values
    too large to represent, yields 0.

    Args:
        size_str: Size string.

    Returns:
        Size in bytes (int, floored).
    """
    if not isinstance(size_str, str):
        return 0

    match = _SIZE_RE.match(size_str)
    if not match:
        return 0

    value = float(match.group(1))
    unit = match.group(2).upper() or "B"

    size = value * _SIZE_MULTIPLIERS.get(unit, 1)
    if not math.isfinite(size):
        return 0
    return math.floor(size)


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _parse_month_day(text: str, now: datetime) -> datetime | None:
    match = _MONTH_DAY_RE.match(text)
    if not match:
        return None

    month, day = int(match.group(1)), int(match.group(2))
    remainder = match.group(3)

    try:
        if _YEAR_RE.match(remainder):
            return datetime(int(remainder), month, day, tzinfo=timezone.utc)

        time_match = _TIME_RE.match(remainder)
        if not time_match:
            return None
        hour, minute = int(time_match.group(1)), int(time_match.group(2))
        second = int(time_match.group(3) or 0)
        return datetime(now.year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError:
        return None


def _parse_generic(text: str) -> datetime | None:
    try:
        return _as_utc(datetime.fromisoformat(text.strip()))
    except (ValueError, OverflowError):
        pass
    try:
        return _as_utc(parsedate_to_datetime(text))
    except (TypeError, ValueError, IndexError, OverflowError):
        return None


def parse_upload_date(text: Any, *, now: datetime | None = None) -> datetime:
    """Parse an upload date string into an aware UTC datetime.

    Supports formats:
        - "06-13 2012" (MM-DD YYYY) → 2012-06-13 00:00
        - "01-01 05:50" (MM-DD HH:MM, year omitted) → current year, 05:50
        - ISO-8601 ("2012-06-13T10:00:00") and RFC 2822 strings as a fallback

    Args:
        text: Raw date string.
        now: Reference time; defaults to the current UTC time.

    Returns:
        Parsed datetime, or ``now`` when nothing can be parsed.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    if not isinstance(text, str) or not text.strip():
        return now

    return _parse_month_day(text, now) or _parse_generic(text) or now


def extract_info_hash(magnet: Any) -> str:
    """Extract the hex info-hash from a magnet URI, or "" if absent."""
    if not isinstance(magnet, str):
        return ""
    match = _INFO_HASH_RE.search(magnet)
    return match.group(1) if match else ""
