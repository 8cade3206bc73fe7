"""Common infrastructure utilities."""

from __future__ import annotations

from .converters import to_count
from .parsers import extract_info_hash, parse_size_to_bytes, parse_upload_date
from .query import build_query, sanitize_title

__all__ = [
    "build_query",
    "extract_info_hash",
    "parse_size_to_bytes",
    "parse_upload_date",
    "sanitize_title",
    "to_count",
]
