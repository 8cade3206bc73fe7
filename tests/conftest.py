"""Shared test fixtures for the torrentsrc test suite."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

import pytest
import structlog

from torrentsrc.domain.entities import MediaType, SearchRequest

HASH_A = "A1B2C3D4E5F60718293A4B5C6D7E8F9012345678"
HASH_B = "0123456789abcdef0123456789abcdef01234567"


def make_magnet(info_hash: str, name: str = "release") -> str:
    return f"magnet:?xt=urn:btih:{info_hash}&dn={name}&tr=udp%3A%2F%2Ftracker.example%3A1337"


def make_raw_item(index: int = 0, **overrides: Any) -> dict[str, Any]:
    """Raw API item as returned by the torrent-search API."""
    item: dict[str, Any] = {
        "Name": f"One Piece - {1000 + index:04d} [1080p]",
        "Magnet": make_magnet(f"{index:040x}"),
        "Seeders": str(100 + index),
        "Leechers": str(index),
        "Size": "1.5 GiB",
        "DateUploaded": "06-13 2012",
        "Uploader": "someone",
    }
    item.update(overrides)
    return item


@pytest.fixture()
def item_factory():
    """Factory for raw API items: ``item_factory(index, **overrides)``."""
    return make_raw_item


@pytest.fixture()
def magnet_factory():
    """Factory for magnet URIs: ``magnet_factory(info_hash)``."""
    return make_magnet


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo configure_logging() so later tests do not write to closed streams."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)


# ---------------------------------------------------------------------------
# Domain entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2025, 3, 14, 9, 26, 53, tzinfo=timezone.utc)


@pytest.fixture()
def anime_request() -> SearchRequest:
    return SearchRequest(titles=("One Piece", "ワンピース"), episode=7)


@pytest.fixture()
def tv_request() -> SearchRequest:
    return SearchRequest(
        titles=("Breaking Bad",), season=2, episode=5, media_type=MediaType.TV
    )


@pytest.fixture()
def movie_request() -> SearchRequest:
    return SearchRequest(titles=("The Matrix",), media_type=MediaType.MOVIE, year=1999)


@pytest.fixture()
def raw_items() -> list[dict[str, Any]]:
    """Three well-formed raw items."""
    return [
        make_raw_item(0, Magnet=make_magnet(HASH_A), Size="1.85 GiB"),
        make_raw_item(1, Magnet=make_magnet(HASH_B), Size="500 MiB"),
        make_raw_item(2, DateUploaded="01-01 05:50"),
    ]
