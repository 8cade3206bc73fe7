"""The Pirate Bay source via a public torrent-search JSON API.

Endpoint: ``GET {base}{query}`` returning a JSON array of items shaped like::

    {
        "Name": "One Piece - 1071 [1080p]",
        "Magnet": "magnet:?xt=urn:btih:...",
        "Seeders": "120",
        "Leechers": "8",
        "Size": "1.85 GiB",
        "DateUploaded": "06-13 2012"
    }

Every field is optional and loosely typed; see ``normalizer`` for the
mapping rules. No authentication, no pagination.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import quote

import httpx

from torrentsrc.domain.entities import SearchRequest, TorrentResult
from torrentsrc.infrastructure.common.query import build_query

from .constants import (
    DEFAULT_CLIENT_TIMEOUT,
    DEFAULT_MAX_RESULTS,
    DEFAULT_TRANSPORT_POLICY,
    DEFAULT_USER_AGENT,
    PIRATEBAY_BASE_URL,
    PIRATEBAY_PROBE_QUERY,
    URI_COMPONENT_SAFE,
    TransportPolicy,
)
from .httpx_base import HttpxSourceBase
from .normalizer import normalize_items

if TYPE_CHECKING:
    from torrentsrc.infrastructure.config import AppConfig


class PirateBaySource(HttpxSourceBase):
    """Fallback-tier source backed by The Pirate Bay search API."""

    name = "piratebay"
    default_base_url = PIRATEBAY_BASE_URL

    def __init__(
        self,
        *,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_CLIENT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport_policy: TransportPolicy = DEFAULT_TRANSPORT_POLICY,
        max_results: int = DEFAULT_MAX_RESULTS,
        probe_query: str = PIRATEBAY_PROBE_QUERY,
        lowercase_hash: bool = False,
    ) -> None:
        super().__init__(
            base_url=base_url,
            http_client=http_client,
            timeout=timeout,
            user_agent=user_agent,
            transport_policy=transport_policy,
        )
        self.max_results = max_results
        self.probe_query = probe_query
        self.lowercase_hash = lowercase_hash

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> PirateBaySource:
        return cls(
            base_url=config.source_base_url,
            http_client=http_client,
            timeout=config.http_timeout_seconds,
            user_agent=config.http_user_agent,
            transport_policy=config.source_transport_policy,
            max_results=config.source_max_results,
            probe_query=config.source_probe_query,
            lowercase_hash=config.source_lowercase_hash,
        )

    def search_url(self, query: str) -> str:
        return self.base_url + quote(query, safe=URI_COMPONENT_SAFE)

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    async def single(self, request: SearchRequest) -> list[TorrentResult]:
        """Search for a single episode (or title without episode)."""
        title = request.primary_title
        if not title:
            return []
        query = build_query(
            title,
            episode=request.episode,
            season=request.season,
            media_type=request.media_type,
            year=request.year,
        )
        return await self._search(query)

    async def batch(self, request: SearchRequest) -> list[TorrentResult]:
        """Search for a batch release. The index has no batch filter."""
        return await self.single(request)

    async def movie(self, request: SearchRequest) -> list[TorrentResult]:
        """Search for a movie. Same query path as ``single``."""
        return await self.single(request)

    async def validate(self) -> bool:
        """Probe the API with a fixed query; ``False`` on any failure."""
        return await self._probe(self.search_url(self.probe_query))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _search(self, query: str) -> list[TorrentResult]:
        url = self.search_url(query)
        items = await self._fetch_json_list(url, context="search")
        if items is None:
            return []

        results = normalize_items(
            items,
            limit=self.max_results,
            lowercase_hash=self.lowercase_hash,
        )
        self._log.info(
            "piratebay_search",
            query=query,
            received=len(items),
            count=len(results),
        )
        return results
