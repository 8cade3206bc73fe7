"""Domain protocol for torrent sources."""

from __future__ import annotations

from typing import Protocol

from torrentsrc.domain.entities import SearchRequest, TorrentResult


class SourceProtocol(Protocol):
    """
    Contract a source must satisfy to be routed by an aggregator.

    A source exposes three query entry points (single episode, batch, movie)
    that resolve to an ordered, possibly empty list of results, plus a
    health check that never raises.
    """

    name: str

    async def single(self, request: SearchRequest) -> list[TorrentResult]: ...

    async def batch(self, request: SearchRequest) -> list[TorrentResult]: ...

    async def movie(self, request: SearchRequest) -> list[TorrentResult]: ...

    async def validate(self) -> bool: ...
