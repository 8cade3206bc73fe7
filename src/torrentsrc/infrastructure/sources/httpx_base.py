"""Shared base class for httpx-based torrent sources.

Holds the boilerplate every JSON-API source needs: client lifecycle,
fetch with structured error logging, JSON decoding, and the transport
failure policy (lenient: log and return ``None``; strict: raise
``SourceTransportError``).

This base class lives in the *infrastructure* layer because it depends
on ``httpx`` and ``structlog``.  The *domain* layer only knows
``SourceProtocol``; sources that inherit from ``HttpxSourceBase``
structurally satisfy that Protocol.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any

import httpx
import structlog

from torrentsrc.domain.sources import SourceTransportError

from .constants import (
    DEFAULT_CLIENT_TIMEOUT,
    DEFAULT_TRANSPORT_POLICY,
    DEFAULT_USER_AGENT,
    TransportPolicy,
)


class HttpxSourceBase:
    """Shared base for httpx-based torrent sources.

    Subclasses **must** set:
    - ``name``
    - ``default_base_url``

    An ``httpx.AsyncClient`` may be injected; the source then never closes
    it. Otherwise a client is created lazily and closed by ``cleanup()``.
    """

    name: str = ""
    default_base_url: str = ""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_CLIENT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport_policy: TransportPolicy = DEFAULT_TRANSPORT_POLICY,
    ) -> None:
        self.base_url: str = base_url or self.default_base_url
        self.transport_policy: TransportPolicy = transport_policy
        self._client: httpx.AsyncClient | None = http_client
        self._owns_client: bool = http_client is None
        self._timeout = timeout
        self._user_agent = user_agent
        self._log = structlog.get_logger(self.name or __name__)

    # ------------------------------------------------------------------
    # Client lifecycle
    # ------------------------------------------------------------------

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Create httpx client if not already running."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                headers={"User-Agent": self._user_agent},
            )
            self._owns_client = True
        return self._client

    async def cleanup(self) -> None:
        """Close the httpx client if this source created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> HttpxSourceBase:
        await self._ensure_client()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.cleanup()

    # ------------------------------------------------------------------
    # Fetch helpers
    # ------------------------------------------------------------------

    def _transport_failure(
        self,
        event: str,
        url: str,
        *,
        status: int | None = None,
        **context: Any,
    ) -> None:
        """Log a transport failure and raise it under the strict policy."""
        self._log.warning(f"{self.name}_{event}", url=url, status=status, **context)
        if self.transport_policy == "strict":
            raise SourceTransportError(
                f"{self.name}: {event.replace('_', ' ')}", url=url, status=status
            )

    async def _safe_fetch(self, url: str, *, context: str = "") -> httpx.Response | None:
        """GET *url*; return ``None`` on failure (lenient) or raise (strict)."""
        client = await self._ensure_client()
        try:
            resp = await client.get(url)
            resp.raise_for_status()
            return resp
        except httpx.TimeoutException:
            self._transport_failure("timeout", url, context=context)
        except httpx.HTTPStatusError as exc:
            self._transport_failure(
                "http_error", url, status=exc.response.status_code, context=context
            )
        except Exception as exc:  # noqa: BLE001
            self._transport_failure("fetch_error", url, error=str(exc), context=context)
        return None

    async def _fetch_json_list(self, url: str, *, context: str = "") -> list[Any] | None:
        """Fetch *url* and return its body if it decodes to a JSON array."""
        resp = await self._safe_fetch(url, context=context)
        if resp is None:
            return None

        try:
            data = resp.json()
        except ValueError:
            self._transport_failure("invalid_json", url, context=context)
            return None

        if not isinstance(data, list):
            self._transport_failure(
                "unexpected_body",
                url,
                status=resp.status_code,
                body_type=type(data).__name__,
                context=context,
            )
            return None
        return data

    async def _probe(self, url: str) -> bool:
        """Return whether a GET on *url* succeeds. Never raises."""
        try:
            client = await self._ensure_client()
            resp = await client.get(url)
        except Exception as exc:  # noqa: BLE001
            self._log.warning(f"{self.name}_validate_failed", url=url, error=str(exc))
            return False

        if not resp.is_success:
            self._log.warning(
                f"{self.name}_validate_failed", url=url, status=resp.status_code
            )
        return resp.is_success
