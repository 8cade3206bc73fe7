"""Shared constants for torrent sources."""

from __future__ import annotations

from typing import Literal

TransportPolicy = Literal["lenient", "strict"]

DEFAULT_USER_AGENT = "torrentsrc/0.1.0"
DEFAULT_CLIENT_TIMEOUT = 15.0
DEFAULT_MAX_RESULTS = 30
DEFAULT_TRANSPORT_POLICY: TransportPolicy = "lenient"

PIRATEBAY_BASE_URL = "https://torrent-search-api-livid.vercel.app/api/piratebay/"
PIRATEBAY_PROBE_QUERY = "one piece"

# Characters JavaScript's encodeURIComponent leaves untouched.
URI_COMPONENT_SAFE = "-_.!~*'()"
