"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

from torrentsrc.infrastructure.sources.constants import (
    DEFAULT_CLIENT_TIMEOUT,
    DEFAULT_MAX_RESULTS,
    DEFAULT_TRANSPORT_POLICY,
    DEFAULT_USER_AGENT,
    PIRATEBAY_BASE_URL,
    PIRATEBAY_PROBE_QUERY,
)

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "torrentsrc",
    "environment": "dev",
    "source": {
        "base_url": PIRATEBAY_BASE_URL,
        "probe_query": PIRATEBAY_PROBE_QUERY,
        "max_results": DEFAULT_MAX_RESULTS,
        "transport_policy": DEFAULT_TRANSPORT_POLICY,
        "lowercase_hash": False,
    },
    "http": {
        "timeout_seconds": DEFAULT_CLIENT_TIMEOUT,
        "user_agent": DEFAULT_USER_AGENT,
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
}
