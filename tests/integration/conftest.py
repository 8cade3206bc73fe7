"""Shared fixtures for integration tests.

These tests use real infrastructure components (config loader, httpx
client, PirateBaySource) with mocked HTTP via respx.
"""

from __future__ import annotations

import os

import pytest
import respx


@pytest.fixture()
def respx_router() -> respx.MockRouter:
    """Explicit respx mock router for request interception."""
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop TORRENTSRC_* variables leaking in from the host environment."""
    for key in list(os.environ):
        if key.startswith("TORRENTSRC_"):
            monkeypatch.delenv(key, raising=False)
