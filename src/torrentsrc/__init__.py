"""Torrent index source adapter with a defensive normalization pipeline."""

from __future__ import annotations

__version__ = "0.1.0"
