"""Normalization of raw index API items into TorrentResult records.

Each raw item is mapped independently. An item that cannot be mapped is
dropped and logged; the rest of the batch is unaffected. The output keeps
API response order and is capped at ``limit`` records.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from typing import Any

import structlog

from torrentsrc.domain.entities import TorrentResult
from torrentsrc.infrastructure.common.converters import to_count
from torrentsrc.infrastructure.common.parsers import (
    extract_info_hash,
    parse_size_to_bytes,
    parse_upload_date,
)

from .constants import DEFAULT_MAX_RESULTS

log = structlog.get_logger(__name__)


def _require_str(item: Mapping[str, Any], key: str) -> str:
    value = item.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{key} must be a string, got {type(value).__name__}")
    return value


def normalize_item(
    item: Any,
    *,
    now: datetime | None = None,
    lowercase_hash: bool = False,
) -> TorrentResult:
    """Map one raw API item to a TorrentResult.

    Raises:
        TypeError: If the item is not a JSON object.
        ValueError: If ``Name`` or ``Magnet`` is missing or not a string.
    """
    if not isinstance(item, Mapping):
        raise TypeError(f"item must be an object, got {type(item).__name__}")

    title = _require_str(item, "Name")
    link = _require_str(item, "Magnet")

    info_hash = extract_info_hash(link)
    if lowercase_hash:
        info_hash = info_hash.lower()

    return TorrentResult(
        title=title,
        link=link,
        hash=info_hash,
        seeders=to_count(item.get("Seeders")),
        leechers=to_count(item.get("Leechers")),
        downloads=0,  # not supplied by this index
        size=parse_size_to_bytes(item.get("Size")),
        date=parse_upload_date(item.get("DateUploaded"), now=now),
        accuracy="medium",
        type="alt",
    )


def normalize_items(
    items: Iterable[Any],
    *,
    limit: int = DEFAULT_MAX_RESULTS,
    now: datetime | None = None,
    lowercase_hash: bool = False,
) -> list[TorrentResult]:
    """Normalize a batch of raw items, skipping the ones that fail.

    Args:
        items: Raw items in API response order.
        limit: Maximum number of records returned (first N, not ranked).
        now: Fallback timestamp for unparseable dates; defaults to the
            current UTC time, taken once for the whole batch.
        lowercase_hash: Lower-case extracted info-hashes.

    Returns:
        Normalized results in input order.
    """
    if now is None:
        now = datetime.now(timezone.utc)

    results: list[TorrentResult] = []
    skipped = 0
    for index, item in enumerate(items):
        if len(results) >= limit:
            break
        try:
            results.append(
                normalize_item(item, now=now, lowercase_hash=lowercase_hash)
            )
        except Exception as exc:  # noqa: BLE001
            skipped += 1
            log.debug("item_skipped", index=index, error=str(exc))

    if skipped:
        log.info("items_skipped", skipped=skipped, kept=len(results))
    return results
