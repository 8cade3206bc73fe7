"""Type conversion utilities."""

from __future__ import annotations

import math
from typing import Any


def to_count(raw: Any) -> int:
    """Coerce a loosely-typed counter (seeders, leechers) to a non-negative int.

    The value is defaulted first and converted second, so an absent or
    falsy field is 0 before any parsing happens.

    Handles various formats:
        - None / "" / 0 → 0
        - 12 → 12
        - 12.9 → 12
        - "34" → 34
        - " 7.5 " → 7
        - "abc" → 0
        - NaN / inf → 0
        - -3 → 0

    Args:
        raw: Input value from an untrusted JSON payload.

    Returns:
        Non-negative integer.
    """
    value = raw or 0

    if isinstance(value, bool):
        return int(value)

    if isinstance(value, int):
        return max(value, 0)

    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0

    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return max(math.floor(value), 0)

    return 0
