"""
Retry delay computation.

Delays are expressed in milliseconds. A server supplied ``Retry-After`` hint
always wins over the exponential fallback.
"""
import math
import re
from typing import Optional

BASE_DELAY_MS = 1000
MAX_DELAY_MS = 60000

_NUMERIC = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def compute_backoff_ms(attempt: int) -> int:
    """Exponential backoff: 2^attempt * 1000 ms, capped at 60 seconds."""
    if attempt < 0:
        raise ValueError("attempt must be >= 0")
    # Avoid computing huge powers once the cap is reached
    if attempt >= 16:
        return MAX_DELAY_MS
    return min((2 ** attempt) * BASE_DELAY_MS, MAX_DELAY_MS)


def parse_retry_after(value: Optional[str]) -> Optional[int]:
    """
    Parse a ``Retry-After`` header value (seconds) into milliseconds.

    Returns None when the header is absent, not numeric, negative or not
    finite. Fractional seconds are rounded up.
    """
    if value is None:
        return None
    text = value.strip()
    if not _NUMERIC.fullmatch(text):
        return None
    try:
        seconds = float(text)
    except ValueError:
        return None
    if not math.isfinite(seconds) or seconds < 0:
        return None
    return math.ceil(seconds) * 1000


def resolve_retry_delay_ms(attempt: int, hint_ms: Optional[int] = None) -> int:
    """Delay before the next attempt, given the failed attempt index."""
    if hint_ms is not None:
        return hint_ms
    return compute_backoff_ms(attempt)
