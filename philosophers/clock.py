"""Wall-clock helpers working in whole milliseconds."""

from __future__ import annotations

import time

_POLL_SECONDS = 0.0001


def now_ms() -> int:
    """Return the current wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def sleep_ms(ms: int) -> None:
    """Sleep for at least ``ms`` milliseconds, polling in short steps."""
    start = now_ms()
    while now_ms() - start < ms:
        time.sleep(_POLL_SECONDS)