"""Wall-clock timestamps and elapsed time in milliseconds."""

from __future__ import annotations

import time


def timestamp() -> float:
    """Return the current wall-clock time in seconds since the epoch."""
    return time.time()


def elapsed_ms(start: float, end: float) -> float:
    """Return the milliseconds from ``start`` to ``end`` (both in seconds)."""
    return (end - start) * 1000.0