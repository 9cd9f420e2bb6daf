"""
Timing Primitives
==================

Wall-clock measurement of repeated calls and human-readable formatting of
the resulting averages.
"""

from __future__ import annotations

import time
from typing import Any, Callable


def measure_time(fn: Callable[[], Any], iterations: int = 1000) -> float:
    """Return the average wall-clock milliseconds per call of *fn*.

    *fn* is invoked exactly *iterations* times with no warm-up.  A single
    :func:`time.perf_counter` span is taken around the whole loop and
    divided by *iterations*, so the result is an amortised per-call cost:
    GC pauses or scheduler jitter that hit one call are spread across all
    of them rather than measured individually.

    Raises:
        ValueError: If *iterations* is less than 1.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")

    start = time.perf_counter()
    for _ in range(iterations):
        fn()
    elapsed = time.perf_counter() - start

    return elapsed * 1000.0 / iterations


def format_time(milliseconds: float) -> str:
    """Format a millisecond duration in the most readable unit.

    Examples:
        >>> format_time(0.0005)
        '0.500 μs'
        >>> format_time(0.25)
        '0.250 ms'
        >>> format_time(12.3456)
        '12.35 ms'
    """
    if milliseconds < 0.001:
        return f"{milliseconds * 1000:.3f} μs"
    if milliseconds < 1:
        return f"{milliseconds:.3f} ms"
    return f"{milliseconds:.2f} ms"
