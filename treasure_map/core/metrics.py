"""Place search metrics.

Collects search latency plus failure and stale-response counters.
"""
import time
from collections import deque
from contextlib import contextmanager

# Percentiles cover the most recent searches only
MAX_SAMPLES = 1000

_search_timings_ms: deque = deque(maxlen=MAX_SAMPLES)
_search_failures: int = 0
_stale_responses: int = 0


@contextmanager
def record_search_latency():
    start = time.perf_counter()
    try:
        yield
    finally:
        _search_timings_ms.append((time.perf_counter() - start) * 1000.0)


def record_search_failure() -> None:
    global _search_failures
    _search_failures += 1


def record_stale_response() -> None:
    global _stale_responses
    _stale_responses += 1


def _percentiles(values) -> dict:
    if not values:
        return {"count": 0, "p95_ms": None, "p99_ms": None}
    vals = sorted(values)
    count = len(vals)

    def _p(p: float) -> float:
        idx = int(round(p * (count - 1)))
        return vals[idx]
    return {"count": count, "p95_ms": _p(0.95), "p99_ms": _p(0.99)}


def snapshot_metrics() -> dict:
    return {
        "search": _percentiles(_search_timings_ms),
        "search_failures": _search_failures,
        "stale_responses": _stale_responses,
    }


def reset_metrics() -> None:
    global _search_failures, _stale_responses
    _search_timings_ms.clear()
    _search_failures = 0
    _stale_responses = 0
