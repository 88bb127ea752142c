"""Per-operation latency instrumentation for backend calls.

Only the most recent LATENCY_WINDOW samples per operation are kept.
"""
import time
from contextlib import contextmanager
from collections import defaultdict, deque

LATENCY_WINDOW = 1000

_timers = defaultdict(lambda: deque(maxlen=LATENCY_WINDOW))


@contextmanager
def record_latency(name: str):
    start = time.perf_counter()
    try:
        yield
    finally:
        _timers[name].append((time.perf_counter() - start) * 1000.0)


def get_metrics_snapshot() -> dict:
    snapshot = {}
    for name, values in list(_timers.items()):
        ordered = sorted(values)
        count = len(ordered)
        snapshot[name] = {
            "count": count,
            "avg_ms": (sum(ordered) / count) if count else 0.0,
            "p95_ms": ordered[int(round(0.95 * (count - 1)))] if count else 0.0,
        }
    return snapshot


def reset_metrics() -> None:
    _timers.clear()
