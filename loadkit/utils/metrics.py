from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

PERCENTILE_KEYS: tuple[int, ...] = (50, 90, 95, 99)


@dataclass(frozen=True, slots=True)
class LatencySummary:
    n: int
    p50_ms: float
    p90_ms: float
    p95_ms: float
    p99_ms: float
    mean_ms: float
    std_ms: float


def _clamp_index(i: int, n: int) -> int:
    return min(max(i, 0), n - 1)


def compute_percentiles(samples: list[float] | np.ndarray, count: int | None = None) -> dict[int, float]:
    """Return p50/p90/p95/p99 by direct indexing into the sorted samples.

    `samples` (list or 1D ndarray) is sorted in place. Indices follow the
    load-test report convention: p50 at floor(n*0.5), the others at
    floor(n*q) - 1. Small sets produce out-of-range indices; those are
    clamped into [0, n-1].

    `count`, if given, must match len(samples).
    """
    n = len(samples)
    if count is not None and int(count) != n:
        raise ValueError(f"count={count} does not match len(samples)={n}")

    out = {k: 0.0 for k in PERCENTILE_KEYS}
    if n == 0:
        return out

    samples.sort()
    arr = np.asarray(samples, dtype=np.float64)

    out[50] = float(arr[_clamp_index(int(n * 0.50), n)])
    out[90] = float(arr[_clamp_index(int(n * 0.90) - 1, n)])
    out[95] = float(arr[_clamp_index(int(n * 0.95) - 1, n)])
    out[99] = float(arr[_clamp_index(int(n * 0.99) - 1, n)])
    return out


def compute_std_dev(samples: Sequence[float]) -> float:
    """Population standard deviation (divides by n, not n-1)."""
    arr = np.asarray(samples, dtype=np.float64).reshape(-1)
    if arr.size == 0:
        return 0.0
    return float(np.std(arr))


def summarize_latencies(samples_ms: Sequence[float]) -> LatencySummary:
    if len(samples_ms) == 0:
        return LatencySummary(n=0, p50_ms=0.0, p90_ms=0.0, p95_ms=0.0, p99_ms=0.0, mean_ms=0.0, std_ms=0.0)

    # Work on a copy; compute_percentiles sorts in place.
    ms = np.array(samples_ms, dtype=np.float64).reshape(-1)
    p = compute_percentiles(ms)
    return LatencySummary(
        n=int(ms.size),
        p50_ms=p[50],
        p90_ms=p[90],
        p95_ms=p[95],
        p99_ms=p[99],
        mean_ms=float(np.mean(ms)),
        std_ms=compute_std_dev(ms),
    )
