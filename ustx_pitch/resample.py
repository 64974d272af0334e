"""Quantise curve ticks onto a fixed sampling grid."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from .types import CurvePoint

__all__ = ["resample"]


def resample(points: Iterable[CurvePoint], interval: int) -> list[CurvePoint]:
    """Snap ticks down to multiples of ``interval`` and average collisions.

    Buckets are ``floor(tick / interval) * interval`` and are returned in
    ascending order, so resampling an already resampled curve is a no-op.
    """

    if interval <= 0:
        raise ValueError("interval must be positive")
    buckets: defaultdict[int, list[float]] = defaultdict(list)
    for tick, value in points:
        buckets[int(tick) // interval * interval].append(float(value))
    return [(tick, sum(vals) / len(vals)) for tick, vals in sorted(buckets.items())]
