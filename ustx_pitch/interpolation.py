"""Shape-aware sampling of a curve segment between two points.

Every shape is a cosine or linear easing of the normalised position
``r = (t - t0) / (t1 - t0)`` so all of them hit both endpoints exactly and stay
inside ``[v0, v1]``.
"""

from __future__ import annotations

import math
from collections.abc import Callable

import numpy as np

from .types import CurvePoint, Shape

__all__ = ["easing", "interpolate", "sample_ticks"]


def _linear(r: np.ndarray) -> np.ndarray:
    return r


def _ease_in(r: np.ndarray) -> np.ndarray:
    return 1.0 - np.cos(r * (math.pi / 2.0))


def _ease_out(r: np.ndarray) -> np.ndarray:
    return np.sin(r * (math.pi / 2.0))


def _ease_in_out(r: np.ndarray) -> np.ndarray:
    return (1.0 - np.cos(r * math.pi)) / 2.0


_EASINGS: dict[Shape, Callable[[np.ndarray], np.ndarray]] = {
    Shape.LINEAR: _linear,
    Shape.EASE_IN: _ease_in,
    Shape.EASE_OUT: _ease_out,
    Shape.EASE_IN_OUT: _ease_in_out,
}


def easing(shape: Shape) -> Callable[[np.ndarray], np.ndarray]:
    """Return the fraction function ``[0, 1] -> [0, 1]`` for ``shape``."""

    return _EASINGS[shape]


def sample_ticks(t0: int, t1: int, interval: int) -> np.ndarray:
    """Return every multiple of ``interval`` strictly between ``t0`` and ``t1``."""

    if interval <= 0:
        raise ValueError("interval must be positive")
    first = (t0 // interval + 1) * interval
    return np.arange(first, t1, interval, dtype=np.int64)


def interpolate(
    start: CurvePoint, end: CurvePoint, shape: Shape, interval: int
) -> list[CurvePoint]:
    """Sample the segment ``start -> end`` on the ``interval`` grid.

    The result starts with ``start``, ends with ``end`` and contains every grid
    tick strictly between them.
    """

    t0, v0 = int(start[0]), float(start[1])
    t1, v1 = int(end[0]), float(end[1])
    if t0 >= t1:
        raise ValueError(f"segment ticks must increase (got {t0} -> {t1})")
    ticks = sample_ticks(t0, t1, interval)
    r = (ticks - t0) / float(t1 - t0)
    values = v0 + (v1 - v0) * easing(shape)(r)
    inner = [(int(t), float(v)) for t, v in zip(ticks.tolist(), values.tolist())]
    return [(t0, v0), *inner, (t1, v1)]
