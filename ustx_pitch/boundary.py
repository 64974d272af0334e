"""Guarantee curve points at a note's start and end tick."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence

from .types import CurvePoint, Note

__all__ = ["boundary_value", "ensure_note_boundaries", "insert_point"]


def boundary_value(points: Sequence[CurvePoint], tick: int) -> float:
    """Return the value a missing boundary point at ``tick`` should take.

    ``points`` must be sorted by tick, hold at least two points and not
    contain ``tick``.
    """

    first_tick, first_value = points[0]
    last_tick = points[-1][0]
    if first_tick > tick:
        return float(first_value)
    if last_tick < tick:
        return 0.0
    idx = bisect_left([t for t, _ in points], tick)
    t_a, v_a = points[idx - 1]
    t_b, v_b = points[idx]
    slope = (v_b - v_a) / (t_b - t_a)
    return float(v_a + (tick - t_a) * slope)


def insert_point(points: Sequence[CurvePoint], point: CurvePoint) -> list[CurvePoint]:
    """Return a new list with ``point`` merged in at its tick position."""

    ticks = [t for t, _ in points]
    idx = bisect_left(ticks, point[0])
    return [*points[:idx], point, *points[idx:]]


def ensure_note_boundaries(
    points: Sequence[CurvePoint], note: Note
) -> tuple[CurvePoint, ...]:
    """Return ``points`` with a point at ``note.tick_on`` and ``note.tick_off``.

    Points are never removed and no tick already present is added twice.  A
    curve with at most one point is extended flat with that point's value (or
    ``0.0`` when empty).  Otherwise a boundary before the curve copies the first
    value, one after it returns to ``0.0`` and one inside it is linearly
    interpolated from its neighbours.
    """

    out = sorted(points, key=lambda p: p[0])
    sparse = len(out) <= 1
    sole = float(out[0][1]) if out else 0.0
    for tick in (note.tick_on, note.tick_off):
        if any(t == tick for t, _ in out):
            continue
        value = sole if sparse else boundary_value(out, tick)
        out = insert_point(out, (tick, value))
    return tuple(out)
