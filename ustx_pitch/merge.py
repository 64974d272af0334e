"""Additive merging of independently produced curves."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from typing import Optional

from .types import CurvePoint, Pitch

logger = logging.getLogger(__name__)

__all__ = ["merge_curves", "merge_pitch_from_parts"]


def merge_curves(*curves: Iterable[tuple[int, Optional[float]]]) -> list[CurvePoint]:
    """Sum values sharing a tick across ``curves``.

    Points whose value is ``None`` are dropped.  The result is sorted by tick.
    """

    sums: defaultdict[int, float] = defaultdict(float)
    for curve in curves:
        for tick, value in curve:
            if value is None:
                continue
            sums[int(tick)] += float(value)
    return sorted(sums.items())


def merge_pitch_from_parts(
    first: Optional[Pitch], second: Optional[Pitch]
) -> Optional[Pitch]:
    """Merge the pitch curves of two parts.

    If either side is ``None`` the other one is returned unchanged.  Both
    inputs are expected to share the same ``is_absolute`` flag; the result
    keeps the flag of ``first``.
    """

    if first is None:
        return second
    if second is None:
        return first
    if first.is_absolute != second.is_absolute:
        logger.warning("merging absolute and relative pitch curves")
    data = merge_curves(first.data, second.data)
    return Pitch(data=tuple(data), is_absolute=first.is_absolute)
