"""Tick <-> millisecond conversion for a constant tempo."""

from __future__ import annotations

import math
from functools import partial

from .types import TickConverter

DEFAULT_TICKS_PER_BEAT = 480

__all__ = [
    "DEFAULT_TICKS_PER_BEAT",
    "milli_sec_from_tick",
    "tick_converter",
    "tick_from_milli_sec",
]


def _check_bpm(bpm: float) -> float:
    bpm_f = float(bpm)
    if bpm_f <= 0 or not math.isfinite(bpm_f):
        raise ValueError("bpm must be positive and finite")
    return bpm_f


def tick_from_milli_sec(
    msec: float, bpm: float, ticks_per_beat: int = DEFAULT_TICKS_PER_BEAT
) -> int:
    """Return the tick count closest to ``msec`` milliseconds at ``bpm``."""

    bpm_f = _check_bpm(bpm)
    return int(round(float(msec) * bpm_f * ticks_per_beat / 60000.0))


def milli_sec_from_tick(
    tick: float, bpm: float, ticks_per_beat: int = DEFAULT_TICKS_PER_BEAT
) -> float:
    """Return the duration of ``tick`` ticks at ``bpm`` in milliseconds."""

    bpm_f = _check_bpm(bpm)
    return float(tick) * 60000.0 / (bpm_f * ticks_per_beat)


def tick_converter(ticks_per_beat: int = DEFAULT_TICKS_PER_BEAT) -> TickConverter:
    """Return ``(msec, bpm) -> tick`` bound to ``ticks_per_beat``."""

    if ticks_per_beat <= 0:
        raise ValueError("ticks_per_beat must be positive")
    return partial(tick_from_milli_sec, ticks_per_beat=ticks_per_beat)
