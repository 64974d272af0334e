"""Pitch unit conversions.

Covers the units met along the conversion: cents, tenths of a semitone,
semitones and 14-bit MIDI pitch-bend values.  Bend scaling always uses 8191
(``PB_MAX``) so ``±bend_range`` maps exactly to ``±8191``.

Sequence inputs return ``numpy.ndarray``; scalar inputs return Python numbers.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Union

import numpy as np

PB_MIN = -8191
PB_MAX = 8191
PB_FS = 8191.0

CENTS_PER_SEMITONE = 100.0
TENTHS_PER_SEMITONE = 10.0

__all__ = [
    "CENTS_PER_SEMITONE",
    "PB_FS",
    "PB_MAX",
    "PB_MIN",
    "TENTHS_PER_SEMITONE",
    "cents_to_semi",
    "semi_to_pb",
    "tenths_to_semi",
]

Number = Union[int, float]


def _clip_int(x: Number) -> int:
    v = int(round(x))
    if v < PB_MIN:
        return PB_MIN
    if v > PB_MAX:
        return PB_MAX
    return v


def cents_to_semi(cents: Number) -> float:
    """セント値を半音値へ変換する。"""

    return float(cents) / CENTS_PER_SEMITONE


def tenths_to_semi(tenths: Number) -> float:
    """1/10 半音単位の値を半音値へ変換する。"""

    return float(tenths) / TENTHS_PER_SEMITONE


def semi_to_pb(semi: Union[Number, Sequence[Number]], bend_range_semi: Number):
    """半音値をピッチベンド値へ変換する。``±bend_range`` → ``±8191``。"""

    if float(bend_range_semi) <= 0:
        raise ValueError("bend range must be positive")
    scale = PB_FS / float(bend_range_semi)
    if hasattr(semi, "__len__"):
        arr = np.asarray(semi, dtype=float)
        return np.clip(np.rint(arr * scale).astype(int), PB_MIN, PB_MAX)
    return _clip_int(float(semi) * scale)

