"""Vibrato overlay for the in-note slice of a pitch curve."""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from .interpolation import sample_ticks
from .tempo import tick_from_milli_sec
from .types import CurvePoint, Note, TickConverter, VibratoParams

__all__ = ["apply_vibrato", "vibrato_offset"]


def vibrato_offset(
    tick: float,
    params: VibratoParams,
    note: Note,
    period_ticks: float,
) -> float:
    """Return the vibrato deviation in semitones at ``tick``.

    The vibrato occupies the last ``params.length`` percent of the note and
    is zero before it.  Fade-in and fade-out are linear ramps measured in
    percent of the vibrato length.
    """

    vib_len = note.length * min(max(params.length, 0.0), 100.0) / 100.0
    start = note.tick_off - vib_len
    if vib_len <= 0 or tick < start or tick > note.tick_off:
        return 0.0
    fade = 1.0
    fade_in_len = vib_len * params.fade_in / 100.0
    if fade_in_len > 0:
        fade = min(fade, (tick - start) / fade_in_len)
    fade_out_len = vib_len * params.fade_out / 100.0
    if fade_out_len > 0:
        fade = min(fade, (note.tick_off - tick) / fade_out_len)
    phase = (tick - start) / period_ticks + params.shift / 100.0
    wave = math.sin(2 * math.pi * phase) + params.drift / 100.0
    return params.depth / 100.0 * max(fade, 0.0) * wave


def apply_vibrato(
    points: Sequence[CurvePoint],
    params: VibratoParams,
    note: Note,
    bpm: float,
    interval: int,
    *,
    tick_converter: TickConverter = tick_from_milli_sec,
) -> list[CurvePoint]:
    """Superimpose ``params`` on ``points`` lying within ``note``.

    Grid ticks every ``interval`` are added over the vibrato span with their
    base value interpolated linearly from ``points``.  Values at
    ``note.tick_on`` and ``note.tick_off`` are left untouched.
    """

    out = sorted(((int(t), float(v)) for t, v in points), key=lambda p: p[0])
    if not out or params.length <= 0 or params.depth <= 0 or note.length <= 0:
        return out
    period_ticks = tick_converter(params.period, bpm)
    if period_ticks < 1:
        return out

    vib_len = note.length * min(params.length, 100.0) / 100.0
    start = note.tick_off - vib_len
    xp = np.asarray([t for t, _ in out], dtype=float)
    fp = np.asarray([v for _, v in out], dtype=float)
    present = {t for t, _ in out}
    grid = [
        int(t)
        for t in sample_ticks(math.ceil(start) - 1, note.tick_off, interval).tolist()
        if t not in present
    ]
    base = np.interp(np.asarray(grid, dtype=float), xp, fp) if grid else []
    merged = sorted([*out, *zip(grid, (float(b) for b in base))], key=lambda p: p[0])

    result: list[CurvePoint] = []
    for tick, value in merged:
        if note.tick_on < tick < note.tick_off:
            value += vibrato_offset(tick, params, note, period_ticks)
        result.append((tick, value))
    return result
