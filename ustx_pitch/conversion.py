"""Part level pitch conversion entry point."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import partial
from typing import Optional

from .merge import merge_curves
from .note_curve import build_note_curves
from .pb_math import cents_to_semi
from .resample import resample
from .settings import ConversionSettings
from .tempo import tick_converter as make_tick_converter
from .types import (
    CurvePoint,
    Note,
    PartPitchData,
    Pitch,
    TickConverter,
    VibratoOverlay,
    pair_notes,
)
from .vibrato import apply_vibrato

logger = logging.getLogger(__name__)

__all__ = ["part_curve", "pitch_from_ustx_part"]


def part_curve(points: Sequence[tuple[int, int]], interval: int) -> list[CurvePoint]:
    """Return the part level ``(tick, cent)`` curve in semitones on the grid."""

    return resample(((int(x), cents_to_semi(y)) for x, y in points), interval)


def pitch_from_ustx_part(
    notes: Sequence[Note],
    pitch_data: PartPitchData,
    bpm: float,
    *,
    settings: Optional[ConversionSettings] = None,
    tick_converter: Optional[TickConverter] = None,
    vibrato: Optional[VibratoOverlay] = None,
) -> Optional[Pitch]:
    """Convert one part's note and curve pitch data into a relative :class:`Pitch`.

    Returns ``None`` when neither the notes nor the part curve yield a point.
    ``tick_converter`` and ``vibrato`` default to the built-in constant-tempo
    converter and vibrato overlay configured from ``settings``.
    """

    cfg = settings or ConversionSettings()
    interval = cfg.sampling_interval_tick
    converter = tick_converter or make_tick_converter(cfg.ticks_per_beat)
    overlay = vibrato or partial(apply_vibrato, tick_converter=converter)

    pairs = pair_notes(notes, pitch_data.notes, cfg.length_mismatch)
    note_curves = build_note_curves(
        pairs, bpm, interval=interval, tick_converter=converter, vibrato=overlay
    )
    curve = part_curve(pitch_data.points, interval)
    data = merge_curves(*note_curves, curve)
    logger.debug(
        "part pitch: %d notes, %d curve points -> %d points",
        len(pairs),
        len(curve),
        len(data),
    )
    if not data:
        return None
    return Pitch(data=tuple(data), is_absolute=False)
