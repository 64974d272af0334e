"""Render a relative :class:`~ustx_pitch.types.Pitch` as MIDI pitch bends.

PrettyMIDI's :class:`PitchBend` carries no channel; events are appended to the
given instrument and routing is left to the caller.
"""

from __future__ import annotations

import logging

import pretty_midi

from . import pb_math
from .tempo import DEFAULT_TICKS_PER_BEAT, milli_sec_from_tick
from .types import Pitch

logger = logging.getLogger(__name__)

__all__ = ["pitch_to_pitch_bends", "write_pitch_midi"]


def pitch_to_pitch_bends(
    pitch: Pitch,
    inst: pretty_midi.Instrument,
    bpm: float,
    *,
    bend_range_semitones: float = 2.0,
    ticks_per_beat: int = DEFAULT_TICKS_PER_BEAT,
) -> list[pretty_midi.PitchBend]:
    """Append ``pitch`` to ``inst`` as pitch-bend events and return them.

    Values beyond ``bend_range_semitones`` are clipped.  Consecutive events
    with the same bend value are collapsed into the first one.
    """

    if pitch.is_absolute:
        raise ValueError("pitch bends require a relative pitch curve")
    points = [(tick, value) for tick, value in pitch.data if value is not None]
    if not points:
        return []
    bends = pb_math.semi_to_pb([v for _, v in points], bend_range_semitones).tolist()
    out: list[pretty_midi.PitchBend] = []
    last: int | None = None
    for (tick, _), bend in zip(points, bends):
        if bend == last:
            continue
        sec = milli_sec_from_tick(tick, bpm, ticks_per_beat) / 1000.0
        out.append(pretty_midi.PitchBend(pitch=int(bend), time=max(sec, 0.0)))
        last = bend
    clipped = sum(1 for _, v in points if abs(v) > bend_range_semitones)
    if clipped:
        logger.warning(
            "%d pitch points exceed ±%s semitones and were clipped",
            clipped,
            bend_range_semitones,
        )
    inst.pitch_bends.extend(out)
    return out


def write_pitch_midi(
    pitch: Pitch,
    path: str,
    bpm: float,
    *,
    bend_range_semitones: float = 2.0,
    ticks_per_beat: int = DEFAULT_TICKS_PER_BEAT,
) -> pretty_midi.PrettyMIDI:
    """Write ``pitch`` to a single-track MIDI file at ``path``."""

    pm = pretty_midi.PrettyMIDI(resolution=ticks_per_beat, initial_tempo=bpm)
    inst = pretty_midi.Instrument(program=0, name="pitch")
    pitch_to_pitch_bends(
        pitch,
        inst,
        bpm,
        bend_range_semitones=bend_range_semitones,
        ticks_per_beat=ticks_per_beat,
    )
    pm.instruments.append(inst)
    pm.write(path)
    return pm
