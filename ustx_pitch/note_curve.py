"""Per-note pitch curve construction.

Raw note points are given in milliseconds from the note onset and in tenths
of a semitone relative to the note key.  They are mapped to absolute ticks and
semitone offsets, filled in according to their shapes, pinned at the note
boundaries, overlaid with vibrato and finally snapped to the sampling grid.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Optional

from .boundary import ensure_note_boundaries
from .interpolation import interpolate
from .pb_math import tenths_to_semi
from .resample import resample
from .tempo import tick_from_milli_sec
from .types import (
    CurvePoint,
    Note,
    NotePitchData,
    NoteWithPitch,
    Shape,
    TickConverter,
    VibratoOverlay,
)
from .vibrato import apply_vibrato

__all__ = [
    "base_key",
    "build_note_curve",
    "build_note_curves",
    "note_points",
    "split_by_note",
]


def base_key(tick: int, note: Note, prev: Optional[Note]) -> int:
    """Return the portamento baseline for a point of ``note`` at ``tick``.

    Points before the previous note's end glide from that note's key.
    """

    if prev is not None and tick < prev.tick_off:
        return prev.key - note.key
    return 0


def note_points(
    note: Note,
    pitch: NotePitchData,
    prev: Optional[Note],
    bpm: float,
    *,
    interval: int,
    tick_converter: TickConverter = tick_from_milli_sec,
) -> list[CurvePoint]:
    """Map raw points to ``(tick, semitone)`` and fill the gaps between them."""

    points: list[CurvePoint] = []
    shape = Shape.EASE_IN_OUT
    for raw in pitch.points:
        x = note.tick_on + tick_converter(raw.x, bpm)
        y = tenths_to_semi(raw.y) - base_key(x, note, prev)
        if points and points[-1][1] != y and points[-1][0] < x:
            points.extend(interpolate(points[-1], (x, y), shape, interval)[1:])
        else:
            points.append((x, y))
        shape = raw.shape
    return points


def split_by_note(
    points: Iterable[CurvePoint], note: Note
) -> tuple[list[CurvePoint], list[CurvePoint], list[CurvePoint]]:
    """Partition ``points`` into before, inside and after ``note``."""

    before: list[CurvePoint] = []
    inside: list[CurvePoint] = []
    after: list[CurvePoint] = []
    for p in points:
        if p[0] < note.tick_on:
            before.append(p)
        elif p[0] > note.tick_off:
            after.append(p)
        else:
            inside.append(p)
    return before, inside, after


def build_note_curve(
    note: Note,
    pitch: NotePitchData,
    prev: Optional[Note],
    bpm: float,
    *,
    interval: int,
    tick_converter: TickConverter = tick_from_milli_sec,
    vibrato: VibratoOverlay = apply_vibrato,
) -> list[CurvePoint]:
    """Return the resampled pitch curve of a single note."""

    points = note_points(
        note, pitch, prev, bpm, interval=interval, tick_converter=tick_converter
    )
    points = ensure_note_boundaries(points, note)
    before, inside, after = split_by_note(points, note)
    inside = vibrato(inside, pitch.vibrato, note, bpm, interval)
    return resample([*before, *inside, *after], interval)


def build_note_curves(
    pairs: Sequence[NoteWithPitch],
    bpm: float,
    *,
    interval: int,
    tick_converter: TickConverter = tick_from_milli_sec,
    vibrato: VibratoOverlay = apply_vibrato,
) -> list[list[CurvePoint]]:
    """Build the curve of every note, tracking the preceding note in order."""

    curves: list[list[CurvePoint]] = []
    prev: Optional[Note] = None
    for pair in pairs:
        curves.append(
            build_note_curve(
                pair.note,
                pair.pitch,
                prev,
                bpm,
                interval=interval,
                tick_converter=tick_converter,
                vibrato=vibrato,
            )
        )
        prev = pair.note
    return curves
