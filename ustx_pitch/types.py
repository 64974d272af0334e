"""Score and pitch data model shared across :mod:`ustx_pitch`.

Notes and pitch inputs are read-only.  Curves are passed around as sequences
of ``(tick, value)`` tuples so that they stay cheap to build and compare.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Optional

logger = logging.getLogger(__name__)

CurvePoint = tuple[int, float]
TickConverter = Callable[[float, float], int]
LengthMismatch = Literal["strict", "truncate"]


@dataclass(frozen=True)
class Note:
    """A note span in ticks with its key in semitones."""

    tick_on: int
    tick_off: int
    key: int

    def __post_init__(self) -> None:
        if self.tick_off < self.tick_on:
            raise ValueError(
                f"tick_off ({self.tick_off}) must not precede tick_on ({self.tick_on})"
            )

    @property
    def length(self) -> int:
        return self.tick_off - self.tick_on


class Shape(Enum):
    """Easing shape of the segment that follows a point."""

    EASE_IN = "i"
    EASE_OUT = "o"
    EASE_IN_OUT = "io"
    LINEAR = "l"

    @classmethod
    def from_text(cls, text: str) -> "Shape":
        """Return the shape for an OpenUtau code (``"io"``) or member name."""

        try:
            return cls(text)
        except ValueError:
            pass
        try:
            return cls[str(text).upper()]
        except KeyError:
            raise ValueError(f"unknown pitch point shape: {text!r}") from None


@dataclass(frozen=True)
class RawNotePoint:
    x: float  # msec from note onset
    y: float  # 1/10 semitone
    shape: Shape = Shape.EASE_IN_OUT


@dataclass(frozen=True)
class VibratoParams:
    """Vibrato settings attached to a note.

    Parameters
    ----------
    length:
        Vibrato length as a percentage of the note length; ``0`` disables it.
    period:
        Oscillation period in milliseconds.
    depth:
        Amplitude in cents.
    fade_in, fade_out:
        Linear ramp lengths as percentages of the vibrato length.
    shift:
        Phase shift as a percentage of one period.
    drift:
        Constant offset as a percentage of ``depth``.
    """

    length: float = 0.0
    period: float = 175.0
    depth: float = 25.0
    fade_in: float = 0.0
    fade_out: float = 0.0
    shift: float = 0.0
    drift: float = 0.0


@dataclass(frozen=True)
class NotePitchData:
    points: tuple[RawNotePoint, ...] = ()
    vibrato: VibratoParams = field(default_factory=VibratoParams)


@dataclass(frozen=True)
class PartPitchData:
    """Part level curve ``(tick, cent)`` plus one :class:`NotePitchData` per note."""

    points: tuple[tuple[int, int], ...] = ()
    notes: tuple[NotePitchData, ...] = ()


@dataclass(frozen=True)
class NoteWithPitch:
    note: Note
    pitch: NotePitchData


@dataclass(frozen=True)
class Pitch:
    """Sparse pitch curve consumed by a piecewise-linear renderer.

    ``data`` holds ``(tick, value)`` pairs with ascending unique ticks.  Values
    may be ``None`` for curves that come from other sources; merging drops them.
    """

    data: tuple[tuple[int, Optional[float]], ...]
    is_absolute: bool = False


VibratoOverlay = Callable[
    [Sequence[CurvePoint], VibratoParams, Note, float, int], list[CurvePoint]
]


def pair_notes(
    notes: Sequence[Note],
    pitch_notes: Sequence[NotePitchData],
    policy: LengthMismatch = "strict",
) -> list[NoteWithPitch]:
    """Pair each note with its pitch input.

    ``policy="strict"`` raises :class:`ValueError` when the lengths differ;
    ``"truncate"`` keeps the shorter length and logs a warning.
    """

    if len(notes) != len(pitch_notes):
        if policy == "strict":
            raise ValueError(
                f"{len(notes)} notes but {len(pitch_notes)} note pitch entries"
            )
        if policy != "truncate":
            raise ValueError(f"unknown length mismatch policy: {policy!r}")
        logger.warning(
            "note/pitch count mismatch (%d vs %d); truncating to %d",
            len(notes),
            len(pitch_notes),
            min(len(notes), len(pitch_notes)),
        )
    return [NoteWithPitch(n, p) for n, p in zip(notes, pitch_notes)]


__all__ = [
    "CurvePoint",
    "LengthMismatch",
    "Note",
    "NotePitchData",
    "NoteWithPitch",
    "PartPitchData",
    "Pitch",
    "RawNotePoint",
    "Shape",
    "TickConverter",
    "VibratoOverlay",
    "VibratoParams",
    "pair_notes",
]
