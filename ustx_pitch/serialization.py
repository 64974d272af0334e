"""Plain ``dict`` / JSON / YAML forms of the pitch data model.

A part is described as::

    bpm: 120
    curve: [[tick, cent], ...]
    notes:
      - tick_on: 0
        tick_off: 480
        key: 60
        points: [[x_ms, y, "io"], ...]   # or {x:, y:, shape:}
        vibrato: {length: 50, period: 175, depth: 25, ...}
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .types import (
    Note,
    NotePitchData,
    PartPitchData,
    Pitch,
    RawNotePoint,
    Shape,
    VibratoParams,
)

__all__ = [
    "PartDump",
    "load_part",
    "part_from_dict",
    "pitch_from_dict",
    "pitch_to_dict",
]

_VIBRATO_KEYS = {f.name for f in fields(VibratoParams)}


@dataclass(frozen=True)
class PartDump:
    notes: tuple[Note, ...]
    pitch: PartPitchData
    bpm: float


def _raw_point(item: Any) -> RawNotePoint:
    if isinstance(item, Mapping):
        x, y, shape = item["x"], item["y"], item.get("shape", "io")
    elif isinstance(item, (list, tuple)) and len(item) in (2, 3):
        x, y = item[0], item[1]
        shape = item[2] if len(item) == 3 else "io"
    else:
        raise ValueError(f"invalid pitch point: {item!r}")
    return RawNotePoint(float(x), float(y), Shape.from_text(shape))


def _vibrato(item: Mapping[str, Any] | None) -> VibratoParams:
    if not item:
        return VibratoParams()
    unknown = set(item) - _VIBRATO_KEYS
    if unknown:
        raise ValueError(f"unknown vibrato keys: {sorted(unknown)}")
    return VibratoParams(**{k: float(v) for k, v in item.items()})


def part_from_dict(desc: Mapping[str, Any]) -> PartDump:
    """Build a :class:`PartDump` from a parsed mapping."""

    try:
        bpm = float(desc["bpm"])
        notes: list[Note] = []
        note_pitch: list[NotePitchData] = []
        for item in desc.get("notes", []):
            notes.append(Note(int(item["tick_on"]), int(item["tick_off"]), int(item["key"])))
            note_pitch.append(
                NotePitchData(
                    points=tuple(_raw_point(p) for p in item.get("points", [])),
                    vibrato=_vibrato(item.get("vibrato")),
                )
            )
        curve = tuple((int(t), int(c)) for t, c in desc.get("curve", []))
    except KeyError as exc:
        raise ValueError(f"missing key in part description: {exc}") from exc
    return PartDump(
        notes=tuple(notes),
        pitch=PartPitchData(points=curve, notes=tuple(note_pitch)),
        bpm=bpm,
    )


def load_part(path: str | Path) -> PartDump:
    """Load a part description from a JSON or YAML file."""

    p = Path(path)
    with p.open(encoding="utf-8") as fh:
        if p.suffix in {".yaml", ".yml"}:
            desc = yaml.safe_load(fh)
        else:
            desc = json.load(fh)
    if not isinstance(desc, Mapping):
        raise ValueError(f"{p}: part description must be a mapping")
    return part_from_dict(desc)


def pitch_to_dict(pitch: Pitch) -> dict[str, Any]:
    return {
        "is_absolute": pitch.is_absolute,
        "data": [[tick, value] for tick, value in pitch.data],
    }


def pitch_from_dict(desc: Mapping[str, Any]) -> Pitch:
    data = tuple(
        (int(tick), None if value is None else float(value)) for tick, value in desc["data"]
    )
    return Pitch(data=data, is_absolute=bool(desc.get("is_absolute", False)))
