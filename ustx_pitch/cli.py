"""Command line interface for :mod:`ustx_pitch`.

Converts one or more JSON/YAML part descriptions into a single relative pitch
curve.  The curve is printed as JSON (or written with ``--out``) and can also
be rendered as MIDI pitch bends with ``--midi``.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .conversion import pitch_from_ustx_part
from .merge import merge_pitch_from_parts
from .midi_export import write_pitch_midi
from .serialization import load_part, pitch_to_dict
from .settings import load_settings
from .types import Pitch

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ustx-pitch", description="Convert note pitch data to a tick pitch curve"
    )
    parser.add_argument("parts", nargs="+", help="JSON/YAML part descriptions")
    parser.add_argument("--out", help="write curve JSON here instead of stdout")
    parser.add_argument("--midi", help="also write the curve as MIDI pitch bends")
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("--interval", type=int, help="sampling interval in ticks")
    parser.add_argument(
        "--truncate",
        action="store_true",
        help="pair notes and pitch entries up to the shorter length",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: list[str] | None = None) -> Optional[Pitch]:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings(
        args.config,
        sampling_interval_tick=args.interval,
        length_mismatch="truncate" if args.truncate else None,
    )

    pitch: Optional[Pitch] = None
    bpm: Optional[float] = None
    for path in args.parts:
        part = load_part(path)
        if bpm is None:
            bpm = part.bpm
        elif part.bpm != bpm:
            logger.warning("%s: bpm %s differs from %s", path, part.bpm, bpm)
        part_pitch = pitch_from_ustx_part(part.notes, part.pitch, part.bpm, settings=settings)
        if part_pitch is None:
            logger.info("%s: no pitch curve", path)
        pitch = merge_pitch_from_parts(pitch, part_pitch)

    if pitch is None:
        logger.warning("no pitch points in any part")
        return None

    text = json.dumps(pitch_to_dict(pitch))
    if args.out:
        Path(args.out).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text + "\n")
    if args.midi and bpm is not None:
        write_pitch_midi(
            pitch,
            args.midi,
            bpm,
            bend_range_semitones=settings.bend_range_semitones,
            ticks_per_beat=settings.ticks_per_beat,
        )
        logger.info("wrote %s", args.midi)
    return pitch


if __name__ == "__main__":  # pragma: no cover
    main()
