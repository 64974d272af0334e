"""ustx_pitch -- OpenUtau note pitch to tick pitch-curve conversion.

Public API:
    - pitch_from_ustx_part
    - merge_pitch_from_parts
    - data model: Note, Shape, RawNotePoint, VibratoParams, NotePitchData,
      PartPitchData, Pitch
    - ConversionSettings / load_settings
"""

from .conversion import pitch_from_ustx_part
from .merge import merge_pitch_from_parts
from .settings import ConversionSettings, load_settings
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
    "ConversionSettings",
    "Note",
    "NotePitchData",
    "PartPitchData",
    "Pitch",
    "RawNotePoint",
    "Shape",
    "VibratoParams",
    "load_settings",
    "merge_pitch_from_parts",
    "pitch_from_ustx_part",
]
