"""Conversion settings.

Values come from (highest priority first) keyword overrides, an optional YAML
file and ``USTX_PITCH_*`` environment variables.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .tempo import DEFAULT_TICKS_PER_BEAT

logger = logging.getLogger(__name__)

SAMPLING_INTERVAL_TICK = 5


class ConversionSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="USTX_PITCH_", extra="ignore")

    sampling_interval_tick: int = Field(SAMPLING_INTERVAL_TICK, ge=1)
    ticks_per_beat: int = Field(DEFAULT_TICKS_PER_BEAT, ge=1)
    length_mismatch: Literal["strict", "truncate"] = "strict"
    bend_range_semitones: float = Field(2.0, gt=0)


def load_settings(path: str | Path | None = None, **overrides: Any) -> ConversionSettings:
    """Return :class:`ConversionSettings` merged from ``path`` and ``overrides``.

    ``path`` points at a YAML mapping; a ``ustx_pitch`` section is used when
    present so the file can be shared with other tools.
    """

    data: dict[str, Any] = {}
    if path is not None:
        p = Path(path)
        with p.open(encoding="utf-8") as fh:
            loaded = yaml.safe_load(fh) or {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{p}: settings must be a mapping")
        section = loaded.get("ustx_pitch", loaded)
        if not isinstance(section, dict):
            raise ValueError(f"{p}: 'ustx_pitch' section must be a mapping")
        data.update(section)
        logger.debug("loaded settings from %s", p)
    data.update({k: v for k, v in overrides.items() if v is not None})
    return ConversionSettings(**data)


__all__ = ["ConversionSettings", "SAMPLING_INTERVAL_TICK", "load_settings"]
