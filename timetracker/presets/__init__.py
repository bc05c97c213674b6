"""Preset catalogue package."""

from .store import (
    PresetStore,
    PresetCollection,
    DEFAULT_PRESETS,
    add_preset,
    default_presets,
    dump_presets,
    parse_presets,
)

__all__ = [
    "PresetStore",
    "PresetCollection",
    "DEFAULT_PRESETS",
    "add_preset",
    "default_presets",
    "dump_presets",
    "parse_presets",
]
