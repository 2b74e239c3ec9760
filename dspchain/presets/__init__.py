"""
Presets module - DSP chain preset format and catalog.
"""

from .dsp_preset_schema import (
    DSPNode,
    DSPPreset,
)

from .dsp_format import (
    parse_preset,
    format_preset,
    load_preset_file,
)

from .errors import (
    PresetError,
    InvalidPresetError,
    PresetReadError,
    AlreadyLoadedError,
    EmptyCatalogError,
)

from .dsp_preset_manager import (
    DSPPresetController,
    iter_preset_entries,
)

__all__ = [
    "DSPNode",
    "DSPPreset",
    "parse_preset",
    "format_preset",
    "load_preset_file",
    "PresetError",
    "InvalidPresetError",
    "PresetReadError",
    "AlreadyLoadedError",
    "EmptyCatalogError",
    "DSPPresetController",
    "iter_preset_entries",
]
