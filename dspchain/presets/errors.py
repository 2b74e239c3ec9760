"""
Preset error types.

All errors inherit from PresetError so callers can catch one type.
"""

from pathlib import Path
from typing import Optional, Union


class PresetError(Exception):
    """Raised when preset operations fail."""
    pass


class InvalidPresetError(PresetError):
    """Raised when preset text does not follow the block format."""

    def __init__(self, reason: str, line: Optional[int] = None,
                 source: Optional[Union[str, Path]] = None):
        self.reason = reason
        self.line = line
        self.source = source
        where = []
        if source is not None:
            where.append(str(source))
        if line is not None:
            where.append(f"line {line}")
        if where:
            super().__init__(f"Invalid preset ({', '.join(where)}): {reason}")
        else:
            super().__init__(f"Invalid preset: {reason}")


class PresetReadError(PresetError):
    """Raised when an existing preset file cannot be read or decoded."""

    def __init__(self, path: Union[str, Path], cause: Exception):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read preset file {path}: {cause}")


class AlreadyLoadedError(PresetError):
    """Raised when load() runs on a catalog that already has presets."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"Preset catalog already loaded ({count} presets)")


class EmptyCatalogError(PresetError):
    """Raised when the current preset is needed but the catalog is empty."""

    def __init__(self):
        super().__init__("Preset catalog is empty; load() it before adding items")
