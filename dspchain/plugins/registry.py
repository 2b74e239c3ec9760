"""
Plugin registry - maps DSP unit type ids to display names.

The host owns the real plugin list; the preset catalog only needs the
ordered type ids and a name lookup, so it takes a registry instance at
construction instead of reaching for a global.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from dspchain.config import PLUGIN_MANIFEST_FORMAT
from dspchain.utils.logger import logger


class PluginRegistry:
    """
    Ordered, in-memory type id -> display name table.

    Usage:
        registry = PluginRegistry([("eq", "Equalizer"), ("comp", "Compressor")])
        registry.list_types()          # ["eq", "comp"]
        registry.name_for_type("eq")   # "Equalizer"
        registry.name_for_type("nope") # None
    """

    def __init__(self, plugins: Iterable[Tuple[str, str]] = ()):
        self._names: Dict[str, str] = {}
        for type_id, name in plugins:
            self.register(type_id, name)

    def register(self, type_id: str, name: str) -> None:
        """Add or rename a type; first registration fixes its position."""
        self._names[type_id] = name

    def list_types(self) -> List[str]:
        return list(self._names)

    def name_for_type(self, type_id: str) -> Optional[str]:
        return self._names.get(type_id)

    def __contains__(self, type_id: str) -> bool:
        return type_id in self._names

    def __len__(self) -> int:
        return len(self._names)

    @classmethod
    def from_manifest(cls, path: Union[str, Path]) -> "PluginRegistry":
        """
        Build a registry from a JSON manifest.

        Format:
            {"manifest_format": 1,
             "plugins": [{"id": "eq", "name": "Equalizer"}, ...]}

        Entries without an id are skipped with a warning; a missing name
        falls back to the id.

        Raises:
            ValueError: Unreadable file, bad JSON, or unsupported format
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                manifest = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in plugin manifest {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Failed to read plugin manifest {path}: {e}") from e

        if not isinstance(manifest, dict):
            raise ValueError(f"Plugin manifest {path} must be a JSON object")

        fmt = manifest.get("manifest_format", PLUGIN_MANIFEST_FORMAT)
        if fmt != PLUGIN_MANIFEST_FORMAT:
            raise ValueError(f"Plugin manifest {path} has unsupported format version {fmt}")

        registry = cls()
        for i, entry in enumerate(manifest.get("plugins", [])):
            if not isinstance(entry, dict) or not entry.get("id"):
                logger.warning(f"Plugin manifest entry {i} has no id, skipping",
                               component="PLUGINS", details=str(path))
                continue
            type_id = str(entry["id"])
            registry.register(type_id, str(entry.get("name") or type_id))

        logger.plugins(f"Loaded {len(registry)} plugin types", details=str(path))
        return registry
